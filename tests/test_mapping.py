"""Tests for crumb.mapping — immutable CookieMap."""

import pytest

from crumb._internal.multimap import MultiValueMapping
from crumb.cookies import CookiePair, parse_cookie_header
from crumb.mapping import CookieMap


def _m(header: str) -> CookieMap:
    """Shorthand: build a CookieMap from a header value."""
    return CookieMap(tuple(parse_cookie_header(header)))


class TestCookieMap:
    def test_getitem(self) -> None:
        m = _m("session=abc; theme=dark")
        assert m["session"] == "abc"
        assert m["theme"] == "dark"

    def test_first_value_wins(self) -> None:
        m = _m("a=1; a=2")
        assert m["a"] == "1"

    def test_missing_key_raises(self) -> None:
        m = _m("a=1")
        with pytest.raises(KeyError):
            m["missing"]

    def test_case_sensitive(self) -> None:
        m = _m("Session=abc")
        assert "Session" in m
        assert "session" not in m

    def test_len_counts_unique_names(self) -> None:
        m = _m("a=1; a=2; b=3")
        assert len(m) == 2

    def test_iter_in_arrival_order(self) -> None:
        m = _m("b=1; a=2; b=3")
        assert list(m) == ["b", "a"]

    def test_get_with_default(self) -> None:
        m = _m("a=1")
        assert m.get("a") == "1"
        assert m.get("missing") is None
        assert m.get("missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        m = _m("a=1; b=2; a=3")
        assert m.get_list("a") == ["1", "3"]
        assert m.get_list("missing") == []

    def test_get_list_returns_copy(self) -> None:
        m = _m("a=1")
        m.get_list("a").append("2")
        assert m.get_list("a") == ["1"]

    def test_empty_value(self) -> None:
        m = _m("flag=")
        assert m["flag"] == ""
        assert m.get("flag", "fallback") == ""

    def test_pairs(self) -> None:
        m = _m("a=1; a=2")
        assert m.pairs() == (CookiePair("a", "1"), CookiePair("a", "2"))

    def test_empty(self) -> None:
        m = CookieMap()
        assert len(m) == 0
        assert m.pairs() == ()

    def test_repr(self) -> None:
        assert repr(_m("a=1")) == "CookieMap({'a': '1'})"

    def test_satisfies_multivalue_protocol(self) -> None:
        assert isinstance(_m("a=1"), MultiValueMapping)
