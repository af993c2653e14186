"""Tests for crumb._internal.asgi — reading cookies from a raw ASGI scope."""

import pytest

from crumb._internal.asgi import cookies_from_scope, headers_from_scope
from crumb.config import ParserConfig
from crumb.errors import HeaderDecodeError


def _scope(*headers: tuple[bytes, bytes]) -> dict:
    return {"type": "http", "method": "GET", "path": "/", "headers": list(headers)}


class TestHeadersFromScope:
    def test_wraps_headers(self) -> None:
        headers = headers_from_scope(_scope((b"cookie", b"a=1")))
        assert headers["cookie"] == "a=1"

    def test_missing_headers_key(self) -> None:
        assert len(headers_from_scope({"type": "http"})) == 0

    def test_charset_from_config(self) -> None:
        config = ParserConfig(header_charset="latin-1")
        headers = headers_from_scope(_scope((b"cookie", b"a=\xe9")), config)
        assert headers["cookie"] == "a=é"


class TestCookiesFromScope:
    def test_no_cookie_header(self) -> None:
        cookies = cookies_from_scope(_scope((b"accept", b"*/*")))
        assert len(cookies) == 0

    def test_multiple_cookie_headers(self) -> None:
        cookies = cookies_from_scope(
            _scope(
                (b"cookie", b"$Version=0; session=\"abc\""),
                (b"cookie", b"theme=dark; session=xyz"),
            )
        )
        assert cookies["session"] == "abc"
        assert cookies.get_list("session") == ["abc", "xyz"]
        assert cookies["theme"] == "dark"

    def test_utf8_cookie(self) -> None:
        cookies = cookies_from_scope(_scope((b"cookie", "2sides=☯".encode())))
        assert cookies["2sides"] == "☯"

    def test_undecodable_cookie_header(self) -> None:
        with pytest.raises(HeaderDecodeError):
            cookies_from_scope(_scope((b"cookie", b"a=\xff")))
