"""Lenient ``Cookie`` request-header parsing.

Real clients send cookie headers that violate RFC2109/RFC6265 in every way
imaginable: stray quotes, tspecials in tokens, percent-escapes, extra ``=``.
The pipeline here accepts all of it and only drops what it cannot split
into a name and a value::

    header --iter_segments--> segment --split_pair--> (name, raw)
           --unwrap_value--> (name, value) --is_reserved--> CookieJar

Nothing in this module raises for malformed input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from crumb.config import ParserConfig
from crumb.mapping import CookieMap

if TYPE_CHECKING:
    from crumb._internal.multimap import HeaderSource

logger = logging.getLogger("crumb.parser")

_DEFAULT_CONFIG = ParserConfig()

# Whitespace allowed around a segment (SP and HT)
_OWS = " \t"


@dataclass(frozen=True, slots=True)
class CookiePair:
    """One cookie read from a request header.

    ``version`` is the ``$Version`` in effect when the pair was read.
    ``path``, ``domain`` and ``port`` come from RFC2109 attributes that
    followed the pair in the same header, and are ``None`` otherwise.
    """

    name: str
    value: str
    version: int = 0
    path: str | None = None
    domain: str | None = None
    port: str | None = None

    def as_tuple(self) -> tuple[str, str]:
        return (self.name, self.value)


def iter_segments(header: str) -> Iterator[str]:
    """Yield the trimmed, non-empty ``;``-separated segments of *header*.

    A ``;`` inside a quoted value still ends the segment.
    """
    start = 0
    length = len(header)
    while start <= length:
        end = header.find(";", start)
        if end == -1:
            end = length
        segment = header[start:end].strip(_OWS)
        if segment:
            yield segment
        start = end + 1


def split_pair(segment: str) -> tuple[str, str] | None:
    """Split *segment* at its first ``=`` into ``(name, raw_value)``.

    Returns ``None`` when there is no ``=`` or the name is empty.
    """
    name, sep, raw_value = segment.partition("=")
    if not sep:
        return None
    name = name.strip(_OWS)
    if not name:
        return None
    return name, raw_value


def unwrap_value(raw_value: str) -> str:
    """Strip one layer of quoting from *raw_value*.

    A value starting with ``"`` loses its first and last character, whatever
    they are. Interior quotes and backslashes are kept as-is. Anything else
    is returned unchanged.
    """
    if raw_value.startswith('"'):
        return raw_value[1:-1]
    return raw_value


def is_reserved(name: str, reserved: Iterable[str]) -> bool:
    """Whether *name* matches one of the *reserved* attribute names.

    Comparison is case-insensitive on the whole name; a leading ``$`` on its
    own does not make a name reserved.
    """
    lowered = name.lower()
    return any(lowered == candidate.lower() for candidate in reserved)


def _parse_version(value: str) -> int | None:
    # 1*DIGIT, ASCII only
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def parse_cookie_header(header: str, config: ParserConfig | None = None) -> list[CookiePair]:
    """Parse one ``Cookie`` header value into a fresh list of pairs.

    Pairs appear in header order. Duplicate names are all kept.
    Returns an empty list for empty or missing headers.
    """
    if not header:
        return []
    config = config or _DEFAULT_CONFIG
    pairs: list[CookiePair] = []
    version = 0
    for segment in iter_segments(header):
        split = split_pair(segment)
        if split is None:
            logger.debug("Dropping malformed cookie segment (%d chars)", len(segment))
            continue
        name, raw_value = split
        value = unwrap_value(raw_value)

        if not is_reserved(name, config.reserved_names):
            pairs.append(CookiePair(name, value, version=version))
            continue

        logger.debug("Consumed cookie attribute %s", name)
        if not config.apply_attributes:
            continue
        attribute = name.lower()
        if attribute == "$version":
            parsed = _parse_version(value)
            if parsed is None:
                logger.debug("Ignoring non-numeric $Version (%d chars)", len(value))
            else:
                version = parsed
        elif attribute in ("$path", "$domain", "$port") and pairs:
            pairs[-1] = replace(pairs[-1], **{attribute[1:]: value})
    return pairs


class CookieJar:
    """Ordered store of every cookie pair read for one request.

    Feed it each ``Cookie`` header value with ``add_header_value``; pairs
    accumulate in arrival order and duplicates are kept. ``snapshot`` hands
    out an immutable tuple, so later additions never change a snapshot
    already returned.

    A jar belongs to a single request. It is not safe to mutate from more
    than one thread at a time.
    """

    __slots__ = ("_config", "_pairs")

    def __init__(self, config: ParserConfig | None = None) -> None:
        self._config = config or _DEFAULT_CONFIG
        self._pairs: list[CookiePair] = []

    @classmethod
    def from_headers(cls, headers: HeaderSource, config: ParserConfig | None = None) -> CookieJar:
        """Build a jar from every ``Cookie`` header in *headers*, in order.

        *headers* is a ``Headers`` or any object with a ``get_list`` method
        returning the values of a header name in the order received.
        """
        jar = cls(config)
        jar.add_header_values(headers.get_list("cookie"))
        return jar

    @property
    def config(self) -> ParserConfig:
        return self._config

    def add_header_value(self, header: str) -> tuple[CookiePair, ...]:
        """Parse *header* and append its pairs. Returns the appended pairs."""
        parsed = parse_cookie_header(header, self._config)
        self._pairs.extend(parsed)
        return tuple(parsed)

    def add_header_values(self, headers: Iterable[str]) -> None:
        """Parse and append several header values, in iteration order."""
        for header in headers:
            self.add_header_value(header)

    def snapshot(self) -> tuple[CookiePair, ...]:
        return tuple(self._pairs)

    def as_mapping(self) -> CookieMap:
        """Read-only name lookup over the current snapshot."""
        return CookieMap(self.snapshot())

    def reset(self) -> None:
        self._pairs.clear()

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __iter__(self) -> Iterator[CookiePair]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        items = ", ".join(f"{pair.name}={pair.value!r}" for pair in self._pairs)
        return f"CookieJar([{items}])"
