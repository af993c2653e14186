"""Read-only name lookup over parsed cookies.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from crumb.cookies import CookiePair


class CookieMap(Mapping[str, str]):
    """Immutable cookies keyed by name.

    Attributes:
        _pairs: The parsed pairs, in arrival order.
        _data: Cookie name -> list of values, in arrival order.

    ``__getitem__`` returns the first value sent for a name.
    ``get_list`` returns all of them. Names are case-sensitive.
    """

    _pairs: tuple[CookiePair, ...]
    _data: dict[str, list[str]]

    __slots__ = ("_data", "_pairs")

    def __init__(self, pairs: tuple[CookiePair, ...] = ()) -> None:
        data: dict[str, list[str]] = {}
        for pair in pairs:
            data.setdefault(pair.name, []).append(pair.value)
        object.__setattr__(self, "_pairs", tuple(pairs))
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"CookieMap({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in arrival order."""
        return list(self._data.get(key, []))

    def pairs(self) -> tuple[CookiePair, ...]:
        """The underlying pairs, including duplicates."""
        return self._pairs
