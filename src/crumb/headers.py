"""Immutable, case-insensitive request headers.

Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
Stores raw byte pairs from the ASGI scope; decodes on access.
"""

from collections.abc import Iterator, Mapping

from crumb.errors import HeaderDecodeError


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. several ``Cookie``
    headers sent by an HTTP/2 client).

    Values are decoded with *charset*. Names are always latin-1.
    """

    __slots__ = ("_charset", "_raw")

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = (), charset: str = "utf-8") -> None:
        object.__setattr__(self, "_raw", tuple(raw))
        object.__setattr__(self, "_charset", charset)

    def _decode(self, name: bytes, value: bytes) -> str:
        try:
            return value.decode(self._charset)
        except UnicodeDecodeError as exc:
            raise HeaderDecodeError(name.decode("latin-1"), self._charset) from exc

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower().encode("latin-1")
        for name, value in self._raw:
            if name.lower() == key_lower:
                return self._decode(name, value)
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower().encode("latin-1")
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = name.decode("latin-1").lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in the order received."""
        key_lower = key.lower().encode("latin-1")
        return [self._decode(name, value) for name, value in self._raw if name.lower() == key_lower]

    @property
    def charset(self) -> str:
        return self._charset

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Access raw header byte pairs for ASGI compatibility."""
        return self._raw
