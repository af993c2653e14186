"""Structural protocols for multi-valued string lookups.

``HeaderSource`` is all ``CookieJar.from_headers`` needs: something that
returns every value of a header in the order received. ``Headers`` satisfies
it, and so does any framework's header object with a ``get_list`` method.
``MultiValueMapping`` is the read-only view shape shared by ``Headers`` and
``CookieMap``.
"""

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class HeaderSource(Protocol):
    """Anything that can list all values sent for a header name."""

    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class MultiValueMapping(HeaderSource, Protocol):
    """A ``HeaderSource`` that also reads like ``Mapping[str, str]``.

    Lookups by ``[]`` and ``get`` return the first value for a key.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
