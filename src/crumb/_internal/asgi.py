"""ASGI adapter.

Reads ``Cookie`` headers straight from a raw ASGI scope, for servers and
middleware that have not built a request object yet.
"""

from collections.abc import MutableMapping
from typing import Any, TypeAlias

from crumb.config import ParserConfig
from crumb.cookies import CookieJar
from crumb.headers import Headers
from crumb.mapping import CookieMap

Scope: TypeAlias = MutableMapping[str, Any]


def headers_from_scope(scope: Scope, config: ParserConfig | None = None) -> Headers:
    """Wrap ``scope["headers"]`` in a ``Headers`` view."""
    charset = config.header_charset if config else "utf-8"
    raw = tuple((bytes(name), bytes(value)) for name, value in scope.get("headers", ()))
    return Headers(raw, charset=charset)


def cookies_from_scope(scope: Scope, config: ParserConfig | None = None) -> CookieMap:
    """Parse every ``Cookie`` header in *scope* into a fresh ``CookieMap``.

    Raises:
        HeaderDecodeError: A cookie header is not valid in the configured charset.
    """
    headers = headers_from_scope(scope, config)
    return CookieJar.from_headers(headers, config).as_mapping()
