"""Crumb — a lenient parser for HTTP ``Cookie`` request headers.

Reads what real clients actually send: stray quotes, tspecials in tokens,
percent-escapes and all. Malformed segments are skipped, never fatal.

Basic usage::

    from crumb import CookieJar

    jar = CookieJar()
    jar.add_header_value('$Version=0; session="abc"; theme=dark')
    jar.snapshot()
    # (CookiePair(name='session', value='abc', ...), CookiePair(name='theme', ...))

One-shot parsing::

    from crumb import parse_cookie_header
    parse_cookie_header("query=b=c&d=e")
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "CookieJar",
    "CookieMap",
    "CookiePair",
    "CrumbError",
    "HeaderDecodeError",
    "Headers",
    "ParserConfig",
    "cookies_from_scope",
    "parse_cookie_header",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    if name in ("CookieJar", "CookiePair", "parse_cookie_header"):
        from crumb import cookies as _cookies

        return getattr(_cookies, name)

    if name == "CookieMap":
        from crumb.mapping import CookieMap

        return CookieMap

    if name == "Headers":
        from crumb.headers import Headers

        return Headers

    if name == "ParserConfig":
        from crumb.config import ParserConfig

        return ParserConfig

    if name == "cookies_from_scope":
        from crumb._internal.asgi import cookies_from_scope

        return cookies_from_scope

    if name in ("CrumbError", "ConfigurationError", "HeaderDecodeError"):
        from crumb import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
