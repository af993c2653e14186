"""Crumb exception hierarchy.

The parser itself never raises for malformed cookie syntax. These types
cover invalid configuration and failures owned by the transport layer.
"""

from dataclasses import dataclass


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when parser configuration is invalid.

    Typically raised from ``ParserConfig.__post_init__``.
    """


@dataclass(frozen=True, slots=True)
class HeaderDecodeError(CrumbError):
    """A raw header value could not be decoded into text.

    Raised by ``Headers`` on access, never by the cookie parser.
    """

    name: str
    charset: str

    def __str__(self) -> str:
        return f"cannot decode {self.name!r} header as {self.charset}"
