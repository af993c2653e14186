"""Parser configuration.

ParserConfig is a frozen dataclass — immutable after creation, shared
freely between jars and requests.
"""

import codecs
from dataclasses import dataclass

from crumb.errors import ConfigurationError

RFC2109_ATTRIBUTES = ("$Version", "$Path", "$Domain", "$Port")


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Cookie parser configuration. Immutable after creation.

    Override what you need::

        config = ParserConfig(reserved_names=("$Version",))

    ``$Version`` is the only attribute real clients are known to send;
    ``$Path``, ``$Domain`` and ``$Port`` are the RFC2109 companions and can
    be dropped from the reserved set, in which case they parse as ordinary
    cookies.
    """

    # Names consumed as metadata instead of becoming cookies (case-insensitive)
    reserved_names: tuple[str, ...] = RFC2109_ATTRIBUTES

    # Attach $Version/$Path/$Domain/$Port to the parsed pairs
    apply_attributes: bool = True

    # Charset used to decode raw ASGI header bytes
    header_charset: str = "utf-8"

    def __post_init__(self) -> None:
        if isinstance(self.reserved_names, str):
            raise ConfigurationError("reserved_names must be a sequence of names, not a string")
        for name in self.reserved_names:
            if not isinstance(name, str):
                raise ConfigurationError(f"Reserved cookie attribute {name!r} must be a string")
            if not name.startswith("$") or len(name) < 2:
                raise ConfigurationError(
                    f"Reserved cookie attribute {name!r} must be '$' followed by a name"
                )
        try:
            codecs.lookup(self.header_charset)
        except LookupError:
            raise ConfigurationError(f"Unknown header charset: {self.header_charset!r}") from None
        object.__setattr__(self, "reserved_names", tuple(self.reserved_names))

