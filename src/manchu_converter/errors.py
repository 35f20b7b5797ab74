"""Exceptions raised by the Manchu converter.

UnrecognizedInput is the caller's problem (bad transliteration);
InternalMappingError and TableError mean the alphabet tables are broken.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every conversion failure."""


class UnrecognizedInput(ConversionError, ValueError):
    """No romanization unit matches the input at ``position``."""

    def __init__(self, substring: str, position: int, word: str | None = None):
        self.substring = substring
        self.position = position
        self.word = word
        where = f" in {word!r}" if word is not None else ""
        super().__init__(
            f"Unrecognized input {substring!r} at position {position}{where}"
        )


class InternalMappingError(ConversionError, LookupError):
    """A romanization unit points at a letter the registry does not define."""

    def __init__(self, unit_identity: str, message: str | None = None):
        self.unit_identity = unit_identity
        super().__init__(
            message or f"No script letter registered for {unit_identity!r}"
        )


class TableError(InternalMappingError):
    """The alphabet tables violate one of their construction invariants."""


class ConfigError(ValueError):
    """Invalid manchu_converter.toml contents."""
