"""
Latin transliteration -> Manchu script conversion.

Orchestrates the tokenizer and glyph resolver over words and whitespace-
delimited text. Conversion is all-or-nothing: the first word that fails
aborts the call, and nothing is ever passed through unconverted.

Usage:
    from manchu_converter import convert_word, convert_text

    convert_word("manju")            # 'ᠮᠠᠨᠵᡠ'
    convert_text("cooha be acaha")   # 'ᠴᠣᠣᡥᠠ ᠪᡝ ᠠᠴᠠᡥᠠ'

    # Or with options from manchu_converter.toml:
    conv = ManchuConverter.from_config("manchu_converter.toml")
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from manchu_converter.alphabet import Position, RomanizationTable, default_table, normalize
from manchu_converter.config import ConverterConfig
from manchu_converter.errors import ConversionError, UnrecognizedInput
from manchu_converter.resolver import GlyphResolver
from manchu_converter.tokenizer import RomanizationUnit, Tokenizer

logger = logging.getLogger(__name__)

# Whitespace runs are captured so they survive the round trip.
_SPLIT_RE = re.compile(r"(\s+)")


class ManchuConverter:
    """
    Converts Möllendorff transliteration to Manchu script code points.

    Holds only read-only tables, so one instance can be shared freely
    between threads.
    """

    def __init__(self, table: RomanizationTable | None = None):
        self.table = table if table is not None else default_table()
        self.tokenizer = Tokenizer(self.table)
        self.resolver = GlyphResolver(self.table.letters)

    @classmethod
    def from_config(cls, config: ConverterConfig | str | Path) -> ManchuConverter:
        """Build a converter from a ConverterConfig or a TOML file path."""
        if not isinstance(config, ConverterConfig):
            config = ConverterConfig.from_file(config)
        return cls(default_table(aliases=config.aliases))

    # ── Conversion ───────────────────────────────────────────────────────

    def tokenize(self, word: str) -> list[RomanizationUnit]:
        return self.tokenizer.tokenize(word)

    def explain(self, word: str) -> list[tuple[RomanizationUnit, Position, str]]:
        """Per-unit breakdown of a word: (unit, positional form, code points)."""
        return self.resolver.forms(self.tokenizer.tokenize(word))

    def convert_word(self, word: str) -> str:
        """Convert a single word. Raises ConversionError on failure."""
        return self.resolver.resolve(self.tokenizer.tokenize(word))

    def convert_text(self, text: str) -> str:
        """Convert whitespace-delimited text, preserving the whitespace.

        Whitespace is copied through untouched; only words are normalized.
        Error positions refer to offsets in the normalized text.
        """
        if not text:
            return text

        out = []
        offset = 0
        for chunk in _SPLIT_RE.split(text):
            if chunk and not chunk.isspace():
                try:
                    out.append(self.convert_word(chunk))
                except UnrecognizedInput as e:
                    logger.debug("Conversion failed on %r: %s", chunk, e)
                    raise UnrecognizedInput(
                        e.substring, offset + e.position, word=chunk,
                    ) from e
            else:
                out.append(chunk)
            offset += len(normalize(chunk))
        return "".join(out)

    def find_unconvertible(self, text: str) -> list[tuple[str, ConversionError]]:
        """Every word of ``text`` that fails to convert, with its error.

        Diagnostic only: positions in the errors are relative to each word.
        """
        failures = []
        for chunk in text.split():
            try:
                self.convert_word(chunk)
            except ConversionError as e:
                failures.append((chunk, e))
        return failures

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        lines = ["ManchuConverter"]
        for sub_line in self.table.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


# ── Module-level API ─────────────────────────────────────────────────────

_default_converter: ManchuConverter | None = None


def _get_default() -> ManchuConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = ManchuConverter()
    return _default_converter


def tokenize(word: str) -> list[RomanizationUnit]:
    return _get_default().tokenize(word)


def convert_word(word: str) -> str:
    """Convert one transliterated word to Manchu script."""
    return _get_default().convert_word(word)


def convert_text(text: str) -> str:
    """Convert transliterated text to Manchu script, keeping its whitespace."""
    return _get_default().convert_text(text)
