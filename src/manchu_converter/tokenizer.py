"""
Greedy longest-match tokenizer for Manchu transliteration.

Splits one word into RomanizationUnits, each selecting exactly one script
letter. The whole word must be consumed; the first position that matches no
spelling in the table raises UnrecognizedInput.

Usage:
    from manchu_converter.tokenizer import Tokenizer

    units = Tokenizer().tokenize("wesimburengge")
    [u.text for u in units]   # ['w', 'e', 's', ..., 'ng', 'g', 'e']
"""

from __future__ import annotations

from dataclasses import dataclass

from manchu_converter.alphabet import (
    RomanizationTable,
    UnitKind,
    default_table,
    normalize,
)
from manchu_converter.errors import UnrecognizedInput


@dataclass(frozen=True, slots=True)
class RomanizationUnit:
    """One matched spelling inside a word."""
    text: str        # normalized source substring, e.g. "ng"
    kind: UnitKind
    letter: str      # ScriptLetter identifier, e.g. "NG"
    position: int    # offset of the match in the normalized word


class Tokenizer:
    """Partitions transliterated words into romanization units."""

    def __init__(self, table: RomanizationTable | None = None):
        self.table = table if table is not None else default_table()

    def tokenize(self, word: str) -> list[RomanizationUnit]:
        """Tokenize a single word (no whitespace) into units.

        Input is normalized first (NFC, lowercase, ASCII apostrophe), so
        reported positions are offsets into the normalized word.
        """
        text = normalize(word)
        units: list[RomanizationUnit] = []
        i = 0
        while i < len(text):
            entry = self.table.longest_match(text, i)
            if entry is None:
                raise UnrecognizedInput(text[i], i, word=word)
            units.append(RomanizationUnit(
                text=entry.source,
                kind=self.table.kind(entry.source),
                letter=entry.letter,
                position=i,
            ))
            i += len(entry.source)
        return units
