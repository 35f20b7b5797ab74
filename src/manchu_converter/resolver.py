"""
Glyph resolution: romanization units -> Manchu script code points.

The position rule is uniform for every letter; letters without a distinct
medial or final shape express that in their ScriptLetter data.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from manchu_converter.alphabet import Position, ScriptLetter, default_table
from manchu_converter.errors import InternalMappingError
from manchu_converter.tokenizer import RomanizationUnit


def position_for(index: int, length: int) -> Position:
    """Positional form for the unit at ``index`` in a word of ``length`` units."""
    if length == 1:
        return Position.ISOLATE
    if index == 0:
        return Position.INITIAL
    if index == length - 1:
        return Position.FINAL
    return Position.MEDIAL


class GlyphResolver:
    """Maps unit sequences to code points using a ScriptLetter registry."""

    def __init__(self, letters: Mapping[str, ScriptLetter] | None = None):
        self.letters = letters if letters is not None else default_table().letters

    def forms(
        self, units: Sequence[RomanizationUnit],
    ) -> list[tuple[RomanizationUnit, Position, str]]:
        """Per-unit (unit, position, code points) triples, in word order."""
        n = len(units)
        result = []
        for i, unit in enumerate(units):
            letter = self.letters.get(unit.letter)
            if letter is None:
                raise InternalMappingError(unit.letter)
            position = position_for(i, n)
            result.append((unit, position, letter.form(position)))
        return result

    def resolve(self, units: Sequence[RomanizationUnit]) -> str:
        """Concatenated code points for one word."""
        return "".join(glyph for _unit, _pos, glyph in self.forms(units))
