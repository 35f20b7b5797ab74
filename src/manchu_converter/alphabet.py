"""
Manchu alphabet tables: script letters and the romanization that selects them.

Two pieces of static reference data:
- LETTERS: every Manchu script letter with its positional forms
- ROMANIZATION: every Latin spelling (single letters, digraphs, apostrophe
  clusters) and the script letter it stands for

Unicode encodes Manchu letters nominally in the Mongolian block and leaves
the contextual shape to the font, so the default letters only carry an
isolate form; initial/medial/final fall back to it. Tables that need distinct
positional code points (variation-selector sequences, presentation forms for
a specific font) can be built from custom ScriptLetter entries.

Usage:
    from manchu_converter.alphabet import default_table

    table = default_table()
    entry = table.longest_match("ngge", 0)   # -> the "ng" entry
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from enum import Enum
from functools import cache
from types import MappingProxyType
from typing import Iterable

from manchu_converter.errors import TableError

logger = logging.getLogger(__name__)

# Mongolian-block characters by codepoint, for reference and readability.
_ = chr


class Position(Enum):
    ISOLATE = "isolate"
    INITIAL = "initial"
    MEDIAL = "medial"
    FINAL = "final"


class UnitKind(Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    CLUSTER = "cluster"


@dataclass(frozen=True, slots=True)
class ScriptLetter:
    """One letter of the Manchu alphabet, independent of position."""

    identifier: str
    isolate: str
    initial: str | None = None
    medial: str | None = None
    final: str | None = None
    vowel: bool = False

    def form(self, position: Position) -> str:
        """Code point(s) for ``position``; missing forms fall back to isolate."""
        if position is Position.ISOLATE:
            return self.isolate
        variant = getattr(self, position.value)
        return self.isolate if variant is None else variant


@dataclass(frozen=True, slots=True)
class RomanizationEntry:
    """A Latin spelling and the script letter it selects."""

    source: str
    letter: str
    alias: bool = False   # alternate keyboard spelling, can be disabled
    note: str = ""


# ── Script letters ──────────────────────────────────────────────────
# (identifier, nominal codepoint, is_vowel)

_LETTER_DATA = [
    # Vowels
    ("A",  _(0x1820), True),
    ("E",  _(0x185D), True),
    ("I",  _(0x1873), True),
    ("O",  _(0x1823), True),
    ("U",  _(0x1860), True),
    ("UU", _(0x1861), True),    # ū

    # Native consonants
    ("N",  _(0x1828), False),
    ("NG", _(0x1829), False),
    ("B",  _(0x182A), False),
    ("P",  _(0x1866), False),
    ("S",  _(0x1830), False),
    ("SH", _(0x1867), False),   # š
    ("K",  _(0x1874), False),
    ("G",  _(0x1864), False),
    ("H",  _(0x1865), False),
    ("L",  _(0x182F), False),
    ("M",  _(0x182E), False),
    ("T",  _(0x1868), False),
    ("D",  _(0x1869), False),
    ("R",  _(0x1875), False),
    ("J",  _(0x1835), False),
    ("Y",  _(0x1836), False),
    ("C",  _(0x1834), False),
    ("F",  _(0x1876), False),
    ("W",  _(0x1838), False),

    # Letters for Chinese loan sounds
    ("TS", _(0x186E), False),
    ("DZ", _(0x186F), False),
    ("KK", _(0x183B), False),   # k'
    ("GG", _(0x186C), False),   # g'
    ("HH", _(0x186D), False),   # h'
    ("CY", _(0x1871), False),   # c'y
]

LETTERS: tuple[ScriptLetter, ...] = tuple(
    ScriptLetter(identifier=ident, isolate=cp, vowel=is_vowel)
    for ident, cp, is_vowel in _LETTER_DATA
)


# ── Romanization table ──────────────────────────────────────────────
# Möllendorff transliteration. Clusters are matched longest first, so
# "ng" wins over "n" + "g" and "c'y" over "c" + ...
#
# No "sh" digraph: native words such as "ashan" spell s + h.

ROMANIZATION: tuple[RomanizationEntry, ...] = (
    # Clusters
    RomanizationEntry("ts'", "TS", note="loan affricate ts"),
    RomanizationEntry("c'y", "CY", note="loan affricate c'y"),
    RomanizationEntry("ng",  "NG", note="velar nasal"),
    RomanizationEntry("dz",  "DZ", note="loan affricate dz"),
    RomanizationEntry("k'",  "KK", note="loan k"),
    RomanizationEntry("g'",  "GG", note="loan g"),
    RomanizationEntry("h'",  "HH", note="loan h"),

    # Vowels
    RomanizationEntry("a", "A"),
    RomanizationEntry("e", "E"),
    RomanizationEntry("i", "I"),
    RomanizationEntry("o", "O"),
    RomanizationEntry("u", "U"),
    RomanizationEntry("ū", "UU"),
    RomanizationEntry("v", "UU", alias=True, note="keyboard spelling of ū"),

    # Consonants
    RomanizationEntry("n", "N"),
    RomanizationEntry("b", "B"),
    RomanizationEntry("p", "P"),
    RomanizationEntry("s", "S"),
    RomanizationEntry("š", "SH"),
    RomanizationEntry("x", "SH", alias=True, note="keyboard spelling of š"),
    RomanizationEntry("k", "K"),
    RomanizationEntry("g", "G"),
    RomanizationEntry("h", "H"),
    RomanizationEntry("l", "L"),
    RomanizationEntry("m", "M"),
    RomanizationEntry("t", "T"),
    RomanizationEntry("d", "D"),
    RomanizationEntry("r", "R"),
    RomanizationEntry("j", "J"),
    RomanizationEntry("y", "Y"),
    RomanizationEntry("c", "C"),
    RomanizationEntry("f", "F"),
    RomanizationEntry("w", "W"),
)


# ── Input normalization ─────────────────────────────────────────────

_APOSTROPHES = str.maketrans({"\u2019": "'", "\u02bc": "'"})  # ’ ʼ


def normalize(text: str) -> str:
    """NFC, lowercase, and fold typographic apostrophes to ASCII.

    Error positions are reported against this normalized text.
    """
    return unicodedata.normalize("NFC", text).lower().translate(_APOSTROPHES)


# ── Table ───────────────────────────────────────────────────────────

class RomanizationTable:
    """
    Validated, read-only view of a letter registry plus romanization entries.

    Construction enforces the invariants the tokenizer and resolver rely on:
    - letter identifiers are unique and every letter has an isolate form
    - every source spelling is non-empty, normalized, and unique
      (so two equal-length clusters can never match the same prefix)
    - every source spelling points at a registered letter
    """

    def __init__(
        self,
        letters: Iterable[ScriptLetter] = LETTERS,
        entries: Iterable[RomanizationEntry] = ROMANIZATION,
        *,
        aliases: bool = True,
    ):
        letter_map: dict[str, ScriptLetter] = {}
        for letter in letters:
            if letter.identifier in letter_map:
                raise TableError(
                    letter.identifier,
                    f"Duplicate script letter {letter.identifier!r}",
                )
            if not letter.isolate:
                raise TableError(
                    letter.identifier,
                    f"Script letter {letter.identifier!r} has no isolate form",
                )
            letter_map[letter.identifier] = letter

        source_map: dict[str, RomanizationEntry] = {}
        kinds: dict[str, UnitKind] = {}
        for entry in entries:
            if entry.alias and not aliases:
                continue
            src = entry.source
            if not src or src != normalize(src):
                raise TableError(
                    entry.letter, f"Source spelling {src!r} is not normalized"
                )
            if src in source_map:
                raise TableError(
                    entry.letter,
                    f"Ambiguous source spelling {src!r}: "
                    f"{source_map[src].letter} and {entry.letter}",
                )
            letter = letter_map.get(entry.letter)
            if letter is None:
                raise TableError(
                    entry.letter,
                    f"Source spelling {src!r} points at unknown letter "
                    f"{entry.letter!r}",
                )
            source_map[src] = entry
            if len(src) > 1:
                kinds[src] = UnitKind.CLUSTER
            elif letter.vowel:
                kinds[src] = UnitKind.VOWEL
            else:
                kinds[src] = UnitKind.CONSONANT

        self.letters = MappingProxyType(letter_map)
        self.sources = MappingProxyType(source_map)
        self._kinds = MappingProxyType(kinds)
        self.aliases = aliases
        self.max_length = max((len(s) for s in source_map), default=0)

        logger.debug(
            "Built romanization table: %d letters, %d spellings (aliases=%s)",
            len(letter_map), len(source_map), aliases,
        )

    def longest_match(self, text: str, start: int) -> RomanizationEntry | None:
        """Longest source spelling of ``text`` beginning at ``start``."""
        longest = min(self.max_length, len(text) - start)
        for length in range(longest, 0, -1):
            entry = self.sources.get(text[start:start + length])
            if entry is not None:
                return entry
        return None

    def kind(self, source: str) -> UnitKind:
        return self._kinds[source]

    def sorted_sources(self) -> list[str]:
        """Source spellings sorted longest-first, then alphabetically."""
        return sorted(self.sources, key=lambda s: (-len(s), s))

    def summary(self) -> str:
        vowels = sum(1 for letter in self.letters.values() if letter.vowel)
        lines = ["Manchu romanization table"]
        lines.append(f"  Letters:      {len(self.letters)} ({vowels} vowels)")
        lines.append(f"  Spellings:    {len(self.sources)}")
        lines.append(f"  Clusters:     {sum(1 for s in self.sources if len(s) > 1)}")
        lines.append(f"  Aliases:      {'on' if self.aliases else 'off'}")
        return "\n".join(lines)


@cache
def default_table(aliases: bool = True) -> RomanizationTable:
    """Shared table built from LETTERS and ROMANIZATION."""
    return RomanizationTable(aliases=aliases)
