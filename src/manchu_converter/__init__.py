"""manchu-converter: Manchu Latin transliteration to Manchu script."""

from manchu_converter.alphabet import (
    Position, ScriptLetter, RomanizationEntry, RomanizationTable, UnitKind,
    default_table,
)
from manchu_converter.tokenizer import RomanizationUnit, Tokenizer
from manchu_converter.resolver import GlyphResolver, position_for
from manchu_converter.converter import (
    ManchuConverter, convert_word, convert_text, tokenize,
)
from manchu_converter.config import ConverterConfig
from manchu_converter.errors import (
    ConversionError, UnrecognizedInput, InternalMappingError, TableError,
    ConfigError,
)

__all__ = [
    "Position", "ScriptLetter", "RomanizationEntry", "RomanizationTable",
    "UnitKind", "default_table",
    "RomanizationUnit", "Tokenizer",
    "GlyphResolver", "position_for",
    "ManchuConverter", "convert_word", "convert_text", "tokenize",
    "ConverterConfig",
    "ConversionError", "UnrecognizedInput", "InternalMappingError",
    "TableError", "ConfigError",
]
