#!/usr/bin/env python3
"""
Manchu transliteration converter CLI.

Reads options from manchu_converter.toml when present, or override with flags:

    python -m manchu_converter.cli "wesimburengge"
    python -m manchu_converter.cli --file letter.txt
    python -m manchu_converter.cli --tokenize "bejing"
    python -m manchu_converter.cli --check "cooha be ac4ha"
    python -m manchu_converter.cli --alphabet
"""

import argparse
import logging
import sys
from pathlib import Path

from manchu_converter.config import ConverterConfig, find_default_config
from manchu_converter.converter import ManchuConverter
from manchu_converter.errors import ConfigError, ConversionError
from manchu_converter.log import setup_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="manchu-convert",
        description="Convert Manchu Latin transliteration to Manchu script",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Transliterated text to convert (words joined with spaces)",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read transliterated text from a UTF-8 file",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect manchu_converter.toml)",
    )
    parser.add_argument(
        "--no-aliases",
        action="store_true",
        help="Reject keyboard spellings v (for ū) and x (for š)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--tokenize",
        action="store_true",
        help="Show romanization units and positional forms for each word",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="List every word that cannot be converted instead of converting",
    )
    parser.add_argument(
        "--alphabet",
        action="store_true",
        help="Print the romanization table and exit",
    )
    args = parser.parse_args(argv)

    # ── Configuration ────────────────────────────────────────────────────

    config_path = Path(args.config) if args.config else find_default_config()
    try:
        config = ConverterConfig.from_file(config_path) if config_path else ConverterConfig()
    except (ConfigError, FileNotFoundError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.no_aliases:
        config.aliases = False
    if args.log_level:
        config.log_level = args.log_level
    setup_logging(config.log_level, config.log_format)

    conv = ManchuConverter.from_config(config)
    logger.info("Loaded %s", conv.summary().replace("\n", "; "))

    if args.alphabet:
        _show_alphabet(conv)
        return 0

    # ── Input ────────────────────────────────────────────────────────────

    if args.file:
        try:
            text = Path(args.file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    elif args.text:
        text = " ".join(args.text)
    else:
        parser.error("No input: pass text or --file")

    # ── Check ────────────────────────────────────────────────────────────

    if args.check:
        failures = conv.find_unconvertible(text)
        if not failures:
            print("All words convertible.")
            return 0
        for word, err in failures:
            print(f"  {word}: {err}")
        print(f"{len(failures)} word(s) cannot be converted.", file=sys.stderr)
        return 1

    # ── Tokenize ─────────────────────────────────────────────────────────

    if args.tokenize:
        try:
            for word in text.split():
                print(f"═══ {word} ═══")
                for unit, position, glyph in conv.explain(word):
                    codes = " ".join(f"U+{ord(ch):04X}" for ch in glyph)
                    print(f"  {unit.text:4s} {unit.letter:3s} {position.value:8s} {codes}")
        except ConversionError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        return 0

    # ── Convert ──────────────────────────────────────────────────────────

    try:
        result = conv.convert_text(text)
    except ConversionError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(result)
    return 0


def _show_alphabet(conv: ManchuConverter) -> None:
    table = conv.table
    print(table.summary())
    print()
    for source in table.sorted_sources():
        entry = table.sources[source]
        glyph = table.letters[entry.letter].isolate
        codes = " ".join(f"U+{ord(ch):04X}" for ch in glyph)
        note = f"  ({entry.note})" if entry.note else ""
        print(f"  {source:>4s} → {entry.letter:3s} {glyph} {codes}{note}")


if __name__ == "__main__":
    sys.exit(main())
