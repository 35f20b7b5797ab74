"""Tests for word and text conversion (converter.py)."""

import threading

import pytest
from manchu_converter import convert_text, convert_word, tokenize
from manchu_converter.alphabet import LETTERS, ROMANIZATION, Position, default_table
from manchu_converter.config import ConverterConfig
from manchu_converter.converter import ManchuConverter
from manchu_converter.errors import ConversionError, UnrecognizedInput

from conftest import codes

# Expected strings are written as \uXXXX escapes:
#   wesimburengge  ᠸᡝᠰᡳᠮᠪᡠᡵᡝᠩᡤᡝ
#   bejing be baha ᠪᡝᠵᡳᠩ ᠪᡝ ᠪᠠᡥᠠ
#   manju          ᠮᠠᠨᠵᡠ
WESIMBURENGGE = (
    "\u1838\u185d\u1830\u1873\u182e\u182a"
    "\u1860\u1875\u185d\u1829\u1864\u185d"
)
BEJING_BE_BAHA = (
    "\u182a\u185d\u1835\u1873\u1829 \u182a\u185d \u182a\u1820\u1865\u1820"
)


# ── Concrete scenarios ────────────────────────────────────────────────────────

def test_wesimburengge():
    assert convert_word("wesimburengge") == WESIMBURENGGE


def test_bejing_be_baha():
    assert convert_text("bejing be baha") == BEJING_BE_BAHA


def test_single_letter_is_isolate():
    assert convert_word("a") == default_table().letters["A"].form(Position.ISOLATE)
    assert convert_word("a") == "\u1820"


def test_digit_rejected_at_position():
    with pytest.raises(UnrecognizedInput) as exc:
        convert_word("b3")
    assert exc.value.substring == "3"
    assert exc.value.position == 1


def test_empty_text():
    assert convert_text("") == ""


def test_manju():
    assert convert_word("manju") == codes(0x182E, 0x1820, 0x1828, 0x1835, 0x1860)


def test_cooha_be_acaha():
    assert convert_text("cooha be acaha") == (
        codes(0x1834, 0x1823, 0x1823, 0x1865, 0x1820) + " "
        + codes(0x182A, 0x185D) + " "
        + codes(0x1820, 0x1834, 0x1820, 0x1865, 0x1820)
    )


def test_takurafi():
    assert convert_word("takūrafi") == codes(
        0x1868, 0x1820, 0x1874, 0x1861, 0x1875, 0x1820, 0x1876, 0x1873,
    )


def test_loan_clusters():
    assert convert_word("ts'ai") == codes(0x186E, 0x1820, 0x1873)
    assert convert_word("dzung") == codes(0x186F, 0x1860, 0x1829)
    assert convert_word("c'yi") == codes(0x1871, 0x1873)
    assert convert_word("k'o") == codes(0x183B, 0x1823)


# ── Alphabet coverage / completeness ──────────────────────────────────────────

def test_every_spelling_converts_alone():
    for entry in ROMANIZATION:
        out = convert_word(entry.source)
        assert out, entry.source


def test_every_spelling_converts_in_context():
    # Exercises initial, medial and final positions for every letter.
    for entry in ROMANIZATION:
        word = entry.source + "a" + entry.source + "a" + entry.source
        assert convert_word(word)


def test_every_letter_is_a_single_codepoint_by_default():
    for letter in LETTERS:
        assert len(convert_word(_spelling_for(letter.identifier))) == 1


def _spelling_for(identifier: str) -> str:
    return next(e.source for e in ROMANIZATION if e.letter == identifier)


# ── Text layout ───────────────────────────────────────────────────────────────

def test_whitespace_preserved():
    assert convert_text("  be\tbe\n\nbe ") == (
        "  " + codes(0x182A, 0x185D) + "\t" + codes(0x182A, 0x185D)
        + "\n\n" + codes(0x182A, 0x185D) + " "
    )


def test_whitespace_only_text():
    assert convert_text(" \n ") == " \n "


def test_unicode_space_separators_preserved():
    # NFC maps EN QUAD / EM QUAD to EN SPACE / EM SPACE; separators must not change.
    be = codes(0x182A, 0x185D)
    assert convert_text("be\u2000be") == be + "\u2000" + be
    assert convert_text("be\u2001be") == be + "\u2001" + be


def test_error_offset_after_unicode_space():
    with pytest.raises(UnrecognizedInput) as exc:
        convert_text("be\u2000b3")
    assert exc.value.position == 4


def test_text_is_case_insensitive():
    assert convert_text("Bejing BE baha") == BEJING_BE_BAHA


# ── Failure policy ────────────────────────────────────────────────────────────

def test_text_fails_fast_with_text_offset():
    with pytest.raises(UnrecognizedInput) as exc:
        convert_text("be ba3ha q")
    assert exc.value.substring == "3"
    assert exc.value.position == 5
    assert exc.value.word == "ba3ha"


def test_text_reports_first_failure():
    with pytest.raises(UnrecognizedInput) as exc:
        convert_text("q be 7")
    assert exc.value.substring == "q"
    assert exc.value.position == 0


def test_no_partial_output_on_failure():
    with pytest.raises(ConversionError):
        convert_text("bejing be ba-ha")


# ── Determinism / thread safety ───────────────────────────────────────────────

def test_deterministic():
    assert convert_word("wesimburengge") == convert_word("wesimburengge")
    assert convert_text("cooha be acaha") == convert_text("cooha be acaha")


def test_concurrent_conversions():
    conv = ManchuConverter()
    results = []
    errors = []

    def work():
        try:
            for _ in range(200):
                results.append(conv.convert_word("wesimburengge"))
        except Exception as e:  # pragma: no cover
            errors.append(e)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not errors
    assert set(results) == {WESIMBURENGGE}


# ── ManchuConverter extras ────────────────────────────────────────────────────

def test_module_tokenize():
    assert [u.text for u in tokenize("bang")] == ["b", "a", "ng"]


def test_explain(converter):
    rows = converter.explain("be")
    assert [(u.text, pos) for u, pos, _ in rows] == [
        ("b", Position.INITIAL), ("e", Position.FINAL),
    ]
    assert "".join(g for _, _, g in rows) == converter.convert_word("be")


def test_find_unconvertible(converter):
    failures = converter.find_unconvertible("cooha b3 be q")
    assert [w for w, _ in failures] == ["b3", "q"]
    assert all(isinstance(e, UnrecognizedInput) for _, e in failures)
    assert failures[0][1].position == 1


def test_find_unconvertible_clean(converter):
    assert converter.find_unconvertible("cooha be acaha") == []


def test_from_config_disables_aliases():
    conv = ManchuConverter.from_config(ConverterConfig(aliases=False))
    with pytest.raises(UnrecognizedInput):
        conv.convert_word("xun")
    assert ManchuConverter().convert_word("xun") == conv.convert_word("šun")


def test_from_config_path(write_config):
    path = write_config("[conversion]\naliases = false\n")
    conv = ManchuConverter.from_config(path)
    assert conv.table.aliases is False


def test_summary(converter):
    s = converter.summary()
    assert s.startswith("ManchuConverter")
    assert "Letters:" in s
