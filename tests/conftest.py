"""Shared test fixtures."""

import logging

import pytest

from manchu_converter.alphabet import default_table
from manchu_converter.converter import ManchuConverter


def codes(*codepoints: int) -> str:
    """Build a Mongolian-block string from codepoints."""
    return "".join(chr(cp) for cp in codepoints)


@pytest.fixture
def table():
    return default_table()


@pytest.fixture
def converter() -> ManchuConverter:
    return ManchuConverter()


@pytest.fixture
def write_config(tmp_path):
    """Write a manchu_converter.toml into tmp_path and return its path."""
    def _write(body: str):
        path = tmp_path / "manchu_converter.toml"
        path.write_text(body, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() rewires the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
