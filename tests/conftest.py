"""Shared test fixtures."""

from pathlib import Path

import pytest

from aii_translit.engine import Transliterator
from aii_translit.lexicon import Lexicon

from samples import BUSH, SHLAMA


@pytest.fixture
def engine() -> Transliterator:
    """Engine with the built-in special cases."""
    return Transliterator()


@pytest.fixture
def bare_engine() -> Transliterator:
    """Engine with no special cases at all."""
    return Transliterator(Lexicon())


@pytest.fixture
def lexicon_file(tmp_path) -> Path:
    """A small special-case file: one anchored entry, one bare entry."""
    path = tmp_path / "extra.lex"
    path.write_text(
        f"#{SHLAMA}#:#salam#\n"
        "not an entry\n"
        ":empty pattern\n"
        f"{BUSH}:bush\n",
        encoding="utf-8",
    )
    return path
