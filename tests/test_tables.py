"""Tests for the mapping tables (tables.py)."""

import pytest

from aii_translit import charset
from aii_translit.charset import ALAPH, SHIN, TAW
from aii_translit.tables import (
    CONSONANTS, DIGRAPHS, HARDENED, SOFTENED, PUNCTUATION, VOWEL_POINTS,
    CONSONANT_TRANSLATION, PUNCTUATION_TRANSLATION, PHONETIC_TRANSLATION,
)


# ── Consonants ────────────────────────────────────────────────────────────────

def test_consonants_cover_the_nineteen_letters():
    assert set(CONSONANTS) == set(charset.CONSONANTS)
    assert "".join(CONSONANTS.values()) == charset.LATIN_CONSONANTS


def test_glides_have_no_fixed_value():
    for g in charset.GLIDES:
        assert g not in CONSONANTS


def test_vowel_points_cover_leftover_glides():
    assert VOWEL_POINTS[charset.WAW] == "w"
    assert VOWEL_POINTS[charset.YUDH] == "y"
    assert set(charset.VOWEL_DIACRITICS) - set(VOWEL_POINTS) == {
        charset.HBASA, charset.RWAHA,
    }


def test_consonant_translation():
    assert (SHIN + TAW).translate(CONSONANT_TRANSLATION) == "št"
    assert ALAPH.translate(CONSONANT_TRANSLATION) == ALAPH


# ── Combining-mark tables ─────────────────────────────────────────────────────

@pytest.mark.parametrize("table", [DIGRAPHS, HARDENED, SOFTENED])
def test_combining_keys_are_letter_plus_mark(table):
    for key, value in table:
        assert len(key) == 2
        assert key[0] in charset.CONSONANTS
        assert len(value) == 1


def test_softened_letters_are_latin_consonants():
    for _, value in SOFTENED:
        assert value in charset.LATIN_CONSONANTS_ALL


# ── Punctuation and phonetic ──────────────────────────────────────────────────

def test_punctuation_turns_quotes_around():
    assert "“x”".translate(PUNCTUATION_TRANSLATION) == "”x“"
    assert "«x»".translate(PUNCTUATION_TRANSLATION) == "“x”"


def test_arabic_punctuation_becomes_latin():
    assert "؟،؛".translate(PUNCTUATION_TRANSLATION) == "?,;"
    assert len(PUNCTUATION) == 9


def test_phonetic_translation():
    assert "šḥžčḵḡṯḇ".translate(PHONETIC_TRANSLATION) == "shkhzhchkhghthv"
    assert "ēīā".translate(PHONETIC_TRANSLATION) == "eeea"
    assert "ʿʾ".translate(PHONETIC_TRANSLATION) == "`'"
