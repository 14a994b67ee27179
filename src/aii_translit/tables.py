"""
Mapping tables for the transliteration pipeline.

Principles:
- Every table is built once at import and never modified afterwards
- Multi-code-point keys (letter + combining mark) are ordered tuples,
  applied in sequence before the single-letter consonant table
- Single-code-point tables also come as ``str.translate`` tables, since
  each key maps independently of its neighbours

Usage:
    from aii_translit.tables import CONSONANTS, CONSONANT_TRANSLATION
"""

from __future__ import annotations

from aii_translit.charset import (
    BETH, DALATH, E, GAMAL, HE, HETH, KAPH, LAMADH, MIM, NUN, PE, QAPH, RISH,
    SADHE, SEMKATH, SHIN, TAW, TETH, WAW, YUDH, ZAIN,
    COMBINING_BREVE_BELOW, COMBINING_TILDE_ABOVE, COMBINING_TILDE_BELOW,
    QUSHSHAYA, RUKKAKHA,
    PTHAHA, ZQAPHA, ZLAMA_ANGULAR, ZLAMA_HORIZONTAL,
    GLOTTAL_STOP, PHARYNGEAL,
)


# ── Core consonants ─────────────────────────────────────────────────────────
# Default Latin value of each base consonant, used once every
# context-sensitive rule has had its chance at the letter.

CONSONANTS = {
    PE:      "p",
    BETH:    "b",
    TAW:     "t",
    TETH:    "ṭ",
    DALATH:  "d",
    KAPH:    "k",
    GAMAL:   "g",
    QAPH:    "q",
    SEMKATH: "s",
    SADHE:   "ṣ",
    ZAIN:    "z",
    SHIN:    "š",
    HETH:    "ḥ",
    E:       PHARYNGEAL,
    HE:      "h",
    MIM:     "m",
    NUN:     "n",
    RISH:    "r",
    LAMADH:  "l",
}


# ── Digraphs ────────────────────────────────────────────────────────────────
# Non-native sounds written with a modifier mark under or over a letter.

DIGRAPHS: tuple[tuple[str, str], ...] = (
    (KAPH + COMBINING_TILDE_BELOW,  "č"),
    (GAMAL + COMBINING_TILDE_BELOW, "j"),
    (SHIN + COMBINING_TILDE_BELOW,  "ž"),
    (ZAIN + COMBINING_TILDE_ABOVE,  "ž"),
    (KAPH + COMBINING_TILDE_ABOVE,  "č"),
    (SHIN + COMBINING_TILDE_ABOVE,  "ž"),
    (PE + COMBINING_BREVE_BELOW,    "f"),
)


# ── Gemination / lenition ───────────────────────────────────────────────────
# Qushshaya forces the plain stop; rukkakha selects the spirant.

HARDENED: tuple[tuple[str, str], ...] = (
    (PE + QUSHSHAYA,     "p"),
    (BETH + QUSHSHAYA,   "b"),
    (TAW + QUSHSHAYA,    "t"),
    (DALATH + QUSHSHAYA, "d"),
    (KAPH + QUSHSHAYA,   "k"),
    (GAMAL + QUSHSHAYA,  "g"),
)

SOFTENED: tuple[tuple[str, str], ...] = (
    (BETH + RUKKAKHA,   "ḇ"),
    (TAW + RUKKAKHA,    "ṯ"),
    (DALATH + RUKKAKHA, "ḏ"),
    (KAPH + RUKKAKHA,   "ḵ"),
    (GAMAL + RUKKAKHA,  "ḡ"),
)


# ── Punctuation ─────────────────────────────────────────────────────────────
# Right-to-left punctuation turned around for left-to-right output.

PUNCTUATION = {
    "“": "”",
    "”": "“",
    "‘": "’",
    "’": "‘",
    "؟": "?",   # Arabic question mark
    "«": "“",
    "»": "”",
    "،": ",",   # Arabic comma
    "؛": ";",   # Arabic semicolon
}

# Characters that get their own boundaries so word-final rules see through them.
BOUNDED_PUNCTUATION = "".join(PUNCTUATION) + "()!.:\"'"


# ── Vowel points and leftover glides ────────────────────────────────────────

VOWEL_POINTS = {
    WAW:              "w",
    YUDH:             "y",
    ZLAMA_ANGULAR:    "ē",
    ZLAMA_HORIZONTAL: "i",
    PTHAHA:           "a",
    ZQAPHA:           "ā",
}


# ── Phonetic respelling ─────────────────────────────────────────────────────

PHONETIC = {
    "ṭ": "t",
    "ṣ": "s",
    "š": "sh",
    "ḥ": "kh",
    "ž": "zh",
    "ḇ": "v",
    "ṯ": "th",
    "ḏ": "d",
    "ḵ": "kh",
    "ḡ": "gh",
    "ē": "e",
    "ī": "ee",
    "ā": "a",
    PHARYNGEAL: "`",
    GLOTTAL_STOP: "'",
    "č": "ch",
}


# ── Translation tables ──────────────────────────────────────────────────────

CONSONANT_TRANSLATION = str.maketrans(CONSONANTS)
PUNCTUATION_TRANSLATION = str.maketrans(PUNCTUATION)
VOWEL_POINT_TRANSLATION = str.maketrans(VOWEL_POINTS)
PHONETIC_TRANSLATION = str.maketrans(PHONETIC)
