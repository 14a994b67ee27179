"""
Pipeline stages: pure ``str -> str`` rewrites of the working string.

Each stage expects the output of the stages before it in the standard
pipeline (see ``aii_translit.pipeline.build_pipeline``).  Until
``assemble`` runs, word edges are marked with ``BOUNDARY``; the Syriac
letters still present at any point are the ones no earlier stage has
claimed yet.

Stages, in order:
    normalize, mark_boundaries, fix_orthography, (lexicon),
    apply_morphology, resolve_digraphs, resolve_gemination,
    segment_proclitics, resolve_vowel_letters, transpose_punctuation,
    map_consonants, resolve_epenthesis, resolve_diphthongs,
    resolve_glides, resolve_alaph, resolve_vowel_points, assimilate

and then the two finishing passes, ``assemble`` (Latin) and
``simplify_phonetic`` (phonetic respelling), both run on the output of
``assimilate``.
"""

from __future__ import annotations

import re
import unicodedata

from aii_translit.charset import (
    ALAPH, E, HE, MIM, NUN, RISH, KAPH, WAW, YUDH,
    HBASA, PTHAHA, RWAHA, ZLAMA_ANGULAR, ZLAMA_HORIZONTAL, ZQAPHA,
    QUSHSHAYA, RUKKAKHA, TALQANA_ABOVE, SUPERSCRIPT_ALAPH, TATWEEL,
    COMBINING_DIAERESIS, COMBINING_DOT_ABOVE, COMBINING_MACRON,
    COMBINING_MACRON_BELOW,
    BOUNDARY, LONG_I_MARK, MARKERS,
    GLOTTAL_STOP, PHARYNGEAL, COPULA_MARK, JOIN_BEFORE, JOIN_AFTER,
    VOWEL_DIACRITICS, NON_VOWEL_DIACRITICS, CONSONANTS, PROCLITICS,
    LATIN_CONSONANTS_ALL, SONORANTS, OBSTRUENTS, LETTERS,
    VOWELS, VOWELS_W, VOWELS_Y, COLLAPSIBLE,
)
from aii_translit.tables import (
    BOUNDED_PUNCTUATION, DIGRAPHS, HARDENED, SOFTENED,
    CONSONANT_TRANSLATION, PUNCTUATION_TRANSLATION,
    VOWEL_POINT_TRANSLATION, PHONETIC_TRANSLATION,
)

B = BOUNDARY


def _replace_pairs(text: str, pairs: tuple[tuple[str, str], ...]) -> str:
    for old, new in pairs:
        text = text.replace(old, new)
    return text


# ── Normalizer ──────────────────────────────────────────────────────────────

_STRIP_TABLE = str.maketrans(
    "", "", TATWEEL + COMBINING_DIAERESIS + SUPERSCRIPT_ALAPH + MARKERS,
)


def normalize(text: str) -> str:
    """Compose to NFC and drop marks that never change the output.

    Internal markers are dropped as well, so every marker the later stages
    see was put there by the pipeline itself.
    """
    text = unicodedata.normalize("NFC", text)
    return text.translate(_STRIP_TABLE)


# ── Boundary tokenizer ──────────────────────────────────────────────────────

CLAUSE_SEPARATOR = " | "

_GAP_RE = re.compile(r"(\s)")


def mark_boundaries(text: str) -> str:
    """Put a boundary on each side of every gap and two at each string end.

    ``"a b"`` becomes ``BBaB BbBB``; the clause separator ``" | "`` is
    bounded as a unit first so its pipe reads as a word of its own.
    """
    text = text.replace(CLAUSE_SEPARATOR, f"{B}{CLAUSE_SEPARATOR}{B}")
    text = _GAP_RE.sub(f"{B}\\1{B}", text)
    return f"{B}{B}{text}{B}{B}"


# ── Orthographic pre-fixes ──────────────────────────────────────────────────

_QUSHSHAYA_AFTER_VOWEL_RE = re.compile(f"([{VOWEL_DIACRITICS}]){QUSHSHAYA}")
_PUNCTUATION_RE = re.compile(f"([{re.escape(BOUNDED_PUNCTUATION)}])")


def fix_orthography(text: str) -> str:
    """Move qushshaya ahead of a vowel point and bound punctuation."""
    text = _QUSHSHAYA_AFTER_VOWEL_RE.sub(f"{QUSHSHAYA}\\1", text)
    return _PUNCTUATION_RE.sub(f"{B}\\1{B}", text)


# ── Morphological context rules ─────────────────────────────────────────────

# Verb endings in -ē before a pharyngeal: 1sg, 1sg + object, 2pl.
_E_SUFFIXES = (E, E + YUDH, E + MIM + WAW + HBASA + NUN)

_E_SUFFIX_RE = re.compile(
    f"([{CONSONANTS}{YUDH}][{NON_VOWEL_DIACRITICS}]?"
    f"[{CONSONANTS}][{NON_VOWEL_DIACRITICS}]?)"
    f"{ZLAMA_ANGULAR}({'|'.join(_E_SUFFIXES)}){B}"
)

# Possessive / agentive endings that shorten a preceding ī before r.
_R_SUFFIXES = (
    ZQAPHA + KAPH + RUKKAKHA + YUDH,
    ZLAMA_ANGULAR + HE,
    ZQAPHA + HE + COMBINING_DOT_ABOVE,
    PTHAHA + NUN,
    ZQAPHA + WAW + KAPH + RUKKAKHA + WAW + RWAHA + NUN,
)

_R_SUFFIX_RE = re.compile(f"{YUDH}{HBASA}{RISH}({'|'.join(_R_SUFFIXES)}){B}")


def apply_morphology(text: str) -> str:
    """Word-final suffix rules: -ē epenthesis and ī shortening before -r."""
    text = _E_SUFFIX_RE.sub(f"\\1{YUDH}{HBASA}\\2{B}", text)
    return _R_SUFFIX_RE.sub(f"{ZLAMA_HORIZONTAL}{RISH}\\1{B}", text)


# ── Digraphs, gemination and lenition ──────────────────────────────────────

def resolve_digraphs(text: str) -> str:
    return _replace_pairs(text, DIGRAPHS)


def resolve_gemination(text: str) -> str:
    """Qushshaya and rukkakha are consumed with their host letter."""
    text = _replace_pairs(text, HARDENED)
    return _replace_pairs(text, SOFTENED)


# ── Word-initial proclitics ─────────────────────────────────────────────────

_INITIAL_VOWEL = ALAPH + "aī"

_DOUBLE_PROCLITIC_RE = re.compile(
    f"{B}([{PROCLITICS}])([{PROCLITICS}])([{_INITIAL_VOWEL}])"
)
_PROCLITIC_RE = re.compile(f"{B}([{PROCLITICS}])([{_INITIAL_VOWEL}])")


def segment_proclitics(text: str) -> str:
    """Hyphenate b-, d-, w-, l- off a vowel-initial stem.

    Two stacked proclitics are tried first, so a doubled letter at the
    start of a word is split into two prefixes rather than one.
    """
    text = _DOUBLE_PROCLITIC_RE.sub(f"{B}\\1-\\2-\\3", text)
    return _PROCLITIC_RE.sub(f"{B}\\1-\\2", text)


# ── Vowel letters ───────────────────────────────────────────────────────────

def resolve_vowel_letters(text: str) -> str:
    """Waw and yudh carrying a vowel point become vowels.

    Yudh + hbasa is parked on ``LONG_I_MARK`` until ``resolve_glides``
    knows whether it is a long ī or a short i.
    """
    text = text.replace(WAW + HBASA + HE + COMBINING_DOT_ABOVE + B, "oh" + B)
    text = text.replace(YUDH + HBASA + E, "ī" + E)
    text = text.replace(YUDH + HBASA, LONG_I_MARK)
    text = text.replace(WAW + RWAHA, "o")
    return text.replace(WAW + HBASA, "u")


# ── Punctuation and consonants ──────────────────────────────────────────────

def transpose_punctuation(text: str) -> str:
    return text.translate(PUNCTUATION_TRANSLATION)


def map_consonants(text: str) -> str:
    return text.translate(CONSONANT_TRANSLATION)


# ── Vowel and glide resolution ──────────────────────────────────────────────

_SONORANT_EPENTHESIS_RE = re.compile(
    f"([{LETTERS}])([{SONORANTS}]){COMBINING_MACRON_BELOW}([{LETTERS}])"
)
_OBSTRUENT_EPENTHESIS_RE = re.compile(
    f"([{LETTERS}])([{OBSTRUENTS}]){COMBINING_MACRON}([{LETTERS}])"
)
_SILENT_LETTER_RE = re.compile(f"[{LETTERS}]{TALQANA_ABOVE}")


def resolve_epenthesis(text: str) -> str:
    """A lone alaph is a glottal stop; macrons insert e; talqana silences."""
    text = text.replace(B + ALAPH + B, B + GLOTTAL_STOP + B)
    text = _SONORANT_EPENTHESIS_RE.sub(r"\1e\2\3", text)
    text = _OBSTRUENT_EPENTHESIS_RE.sub(r"\1\2e\3", text)
    return _SILENT_LETTER_RE.sub("", text)


_SHORT_VOWELS = ZLAMA_HORIZONTAL + PTHAHA

_GEMINATE_RE = re.compile(
    f"([{_SHORT_VOWELS}])([{LETTERS}])([{VOWEL_DIACRITICS}])"
)
_GEMINATE_BEFORE_U_RE = re.compile(
    f"([{_SHORT_VOWELS}])([{LETTERS}])u([{LETTERS}])([{VOWEL_DIACRITICS}])"
)
_GEMINATE_BEFORE_OH_RE = re.compile(f"([{_SHORT_VOWELS}])([{LETTERS}])oh")


def resolve_diphthongs(text: str) -> str:
    """A letter between a short vowel and another vowel is doubled."""
    text = _GEMINATE_RE.sub(r"\1\2\2\3", text)
    text = _GEMINATE_BEFORE_U_RE.sub(r"\1\2\2u\3\4", text)
    text = _GEMINATE_BEFORE_OH_RE.sub(r"\1\2\2oh", text)
    return text.replace(COMBINING_DOT_ABOVE, "")


_SHORT_I_RE = re.compile(
    f"([{WAW}{YUDH}{LATIN_CONSONANTS_ALL}]){LONG_I_MARK}"
    f"([{LETTERS}])([^{VOWEL_DIACRITICS}])"
)
_E_GLIDE_RE = re.compile(f"([{LETTERS}]){ZLAMA_ANGULAR}{YUDH}([{LETTERS}])")
_PROCLITIC_YUDH_RE = re.compile(f"{B}([{PROCLITICS}]){YUDH}([{LETTERS}])")
_MEDIAL_YUDH_RE = re.compile(f"([{LETTERS}]){YUDH}([{LETTERS}])")
_FINAL_YUDH_RE = re.compile(f"([{LATIN_CONSONANTS_ALL}]){YUDH}{B}")
_INITIAL_YUDH_RE = re.compile(f"{B}{YUDH}([{LETTERS}])")


def resolve_glides(text: str) -> str:
    """Decide whether each yudh is a consonant, a vowel, or silent.

    A parked ī in a closed syllable shortens to i; a yudh between
    letters is the vowel i, after zlama the vowel ē; a word-final yudh
    after a consonant is silent, as is a word-initial one before a letter.
    """
    text = _SHORT_I_RE.sub(r"\1i\2\3", text)
    text = text.replace(LONG_I_MARK, "ī")
    text = _E_GLIDE_RE.sub(r"\1ē\2", text)
    text = _PROCLITIC_YUDH_RE.sub(f"{B}\\1-\\2", text)
    text = _MEDIAL_YUDH_RE.sub(r"\1i\2", text)
    text = _FINAL_YUDH_RE.sub(f"\\1{B}", text)
    text = text.replace(ALAPH + PTHAHA + WAW + B, "aw" + B)
    text = text.replace(ALAPH + PTHAHA + YUDH + B, "ay" + B)
    text = text.replace(B + ALAPH + ZLAMA_ANGULAR + YUDH, B + "ē")
    text = text.replace(B + ALAPH + YUDH, B + "ī")
    return _INITIAL_YUDH_RE.sub(f"{B}\\1", text)


_ZLAMA_ALAPH_RE = re.compile(f"{ZLAMA_HORIZONTAL}{ALAPH}(?:{YUDH})?{B}")


def resolve_alaph(text: str) -> str:
    """Word-final alaph takes the quality of its vowel; elsewhere it is ʾ.

    Word-initial alaph carries no sound of its own and is dropped.
    """
    text = text.replace(PTHAHA + ALAPH + B, "a" + B)
    text = text.replace(ZLAMA_ANGULAR + ALAPH + B, "ē" + B)
    text = _ZLAMA_ALAPH_RE.sub(f"i{GLOTTAL_STOP}{B}", text)
    text = text.replace(ZQAPHA + ALAPH + B, "ā" + B)
    text = text.replace(ALAPH + B, "ā" + B)
    text = text.replace(B + ALAPH, B)
    return text.replace(ALAPH, GLOTTAL_STOP)


_INITIAL_WAW_RE = re.compile(f"{B}{WAW}([{LETTERS}{VOWELS}])")
_GLOTTAL_AFTER_LONG_RE = re.compile(f"([ēīā]){GLOTTAL_STOP}([{LETTERS}])")
_W_HIATUS_RE = re.compile(f"([{VOWELS_W}])([{VOWELS}])")
_Y_HIATUS_RE = re.compile(f"([{VOWELS_Y}])([{VOWELS}])")
_A_BEFORE_V_RE = re.compile(
    f"([aā])ḇ([{LATIN_CONSONANTS_ALL.replace('ḇ', '')}])"
)
_U_BEFORE_V_RE = re.compile(f"uḇ([{LATIN_CONSONANTS_ALL}])")


def resolve_vowel_points(text: str) -> str:
    """Spell out vowel points and the glides left standing as consonants."""
    text = _INITIAL_WAW_RE.sub(f"{B}w-\\1", text)
    text = text.translate(VOWEL_POINT_TRANSLATION)
    text = _GLOTTAL_AFTER_LONG_RE.sub(r"\1\2", text)
    text = _W_HIATUS_RE.sub(r"\1w\2", text)
    text = _Y_HIATUS_RE.sub(r"\1y\2", text)
    text = _A_BEFORE_V_RE.sub(r"\1w\2", text)
    return _U_BEFORE_V_RE.sub(r"u\1", text)


# ── Assimilation and cleanup ────────────────────────────────────────────────

_DOUBLED_RE = re.compile(f"([{COLLAPSIBLE}])\\1+")
_TRAILING_H_RE = re.compile("([ḥčḡš])h")


def assimilate(text: str) -> str:
    text = _DOUBLED_RE.sub(r"\1", text)
    text = _TRAILING_H_RE.sub(r"\1", text)
    return text.replace("-" + GLOTTAL_STOP, "-")


# ── Output assembly ─────────────────────────────────────────────────────────

def assemble(text: str) -> str:
    """Latin branch: the working string without its boundaries."""
    return text.replace(B, "")


# ── Phonetic simplifier ─────────────────────────────────────────────────────

_STOPS = PHARYNGEAL + GLOTTAL_STOP
_PHONETIC_LETTERS = LATIN_CONSONANTS_ALL + VOWELS + "wy"
_DELIMITERS = JOIN_BEFORE + JOIN_AFTER

_E_BEFORE_STOP_RE = re.compile(f"ē([{_STOPS}])")
_FINAL_A_AFTER_STOP_RE = re.compile(f"([{_STOPS}])ā{B}")


def _delimited_copula_re(delimiter: str) -> re.Pattern:
    # A single space on each side of the delimiter is enough.  The older
    # rule wanted two on one side, so "kul ❋ ìwen" fell through to the
    # bare-space rule and came out "kul ❋ -wen" rather than "kul- wen".
    return re.compile(
        f"([{_PHONETIC_LETTERS}])"
        f"(?:[ ]+{delimiter}[ ]*|[ ]*{delimiter}[ ]+)"
        f"{COPULA_MARK}"
    )


# (pattern, replacement) per delimiter; the hyphen goes on the side the
# delimiter names.
_DELIMITED_COPULA = (
    (_delimited_copula_re(JOIN_BEFORE), f"\\1- {JOIN_BEFORE} "),
    (_delimited_copula_re(JOIN_AFTER), f"\\1 {JOIN_AFTER} -"),
)
_SPACED_COPULA_RE = re.compile(f"([{_PHONETIC_LETTERS}])[ ]+{COPULA_MARK}")

_INNER_DELIMITER_RE = re.compile(f"(?<=\\S)[ ]*[{_DELIMITERS}][ ]*(?=\\S)")
_EDGE_DELIMITER_RE = re.compile(f"[ ]*[{_DELIMITERS}][ ]*")


def simplify_phonetic(text: str) -> str:
    """Phonetic branch: an English-friendly respelling.

    Runs on the boundary-marked string so word-final rules still apply.
    The enclitic copula is hyphenated onto its neighbour, then every
    letter with a diacritic is swapped for an ASCII spelling.  Delimiters
    are removed last.
    """
    text = _E_BEFORE_STOP_RE.sub(r"eh\1", text)
    text = _FINAL_A_AFTER_STOP_RE.sub(f"\\1ah{B}", text)
    text = text.replace("ē" + B, "eh" + B)
    text = text.replace("uh" + B, "oo" + B)
    text = text.replace(B, "")

    for pattern, replacement in _DELIMITED_COPULA:
        text = pattern.sub(replacement, text)
    text = _SPACED_COPULA_RE.sub(r"\1-", text)
    text = text.replace(COPULA_MARK, "-")

    text = text.replace("w-", "oo-")
    text = text.replace("āyh", "āy")
    text = text.replace("ayh", "ay")
    text = text.translate(PHONETIC_TRANSLATION)

    text = _INNER_DELIMITER_RE.sub(" ", text)
    return _EDGE_DELIMITER_RE.sub("", text)
