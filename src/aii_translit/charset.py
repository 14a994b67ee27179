"""
Character classes for Eastern Syriac (Assyrian) script.

Everything here is a plain module-level string of code points, grouped by
linguistic role and built once at import.  Rule patterns drop these strings
straight into regex character classes, so none of them may contain regex
metacharacters.

Syriac code points are written as escapes; the trailing comment shows the
letter or mark.
"""

from __future__ import annotations

import re


# ── Letters ─────────────────────────────────────────────────────────────────

ALAPH = "\u0710"       # ܐ  glottal-stop bearer
BETH = "\u0712"        # ܒ
GAMAL = "\u0713"       # ܓ
DALATH = "\u0715"      # ܕ
HE = "\u0717"          # ܗ
WAW = "\u0718"         # ܘ
ZAIN = "\u0719"        # ܙ
HETH = "\u071A"        # ܚ
TETH = "\u071B"        # ܛ
YUDH = "\u071D"        # ܝ
KAPH = "\u071F"        # ܟ
LAMADH = "\u0720"      # ܠ
MIM = "\u0721"         # ܡ
NUN = "\u0722"         # ܢ
SEMKATH = "\u0723"     # ܣ
E = "\u0725"           # ܥ  pharyngeal
PE = "\u0726"          # ܦ
SADHE = "\u0728"       # ܨ
QAPH = "\u0729"        # ܩ
RISH = "\u072A"        # ܪ
SHIN = "\u072B"        # ܫ
TAW = "\u072C"         # ܬ

# ── Vowel points ────────────────────────────────────────────────────────────

PTHAHA = "\u0732"            # dotted pthaha, short a
ZQAPHA = "\u0735"            # dotted zqapha, long ā
ZLAMA_HORIZONTAL = "\u0738"  # short i
ZLAMA_ANGULAR = "\u0739"     # long ē
HBASA = "\u073C"             # hbasa-esasa, ī with yudh / u with waw
RWAHA = "\u073F"             # o with waw

# ── Other combining marks ───────────────────────────────────────────────────

QUSHSHAYA = "\u0741"         # hardening dot
RUKKAKHA = "\u0742"          # softening dot
TALQANA_ABOVE = "\u0747"     # oblique line: letter is silent
SUPERSCRIPT_ALAPH = "\u0711"
COMBINING_TILDE_ABOVE = "\u0303"
COMBINING_MACRON = "\u0304"
COMBINING_DOT_ABOVE = "\u0307"
COMBINING_DIAERESIS = "\u0308"
COMBINING_DOT_BELOW = "\u0323"
COMBINING_BREVE_BELOW = "\u032E"
COMBINING_TILDE_BELOW = "\u0330"
COMBINING_MACRON_BELOW = "\u0331"

TATWEEL = "\u0640"           # ـ  decorative elongation

# ── Output-side symbols ─────────────────────────────────────────────────────

GLOTTAL_STOP = "ʾ"
PHARYNGEAL = "ʿ"

# Enclitic copula marker written by some special cases ("ìwen", "ìlēh").
COPULA_MARK = "ì"

# Clause delimiters that position the copula hyphen in the phonetic branch.
JOIN_BEFORE = "❋"  # hyphen attaches to the preceding word
JOIN_AFTER = "❊"   # hyphen leads the following word

# ── Internal markers ────────────────────────────────────────────────────────
# Private Use Area code points, removed from input by the normalizer, so a
# marker in the working string can only have been put there by the pipeline.

BOUNDARY = "\uE000"
LONG_I_MARK = "\uE001"
MARKERS = BOUNDARY + LONG_I_MARK


# ── Role groupings ──────────────────────────────────────────────────────────

VOWEL_DIACRITICS = HBASA + RWAHA + ZLAMA_ANGULAR + ZLAMA_HORIZONTAL + PTHAHA + ZQAPHA
NON_VOWEL_DIACRITICS = (
    COMBINING_TILDE_BELOW + COMBINING_TILDE_ABOVE + QUSHSHAYA
    + RUKKAKHA + COMBINING_BREVE_BELOW + TALQANA_ABOVE
)

# The 19 letters with a fixed consonant value (glides excluded).
CONSONANTS = (
    PE + BETH + TAW + TETH + DALATH + KAPH + GAMAL + QAPH + SEMKATH + SADHE
    + ZAIN + SHIN + HETH + E + HE + MIM + NUN + RISH + LAMADH
)

# Letters that are consonant or vowel carrier depending on context.
GLIDES = ALAPH + YUDH + WAW

# Prepositional / conjunctive proclitics b-, d-, w-, l-.
PROCLITICS = BETH + DALATH + WAW + LAMADH

# Latin values of CONSONANTS, in the same order.
LATIN_CONSONANTS = "pbtṭdkgqsṣzšḥ" + PHARYNGEAL + "hmnrl"

# Every Latin consonant the pipeline can produce.
LATIN_CONSONANTS_ALL = LATIN_CONSONANTS + "čjžfḇṯḏḵḡ"

# Sonorants take an epenthetic e before them under a macron below;
# obstruents take it after them under a macron above.
SONORANTS = "hlmn" + PHARYNGEAL + "r" + ALAPH + YUDH + WAW
OBSTRUENTS = "pbtṭdkgqsṣzšḥ"

# Any letter, Syriac glide or resolved Latin consonant.
LETTERS = GLIDES + LATIN_CONSONANTS_ALL

VOWELS_W = "uo"
VOWELS_Y = "eiēī"
VOWELS = VOWELS_W + VOWELS_Y + "aā"

# Letters that collapse when doubled.
COLLAPSIBLE = PHARYNGEAL + GLOTTAL_STOP + "āšyḥhčžj"


# ── Script detection ────────────────────────────────────────────────────────

_SYRIAC_RE = re.compile("[\u0700-\u077F]")

_RESIDUE_RE = re.compile(
    "[\u0700-\u077F"
    + COMBINING_TILDE_ABOVE + COMBINING_MACRON + COMBINING_DOT_ABOVE
    + COMBINING_DOT_BELOW + COMBINING_BREVE_BELOW + COMBINING_TILDE_BELOW
    + COMBINING_MACRON_BELOW + "]"
)


def contains_syriac(text: str) -> bool:
    """True if the text has at least one code point in the Syriac blocks."""
    return _SYRIAC_RE.search(text) is not None


def residue(text: str) -> list[str]:
    """Syriac letters and marks still present in a transliterated string."""
    return _RESIDUE_RE.findall(text)
