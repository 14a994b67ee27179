"""
Special-case lexicon: literal rewrites for words the general rules get wrong.

Entries are (pattern, replacement) pairs applied in list order, each one
replacing every occurrence before the next entry runs.  In the data below
``#`` stands for a word boundary; it is swapped for the pipeline's internal
boundary marker when the entry is built, so anchored entries only match once
the boundary stage has run.

Usage:
    from aii_translit.lexicon import Lexicon

    lex = Lexicon.builtin()
    lex = Lexicon.from_files("extra.lex", builtin=True)
    text = lex.apply(text)

Lexicon files hold one ``pattern:replacement`` per line.
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from aii_translit.charset import BOUNDARY

logger = logging.getLogger(__name__)

# Boundary placeholder used in lexicon data and lexicon files.
BOUNDARY_TOKEN = "#"


@dataclass(frozen=True, slots=True)
class LexiconEntry:
    """One literal rewrite, with boundaries already in internal form."""
    pattern: str
    replacement: str

    @classmethod
    def parse(cls, pattern: str, replacement: str) -> LexiconEntry:
        """Build an entry from data notation (``#`` for a word boundary)."""
        pattern = unicodedata.normalize("NFC", pattern)
        return cls(
            pattern=pattern.replace(BOUNDARY_TOKEN, BOUNDARY),
            replacement=replacement.replace(BOUNDARY_TOKEN, BOUNDARY),
        )

    @property
    def anchored(self) -> bool:
        """True if the entry only matches at a word boundary."""
        return BOUNDARY in self.pattern

    def __str__(self) -> str:
        pattern = self.pattern.replace(BOUNDARY, BOUNDARY_TOKEN)
        replacement = self.replacement.replace(BOUNDARY, BOUNDARY_TOKEN)
        return f"{pattern}:{replacement}"


# ── Built-in entries ────────────────────────────────────────────────────────
# Order matters: the copula entries must run before the bare "all" entries,
# and each group relies on the boundaries put around words and punctuation.

_BUILTIN: tuple[tuple[str, str], ...] = (
    # Words opening on a long ī
    ("\u071D\u073C\u0717\u0718\u073C\u0715", "īhud"),
    ("\u071D\u073C\u071A\u071D\u073C\u0715\u0735\u071D\u0735\u0710", "īḥīdāyā"),
    ("\u071D\u073C\u0723\u0732\u072A", "īsar"),
    ("\u071D\u073C\u0720\u071D\u073C\u0715\u0718\u073C\u072C\u0735\u0710", "īlidutā"),
    ("\u071D\u073C\u0715\u0735\u0725", "īdāʿ"),

    # Demonstratives and interrogatives marked with a dot
    ("#\u0712\u0717\u0307\u071D#", "#b-ay#"),
    ("\u0717\u0307\u071D#", "aya#"),
    ("\u0717\u0307\u0718#", "awa#"),
    ("\u0721\u0307\u0722#", "man#"),
    ("\u0721\u0323\u0722#", "min#"),

    # Loanwords and idioms
    ("\u0712\u0735\u072C\u0739\u0710#", "bāttē#"),
    ("\u071F\u0330\u0735\u0710\u071D", "čāy"),
    ("\u0712\u0735\u0710\u071D", "bāy"),
    ("\u0710\u0732\u0726\u032E\u0718\u073F\u071F\u0735\u0715", "avokād"),
    ("\u071D\u073C\u072B\u0718\u073F\u0725#", "īšoʿ#"),
    ("\u0722\u0732\u0726\u032E\u072B", "noš"),
    ("\u0718\u073C\u0726\u032E", "\u0718\u073C"),
    ("\u0715\u071D\u073C\u0722\u0735\u0710#", "dīnā#"),

    # Enclitic copula written as its own word
    ("#\u071D\u0718\u0738\u0722#", "#ìwen#"),
    ("#\u071D\u0718\u0735\u0722#", "#ìwān#"),
    ("#\u071D\u0718\u0732\u071A#", "#ìwaḥ#"),
    ("#\u071D\u0718\u0738\u072C#", "#ìwet#"),
    ("#\u071D\u0718\u0735\u072C\u071D#", "#ìwāt#"),
    ("#\u071D\u072C\u0718\u073F\u0722#", "#ìton#"),
    ("#\u071D\u0720\u0739\u0717#", "#ìlēh#"),
    ("#\u071D\u0720\u0735\u0717\u0307#", "#ìlāh#"),
    ("#\u071D\u0722\u0735\u0710#", "#ìnā#"),
    ("#\u071D\u0717\u0747\u0718\u0735\u0710#", "#ìwā#"),
    ("#\u071D\u0717\u0747\u0718\u0735\u072C\u0747#", "#ìwā#"),
    ("#\u071D\u0717\u0747\u0718\u0735\u0718#", "#ìwā#"),

    # Copula fused with a long ī
    ("\u071D\u073C\u0718\u0738\u0722#", "īwen#"),
    ("\u071D\u073C\u0718\u0735\u0722", "īwān"),
    ("\u071D\u073C\u0718\u0738\u072C#", "īwet#"),
    ("\u071D\u073C\u0718\u0735\u072C\u071D#", "īwāt#"),
    ("\u071D\u073C\u0720\u0739\u0717#", "īlēh#"),
    ("\u071D\u073C\u0720\u0735\u0717\u0307#", "īlāh#"),
    ("\u071D\u073C\u0718\u0732\u071A#", "īwaḥ#"),
    ("\u071D\u073C\u072C\u0718\u073F\u0722#", "īton#"),
    ("\u071D\u073C\u0722\u0735\u0710#", "īnā#"),
    ("\u071D\u073C\u0717\u0747\u0718\u0735\u0710#", "īwā#"),
    ("\u071D\u073C\u0717\u0747\u0718\u0735\u0718#", "īwā#"),

    # Past copula
    ("#\u0717\u0747\u0718\u071D\u073C", "#wī"),
    ("#\u0717\u0747\u0718\u0739\u071D\u0721\u0718\u073C\u0722#", "#wēmun#"),
    ("#\u0717\u0747\u0718\u0735\u0710#", "#wā#"),
    ("#\u0717\u0747\u0718\u0735\u0718#", "#wā#"),
    ("#\u0717\u0747\u0718\u0739\u0710#", "#wē#"),

    # "all" and its possessive forms
    ("\u071F\u0720#", "kul#"),
    ("\u071F\u0720\u0735\u0722#", "kullān#"),
    ("\u071F\u0720\u0718\u073C\u071F\u0742#", "kulloḵ#"),
    ("\u071F\u0720\u0735\u071F\u0742\u071D#", "kullāḵ#"),
    ("\u071F\u0720\u0739\u0717#", "kullēh#"),
    ("\u071F\u0720\u0735\u0717\u0307#", "kullāh#"),
    ("\u071F\u0720\u0718\u073C\u0717\u071D#", "kulluh#"),
    ("\u071F\u0720\u0718\u073F\u0717\u0307#", "kulloh#"),
    ("\u071F\u0720\u0732\u0722#", "kullan#"),
    ("\u071F\u0720\u0735\u0718\u071F\u0742\u0718\u073F\u0722#", "kullāwḵon#"),
    ("\u071F\u0720\u0732\u0718\u071F\u0742\u0718\u073F\u0722#", "kullāwḵon#"),
    ("\u071F\u0720\u0735\u071D\u0717\u071D#", "kullāyh#"),
    ("\u071F\u0720\u0717\u0718\u073F\u0722#", "kullhon#"),
    ("\u071F\u0720\u0735\u0722\u0735\u0710\u071D\u073C\u072C#", "kullānāʾīt#"),
    ("\u071F\u0720\u0735\u0722\u0735\u0710\u071D\u073C\u072C\u0742#", "kullānāʾīṯ#"),
    ("\u071F\u0720\u0735\u0722\u0735\u071D", "kullānāy"),
    ("\u071F\u0718\u073F\u0720\u0735\u071D", "kollāy"),
    ("\u071F\u0720\u071A\u0732\u0715\u0747#", "kulḥa#"),
    ("\u071F\u0720\u071A\u0715\u0742\u0735\u0710#", "kulḥḏā#"),
    ("\u071F\u0720\u072B\u0732\u0722\u0747\u072C#", "kulšat#"),

    # Interjections
    ("\u071D\u0732\u0710\u0720\u0735\u0717#", "yallāh#"),
    ("\u0718\u0732\u0710\u0720\u0735\u0717#", "wallāh#"),
    ("\u0719\u0739\u0720\u0747\u071D#", "zē#"),
    ("\u072C\u0735\u0710\u071D#", "tā#"),
)

BUILTIN_ENTRIES: tuple[LexiconEntry, ...] = tuple(
    LexiconEntry.parse(pattern, replacement) for pattern, replacement in _BUILTIN
)


# ── Lexicon ─────────────────────────────────────────────────────────────────

class Lexicon:
    """
    Ordered collection of special-case rewrites.

    A lexicon is immutable once built; combining lexicons returns a new one.
    Its ``requires`` names the pipeline stages that must run before it.
    """

    requires = ("boundaries", "prefixes")

    def __init__(self, entries: Iterable[LexiconEntry] = ()):
        self.entries: tuple[LexiconEntry, ...] = tuple(entries)

    @classmethod
    def builtin(cls) -> Lexicon:
        return cls(BUILTIN_ENTRIES)

    @classmethod
    def from_file(cls, path: str | Path) -> Lexicon:
        """Load entries from a ``pattern:replacement`` file."""
        path = Path(path)
        entries = []
        with path.open(encoding="utf-8-sig") as f:
            for line in f:
                line = line.strip()
                if ":" not in line:
                    continue
                pattern, replacement = line.split(":", 1)
                if not pattern:
                    continue
                entries.append(LexiconEntry.parse(pattern, replacement))
        logger.info("Loaded %d lexicon entries from %s", len(entries), path)
        return cls(entries)

    @classmethod
    def from_files(cls, *paths: str | Path, builtin: bool = True) -> Lexicon:
        """Load and merge several files, in order, ahead of the built-ins."""
        lex = cls()
        for p in paths:
            lex = lex + cls.from_file(p)
        if builtin:
            lex = lex + cls.builtin()
        return lex

    def apply(self, text: str) -> str:
        for entry in self.entries:
            text = text.replace(entry.pattern, entry.replacement)
        return text

    def matches(self, text: str) -> list[LexiconEntry]:
        """Entries that fire on ``text``, in application order."""
        hits = []
        for entry in self.entries:
            if entry.pattern in text:
                hits.append(entry)
                text = text.replace(entry.pattern, entry.replacement)
        return hits

    def __add__(self, other: Lexicon) -> Lexicon:
        return Lexicon(self.entries + other.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[LexiconEntry]:
        return iter(self.entries)

    def summary(self) -> str:
        anchored = sum(1 for e in self.entries if e.anchored)
        lines = ["Special-case lexicon"]
        lines.append(f"  Entries:    {len(self.entries)}")
        lines.append(f"  Anchored:   {anchored}")
        return "\n".join(lines)
