"""
Transliteration engine: Eastern Syriac text in, Latin and phonetic out.

Runs the stage pipeline once and forks the result into the two output
forms.  Configuration (extra special-case lexicons) comes from TOML.

Usage:
    from aii_translit.engine import Transliterator, transliterate

    result = transliterate("ܟܠ")     # default engine
    result.latin, result.phonetic   # ("kul", "kul")

    engine = Transliterator.from_config()   # loads aii_translit.toml
    engine = Transliterator(Lexicon.from_files("extra.lex"))
"""

from __future__ import annotations

import glob
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from aii_translit.charset import residue
from aii_translit.lexicon import Lexicon, LexiconEntry
from aii_translit.pipeline import build_pipeline
from aii_translit.stages import assemble, simplify_phonetic

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Transliteration:
    """Both renderings of one input string."""

    latin: str
    phonetic: str

    @property
    def unresolved(self) -> list[str]:
        """Syriac letters or marks no rule consumed."""
        return residue(self.latin)


class Transliterator:
    """
    Runs the transliteration pipeline with a given special-case lexicon.

    Holds no per-call state, so one instance can serve any number of
    callers at once.
    """

    def __init__(self, lexicon: Lexicon | None = None):
        self.lexicon = Lexicon.builtin() if lexicon is None else lexicon
        self.pipeline = build_pipeline(self.lexicon)

    @classmethod
    def from_config(cls, config_path: str | Path = "aii_translit.toml") -> Transliterator:
        """Build a Transliterator from a TOML config file.

        Paths in the config are resolved relative to the config file's
        directory.  Glob patterns in paths are expanded.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        base_dir = config_path.parent

        lex_cfg = cfg.get("lexicon", {})
        paths = []
        for p in _resolve_config_paths(lex_cfg.get("paths", []), base_dir):
            if p.exists():
                paths.append(p)
            else:
                logger.warning("Lexicon file not found, skipping: %s", p)

        lexicon = Lexicon.from_files(*paths, builtin=lex_cfg.get("builtin", True))
        return cls(lexicon)

    # ── Transliteration ──────────────────────────────────────────────────

    def transliterate(self, text: str) -> Transliteration:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        working = self.pipeline.run(text)
        return Transliteration(
            latin=assemble(working),
            phonetic=simplify_phonetic(working),
        )

    def transliterate_many(self, texts: Iterable[str]) -> list[Transliteration]:
        return [self.transliterate(t) for t in texts]

    def lexicon_hits(self, text: str) -> list[LexiconEntry]:
        """Special-case entries that fire on ``text``, in application order."""
        before = self.pipeline.run(text, until="prefixes")
        return self.lexicon.matches(before)

    def trace(self, text: str) -> list[tuple[str, str]]:
        """Working string after every stage, then the two outputs."""
        steps = self.pipeline.trace(text)
        working = steps[-1][1]
        steps.append(("latin", assemble(working)))
        steps.append(("phonetic", simplify_phonetic(working)))
        return steps

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        lines = [f"Transliterator with {len(self.pipeline)} stage(s):"]
        lines.append(f"  {' > '.join(self.pipeline.names)}")
        for sub_line in self.lexicon.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


# ── Default engine ───────────────────────────────────────────────────────

_default = Transliterator()


def transliterate(text: str) -> Transliteration:
    """Transliterate with the built-in lexicon."""
    return _default.transliterate(text)


# ── Path helpers ─────────────────────────────────────────────────────────

def expand_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Expand globs and return a list of Paths."""
    result = []
    for p in paths:
        p_str = str(p)
        if "*" in p_str or "?" in p_str:
            result.extend(Path(m) for m in sorted(glob.glob(p_str)))
        else:
            result.append(Path(p))
    return result


def _resolve_config_paths(raw_paths: list[str], base_dir: Path) -> list[Path]:
    """Resolve config paths relative to base_dir, expanding globs."""
    return expand_paths(
        Path(p) if Path(p).is_absolute() else base_dir / p for p in raw_paths
    )
