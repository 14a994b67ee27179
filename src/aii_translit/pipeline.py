"""
Ordered stage pipeline with explicit prerequisites.

A stage is a named pure ``str -> str`` function.  Stages may name other
stages that must already have run; a pipeline refuses to be built in an
order that breaks those prerequisites.

Usage:
    from aii_translit.pipeline import build_pipeline
    from aii_translit.lexicon import Lexicon

    pipeline = build_pipeline(Lexicon.builtin())
    working = pipeline.run(text)
    working = pipeline.run(text, until="lexicon")   # stop early
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from aii_translit import stages
from aii_translit.lexicon import Lexicon

logger = logging.getLogger(__name__)


class PipelineOrderError(ValueError):
    """A stage was placed before one of its prerequisites."""


@dataclass(frozen=True, slots=True)
class Stage:
    name: str
    func: Callable[[str], str]
    requires: tuple[str, ...] = ()

    def __call__(self, text: str) -> str:
        return self.func(text)


class Pipeline:
    """An immutable, order-checked sequence of stages."""

    def __init__(self, stage_list: Iterable[Stage]):
        self.stages: tuple[Stage, ...] = tuple(stage_list)
        seen: set[str] = set()
        for stage in self.stages:
            if stage.name in seen:
                raise PipelineOrderError(f"Duplicate stage: {stage.name}")
            missing = [r for r in stage.requires if r not in seen]
            if missing:
                raise PipelineOrderError(
                    f"Stage '{stage.name}' must run after: {', '.join(missing)}"
                )
            seen.add(stage.name)

    @property
    def names(self) -> list[str]:
        return [s.name for s in self.stages]

    def run(self, text: str, *, until: str | None = None) -> str:
        """Run every stage in order, or stop after the stage named ``until``."""
        if until is not None and until not in self.names:
            raise KeyError(f"No stage named {until!r}")
        debug = logger.isEnabledFor(logging.DEBUG)
        for stage in self.stages:
            text = stage(text)
            if debug:
                logger.debug("%-14s %r", stage.name, text)
            if stage.name == until:
                break
        return text

    def trace(self, text: str) -> list[tuple[str, str]]:
        """(stage name, working string after it) for every stage."""
        steps = []
        for stage in self.stages:
            text = stage(text)
            steps.append((stage.name, text))
        return steps

    def __len__(self) -> int:
        return len(self.stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self.stages)


# ── Standard pipeline ───────────────────────────────────────────────────────

def build_pipeline(lexicon: Lexicon) -> Pipeline:
    """The full pipeline up to, not including, the Latin/phonetic fork."""
    return Pipeline([
        Stage("normalize", stages.normalize),
        Stage("boundaries", stages.mark_boundaries, ("normalize",)),
        Stage("prefixes", stages.fix_orthography, ("boundaries",)),
        Stage("lexicon", lexicon.apply, lexicon.requires),
        Stage("morphology", stages.apply_morphology, ("boundaries",)),
        Stage("digraphs", stages.resolve_digraphs, ("lexicon",)),
        Stage("gemination", stages.resolve_gemination, ("prefixes", "lexicon")),
        Stage("segmentation", stages.segment_proclitics, ("boundaries",)),
        Stage("vowel_letters", stages.resolve_vowel_letters, ("boundaries",)),
        Stage("punctuation", stages.transpose_punctuation, ("prefixes",)),
        Stage("consonants", stages.map_consonants,
              ("digraphs", "gemination", "segmentation", "vowel_letters")),
        Stage("epenthesis", stages.resolve_epenthesis, ("consonants",)),
        Stage("diphthongs", stages.resolve_diphthongs, ("consonants",)),
        Stage("glides", stages.resolve_glides, ("diphthongs",)),
        Stage("alaph", stages.resolve_alaph, ("glides",)),
        Stage("vowel_points", stages.resolve_vowel_points, ("alaph",)),
        Stage("cleanup", stages.assimilate, ("vowel_points",)),
    ])
