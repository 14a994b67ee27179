"""aii-translit: Eastern Syriac (Assyrian) to Latin and phonetic transliteration."""

from aii_translit.charset import contains_syriac, residue
from aii_translit.lexicon import Lexicon, LexiconEntry
from aii_translit.pipeline import Pipeline, PipelineOrderError, Stage, build_pipeline
from aii_translit.engine import Transliteration, Transliterator, transliterate
from aii_translit.coverage import CoverageReport, check_coverage

__all__ = [
    "contains_syriac", "residue",
    "Lexicon", "LexiconEntry",
    "Pipeline", "PipelineOrderError", "Stage", "build_pipeline",
    "Transliteration", "Transliterator", "transliterate",
    "CoverageReport", "check_coverage",
]
