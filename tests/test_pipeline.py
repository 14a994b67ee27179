"""Tests for Stage, Pipeline and the standard stage order (pipeline.py)."""

import logging

import pytest

from aii_translit.charset import BOUNDARY as B
from aii_translit.lexicon import Lexicon
from aii_translit.pipeline import Pipeline, PipelineOrderError, Stage, build_pipeline


def _upper(text: str) -> str:
    return text.upper()


def _exclaim(text: str) -> str:
    return text + "!"


# ── Order checking ────────────────────────────────────────────────────────────

def test_prerequisite_satisfied():
    p = Pipeline([Stage("upper", _upper), Stage("exclaim", _exclaim, ("upper",))])
    assert p.run("hi") == "HI!"
    assert p.names == ["upper", "exclaim"]


def test_prerequisite_out_of_order():
    with pytest.raises(PipelineOrderError, match="exclaim"):
        Pipeline([Stage("exclaim", _exclaim, ("upper",)), Stage("upper", _upper)])


def test_order_error_is_value_error():
    assert issubclass(PipelineOrderError, ValueError)


def test_duplicate_stage_rejected():
    with pytest.raises(PipelineOrderError, match="Duplicate"):
        Pipeline([Stage("upper", _upper), Stage("upper", _upper)])


def test_lexicon_before_boundaries_rejected():
    lex = Lexicon()
    with pytest.raises(PipelineOrderError):
        Pipeline([Stage("lexicon", lex.apply, lex.requires)])


# ── Running ───────────────────────────────────────────────────────────────────

def test_run_until():
    p = Pipeline([Stage("upper", _upper), Stage("exclaim", _exclaim)])
    assert p.run("hi", until="upper") == "HI"


def test_run_until_unknown_stage():
    p = Pipeline([Stage("upper", _upper)])
    with pytest.raises(KeyError):
        p.run("hi", until="nope")


def test_trace_records_every_stage():
    p = Pipeline([Stage("upper", _upper), Stage("exclaim", _exclaim)])
    assert p.trace("hi") == [("upper", "HI"), ("exclaim", "HI!")]


def test_run_logs_each_stage(caplog):
    p = build_pipeline(Lexicon.builtin())
    with caplog.at_level(logging.DEBUG, logger="aii_translit.pipeline"):
        p.run("x")
    assert len(caplog.records) == len(p)


# ── Standard pipeline ─────────────────────────────────────────────────────────

def test_standard_order():
    p = build_pipeline(Lexicon.builtin())
    assert p.names == [
        "normalize", "boundaries", "prefixes", "lexicon", "morphology",
        "digraphs", "gemination", "segmentation", "vowel_letters",
        "punctuation", "consonants", "epenthesis", "diphthongs", "glides",
        "alaph", "vowel_points", "cleanup",
    ]


def test_standard_pipeline_keeps_boundaries():
    p = build_pipeline(Lexicon())
    assert p.run("a") == f"{B}{B}a{B}{B}"
