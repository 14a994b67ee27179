"""Tests for the command line (cli.py)."""

import json
import logging

import pytest

from aii_translit.cli import main

from samples import KUL, SHLAMA


@pytest.fixture(autouse=True)
def _no_config(tmp_path, monkeypatch):
    """Run every test from an empty directory so no config is picked up."""
    monkeypatch.chdir(tmp_path)


# ── Transliteration ───────────────────────────────────────────────────────────

def test_text_prints_both_branches(capsys):
    assert main([KUL]) == 0
    assert capsys.readouterr().out == "kul\tkul\n"


def test_latin_only(capsys):
    main([SHLAMA, "--latin"])
    assert capsys.readouterr().out == "šlāmā\n"


def test_phonetic_only(capsys):
    main([SHLAMA, "--phonetic"])
    assert capsys.readouterr().out == "shlama\n"


def test_json(capsys):
    main([SHLAMA, "--json"])
    assert json.loads(capsys.readouterr().out) == {
        "latin": "šlāmā", "phonetic": "shlama",
    }


def test_file_input(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text(f"{KUL}\n{SHLAMA}\n", encoding="utf-8")
    main(["--file", str(src), "--latin"])
    assert capsys.readouterr().out == "kul\nšlāmā\n"


def test_branch_flags_are_exclusive():
    with pytest.raises(SystemExit):
        main([KUL, "--latin", "--phonetic"])


def test_nothing_to_do():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_mismatches_needs_coverage():
    with pytest.raises(SystemExit):
        main([KUL, "--mismatches", "out.tsv"])


# ── Lexicon and config ────────────────────────────────────────────────────────

def test_no_builtin(capsys):
    main([KUL, "--no-builtin", "--latin"])
    assert capsys.readouterr().out == "kl\n"


def test_lexicon_flag(lexicon_file, capsys):
    main([SHLAMA, "--lexicon", str(lexicon_file), "--latin"])
    assert capsys.readouterr().out == "salam\n"


def test_config_auto_detected(tmp_path, lexicon_file, capsys):
    (tmp_path / "aii_translit.toml").write_text(
        '[lexicon]\npaths = ["extra.lex"]\n', encoding="utf-8",
    )
    main([SHLAMA, "--latin"])
    assert capsys.readouterr().out == "salam\n"


def test_missing_config(capsys):
    with pytest.raises(FileNotFoundError):
        main([KUL, "--config", "nope.toml"])


# ── Trace, coverage, logging ──────────────────────────────────────────────────

def test_trace(capsys):
    main([KUL, "--trace"])
    out = capsys.readouterr().out
    assert "Trace of" in out
    assert "normalize" in out
    assert "phonetic" in out


def test_coverage(tmp_path, capsys):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text(f"{KUL} {SHLAMA} \u0724\n", encoding="utf-8")
    out_tsv = tmp_path / "unresolved.tsv"
    main(["--coverage", str(corpus), "--mismatches", str(out_tsv)])
    out = capsys.readouterr().out
    assert "Coverage Report" in out
    assert "Mismatches written" in out
    assert out_tsv.exists()


def test_warns_without_syriac(caplog, capsys):
    with caplog.at_level(logging.WARNING, logger="aii_translit.cli"):
        main(["hello"])
    assert "No Syriac characters" in caplog.text
    assert capsys.readouterr().out == "hello\thello\n"
