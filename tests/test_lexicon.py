"""Tests for the special-case lexicon (lexicon.py)."""

from aii_translit.charset import BOUNDARY as B
from aii_translit.lexicon import BUILTIN_ENTRIES, Lexicon, LexiconEntry

from samples import BUSH, KUL, SHLAMA


# ── LexiconEntry ──────────────────────────────────────────────────────────────

def test_parse_swaps_hash_for_boundary():
    e = LexiconEntry.parse("#ab#", "#x#")
    assert e.pattern == f"{B}ab{B}"
    assert e.replacement == f"{B}x{B}"
    assert e.anchored


def test_parse_leaves_bare_entries_unanchored():
    assert not LexiconEntry.parse("ab", "x").anchored


def test_parse_normalizes_pattern():
    e = LexiconEntry.parse("e\u0301", "x")
    assert e.pattern == "é"


def test_entry_str_round_trips_notation():
    assert str(LexiconEntry.parse("#ab#", "#x#")) == "#ab#:#x#"


# ── Built-ins ─────────────────────────────────────────────────────────────────

def test_builtin_size_and_order():
    lex = Lexicon.builtin()
    assert len(lex) == 70
    assert lex.entries == BUILTIN_ENTRIES
    assert lex.entries[-1].replacement == f"tā{B}"


def test_builtin_all_entry():
    lex = Lexicon.builtin()
    assert lex.apply(f"{B}{B}{KUL}{B}{B}") == f"{B}{B}kul{B}{B}"


def test_builtin_needs_boundaries():
    """Anchored entries do not fire on unbounded text."""
    lex = Lexicon.builtin()
    assert lex.apply(KUL) == KUL


# ── Application ───────────────────────────────────────────────────────────────

def test_apply_is_sequential():
    lex = Lexicon([LexiconEntry.parse("ab", "x"), LexiconEntry.parse("x", "y")])
    assert lex.apply("ab ab") == "y y"


def test_matches_reports_fired_entries_in_order():
    first = LexiconEntry.parse("ab", "x")
    second = LexiconEntry.parse("x", "y")
    unused = LexiconEntry.parse("zz", "q")
    lex = Lexicon([first, unused, second])
    assert lex.matches("ab") == [first, second]
    assert lex.matches("cd") == []


def test_add_concatenates():
    a = Lexicon([LexiconEntry.parse("a", "b")])
    b = Lexicon([LexiconEntry.parse("c", "d")])
    combined = a + b
    assert [str(e) for e in combined] == ["a:b", "c:d"]
    assert len(a) == 1


def test_empty_lexicon_is_identity():
    assert Lexicon().apply("anything") == "anything"


# ── Loading ───────────────────────────────────────────────────────────────────

def test_from_file_skips_malformed_lines(lexicon_file):
    lex = Lexicon.from_file(lexicon_file)
    assert len(lex) == 2
    assert lex.entries[0].pattern == f"{B}{SHLAMA}{B}"
    assert lex.entries[1] == LexiconEntry(BUSH, "bush")


def test_from_file_splits_on_first_colon(tmp_path):
    path = tmp_path / "colon.lex"
    path.write_text("a:b:c\n", encoding="utf-8")
    assert Lexicon.from_file(path).entries[0].replacement == "b:c"


def test_from_file_tolerates_bom(tmp_path):
    path = tmp_path / "bom.lex"
    path.write_text("ab:x\n", encoding="utf-8-sig")
    assert Lexicon.from_file(path).entries[0].pattern == "ab"


def test_from_files_puts_files_before_builtins(lexicon_file):
    lex = Lexicon.from_files(lexicon_file)
    assert len(lex) == 2 + len(BUILTIN_ENTRIES)
    assert lex.entries[0].replacement == f"{B}salam{B}"
    assert lex.entries[2:] == BUILTIN_ENTRIES


def test_from_files_without_builtins(lexicon_file):
    assert len(Lexicon.from_files(lexicon_file, builtin=False)) == 2
    assert len(Lexicon.from_files(builtin=False)) == 0


def test_summary():
    s = Lexicon.builtin().summary()
    assert "Entries:    70" in s
    assert "Anchored:" in s
