"""
Run a corpus through the transliterator to measure rule coverage.

This tells us:
- What % of Syriac words come out with no Syriac left in them
- Which letters and marks the rules leave behind, and how often
- Which words leave residue (gaps in rule coverage)
- How many words a special-case entry handled

Usage:
    from aii_translit import Transliterator, check_coverage

    with open("corpus.txt", encoding="utf-8") as f:
        report = check_coverage(Transliterator(), f)
    print(report.summary())
    report.write_mismatches(Path("unresolved.tsv"))
"""

from __future__ import annotations

import csv
import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from aii_translit.charset import contains_syriac, residue
from aii_translit.engine import Transliteration, Transliterator


@dataclass
class CoverageReport:
    """Aggregated coverage statistics."""

    total_lines: int = 0
    total_words: int = 0
    skipped_words: int = 0  # no Syriac in them
    checked_words: int = 0
    resolved_words: int = 0
    lexicon_words: int = 0  # at least one special case fired

    residue_marks: Counter = field(default_factory=Counter)  # char name → count
    unresolved_words: Counter = field(default_factory=Counter)  # word → count
    outputs: dict[str, tuple[str, str]] = field(
        default_factory=dict
    )  # word → (latin, phonetic), unresolved words only

    def summary(self) -> str:
        if self.checked_words == 0:
            return "No Syriac words checked."

        pct = lambda n, d: f"{100*n/d:.1f}%" if d > 0 else "N/A"

        unresolved = self.checked_words - self.resolved_words

        lines = [
            "═══ Coverage Report ═══",
            "",
            f"Lines:          {self.total_lines}",
            f"Words:          {self.total_words}",
            f"Skipped (no Syriac): {self.skipped_words}",
            f"Checked:        {self.checked_words}",
            "",
            f"Fully resolved:      {self.resolved_words:5d}  ({pct(self.resolved_words, self.checked_words)})",
            f"  Via special case:    {self.lexicon_words:5d}  ({pct(self.lexicon_words, self.checked_words)})",
            f"With residue:        {unresolved:5d}  ({pct(unresolved, self.checked_words)})",
        ]

        if self.residue_marks:
            lines.append("")
            lines.append("─── Residue by character ───")
            for name, count in self.residue_marks.most_common():
                lines.append(f"  {name:40s}  x{count}")

        if self.unresolved_words:
            lines.append("")
            lines.append("─── Top 20 unresolved words ───")
            for word, count in self.unresolved_words.most_common(20):
                latin, _ = self.outputs[word]
                lines.append(f"  {word:20s}  {latin:20s}  x{count}")

        return "\n".join(lines)

    def write_mismatches(self, path: Path) -> None:
        """Write every unresolved word to a TSV file for manual review.

        Columns: word, latin, phonetic, residue, count
        """
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, delimiter="\t")
            writer.writerow(["word", "latin", "phonetic", "residue", "count"])
            for word, count in self.unresolved_words.most_common():
                latin, phonetic = self.outputs[word]
                left = " ".join(
                    f"U+{ord(c):04X}" for c in dict.fromkeys(residue(latin))
                )
                writer.writerow([word, latin, phonetic, left, count])


def check_coverage(
    transliterator: Transliterator,
    lines: Iterable[str],
) -> CoverageReport:
    """
    Transliterate every word of a corpus and count what the rules miss.

    Args:
        transliterator: Engine to test (its lexicon is part of what is measured)
        lines: Corpus text, one line per item; words are split on whitespace
    """
    report = CoverageReport()
    seen: dict[str, tuple[Transliteration, bool]] = {}  # word → (result, special case fired)

    for line in lines:
        report.total_lines += 1
        for word in line.split():
            report.total_words += 1

            if not contains_syriac(word):
                report.skipped_words += 1
                continue

            report.checked_words += 1
            if word not in seen:
                seen[word] = (
                    transliterator.transliterate(word),
                    bool(transliterator.lexicon_hits(word)),
                )
            result, special = seen[word]

            if special:
                report.lexicon_words += 1

            left = result.unresolved
            if not left:
                report.resolved_words += 1
                continue

            report.unresolved_words[word] += 1
            report.outputs[word] = (result.latin, result.phonetic)
            for c in left:
                report.residue_marks[unicodedata.name(c, f"U+{ord(c):04X}")] += 1

    return report
