#!/usr/bin/env python3
"""
Eastern Syriac transliteration CLI.

Loads extra special cases from aii_translit.toml by default, or override
with flags:

    python -m aii_translit.cli "TEXT"
    python -m aii_translit.cli --file input.txt --phonetic
    python -m aii_translit.cli "TEXT" --lexicon extra.lex --no-builtin
    python -m aii_translit.cli --trace "WORD"
    python -m aii_translit.cli --coverage corpus.txt --mismatches unresolved.tsv
"""

import argparse
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger("aii_translit.cli")


def _find_default_config() -> Path | None:
    """Look for aii_translit.toml in CWD."""
    candidate = Path("aii_translit.toml")
    if candidate.exists():
        return candidate
    return None


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Eastern Syriac to Latin and phonetic transliteration"
    )
    parser.add_argument(
        "text",
        nargs="?",
        help="Text to transliterate",
    )
    parser.add_argument(
        "--file",
        metavar="FILE",
        help="Transliterate each line of a UTF-8 file",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect aii_translit.toml)",
    )
    parser.add_argument(
        "--lexicon",
        nargs="+",
        metavar="FILE",
        help="Special-case lexicon file(s) (overrides config)",
    )
    parser.add_argument(
        "--no-builtin",
        action="store_true",
        help="Leave out the built-in special cases",
    )
    branch = parser.add_mutually_exclusive_group()
    branch.add_argument(
        "--latin",
        action="store_true",
        help="Print only the Latin transliteration",
    )
    branch.add_argument(
        "--phonetic",
        action="store_true",
        help="Print only the phonetic respelling",
    )
    branch.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per input",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Show the working string after every stage",
    )
    parser.add_argument(
        "--coverage",
        metavar="FILE",
        help="Run a coverage check over a corpus file",
    )
    parser.add_argument(
        "--mismatches",
        metavar="FILE",
        help="Write every unresolved word to a TSV file (use with --coverage)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="More logging (-v info, -vv per-stage debug)",
    )
    args = parser.parse_args(argv)

    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.text is None and args.file is None and args.coverage is None:
        parser.error("Nothing to do: give TEXT, --file or --coverage.")
    if args.mismatches and not args.coverage:
        parser.error("--mismatches requires --coverage.")

    # ── Build engine ─────────────────────────────────────────────────────

    from aii_translit.engine import Transliterator, expand_paths
    from aii_translit.lexicon import Lexicon

    if args.lexicon or args.no_builtin:
        # Explicit flags: build engine manually (flags override config)
        paths = expand_paths(args.lexicon or [])
        engine = Transliterator(
            Lexicon.from_files(*paths, builtin=not args.no_builtin)
        )
    else:
        config_path = Path(args.config) if args.config else _find_default_config()
        if config_path is not None:
            engine = Transliterator.from_config(config_path)
        else:
            engine = Transliterator()

    logger.info("%s", engine.summary())

    # ── Coverage ─────────────────────────────────────────────────────────

    if args.coverage:
        from aii_translit.coverage import check_coverage

        with open(args.coverage, encoding="utf-8-sig") as f:
            report = check_coverage(engine, f)
        print(report.summary())
        if args.mismatches:
            report.write_mismatches(Path(args.mismatches))
            print(f"\nMismatches written to {args.mismatches}")

    # ── Transliterate ────────────────────────────────────────────────────

    texts = []
    if args.text is not None:
        texts.append(args.text)
    if args.file:
        with open(args.file, encoding="utf-8-sig") as f:
            texts.extend(line.rstrip("\n") for line in f)

    from aii_translit.charset import contains_syriac

    for text in texts:
        if text and not contains_syriac(text):
            logger.warning("No Syriac characters in input: %r", text)

        if args.trace:
            print(f"═══ Trace of '{text}' ═══")
            for name, working in engine.trace(text):
                print(f"  {name:14s}  {working!r}")
            print()
            continue

        result = engine.transliterate(text)
        if args.latin:
            print(result.latin)
        elif args.phonetic:
            print(result.phonetic)
        elif args.json:
            print(json.dumps(
                {"latin": result.latin, "phonetic": result.phonetic},
                ensure_ascii=False,
            ))
        else:
            print(f"{result.latin}\t{result.phonetic}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
