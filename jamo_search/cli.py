from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence, TextIO

from jamo_search.domain.enums import JosaType
from jamo_search.domain.hangul_compose import extract_leading, separate
from jamo_search.domain.josa import append_josa_type
from jamo_search.domain.matching import (
    CharComparatorStrategy,
    comparator_by_name,
    comparator_names,
    contains,
    equals,
)
from jamo_search.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jamo-search", description="Hangul jamo-aware search tools.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="Print lines that match KEYWORD (ㄷㅎㅁㄱ, 마르고 다도로, ...).")
    p_search.add_argument("keyword")
    p_search.add_argument("file", nargs="?", default=None, help="Input file (default: stdin).")
    p_search.add_argument("--strategy", choices=comparator_names(), default=None)
    p_search.add_argument("--equals", action="store_true", help="Match whole lines only.")
    p_search.add_argument("-n", "--line-number", action="store_true")

    p_chosung = sub.add_parser("chosung", help="Print the leading consonants of TEXT.")
    p_chosung.add_argument("text")

    p_separate = sub.add_parser("separate", help="Print TEXT fully decomposed into jamo.")
    p_separate.add_argument("text")

    p_josa = sub.add_parser("josa", help="Append the right particle form to WORD.")
    p_josa.add_argument("word")
    p_josa.add_argument("josa_type", choices=[t.name for t in JosaType], type=str.upper)

    return parser


def search_lines(
    lines: Iterable[str],
    keyword: str,
    strategy: CharComparatorStrategy,
    *,
    whole_line: bool = False,
) -> list[tuple[int, str]]:
    """Return (1-based line number, line) for every line the keyword matches."""
    found: list[tuple[int, str]] = []
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        hit = equals(line, keyword, strategy) if whole_line else contains(line, keyword, strategy)
        if hit:
            found.append((number, line))
    return found


def _run_search(args: argparse.Namespace, store: SettingsStore, out: TextIO) -> int:
    strategy = comparator_by_name(args.strategy or store.get_strategy_name())
    logger.debug("search keyword=%r strategy=%s", args.keyword, strategy.name)

    if args.file is None:
        found = search_lines(sys.stdin, args.keyword, strategy, whole_line=args.equals)
    else:
        with Path(args.file).open("r", encoding="utf-8") as f:
            found = search_lines(f, args.keyword, strategy, whole_line=args.equals)

    for number, line in found:
        out.write("{}:{}\n".format(number, line) if args.line_number else line + "\n")
    return 0 if found else 1


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    out = out or sys.stdout

    store = SettingsStore(args.settings)
    level = "DEBUG" if args.verbose else store.get_log_level()
    logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "search":
        try:
            return _run_search(args, store, out)
        except (OSError, UnicodeDecodeError) as e:
            parser.error("cannot read {}: {}".format(args.file or "<stdin>", e))
    if args.command == "chosung":
        out.write(extract_leading(args.text) + "\n")
        return 0
    if args.command == "separate":
        out.write(separate(args.text) + "\n")
        return 0
    if args.command == "josa":
        out.write(append_josa_type(args.word, JosaType[args.josa_type]) + "\n")
        return 0

    parser.error("unknown command {!r}".format(args.command))
    return 2


if __name__ == "__main__":
    sys.exit(main())
