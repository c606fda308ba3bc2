"""Command-line interface for sorting and checking text lines."""
from __future__ import annotations

import argparse
import logging
import sys
from itertools import pairwise
from pathlib import Path
from typing import Iterable

from .adapters import sorted_by
from .builder import OrderingBuilder
from .config import SortConfig
from .core import Comparison, Ordering, is_ordered
from .utils import clean_line, parse_ranking

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="orderings", description="Sort or check lines with composable orderings")
    parser.add_argument("command", choices=["sort", "check"], help="Sort the input or check that it is already ordered")
    parser.add_argument("files", nargs="*", type=Path, help="Input files; reads stdin when omitted")
    parser.add_argument("--key", choices=SortConfig.KEYS, default="natural", help="How each line is compared")
    parser.add_argument("--rank", default=None, help="Comma-separated values ranked ahead of the key; unlisted lines come first")
    parser.add_argument("--reverse", action="store_true", help="Invert the ordering")
    parser.add_argument("--ignore-case", action="store_true", help="Compare lines case-insensitively")
    parser.add_argument("--no-strip", action="store_true", help="Keep leading and trailing whitespace on each line")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    config = SortConfig(
        key=args.key,
        ranking=parse_ranking(args.rank),
        descending=args.reverse,
        ignore_case=args.ignore_case,
        strip=not args.no_strip,
    )
    ordering = OrderingBuilder(config).build()

    try:
        lines = list(_read_lines(args.files, strip=config.strip))
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read input: {exc}")
    logger.info("Read %d lines", len(lines))

    if args.command == "check":
        if is_ordered(ordering, lines):
            logger.info("Input is ordered")
            return 0
        _log_first_violation(ordering, lines)
        return 1

    for line in sorted_by(ordering, lines):
        print(line)
    return 0


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _read_lines(paths: list[Path], strip: bool) -> Iterable[str]:
    if not paths:
        for raw in sys.stdin:
            yield clean_line(raw, strip)
        return
    for path in paths:
        with path.open(encoding="utf-8") as handle:
            for raw in handle:
                yield clean_line(raw, strip)


def _log_first_violation(ordering: Ordering[str], lines: list[str]) -> None:
    for index, (left, right) in enumerate(pairwise(lines), start=1):
        if ordering(left, right) is Comparison.GREATER_THAN:
            logger.warning("Line %d (%r) sorts after line %d (%r)", index, left, index + 1, right)
            return


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
