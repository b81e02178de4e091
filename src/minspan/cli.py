"""Rank lines of text by how tightly they contain a query as a subsequence.

Reads candidate lines (for example a shell history file) and prints the best
matches first, the way an interactive completer would offer them.
"""

# ruff: noqa: T201  # CLI intentionally prints results

from __future__ import annotations

import argparse
from collections.abc import Sequence
import io
import logging
from pathlib import Path
import sys

from pydantic import ValidationError

from minspan.config import Settings
from minspan.errors import MinspanError
from minspan.observability import configure_logging
from minspan.ranking import RankedCandidate, rank_candidates


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minspan", description=__doc__)
    parser.add_argument("needle", help="Characters to find, in order")
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="File with one candidate per line (default: stdin)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of lines to print (default: MINSPAN_RESULT_LIMIT or 10)",
    )
    parser.add_argument(
        "--all",
        dest="keep_duplicates",
        action="store_true",
        help="Keep repeated lines instead of collapsing them",
    )
    parser.add_argument(
        "--show-spans",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prefix each line with the start:end of its match",
    )
    parser.add_argument("--log-level", default=None, help="Override MINSPAN_LOG_LEVEL")
    parser.add_argument(
        "--json-logs",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Emit structured JSON logs on stderr",
    )
    return parser


def read_candidates(path: Path | None) -> list[str]:
    if path is None:
        # Match the file policy: shell history often holds invalid UTF-8
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        return [line.rstrip("\r\n") for line in sys.stdin]
    with path.open(encoding="utf-8", errors="replace") as handle:
        return [line.rstrip("\r\n") for line in handle]


def format_match(match: RankedCandidate[str], *, show_spans: bool) -> str:
    if show_spans:
        return f"{match.span.start}:{match.span.end}\t{match.candidate}"
    return match.candidate


def main(argv: Sequence[str] | None = None) -> int:
    args = build_argument_parser().parse_args(argv)

    overrides = {
        key: value
        for key, value in {
            "log_level": args.log_level,
            "log_json": args.json_logs,
            "result_limit": args.limit,
            "show_spans": args.show_spans,
            "unique_candidates": False if args.keep_duplicates else None,
        }.items()
        if value is not None
    }

    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(settings.log_level, settings.log_json)

    try:
        candidates = read_candidates(args.file)
        matches = rank_candidates(
            args.needle,
            candidates,
            limit=settings.result_limit,
            unique=settings.unique_candidates,
        )
    except (OSError, MinspanError) as exc:
        logger.debug("Ranking failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if not matches:
        logger.info("No candidate matched", extra={"candidates": len(candidates)})
        return EXIT_NO_MATCH

    for match in matches:
        print(format_match(match, show_spans=settings.show_spans))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
