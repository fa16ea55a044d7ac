"""Command-line interface for the daily puzzle solvers."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .io import PuzzleFileError
from .solver import DayResult, HarnessConfig, available_days, run_day

NO_ANSWER = "no answer"


def _format_day(result: DayResult, timed: bool) -> str:
    lines = [f"== {result.source} =="]
    for part in result.parts:
        answer = NO_ANSWER if part.answer is None else part.answer
        line = f"Part {part.part}: {answer}"
        if timed:
            line += f" ({part.elapsed * 1000:.3f} ms)"
        lines.append(line)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Advent of Code 2022 solvers, days 1-8")
    parser.add_argument("day", type=int, help="Puzzle day to solve")
    parser.add_argument(
        "--example",
        action="store_true",
        help="Also solve the published example (examples/<NN>) before the real input",
    )
    parser.add_argument("--root", default=".", help="Directory holding inputs/ and examples/")
    parser.add_argument("--time", action="store_true", help="Report how long each part took")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log solver diagnostics at debug level")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.day not in available_days():
        print(f"No solver for day {args.day}; choose from {available_days()}", file=sys.stderr)
        return 1

    config = HarnessConfig(root=Path(args.root), include_example=args.example, timed=args.time)
    try:
        results = run_day(args.day, config)
    except PuzzleFileError as exc:
        print(f"Failed to load puzzle: {exc}", file=sys.stderr)
        return 2

    for result in results:
        print(_format_day(result, config.timed))

    if not all(result.solved for result in results):
        return 3
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
