"""
Day 4: Scratchcards.

Usage:
    python -m puzzlebox.jobs.day4 --input data/day4/data.txt --verbose
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from puzzlebox.jobs.cli import run_cli
from puzzlebox.models.solution import PuzzleAnswer
from puzzlebox.parsers.lines import load_lines
from puzzlebox.parsers.scratchcard import parse_deck
from puzzlebox.services.propagator import propagate_copies
from puzzlebox.services.reporter import format_card_line, format_copy_overview
from puzzlebox.services.runtime import file_size_kb, measure_runtime
from puzzlebox.services.scorer import total_points

logger = logging.getLogger(__name__)

DAY = 4


def solve(lines: Sequence[str], *, verbose: bool = False) -> tuple[int, int]:
    """
    Solve both parts from card lines.

    Returns:
        Tuple of (total points, total scratchcards after copies are won)
    """
    deck = parse_deck(lines)

    if verbose:
        for card, line in zip(deck, lines, strict=True):
            logger.info("%s", format_card_line(card, line))

    part1 = total_points(deck)
    copies = propagate_copies(deck)

    if verbose:
        logger.info("Copies held:\n%s", format_copy_overview(copies))

    return part1, sum(copies.values())


def run_day(path: Path, *, verbose: bool = False) -> PuzzleAnswer:
    """Load the input file, solve it, and record measurements."""
    lines, read_ms = measure_runtime(load_lines, path)
    (part1, part2), solve_ms = measure_runtime(solve, lines, verbose=verbose)

    return PuzzleAnswer(
        day=DAY,
        part1=part1,
        part2=part2,
        runtime_ms=read_ms + solve_ms,
        data_size_kb=file_size_kb(path),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for day 4."""
    return run_cli(DAY, "Solve day 4: Scratchcards", run_day, argv)


if __name__ == "__main__":
    raise SystemExit(main())
