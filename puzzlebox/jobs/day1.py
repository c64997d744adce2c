"""
Day 1: Trebuchet calibration.

Usage:
    python -m puzzlebox.jobs.day1 --input data/day1/data.txt
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from puzzlebox.jobs.cli import run_cli
from puzzlebox.models.solution import PuzzleAnswer
from puzzlebox.parsers.lines import load_lines
from puzzlebox.services.calibration import find_digit, sum_calibration_values
from puzzlebox.services.reporter import format_calibration_line
from puzzlebox.services.runtime import file_size_kb, measure_runtime

logger = logging.getLogger(__name__)

DAY = 1


def _log_lines(lines: Sequence[str], include_words: bool) -> None:
    for line in lines:
        first = find_digit(line, include_words=include_words)
        last = find_digit(line, reverse=True, include_words=include_words)
        value = first.value * 10 + last.value
        logger.info("%s", format_calibration_line(line, first, last, value))


def solve(lines: Sequence[str], *, verbose: bool = False) -> tuple[int, int]:
    """
    Solve both parts from calibration lines.

    Returns:
        Tuple of (digits-only sum, digits-and-words sum)
    """
    part1 = sum_calibration_values(lines)
    part2 = sum_calibration_values(lines, include_words=True)

    if verbose:
        logger.info("Part 1 (digits only)")
        _log_lines(lines, include_words=False)
        logger.info("Part 2 (digits and words)")
        _log_lines(lines, include_words=True)

    return part1, part2


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
    """CLI entry point for day 1."""
    return run_cli(DAY, "Solve day 1: Trebuchet calibration", run_day, argv)


if __name__ == "__main__":
    raise SystemExit(main())
