"""Command-line plumbing shared by every day's entry point."""

import argparse
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from puzzlebox.config import LOG_FORMAT, settings
from puzzlebox.models.errors import PuzzleInputError
from puzzlebox.models.solution import PuzzleAnswer
from puzzlebox.services.reporter import format_answer

logger = logging.getLogger(__name__)

RunDay = Callable[..., PuzzleAnswer]


def build_parser(day: int, description: str) -> argparse.ArgumentParser:
    """Argument parser with the options every day accepts."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument(
        "--input",
        type=Path,
        default=settings.input_path(day),
        help="Puzzle input file (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=settings.verbose_logging,
        help="Log every input line with its annotation",
    )
    return parser


def run_cli(
    day: int,
    description: str,
    run_day: RunDay,
    argv: Sequence[str] | None = None,
) -> int:
    """
    Parse arguments, solve the day, and print the report.

    Returns:
        Process exit code: 0 on success, 1 if the input could not be solved
    """
    args = build_parser(day, description).parse_args(argv)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    logger.info("Solving day %d from %s", day, args.input)
    try:
        answer = run_day(args.input, verbose=args.verbose)
    except FileNotFoundError as e:
        logger.error("Input file not found: %s", e.filename)
        return 1
    except PuzzleInputError as e:
        logger.error("Failed to solve day %d: %s", day, e)
        return 1

    print(format_answer(answer))
    return 0
