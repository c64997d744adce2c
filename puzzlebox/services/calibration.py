"""
Calibration value recovery.

Each line hides a two-digit calibration value: its first digit followed
by its last digit. Part 1 only counts digit characters; part 2 also
accepts digits spelled out as words ("one" through "nine").

Spelled-out words may overlap ("eightwo"), so the first digit is the
earliest token scanning left to right and the last digit is the latest
token scanning right to left; both readings of an overlap are valid.
"""

import logging
from collections.abc import Sequence

from puzzlebox.models.calibration import CalibrationDigit
from puzzlebox.models.errors import InputShapeError, ParseError

logger = logging.getLogger(__name__)

DIGIT_WORDS: dict[str, int] = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _digit_at(line: str, position: int, include_words: bool) -> CalibrationDigit | None:
    """Return the digit token starting at `position`, if there is one."""
    char = line[position]
    if char.isdecimal() and char.isascii():
        return CalibrationDigit(value=int(char), token=char, kind="digit", position=position)

    if include_words:
        for word, value in DIGIT_WORDS.items():
            if line.startswith(word, position):
                return CalibrationDigit(value=value, token=word, kind="word", position=position)

    return None


def find_digit(
    line: str,
    *,
    reverse: bool = False,
    include_words: bool = False,
) -> CalibrationDigit:
    """
    Find the first (or last) digit in a line.

    Args:
        line: Calibration line
        reverse: Scan from the end of the line instead of the start
        include_words: Also accept spelled-out digits

    Returns:
        The digit token closest to the scan origin

    Raises:
        ParseError: If the line contains no digit
    """
    positions = range(len(line) - 1, -1, -1) if reverse else range(len(line))

    for position in positions:
        digit = _digit_at(line, position, include_words)
        if digit is not None:
            return digit

    kinds = "digit or digit word" if include_words else "digit"
    raise ParseError(line, f"no {kinds} found")


def calibration_value(line: str, *, include_words: bool = False) -> int:
    """Two-digit number formed from the first and last digit of a line."""
    first = find_digit(line, include_words=include_words)
    last = find_digit(line, reverse=True, include_words=include_words)
    return first.value * 10 + last.value


def sum_calibration_values(lines: Sequence[str], *, include_words: bool = False) -> int:
    """
    Sum the calibration values of every line.

    Args:
        lines: Calibration lines
        include_words: False for part 1, True for part 2

    Returns:
        Sum of all calibration values

    Raises:
        InputShapeError: If there are no lines
        ParseError: If a line has no digit
    """
    if not lines:
        raise InputShapeError("no calibration lines to read")

    total = 0
    for number, line in enumerate(lines, start=1):
        try:
            total += calibration_value(line, include_words=include_words)
        except ParseError as e:
            raise ParseError(line, e.reason, number) from e

    logger.debug("Summed %d calibration values (include_words=%s)", len(lines), include_words)
    return total
