"""
Console report formatting.

THIS MODULE HANDLES OUTPUT RENDERING ONLY.

It accepts already-computed data (cards, digits, answers) and produces
strings. It never parses or scores; callers decide whether the result
is printed or logged.
"""

import re

from puzzlebox.models.calibration import CalibrationDigit
from puzzlebox.models.card import Card, CopyCounts
from puzzlebox.models.solution import PuzzleAnswer
from puzzlebox.services.scorer import score_card

HIGHLIGHT = "[{}]"

BANNER_OPEN = "🎄" * 10
BANNER_RESULTS = "🎁" * 10

_NUMBER_PATTERN = re.compile(r"\d+")


def _highlight(text: str) -> str:
    return HIGHLIGHT.format(text)


def format_card_line(card: Card, raw_line: str) -> str:
    """
    Echo a card line with its matching numbers highlighted.

    Appends the card's points when it scored anything.

    Example:
        Card 4: 41 92 73 [84] 69 | 59 [84] 76 51 58  5 54 83  points: 1
    """
    header, sep, numbers = raw_line.partition(":")
    matching = set(card.matching_numbers)

    if matching:
        numbers = _NUMBER_PATTERN.sub(
            lambda m: _highlight(m.group()) if int(m.group()) in matching else m.group(),
            numbers,
        )

    line = f"{header}{sep}{numbers}"
    card_points = score_card(card)
    if card_points > 0:
        line = f"{line}  points: {card_points}"
    return line


def format_calibration_line(
    line: str,
    first: CalibrationDigit,
    last: CalibrationDigit,
    value: int,
) -> str:
    """
    Echo a calibration line with its first and last digit tokens highlighted.

    Overlapping tokens ("eightwo") are highlighted as one span.
    """
    spans = sorted(
        {
            (first.position, first.position + len(first.token)),
            (last.position, last.position + len(last.token)),
        }
    )

    merged: list[tuple[int, int]] = []
    for start, end in spans:
        if merged and start < merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))

    parts: list[str] = []
    cursor = 0
    for start, end in merged:
        parts.append(line[cursor:start])
        parts.append(_highlight(line[start:end]))
        cursor = end
    parts.append(line[cursor:])

    return f"{''.join(parts)} {value}"


def format_copy_overview(copies: CopyCounts) -> str:
    """One row per card showing how many copies ended up held."""
    return "\n".join(f"Card {index}: {count}" for index, count in sorted(copies.items()))


def format_answer(answer: PuzzleAnswer) -> str:
    """
    Format a day's answers as the decorated console report.

    Args:
        answer: Solved day with measurements

    Returns:
        Multi-line report ready to print
    """
    lines: list[str] = [
        "",
        BANNER_OPEN,
        "",
        f"Day: {answer.day}",
        "",
        f"Part-1: {answer.part1}",
        f"Part-2: {answer.part2}",
        "",
    ]

    if answer.data_size_kb is not None:
        lines.append(f"Data: {answer.data_size_kb}kb")

    lines.append(f"Runtime: {answer.runtime_ms:.2f}ms")
    lines.append("")
    lines.append(BANNER_RESULTS)

    return "\n".join(lines)
