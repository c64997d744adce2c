"""
Parser for scratchcard lines.

Scratchcard format:
    Card <n>: <winning numbers> | <held numbers>

Example:
    Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53

Numbers are space separated and right-aligned, so runs of several
spaces are common. Every malformed line is an error: puzzle input is
assumed well-formed, and a skipped line would silently change totals.
"""

import logging
import re
from collections.abc import Sequence

from puzzlebox.models.card import Card, CardDeck
from puzzlebox.models.errors import InputShapeError, ParseError
from puzzlebox.parsers.lines import split_lines

logger = logging.getLogger(__name__)

# Pattern: "Card 4" or "Card   12"
# Groups: (card_index)
CARD_HEADER_PATTERN = re.compile(r"^Card\s+(\d+)$")

HEADER_SEPARATOR = ":"
NUMBERS_SEPARATOR = "|"


def parse_card(line: str, line_number: int | None = None) -> Card:
    """
    Parse one scratchcard line into a Card.

    Args:
        line: Raw card line
        line_number: 1-based position in the input (used in error messages)

    Returns:
        Card with its index, winning set and held numbers

    Raises:
        ParseError: If a separator is missing, the header is not "Card <n>",
            or a number token is not numeric
    """
    header, sep, numbers_part = line.partition(HEADER_SEPARATOR)
    if not sep:
        raise ParseError(line, f"missing '{HEADER_SEPARATOR}' separator", line_number)

    winning_part, sep, held_part = numbers_part.partition(NUMBERS_SEPARATOR)
    if not sep:
        raise ParseError(line, f"missing '{NUMBERS_SEPARATOR}' separator", line_number)

    match = CARD_HEADER_PATTERN.match(header.strip())
    if not match:
        raise ParseError(line, f"expected 'Card <n>' header, got {header.strip()!r}", line_number)

    index = int(match.group(1))
    if index < 1:
        raise ParseError(line, "card index must be positive", line_number)

    return Card(
        index=index,
        winning_numbers=frozenset(_parse_numbers(winning_part, line, line_number)),
        held_numbers=tuple(_parse_numbers(held_part, line, line_number)),
    )


def _parse_numbers(part: str, line: str, line_number: int | None) -> list[int]:
    """Split a run of space-separated numbers, rejecting anything non-numeric."""
    numbers: list[int] = []
    for token in part.split():
        if not token.isdecimal():
            raise ParseError(line, f"non-numeric token {token!r}", line_number)
        numbers.append(int(token))
    return numbers


def parse_deck(lines: Sequence[str]) -> CardDeck:
    """
    Parse every card line into a CardDeck.

    Args:
        lines: One card line per entry, in card order

    Returns:
        Immutable deck of N cards with indexes 1..N

    Raises:
        InputShapeError: If there are no lines
        ParseError: On the first malformed line, or a card whose index
            does not match its position
    """
    if not lines:
        raise InputShapeError("no scratchcards to parse")

    cards: list[Card] = []
    for position, line in enumerate(lines, start=1):
        card = parse_card(line, line_number=position)
        if card.index != position:
            raise ParseError(
                line,
                f"card index {card.index} does not match position {position}",
                position,
            )
        cards.append(card)

    logger.debug("Parsed %d scratchcards", len(cards))
    return CardDeck(cards=tuple(cards))


def parse_deck_text(text: str) -> CardDeck:
    """
    Convenience function: parse raw input text directly to a CardDeck.

    Args:
        text: Whole input file contents

    Returns:
        CardDeck with all cards from the input
    """
    return parse_deck(split_lines(text))
