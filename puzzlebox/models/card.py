from collections.abc import Iterator
from dataclasses import dataclass, field

from puzzlebox.models.errors import ParseError

# Card index -> total copies held (originals included)
CopyCounts = dict[int, int]


@dataclass(frozen=True, slots=True)
class Card:
    """
    A single scratchcard.

    Attributes:
        index: 1-based card number, matches input order
        winning_numbers: Numbers that win on this card
        held_numbers: Numbers scratched off, in printed order
    """

    index: int
    winning_numbers: frozenset[int]
    held_numbers: tuple[int, ...]

    @property
    def matching_numbers(self) -> tuple[int, ...]:
        """Held numbers present in the winning set, one entry per occurrence."""
        return tuple(n for n in self.held_numbers if n in self.winning_numbers)

    @property
    def match_count(self) -> int:
        return len(self.matching_numbers)


@dataclass(frozen=True)
class CardDeck:
    """
    An immutable, ordered pile of scratchcards.

    Card indexes are dense over [1, N] in input order.

    Raises:
        ParseError: If a card's index does not match its position
    """

    cards: tuple[Card, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for position, card in enumerate(self.cards, start=1):
            if card.index != position:
                raise ParseError(
                    f"Card {card.index}",
                    f"card index {card.index} does not match position {position}",
                    position,
                )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def get(self, index: int) -> Card:
        """Get a card by its 1-based index."""
        if not 1 <= index <= len(self.cards):
            raise IndexError(f"Card {index} is outside 1..{len(self.cards)}")
        return self.cards[index - 1]
