"""
Scratchcard scoring.

The first match is worth one point and each further match doubles it,
so a card with k matches scores 2^(k-1). Computed in closed form.
"""

from puzzlebox.models.card import Card, CardDeck


def count_matches(card: Card) -> int:
    """
    Count held numbers present in the winning set.

    Duplicated held numbers count once per occurrence.
    """
    return card.match_count


def points(match_count: int) -> int:
    """
    Points for a card with `match_count` matches.

    Raises:
        ValueError: If match_count is negative
    """
    if match_count < 0:
        raise ValueError(f"match_count must be non-negative, got {match_count}")
    if match_count == 0:
        return 0
    return 2 ** (match_count - 1)


def score_card(card: Card) -> int:
    """Points earned by a single card."""
    return points(count_matches(card))


def total_points(deck: CardDeck) -> int:
    """Sum of points across every card in the deck (part 1)."""
    return sum(score_card(card) for card in deck)
