"""
Cascading-copy counter for scratchcards.

A card with m matches wins one copy of each of the next m cards, and
every copy wins again exactly like its original. Because a card only
ever awards copies to cards with a strictly greater index, a single
forward sweep settles the count for card i before i is processed:

    copies[i] = 1 for every card
    for i in 1..N:
        for j in i+1 .. min(i + m_i, N):
            copies[j] += copies[i]

Work is bounded by N * max(m), independent of how many copies are won.
"""

import logging

from puzzlebox.models.card import CardDeck, CopyCounts
from puzzlebox.services.scorer import count_matches

logger = logging.getLogger(__name__)


def propagate_copies(deck: CardDeck) -> CopyCounts:
    """
    Run the forward sweep over a deck.

    Args:
        deck: Parsed deck with dense indexes 1..N

    Returns:
        Fresh mapping of card index to total copies held (originals included).
        Wins that reach past the last card are discarded.
    """
    total = len(deck)
    copies: CopyCounts = {card.index: 1 for card in deck}

    for card in deck:
        last = min(card.index + count_matches(card), total)
        for won in range(card.index + 1, last + 1):
            copies[won] += copies[card.index]

    logger.debug("Propagated copies across %d cards", total)
    return copies


def total_scratchcards(deck: CardDeck) -> int:
    """Total cards held once every copy has been won (part 2)."""
    return sum(propagate_copies(deck).values())
