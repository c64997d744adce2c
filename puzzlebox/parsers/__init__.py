from puzzlebox.parsers.lines import load_lines, split_lines
from puzzlebox.parsers.scratchcard import parse_card, parse_deck, parse_deck_text

__all__ = [
    "load_lines",
    "parse_card",
    "parse_deck",
    "parse_deck_text",
    "split_lines",
]
