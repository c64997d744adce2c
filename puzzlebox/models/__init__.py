from puzzlebox.models.calibration import CalibrationDigit, DigitKind
from puzzlebox.models.card import Card, CardDeck, CopyCounts
from puzzlebox.models.errors import InputShapeError, ParseError, PuzzleInputError
from puzzlebox.models.solution import PuzzleAnswer

__all__ = [
    "CalibrationDigit",
    "Card",
    "CardDeck",
    "CopyCounts",
    "DigitKind",
    "InputShapeError",
    "ParseError",
    "PuzzleAnswer",
    "PuzzleInputError",
]
