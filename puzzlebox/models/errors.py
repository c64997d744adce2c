"""
Input errors for puzzle solutions.

Every solution is a pure batch computation: any error aborts the whole
input set. There is no partial recovery and no retry.

Taxonomy:
- InputShapeError: input is empty or not line-structured (raised before parsing)
- ParseError: a single line violates the expected grammar
"""


class PuzzleInputError(Exception):
    """Base class for all puzzle input failures."""


class InputShapeError(PuzzleInputError):
    """
    Raised when input is empty or not line-structured.

    Fails fast, before any line is parsed.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid input: {reason}")


class ParseError(PuzzleInputError):
    """
    Raised when a line violates its expected grammar.

    Carries the offending line so the caller can surface it verbatim.
    Malformed input must never silently produce wrong totals.
    """

    def __init__(self, line: str, reason: str, line_number: int | None = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        location = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Could not parse {location} {line!r}: {reason}")
