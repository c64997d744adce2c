from dataclasses import dataclass
from typing import Literal

DigitKind = Literal["digit", "word"]


@dataclass(frozen=True, slots=True)
class CalibrationDigit:
    """
    A digit found in a calibration line.

    Attributes:
        value: Numeric value (0-9)
        token: Literal text matched in the line, e.g. "7" or "seven"
        kind: Whether the token was a digit character or a spelled-out word
        position: Offset of the token's first character within the line
    """

    value: int
    token: str
    kind: DigitKind
    position: int
