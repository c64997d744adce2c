from puzzlebox.services.calibration import (
    calibration_value,
    find_digit,
    sum_calibration_values,
)
from puzzlebox.services.propagator import propagate_copies, total_scratchcards
from puzzlebox.services.scorer import count_matches, points, score_card, total_points

__all__ = [
    "calibration_value",
    "count_matches",
    "find_digit",
    "points",
    "propagate_copies",
    "score_card",
    "sum_calibration_values",
    "total_points",
    "total_scratchcards",
]
