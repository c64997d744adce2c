"""
Line loading shared by every day.

Inputs are read in full before processing begins (never streamed).
Surrounding blank lines are dropped; a blank line between content
lines means the input is not a simple line-per-record file.
"""

from pathlib import Path

from puzzlebox.models.errors import InputShapeError


def split_lines(text: str) -> list[str]:
    """
    Split raw input text into content lines.

    Args:
        text: Whole input file contents

    Returns:
        Lines with trailing whitespace removed

    Raises:
        InputShapeError: If the input is empty or contains interior blank lines
    """
    if not text or not text.strip():
        raise InputShapeError("input is empty")

    lines = [line.rstrip() for line in text.split("\n")]

    while not lines[0]:
        lines.pop(0)
    while not lines[-1]:
        lines.pop()

    # Anything blank that is left sits between records
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            raise InputShapeError(f"blank line {number} between records")

    return lines


def load_lines(path: Path) -> list[str]:
    """Read a text file and split it into content lines."""
    return split_lines(Path(path).read_text(encoding="utf-8"))
