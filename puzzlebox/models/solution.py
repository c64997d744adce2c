"""Plain-data result of solving one day, handed to the reporter."""

from pydantic import BaseModel, Field


class PuzzleAnswer(BaseModel):
    """Both answers for a day plus the measurements shown in the report."""

    day: int = Field(..., ge=1, le=25, description="Puzzle day number")
    part1: int = Field(..., description="Answer to part 1")
    part2: int = Field(..., description="Answer to part 2")
    runtime_ms: float = Field(
        default=0.0,
        ge=0.0,
        description="Wall time spent loading and solving, in milliseconds",
    )
    data_size_kb: float | None = Field(
        default=None,
        description="Size of the input file in kilobytes (None when solved from memory)",
    )
