"""Timing and file-size measurements shown in each day's report."""

import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

T = TypeVar("T")


def measure_runtime(func: Callable[..., T], *args: Any, **kwargs: Any) -> tuple[T, float]:
    """
    Call `func` and measure how long it took.

    Returns:
        Tuple of (result, elapsed milliseconds)
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed_ms = (time.perf_counter() - start) * 1000
    return result, elapsed_ms


def file_size_kb(path: Path) -> float:
    """Size of a file in kilobytes, rounded to 2 decimals."""
    return round(Path(path).stat().st_size / 1024, 2)
