"""Daily puzzle solutions."""
