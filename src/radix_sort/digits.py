"""Base-10 digit helpers used by the radix passes."""

from __future__ import annotations

BASE = 10


def num_digits(value: int) -> int:
    """Number of decimal digits in abs(value). Zero has one digit."""
    value = abs(value)
    if value < BASE:
        return 1

    digits = 0
    while value:
        value //= BASE
        digits += 1
    return digits


def get_digit(value: int, position: int) -> int:
    """
    Digit of abs(value) at `position`, where 0 is the least significant place.

    Positions past the most significant digit give 0.
    """
    if position < 0:
        raise ValueError(f"digit position must be >= 0, got {position}")
    return (abs(value) // BASE**position) % BASE
