"""Value/power conversions for the tile ladder ``lowest * 2**power``."""
from __future__ import annotations


def is_on_ladder(value: int, lowest: int) -> bool:
    """Return True if ``value`` equals ``lowest * 2**k`` for some k >= 0."""
    if lowest <= 0 or value < lowest or value % lowest:
        return False
    ratio = value // lowest
    return ratio & (ratio - 1) == 0


def power_for_value(value: int, lowest: int) -> int:
    if not is_on_ladder(value, lowest):
        raise ValueError(f"Tile value {value} is not a power-of-two multiple of {lowest}")
    return (value // lowest).bit_length() - 1


def value_for_power(power: int, lowest: int) -> int:
    if power < 0:
        raise ValueError(f"Tile power must be non-negative, got {power}")
    return lowest << power
