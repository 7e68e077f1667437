"""Small numeric helpers shared across the game logic."""

from __future__ import annotations

import math

_U32_POWER_LIMIT = 1 << 31


def wrap_degrees(degrees: float) -> float:
    """Wrap an angle into the range [-180, 180)."""
    wrapped = math.fmod(degrees, 360.0)
    if wrapped >= 180.0:
        wrapped -= 360.0
    if wrapped < -180.0:
        wrapped += 360.0
    return wrapped


def squared_magnitude(a: float, b: float, c: float) -> float:
    return c * c + (a * a + b * b)


def magnitude(a: float, b: float, c: float) -> float:
    return math.sqrt(squared_magnitude(a, b, c))


def get_section_cord(coord: int) -> int:
    """Convert a world coordinate to its chunk-section coordinate."""
    return coord >> 4


def _check_u32_power_input(value: int) -> None:
    if value < 1 or value > _U32_POWER_LIMIT:
        raise ValueError(f"value must be in 1..={_U32_POWER_LIMIT}, got {value}")


def smallest_encompassing_power_of_two(value: int) -> int:
    """Smallest power of two that is at least ``value``."""
    _check_u32_power_input(value)
    return 1 << (value - 1).bit_length()


def ceil_log2(value: int) -> int:
    """Ceiling of log2 of ``value``; at most 31."""
    _check_u32_power_input(value)
    return (value - 1).bit_length()


def floor_log2(value: int) -> int:
    """Floor of log2 of ``value``; at most 30 for values up to 2**31."""
    _check_u32_power_input(value)
    return value.bit_length() - 1


def floor_div(x: int, y: int) -> int:
    """Integer division rounding towards negative infinity."""
    return x // y


def floor_mod(x: int, y: int) -> int:
    """Remainder whose sign follows the divisor."""
    return x % y


def assert_eq_delta(x: float, y: float, d: float) -> None:
    """Raise AssertionError unless ``x`` and ``y`` agree within relative delta ``d``."""
    diff = abs(x - y)
    if not 2.0 * diff <= d * (abs(x) + abs(y)):
        raise AssertionError(f"{x} vs {y} ({diff} vs {d})")