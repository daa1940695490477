"""Numeric rounding, clamping and display formatting utilities"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity (668.5 -> 669, -7.5 -> -7)"""
    return math.floor(value + 0.5)


def clamp(value: float, lower: float, upper: float) -> float:
    """Restrict value to the inclusive range [lower, upper]"""
    return min(max(value, lower), upper)


def format_number(value: float, max_fraction_digits: int = 3, grouping: bool = True) -> str:
    """Format with no trailing zeros, thousands separators unless grouping=False (60000 -> '60,000')"""
    separator = "," if grouping else ""
    if isinstance(value, int):
        return f"{value:{separator}}"
    if value.is_integer():
        return f"{int(value):{separator}}"
    text = f"{value:{separator}.{max_fraction_digits}f}".rstrip("0").rstrip(".")
    return text


def format_points(value: float, signed: bool = True) -> str:
    """Rounded point delta, '+' prefixed when positive (25 -> '+25', -7.5 -> '-7')"""
    rounded = round_half_up(value)
    if signed and value > 0:
        return f"+{rounded}"
    return str(rounded)
