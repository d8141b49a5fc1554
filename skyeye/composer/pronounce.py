"""Spoken forms of bearings and numbers, digit by digit."""

from __future__ import annotations

from skyeye.bearings import Bearing

__all__ = [
    "pronounce_bearing",
    "pronounce_int",
    "pronounce_decimal",
    "pronounce_numbers",
]

_DEFAULT_DECIMAL_SEPARATOR = "point"
_ASCII_DIGITS = frozenset("0123456789")


def pronounce_bearing(bearing: Bearing) -> str:
    """Speak a bearing as three digits, padding with leading zeros."""
    theta = int(bearing.rounded_degrees())
    spoken = pronounce_int(theta)
    if theta < 10:
        spoken = "0 " + spoken
    if theta < 100:
        spoken = "0 " + spoken
    return spoken


def pronounce_int(d: int) -> str:
    """Speak an integer as a sequence of digits separated by spaces."""
    if d < 0:
        return "minus " + pronounce_int(-d)
    return " ".join(str(d))


def pronounce_decimal(f: float, precision: int, separator: str = "") -> str:
    """Speak a number as digits, the separator, then the fractional digits.

    An empty separator means "point". With a precision of zero only the
    integer part is spoken.
    """
    if not separator:
        separator = _DEFAULT_DECIMAL_SEPARATOR
    integer_part = int(f)
    fractional = f - integer_part
    _, _, fractional_text = f"{fractional:.{precision}f}".partition(".")
    if not fractional_text:
        fractional_text = "0" * precision
    if not fractional_text:
        return pronounce_int(integer_part)
    return f"{pronounce_int(integer_part)} {separator} {pronounce_int(int(fractional_text))}"


def pronounce_numbers(s: str) -> str:
    """Speak every digit of the string in turn, ignoring anything else."""
    return "".join(f"{pronounce_int(int(char))} " for char in s if char in _ASCII_DIGITS)