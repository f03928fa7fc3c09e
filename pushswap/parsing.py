"""Validation of command-line arguments into a list of distinct integers."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.chars import isdigit

INT_MAX = 2147483647
INT_MIN_MAGNITUDE = 2147483648


class ParseError(ValueError):
    """An argument is not a valid 32-bit integer, or is repeated."""


def parse_int(text: str) -> int:
    """Parse a whole argument as a signed 32-bit integer.

    One leading sign is allowed; every other character must be a digit.
    A string with no digits at all reads as 0.
    """
    sign = 1
    digits = text
    if digits[:1] in ("-", "+"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]
    if not all(isdigit(char) for char in digits):
        raise ParseError(f"not an integer: {text!r}")
    value = int(digits) if digits else 0
    limit = INT_MIN_MAGNITUDE if sign < 0 else INT_MAX
    if value > limit:
        raise ParseError(f"out of range: {text!r}")
    return sign * value


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Parse each argument in order, rejecting invalid or duplicate values."""
    values: List[int] = []
    seen = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)
        values.append(value)
    return values