"""Conversions between decimal text and integers."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LLONG_MAX = 2**63 - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted, and parsing stops at the
    first non-digit. The result is wrapped into the signed 32-bit range.
    When the digits exceed the signed 64-bit range, the result is -1 for a
    positive number and 0 for a negative one.
    """
    text = text.split("\0", 1)[0]
    index = 0
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    sign = 1
    if index < len(text) and text[index] in "+-":
        sign = -1 if text[index] == "-" else 1
        index += 1
    value = 0
    for char in text[index:]:
        if not "0" <= char <= "9":
            break
        value = 10 * value + (ord(char) - ord("0"))
        if value > _LLONG_MAX:
            return -1 if sign > 0 else 0
    return _to_int32(value * sign)


def itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a signed 32-bit integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(_to_int32(number))