"""A small formatted-output routine supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, List, Optional, TextIO

from pushswap.numbers import itoa


def _to_uint32(value: int) -> int:
    return value & 0xFFFFFFFF


def _integer(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if conversion == "c":
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {value!r}")
            return value
        return chr(_integer(value, conversion) & 0xFF)
    if conversion == "s":
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s expects a string, got {type(value).__name__}")
        return value.split("\0", 1)[0]
    if conversion == "p":
        if value is None or value == 0:
            return "(nil)"
        return "0x" + format(_integer(value, conversion) & 0xFFFFFFFFFFFFFFFF, "x")
    if conversion in "di":
        return itoa(_integer(value, conversion))
    if conversion == "u":
        return str(_to_uint32(_integer(value, conversion)))
    if conversion == "x":
        return format(_to_uint32(_integer(value, conversion)), "x")
    if conversion == "X":
        return format(_to_uint32(_integer(value, conversion)), "X")
    raise ValueError(f"unsupported conversion %{conversion}")


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    A lone ``%`` at the very end of ``fmt`` produces nothing. Extra
    arguments are ignored; missing ones raise TypeError.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a string, got {type(fmt).__name__}")
    pieces: List[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, None)
        if conversion is None:
            break
        pieces.append(_convert(conversion, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default) and return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)