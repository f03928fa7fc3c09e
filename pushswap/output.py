"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from pushswap.numbers import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(char: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a character code."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        text = char
    elif isinstance(char, int) and not isinstance(char, bool):
        text = chr(char & 0xFF)
    else:
        raise TypeError(f"expected an int or a single character, got {type(char).__name__}")
    _target(stream).write(text)


def putstr_fd(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL."""
    _target(stream).write(text.split("\0", 1)[0])


def putendl_fd(text: str, stream: Optional[TextIO] = None) -> None:
    """Write ``text`` up to its first NUL, then a newline."""
    out = _target(stream)
    out.write(text.split("\0", 1)[0])
    out.write("\n")


def putnbr_fd(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` in decimal, taken as a signed 32-bit integer."""
    _target(stream).write(itoa(number))