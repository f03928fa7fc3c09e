"""String building helpers: splitting, trimming, slicing, joining and mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional

from pushswap.strings import strlen


def _cstr(text: str) -> str:
    return text.split("\0", 1)[0]


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _cstr(text)
    if sep == "\0":
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    charset = _cstr(charset)
    text = _cstr(text)
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _cstr(text)
    if len(text) < start:
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _cstr(first) + _cstr(second)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(_cstr(text)))


def striteri(
    chars: MutableSequence[str],
    func: Callable[[int, str], Optional[str]],
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each character, storing any non-None result in place.

    The characters visited are those before the first NUL at call time.
    """
    length = strlen("".join(chars))
    for index, char in enumerate(list(chars[:length])):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars