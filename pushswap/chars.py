"""Character classification and case conversion on character codes."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]


def _code(code: CharLike) -> int:
    """Return the integer code of ``code``, accepting an int or a one-character string."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int or a single character, got {type(code).__name__}")
    return code


def _same_kind(original: CharLike, value: int) -> CharLike:
    return chr(value) if isinstance(original, str) else value


def isalpha(code: CharLike) -> bool:
    """True for ASCII letters."""
    value = _code(code)
    return ord("a") <= value <= ord("z") or ord("A") <= value <= ord("Z")


def isdigit(code: CharLike) -> bool:
    """True for the ASCII digits 0 to 9."""
    value = _code(code)
    return ord("0") <= value <= ord("9")


def isalnum(code: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(code) or isdigit(code)


def isascii(code: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(code) <= 127


def isprint(code: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(code) <= 126


def toupper(code: CharLike) -> CharLike:
    """Map a lower-case ASCII letter to upper case; anything else is returned unchanged."""
    value = _code(code)
    if ord("a") <= value <= ord("z"):
        value -= 32
    return _same_kind(code, value)


def tolower(code: CharLike) -> CharLike:
    """Map an upper-case ASCII letter to lower case; anything else is returned unchanged."""
    value = _code(code)
    if ord("A") <= value <= ord("Z"):
        value += 32
    return _same_kind(code, value)