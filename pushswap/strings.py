"""C-style string queries: length, search, comparison and bounded copies.

Strings follow C conventions: a NUL character ends the string, and any
text after it is ignored.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]


def _cstr(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def _char(char: CharLike) -> str:
    """Turn a one-character string or a character code into a character."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected an int or a single character, got {type(char).__name__}")
    return chr(char & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    wanted = _char(char)
    text = _cstr(text)
    if wanted == "\0":
        return len(text)
    index = text.find(wanted)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    wanted = _char(char)
    text = _cstr(text)
    if wanted == "\0":
        return len(text)
    index = text.rfind(wanted)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, or 0 when the
    compared parts are equal.
    """
    _check_size(n)
    first = _cstr(first)[:n] + "\0"
    second = _cstr(second)[:n] + "\0"
    for a, b in zip(first, second):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly within the first ``n`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_size(n)
    little = _cstr(little)
    if not little:
        return 0
    index = _cstr(big)[:n].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` characters, terminator included.

    Returns the copied text (at most ``size - 1`` characters; empty when
    ``size`` is 0) and the full length of ``src``, which shows whether the
    copy was truncated.
    """
    _check_size(size)
    src = _cstr(src)
    return src[:max(size - 1, 0)], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a destination of ``size`` characters, terminator included.

    Returns the resulting text and the length the untruncated result would
    have had. When ``size`` does not exceed the length of ``dst``, ``dst`` is
    left unchanged and the length reported is ``size + strlen(src)``.
    """
    _check_size(size)
    dst = _cstr(dst)
    src = _cstr(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strdup(text: str) -> str:
    """Copy of ``text`` up to its first NUL."""
    return _cstr(text)