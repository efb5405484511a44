"""Building new strings from existing ones: copying, slicing, joining,
trimming, splitting and per-character mapping.

As elsewhere in the package, an embedded NUL character ends a string and
whatever follows it is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

Char = Union[int, str]


def _terminated(s: str) -> str:
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s.partition("\0")[0]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative: {start}")
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _terminated(s)
    chars = _terminated(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: Char) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    text = _terminated(s)
    separator = _char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    if func is None:
        raise TypeError("func must be callable")

    def mapped(index: int, ch: str) -> str:
        result = func(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping must return a single character, got {result!r}")
        return result

    return "".join(mapped(i, ch) for i, ch in enumerate(_terminated(s)))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Apply ``func(index, char)`` to each character of ``chars`` in place.

    Processing stops at the first NUL. A character is replaced by what
    ``func`` returns; a return of None leaves it unchanged.
    """
    if func is None:
        raise TypeError("func must be callable")
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        result = func(index, ch)
        if result is not None:
            chars[index] = _char(result)