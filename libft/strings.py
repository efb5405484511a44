"""Length-bounded string searching, comparison and copying.

Strings follow C conventions in one respect: an embedded NUL character
ends the string, and whatever follows it is ignored.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

Char = Union[int, str]


class Truncated(NamedTuple):
    """The text produced by a bounded copy and the length it tried to create."""

    text: str
    length: int


def _terminated(s: str) -> str:
    return s.partition("\0")[0]


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first unequal pair, or 0."""
    if n < 0:
        raise ValueError(f"count must not be negative: {n}")
    a = _terminated(s1)
    b = _terminated(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
        if x == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` starts within the first ``length`` characters of ``haystack``, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    target = _terminated(needle)
    if not target:
        return 0
    if length == 0:
        return None
    index = _terminated(haystack)[:length].find(target)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Truncated:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is not less than ``size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    text = _terminated(src)
    copied = text[: size - 1] if size > 0 else ""
    return Truncated(copied, len(text))


def strlcat(dst: str, src: str, size: int) -> Truncated:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have had. When ``dst`` already fills the buffer it is returned unchanged
    and the length reported is ``size`` plus the length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    head = _terminated(dst)
    tail = _terminated(src)
    dst_len = min(len(head), size)
    if dst_len >= size:
        return Truncated(head, size + len(tail))
    room = size - 1 - dst_len
    return Truncated(head + tail[:room], dst_len + len(tail))