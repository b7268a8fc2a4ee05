"""String length, comparison and searching helpers.

The end of a string counts as a terminating NUL character, so searching
for ``"\\0"`` finds the position just past the last character.
"""

from __future__ import annotations

from itertools import zip_longest

NUL = "\0"


def _char(c: str | int) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``, the length of ``s`` for NUL, else None."""
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``, the length of ``s`` for NUL, else None."""
    ch = _char(c)
    if ch == NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; otherwise None when there is no match.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the code-point difference of the first differing characters,
    the end of a string counting as NUL, or 0 when they match.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for x, y in zip_longest(a[:n], b[:n], fillvalue=NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == NUL:
            break
    return 0