"""Building new strings: splitting, joining, trimming, copying and mapping."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(name: str, value: int) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [word for word in s.split(_single_char(sep)) if word]


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def striteri(s: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Call ``func(index, char)`` for each character of ``s``, in order.

    When ``func`` returns a string, it replaces that character in place;
    returning None leaves the character unchanged.
    """
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = _single_char(replacement)


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return a + b


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    The result holds at most ``size - 1`` characters. Returns the result and
    the length the full concatenation would have had; when ``size`` does not
    exceed the length of ``dst``, ``dst`` is unchanged and the length
    reported is ``len(src) + size``.
    """
    _non_negative("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copy, truncated to ``size - 1`` characters, and the length
    of ``src``. A size of 0 copies nothing.
    """
    _non_negative("size", size)
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    return "".join(_single_char(func(index, ch)) for index, ch in enumerate(s))


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]