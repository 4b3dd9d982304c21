"""String searching, comparison, copying and splitting helpers.

Positions are returned as indices into the given text. ``None`` means that
nothing was found. As with NUL-terminated strings, searching for ``"\\0"``
finds the end of the text.
"""

from __future__ import annotations

from typing import Callable, Optional

from .parse import split_words

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    return split_words(text, _single_char(sep))


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None if it does not occur."""
    _single_char(c)
    index = text.find(c)
    if index >= 0:
        return index
    if c == _NUL:
        return len(text)
    return None


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None if it does not occur."""
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    limit = max(0, min(length, len(haystack)))
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters: -1, 0 or 1.

    A string that ends first compares lower than one that goes on.
    """
    if n <= 0:
        return 0
    left, right = s1[:n], s2[:n]
    return (left > right) - (left < right)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text (at most ``size - 1`` characters long) and the
    length that the full concatenation would have had. When ``size`` does not
    exceed the length of ``dest``, ``dest`` is returned unchanged together
    with ``size + len(src)``.
    """
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copy (at most ``size - 1`` characters) and ``len(src)``.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from index ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Apply ``func(index, char)`` to every character and join the results."""
    return "".join(func(index, char) for index, char in enumerate(text))