"""Character classes, case mapping and decimal conversion of integers.

The character functions accept either a one-character string or an integer
character code. Only the ASCII ranges count: letters are ``A``-``Z`` and
``a``-``z``, digits are ``0``-``9``.
"""

from __future__ import annotations

from typing import Union

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"

Char = Union[str, int]


def _code(c: Char) -> int:
    """The integer code of ``c``; strings must hold exactly one character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _like(c: Char, code: int) -> Char:
    """Return ``code`` in the same form as ``c`` was given."""
    return chr(code) if isinstance(c, str) else code


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def isalpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: Char) -> bool:
    """True for a code from 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: Char) -> Char:
    """Map an upper-case ASCII letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += ord("a") - ord("A")
    return _like(c, code)


def toupper(c: Char) -> Char:
    """Map a lower-case ASCII letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= ord("a") - ord("A")
    return _like(c, code)


def atoi(text: str) -> int:
    """Read leading whitespace, one optional sign and digits; ignore the rest.

    The result is a signed 32-bit integer and wraps around on overflow.
    """
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    digits = []
    for char in body:
        if not isdigit(char):
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Write a signed 32-bit integer in decimal.

    Raises ValueError for a value outside the 32-bit range.
    """
    if not INT_MIN <= n <= INT_MAX:
        raise ValueError(f"out of 32-bit range: {n}")
    return str(n)