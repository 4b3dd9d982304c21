"""Reading the command-line numbers into a list of distinct integers."""

from __future__ import annotations

from typing import Iterable

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """Raised for any argument that is not a valid, unique 32-bit integer."""


def atol(text: str) -> int:
    """Read leading whitespace, an optional sign and digits; ignore the rest."""
    body = text.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = []
    for char in body:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def check_syntax(token: str) -> None:
    """Raise InputError unless ``token`` is an optional sign followed by digits."""
    if token.startswith("-") and len(token) > 11:
        raise InputError(f"too long: {token!r}")
    if len(token) > 10:
        raise InputError(f"too long: {token!r}")
    if not token or not (token[0] in "+-" or token[0] in _DIGITS):
        raise InputError(f"not a number: {token!r}")
    if token[0] in "+-" and not (len(token) > 1 and token[1] in _DIGITS):
        raise InputError(f"sign without digits: {token!r}")
    if any(char not in _DIGITS for char in token[1:]):
        raise InputError(f"not a number: {token!r}")


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Validate every argument and return the numbers in order."""
    values: list[int] = []
    seen: set[int] = set()
    for token in args:
        check_syntax(token)
        value = atol(token)
        if value in seen:
            raise InputError(f"duplicate: {value}")
        if not INT_MIN <= value <= INT_MAX:
            raise InputError(f"out of range: {value}")
        seen.add(value)
        values.append(value)
    return values