"""Reading the integers given on the command line."""

from __future__ import annotations

from typing import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments are not a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_int(text: str) -> int:
    """Read a 32-bit signed integer, as the command line accepts it.

    Leading whitespace and one sign are allowed. Digits are read until the
    first non-digit; that character must be whitespace or the end of text.
    Values outside the 32-bit range raise :class:`InputError`.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    if not rest:
        raise InputError()
    result = 0
    consumed = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
        if (sign == 1 and result > INT_MAX) or (sign == -1 and -result < INT_MIN):
            raise InputError()
        consumed += 1
    tail = rest[consumed:]
    if tail and tail[0] not in _WHITESPACE:
        raise InputError()
    return sign * result


def parse_args(args: Sequence[str]) -> list[int]:
    """Parse every argument as an integer; reject an empty or duplicated list."""
    if not args:
        raise InputError()
    values = [parse_int(arg) for arg in args]
    if len(set(values)) != len(values):
        raise InputError()
    return values