"""Command-line argument checks and integer parsing."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def check_params(args: Iterable[str]) -> bool:
    """Return True if every argument is a non-empty run of ASCII digits other than "0".

    ``args`` holds the arguments without the program name.
    """
    for arg in args:
        if not arg or arg == "0":
            return False
        if not set(arg) <= _DIGITS:
            return False
    return True


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % (1 << _INT_BITS)) - half


def parse_int(text: str) -> int:
    """Parse a leading integer the way the C library's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if char not in _DIGITS:
            break
        digits.append(char)
    if not digits:
        return 0
    return _wrap_int(sign * int("".join(digits)))