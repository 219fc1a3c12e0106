"""Strict validation and lenient parsing of 32-bit integer arguments."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_ATOI_WHITESPACE = " \t\n\v\f\r"


def is_valid_int(text: str | None) -> bool:
    """Return True if ``text`` is an optionally negative run of digits fitting in an int.

    Leading spaces (and only spaces) are skipped. A ``+`` sign is rejected.
    An empty digit run is accepted, as the parser then yields zero.
    """
    if text is None:
        return False
    body = text.lstrip(" ")
    negative = body.startswith("-")
    if negative:
        body = body[1:]
    value = 0
    for char in body:
        if not "0" <= char <= "9":
            return False
        value = value * 10 + (ord(char) - ord("0"))
        if negative and -value < INT_MIN:
            return False
        if not negative and value > INT_MAX:
            return False
    return True


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def parse_int(text: str) -> int:
    """Parse a leading integer from ``text``, ignoring anything after the digits.

    Leading whitespace is skipped and one ``+`` or ``-`` sign is honoured.
    Text without digits yields zero; results wrap like a 32-bit int.
    """
    body = text.lstrip(_ATOI_WHITESPACE)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    value = 0
    for char in body:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _wrap_int32(value * sign)