"""
Base-60 numerals as used by the packed zone format.

Digits run ``0-9``, then ``a-z``, then ``A-Z`` (values 0..61).  A number is
``[+-]?<digits>(.<digits>)?`` with the integer part most significant first and
fraction digits weighted 1/60, 1/3600, ...
"""

from __future__ import annotations

import re

from ._exceptions import ZoneParseError

BASE60_NUMBER = re.compile(r"[+-]?[0-9a-zA-Z]+(?:\.[0-9a-zA-Z]+)?")


def digit_value(ch: str) -> int:
    code = ord(ch)
    if code > 96:
        return code - 87
    if code > 64:
        return code - 29
    return code - 48


def decode_base60(token: str) -> float:
    if BASE60_NUMBER.fullmatch(token) is None:
        raise ZoneParseError([f"invalid base-60 number {token!r}"])

    sign = 1.0
    if token[0] in "+-":
        sign = -1.0 if token[0] == "-" else 1.0
        token = token[1:]

    whole, _, frac = token.partition(".")
    value = 0.0
    for ch in whole:
        value = 60.0 * value + digit_value(ch)

    weight = 1.0
    for ch in frac:
        weight /= 60.0
        value += digit_value(ch) * weight

    return sign * value
