"""Strict number parsing that reads the longest valid prefix of a string."""

from __future__ import annotations

import itertools
import math
import re

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_FLOAT_RE = re.compile(
    r"(?P<sign>-?)"
    r"(?:(?P<special>inf(?:inity)?|nan(?:\([0-9a-z_]*\))?)"
    r"|(?P<number>(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?))",
    re.IGNORECASE | re.ASCII,
)


def parse_int(text: str, base: int = 10) -> int:
    """Parse an integer in ``base`` from the start of ``text``.

    An optional leading ``-`` is accepted; ``+``, whitespace and radix
    prefixes are not. Trailing characters after the digits are ignored.
    Raises ValueError when no digits can be read.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    valid = _DIGITS[:base]
    negative = text.startswith("-")
    body = text[1:] if negative else text
    digits = "".join(itertools.takewhile(lambda c: c.lower() in valid, body))
    if not digits:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(digits, base)
    return -value if negative else value


def parse_float(text: str) -> float:
    """Parse a floating point number from the start of ``text``.

    Accepts decimal and scientific notation as well as ``inf``,
    ``infinity`` and ``nan``; trailing characters are ignored.
    Raises ValueError when nothing can be read or the value is out of range.
    """
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    sign = -1.0 if match.group("sign") else 1.0
    special = match.group("special")
    if special is not None:
        base = math.inf if special.lower().startswith("inf") else math.nan
        return math.copysign(base, sign)
    value = float(match.group("number"))
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return math.copysign(value, sign)