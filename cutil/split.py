"""String splitting helpers."""

from __future__ import annotations

import re

_SHELL_TOKEN_RE = re.compile(
    r"""(?P<quote>["'])(?P<quoted>.*?)(?:(?P=quote)|\Z)|(?P<word>[^ \t\n\v\f\r]+)""",
    re.DOTALL,
)


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if not sep:
        raise ValueError("separator must not be empty")
    return [piece for piece in text.split(sep) if piece]


def split_like_shell(text: str) -> list[str]:
    """Split ``text`` on whitespace, keeping single- or double-quoted runs together.

    A quote only opens a group at the start of a token; an unclosed quote
    runs to the end of the text.
    """
    return [
        match.group("quoted") if match.group("quote") else match.group("word")
        for match in _SHELL_TOKEN_RE.finditer(text)
    ]