"""Shortening of compiler-style function and file names for log prefixes."""

from __future__ import annotations

import sys

from cutil.strtools import (
    NPOS,
    concat,
    find,
    remove_prefix,
    remove_suffix,
    replace,
    rfind,
)


def remove_prefix_before_second_delim(text: str, delim: str) -> str:
    """Keep only the part of ``text`` after the second-to-last ``delim``."""
    last = rfind(text, delim)
    if last == NPOS:
        return text
    before = rfind(text, delim, last - 1 if last > 0 else None)
    if before == NPOS:
        return text
    return text[before + len(delim) :]


def remove_suffix_pair(text: str, open_: str, close: str) -> str:
    """Drop a trailing bracketed group that starts at the last ``open_``."""
    pos = rfind(text, open_)
    if not text.endswith(close) or pos == NPOS:
        return text
    return text[:pos]


def remove_region_recursive(text: str, open_: str, close: str) -> str:
    """Remove every region from ``open_`` to the following ``close``."""
    while True:
        opos = find(text, open_)
        if opos == NPOS:
            return text
        epos = find(text, close, opos + 1)
        if epos == NPOS:
            return text
        text = text[:opos] + text[epos + 1 :]


def format_function_name(name: str, clang: bool = False) -> str:
    """Reduce a pretty-printed function signature to ``Scope::name``.

    ``clang`` selects that compiler's spelling of lambdas and anonymous
    namespaces; otherwise the GCC spelling is assumed.
    """
    text = remove_prefix(name, "static ")
    text = remove_prefix(text, "virtual ")

    text = remove_suffix_pair(text, "[", "]")
    text = remove_suffix(text, " ")
    text = remove_suffix(text, " const")
    text = remove_suffix_pair(text, "(", ")")

    if clang:
        stripped = remove_suffix(text, "(anonymous class)::operator()")
    else:
        stripped = remove_suffix_pair(text, "<lambda", ">")
    if len(stripped) != len(text):
        stripped = concat(stripped, "<lambda>")
    text = stripped

    anon_label = "(anonymous namespace)::" if clang else "{anonymous}::"
    text = replace(text, anon_label, "")

    text = remove_region_recursive(text, "(", ")")

    pos = max(rfind(text, " ") + 1, rfind(text, "*") + 1) - 1
    if pos != NPOS:
        text = text[pos + 1 :]
    text = remove_prefix(text, "*")

    return remove_prefix_before_second_delim(text, "::")


def format_file_name(path: str) -> str:
    """Keep the last directory and the file name of ``path``."""
    return remove_prefix_before_second_delim(path, "/")


def location_print(
    filename: str,
    function: str,
    line: int,
    message: str,
    err: bool = False,
    clang: bool = False,
) -> None:
    """Print ``message`` prefixed with a short function name and source location.

    Output goes to standard output when ``err`` is set and to standard
    error otherwise.
    """
    out = sys.stdout if err else sys.stderr
    short_function = format_function_name(function, clang)
    short_filename = format_file_name(filename)
    print(f"{short_function} @ {short_filename}:{line} {message}", file=out)