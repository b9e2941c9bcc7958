"""Small string utilities with search positions reported as -1 when absent."""

from __future__ import annotations

NPOS = -1


def concat(*args: str) -> str:
    """Join all arguments into one string."""
    return "".join(args)


def conditional(cond: bool, a: str, b: str) -> str:
    """Return ``a`` when ``cond`` holds, otherwise ``b``."""
    return a if cond else b


def starts_with(text: str, key: str) -> bool:
    """Whether ``text`` begins with ``key``."""
    return text.startswith(key)


def ends_with(text: str, key: str) -> bool:
    """Whether ``text`` ends with ``key``."""
    return text.endswith(key)


def substr(text: str, index: int, length: int | None = None) -> str:
    """Return ``length`` characters of ``text`` starting at ``index``.

    Without a length the rest of the string is returned. Raises IndexError
    when the range does not lie within ``text``.
    """
    if length is None:
        length = len(text) - index
    if index < 0 or length < 0 or index + length > len(text):
        raise IndexError(f"range [{index}, {index + length}) outside string of length {len(text)}")
    return text[index : index + length]


def find(text: str, key: str, pos: int = 0) -> int:
    """Index of the first ``key`` at or after ``pos``, or -1."""
    return text.find(key, pos)


def rfind(text: str, key: str, pos: int | None = None) -> int:
    """Index of the last ``key`` that starts at or before ``pos``, or -1."""
    if pos is None:
        return text.rfind(key)
    return text.rfind(key, 0, pos + len(key))


def remove_prefix(text: str, prefix: str) -> str:
    """Strip ``prefix`` from ``text`` if present."""
    return text[len(prefix) :] if text.startswith(prefix) else text


def remove_suffix(text: str, suffix: str) -> str:
    """Strip ``suffix`` from ``text`` if present."""
    if suffix and text.endswith(suffix):
        return text[: len(text) - len(suffix)]
    return text


def replace(text: str, old: str, new: str, index: int = 0) -> str:
    """Replace every ``old`` found at or after ``index`` with ``new``."""
    if not old:
        raise ValueError("substring to replace must not be empty")
    return text[:index] + text[index:].replace(old, new)


def to_string(number: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)