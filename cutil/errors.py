"""Fatal assertions and a simple string-valued error."""

from __future__ import annotations

from dataclasses import dataclass


class PanicError(RuntimeError):
    """Raised when an unrecoverable condition is reached."""


def panic(message: str = "") -> None:
    """Abort the current operation by raising PanicError."""
    raise PanicError(message)


def dynamic_assert(cond: bool, message: str = "") -> None:
    """Raise PanicError with ``message`` unless ``cond`` holds."""
    if not cond:
        panic(message)


@dataclass(frozen=True)
class StringError:
    """An error carrying only a message; an empty message means no error."""

    what: str = ""

    def __bool__(self) -> bool:
        return bool(self.what)

    def __str__(self) -> str:
        return self.what