"""A fixed list of pairs searchable from either side."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class PairTable(Generic[T, U]):
    """Looks up the partner of a value in a small table of pairs.

    When several pairs match, the first one wins.
    """

    def __init__(self, pairs: Iterable[tuple[T, U]]) -> None:
        self.pairs: tuple[tuple[T, U], ...] = tuple(pairs)

    def find_second(self, first: T) -> U | None:
        """The second item of the first pair whose first item equals ``first``."""
        return next((b for a, b in self.pairs if a == first), None)

    def find_first(self, second: U) -> T | None:
        """The first item of the first pair whose second item equals ``second``."""
        return next((a for a, b in self.pairs if b == second), None)