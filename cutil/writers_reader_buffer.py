"""A double buffer that many threads append to and one thread drains."""

from __future__ import annotations

from typing import Generic, TypeVar

from cutil.critical import Critical

T = TypeVar("T")


class WritersReaderBuffer(Generic[T]):
    """Writers push into the front list; the reader swaps it out to read it."""

    def __init__(self) -> None:
        self._buffers: tuple[Critical[list[T]], Critical[list[T]]] = (
            Critical([]),
            Critical([]),
        )
        self._flip = 0

    def push(self, item: T) -> None:
        """Append ``item`` to the current front buffer."""
        while True:
            front = self._flip
            with self._buffers[front].access() as data:
                # the reader may have swapped while this writer waited for the lock
                if front != self._flip:
                    continue
                data.append(item)
                return

    def swap(self) -> list[T]:
        """Make the other buffer the front and return the items pushed so far.

        The returned list is reused: it is cleared by the next ``swap``.
        """
        self._buffers[self._flip ^ 1].unsafe_access().clear()
        self._flip ^= 1
        with self._buffers[self._flip ^ 1].access() as data:
            return data