"""Read-copy-update with two slots: readers never block the single updater for long."""

from __future__ import annotations

import copy
import threading
import time
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class _Slot(Generic[T]):
    """One storage slot: the data plus a count of readers holding it."""

    def __init__(self, data: T) -> None:
        self.data = data
        self.complete = True
        self._refcount = 0
        self._count_lock = threading.Lock()

    @property
    def refcount(self) -> int:
        return self._refcount

    def _acquire(self) -> None:
        with self._count_lock:
            self._refcount += 1

    def _release(self) -> None:
        with self._count_lock:
            self._refcount -= 1


class RCU(Generic[T]):
    """Two-slot read-copy-update container for one updater and many readers."""

    def __init__(self, initial: T = None) -> None:  # type: ignore[assignment]
        self._slots = (_Slot(initial), _Slot(copy.deepcopy(initial)))
        self._flip = 0

    def copy_data(self) -> T:
        """Return a deep copy of the current data."""
        return copy.deepcopy(self._slots[self._flip].data)

    def emplace(self, value: T) -> int:
        """Publish ``value``; returns how many times it had to wait for readers."""
        back = self._slots[self._flip ^ 1]
        spins = 0
        while back.refcount != 0:
            time.sleep(0)
            spins += 1
        back.complete = False
        back.data = value
        back.complete = True
        self._flip ^= 1
        return spins

    def lock(self) -> _Slot[T]:
        """Pin the current slot for reading; release it with ``unlock``."""
        front = self._slots[self._flip]
        front._acquire()
        while not front.complete:
            time.sleep(0)
        return front

    def unlock(self, slot: _Slot[T]) -> None:
        """Release a slot obtained from ``lock``."""
        slot._release()

    @contextmanager
    def access(self) -> Iterator[T]:
        """Context manager yielding the current data while it is pinned."""
        slot = self.lock()
        try:
            yield slot.data
        finally:
            self.unlock(slot)