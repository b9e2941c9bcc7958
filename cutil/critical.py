"""A value guarded by its own lock."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Guard(Generic[T]):
    """Context manager that holds the lock of a Critical while in use."""

    def __init__(self, critical: Critical[T], acquired: bool) -> None:
        self._critical = critical
        self._acquired = acquired

    def __enter__(self) -> T:
        if not self._acquired:
            self._critical._lock.acquire()
            self._acquired = True
        return self._critical._data

    def __exit__(self, *exc: Any) -> None:
        self._acquired = False
        self._critical._lock.release()


class Critical(Generic[T]):
    """Holds ``data`` and hands it out only while its lock is held."""

    def __init__(self, data: T = None) -> None:  # type: ignore[assignment]
        self._lock = threading.Lock()
        self._data = data

    def access(self) -> _Guard[T]:
        """Context manager that locks and yields the data."""
        return _Guard(self, acquired=False)

    def try_access(self) -> _Guard[T] | None:
        """Lock without blocking; return a guard to enter, or None if busy.

        The returned guard already owns the lock and must be entered so that
        leaving it releases the lock.
        """
        if self._lock.acquire(blocking=False):
            return _Guard(self, acquired=True)
        return None

    def unsafe_access(self) -> T:
        """Return the data without locking."""
        return self._data

    def swap(self, new_data: T) -> T:
        """Replace the data under the lock and return the previous value."""
        with self._lock:
            old, self._data = self._data, new_data
        return old

    def set(self, value: T) -> None:
        """Replace the data under the lock."""
        with self._lock:
            self._data = value