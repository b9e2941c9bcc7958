"""A wakeup that can also end by timing out."""

from __future__ import annotations

import threading


class TimerEvent:
    """Waiters block until ``wakeup`` is called or, with ``wait_for``, a timeout ends."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._waked = False

    def wait(self) -> None:
        """Block until the next ``wakeup``."""
        with self._cond:
            self._waked = False
            self._cond.wait_for(lambda: self._waked)

    def wait_for(self, timeout: float) -> bool:
        """Wait at most ``timeout`` seconds; True if woken, False on timeout."""
        with self._cond:
            self._waked = False
            return self._cond.wait_for(lambda: self._waked, timeout)

    def wakeup(self) -> None:
        """Wake every waiter."""
        with self._cond:
            self._waked = True
            self._cond.notify_all()