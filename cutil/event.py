"""A one-shot wakeup for a single waiter and any number of notifiers."""

from __future__ import annotations

import threading


class Event:
    """Auto-resetting event: ``wait`` blocks until notified, then clears the flag."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._flag = False

    def wait(self) -> None:
        """Block until notified and consume the notification."""
        with self._cond:
            self._cond.wait_for(lambda: self._flag)
            self._flag = False

    def notify(self) -> None:
        """Set the flag and wake one waiter."""
        with self._cond:
            self._flag = True
            self._cond.notify()