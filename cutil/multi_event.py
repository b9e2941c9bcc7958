"""A wakeup that releases every waiting thread at once."""

from __future__ import annotations

import threading


class MultiEvent:
    """Multiple waiters, single notifier.

    ``notify`` releases every thread currently in ``wait`` and returns once
    all of them have left it; each thread passes ``wait`` at most once per
    notification.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._waiters = 0
        self._notified = False
        self._synced = False
        self._round = 0

    def wait(self) -> None:
        """Block until the next notification."""
        with self._cond:
            self._waiters += 1
            self._cond.wait_for(lambda: self._notified)
            my_round = self._round
            self._waiters -= 1
            if self._waiters == 0:
                self._synced = True
                self._cond.notify_all()
            self._cond.wait_for(lambda: self._round != my_round)

    def notify(self) -> None:
        """Wake all waiters; blocks until at least one thread has been woken."""
        with self._cond:
            self._notified = True
            self._synced = False
            self._cond.notify_all()
            self._cond.wait_for(lambda: self._synced)
            self._notified = False
            self._round += 1
            self._cond.notify_all()

    def notify_unblock(self) -> None:
        """Like ``notify``, but return at once when nobody is waiting."""
        with self._cond:
            if self._waiters <= 0:
                return
        self.notify()