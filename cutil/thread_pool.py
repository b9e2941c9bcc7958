"""Fixed-size groups of threads that share a stop signal."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, Generic, Sequence, TypeVar

from cutil.multi_event import MultiEvent

T = TypeVar("T")


class ThreadPool:
    """Runs one target on ``size`` threads.

    Targets may block on ``event``; ``stop`` keeps notifying it until every
    thread has finished, then joins them.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"pool size must be positive, got {size}")
        self.size = size
        self.event = MultiEvent()
        self.threads: list[threading.Thread] = []
        self._finished = 0
        self._finished_lock = threading.Lock()

    def _finish(self) -> None:
        with self._finished_lock:
            self._finished += 1

    def _spawn(self, body: Callable[[], Any]) -> threading.Thread:
        def runner() -> None:
            try:
                body()
            finally:
                self._finish()

        thread = threading.Thread(target=runner)
        thread.start()
        return thread

    def run(self, target: Callable[[], Any]) -> None:
        """Start ``size`` threads that each call ``target()``."""
        self.threads = [self._spawn(target) for _ in range(self.size)]

    def stop(self) -> None:
        """Wake waiters until all threads have finished, then join them."""
        while self._finished != self.size:
            self.event.notify_unblock()
            time.sleep(0)
        for thread in self.threads:
            thread.join()


class CustomDataThreadPool(ThreadPool, Generic[T]):
    """A pool whose threads each receive their own item of ``data``."""

    def __init__(self, data: Sequence[T]) -> None:
        super().__init__(len(data))
        self.data = list(data)

    def run(self, target: Callable[[T], Any]) -> None:
        """Start one thread per item, each calling ``target(item)``."""
        self.threads = [self._spawn(lambda item=item: target(item)) for item in self.data]