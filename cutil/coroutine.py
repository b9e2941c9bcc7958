"""Step-wise driving of a generator that yields and finally returns a value."""

from __future__ import annotations

from typing import Any, Callable, Generator, Generic, TypeVar

T = TypeVar("T")


class CoRoutine(Generic[T]):
    """Runs a generator one step per ``resume``.

    Each step returns the value the generator yielded, or the value it
    returned when it finished.
    """

    def __init__(self) -> None:
        self._generator: Generator[T, None, T] | None = None
        self._done = False
        self._last: T | None = None

    def start(self, routine: Callable[..., Generator[T, None, T]], *args: Any, **kwargs: Any) -> None:
        """Create the generator; it does not run until the first ``resume``."""
        self._generator = routine(*args, **kwargs)
        self._done = False
        self._last = None

    def resume(self) -> T:
        """Run to the next yield or to the end and return the value produced."""
        if self._generator is None:
            raise RuntimeError("coroutine has not been started")
        if self._done:
            raise RuntimeError("coroutine has finished")
        try:
            self._last = next(self._generator)
        except StopIteration as stop:
            self._done = True
            self._last = stop.value
        return self._last  # type: ignore[return-value]

    def done(self) -> bool:
        """Whether the generator has returned."""
        return self._done