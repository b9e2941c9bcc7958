"""A counter-based wakeup backed by a Linux eventfd."""

from __future__ import annotations

import os
import select

from cutil.fd import FileDescriptor

_COUNTER_FORMAT = "=Q"


class EventFileDescriptor:
    """An eventfd that can be notified, consumed and waited on, or polled by others."""

    def __init__(self) -> None:
        self._fd = FileDescriptor(os.eventfd(0, 0))

    def notify(self) -> None:
        """Add one to the counter, waking anyone polling the descriptor."""
        self._fd.write_struct(_COUNTER_FORMAT, 1)

    def consume(self) -> int:
        """Read and reset the counter; blocks while it is zero."""
        (value,) = self._fd.read_struct(_COUNTER_FORMAT)
        return value

    def wait(self) -> None:
        """Block until the descriptor is readable, then consume the counter."""
        poller = select.poll()
        poller.register(self._fd.fileno(), select.POLLIN)
        while True:
            for _, revents in poller.poll():
                if revents & select.POLLIN:
                    self.consume()
                    return

    def fileno(self) -> int:
        """The raw descriptor, for use with select or poll."""
        return self._fd.fileno()

    def close(self) -> None:
        """Close the descriptor."""
        self._fd.close()