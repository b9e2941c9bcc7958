"""An owned operating-system file descriptor with whole-buffer reads and writes."""

from __future__ import annotations

import os
import struct
from typing import Any

_SIZE_FORMAT = "N"


class FileDescriptor:
    """Owns a raw file descriptor and closes it when closed or collected.

    A value of -1 means that no descriptor is held.
    """

    def __init__(self, fd: int = -1) -> None:
        self._fd = fd

    def read(self, size: int) -> bytes:
        """Read exactly ``size`` bytes.

        Raises EOFError if the stream ends first and OSError on failure.
        """
        chunks: list[bytes] = []
        remaining = size
        while remaining > 0:
            chunk = os.read(self._fd, remaining)
            if not chunk:
                raise EOFError(f"stream ended with {remaining} of {size} bytes unread")
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def read_struct(self, fmt: str) -> tuple[Any, ...]:
        """Read and unpack one record laid out as the ``struct`` format ``fmt``."""
        return struct.unpack(fmt, self.read(struct.calcsize(fmt)))

    def read_sized(self) -> bytes:
        """Read a native ``size_t`` length followed by that many bytes."""
        (size,) = self.read_struct(_SIZE_FORMAT)
        return self.read(size)

    def write(self, data: bytes) -> None:
        """Write all of ``data``; raises OSError on failure."""
        view = memoryview(data).cast("B")
        while view:
            written = os.write(self._fd, view)
            view = view[written:]

    def write_struct(self, fmt: str, *args: Any) -> None:
        """Pack ``args`` with the ``struct`` format ``fmt`` and write them."""
        self.write(struct.pack(fmt, *args))

    def close(self) -> None:
        """Close the descriptor if one is held."""
        if self._fd != -1:
            fd, self._fd = self._fd, -1
            os.close(fd)

    def release(self) -> int:
        """Give up ownership and return the raw descriptor."""
        fd, self._fd = self._fd, -1
        return fd

    def clone(self) -> FileDescriptor:
        """Return a new owner of a duplicate of this descriptor."""
        return FileDescriptor(os.dup(self._fd))

    def fileno(self) -> int:
        """The raw descriptor, or -1 when none is held."""
        return self._fd

    def __enter__(self) -> FileDescriptor:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except OSError:
            pass