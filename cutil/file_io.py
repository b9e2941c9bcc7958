"""Reading and writing whole files as bytes."""

from __future__ import annotations

import os
from pathlib import Path


def read_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole content of ``path``; raises OSError on failure."""
    return Path(path).read_bytes()


def write_file(path: str | os.PathLike[str], data: bytes) -> None:
    """Replace the content of ``path`` with ``data``; raises OSError on failure."""
    with open(path, "wb") as stream:
        stream.write(data)