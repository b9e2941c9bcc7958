"""Random byte generation driven by a 64-bit Mersenne Twister."""

from __future__ import annotations

import secrets
import sys

_MASK64 = (1 << 64) - 1
_N = 312
_M = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UPPER_MASK = 0xFFFFFFFF80000000
_LOWER_MASK = 0x7FFFFFFF
_INIT_MULTIPLIER = 6364136223846793005


class _MT19937_64:
    """The standard 64-bit Mersenne Twister."""

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK64]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_INIT_MULTIPLIER * (prev ^ (prev >> 62)) + i) & _MASK64)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for i in range(_N):
            x = (state[i] & _UPPER_MASK) | (state[(i + 1) % _N] & _LOWER_MASK)
            shifted = x >> 1
            if x & 1:
                shifted ^= _MATRIX_A
            state[i] = state[(i + _M) % _N] ^ shifted
        self._index = 0

    def __call__(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> 29) & 0x5555555555555555
        y ^= (y << 17) & 0x71D67FFFEDA60000
        y ^= (y << 37) & 0xFFF7EEE000000000
        y ^= y >> 43
        return y & _MASK64


class RandomEngine:
    """Fills buffers with random bytes.

    Whole 8-byte words come first, each from one engine output in native
    byte order; a remaining 4-, 2- and 1-byte tail each take one output,
    truncated. Without a seed the engine is seeded from the system's
    randomness source.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._engine = _MT19937_64(secrets.randbits(32) if seed is None else seed)

    def random_fill(self, buffer: bytearray | memoryview) -> None:
        """Overwrite every byte of the writable ``buffer`` with random data."""
        view = memoryview(buffer).cast("B")
        pieces: list[bytes] = []
        remaining = len(view)
        for width in (8, 4, 2, 1):
            count, remaining = divmod(remaining, width)
            mask = (1 << (8 * width)) - 1
            pieces.extend(
                (self._engine() & mask).to_bytes(width, sys.byteorder) for _ in range(count)
            )
        view[:] = b"".join(pieces)

    def generate(self, length: int) -> bytes:
        """Return ``length`` random bytes."""
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        buffer = bytearray(length)
        self.random_fill(buffer)
        return bytes(buffer)