"""Allocation tracking for running programs, released all at once at exit."""

from __future__ import annotations

from array import array
from collections.abc import Callable, Sequence
from typing import Union

Buffer = Union[bytearray, array]


class Arena:
    """Hands out zeroed buffers and frees every one of them together."""

    def __init__(self) -> None:
        self._buffers: list[Buffer] = []
        self._destroyed = False

    def __len__(self) -> int:
        return len(self._buffers)

    def _track(self, buffer: Buffer) -> Buffer:
        if self._destroyed:
            raise RuntimeError("arena has been destroyed")
        self._buffers.append(buffer)
        return buffer

    @staticmethod
    def _check(size: int) -> None:
        if size < 0:
            raise ValueError(f"invalid allocation size: {size}")

    def alloc(self, size: int) -> bytearray:
        """Allocate ``size`` bytes."""
        self._check(size)
        return self._track(bytearray(size))

    def _typed(self, code: str, size: int) -> array:
        self._check(size)
        return self._track(array(code, bytes(array(code).itemsize * size)))

    def alloc_i8(self, size: int) -> array:
        """Allocate ``size`` unsigned 8-bit items."""
        return self._typed("B", size)

    def alloc_i16(self, size: int) -> array:
        """Allocate ``size`` unsigned 16-bit items."""
        return self._typed("H", size)

    def alloc_i32(self, size: int) -> array:
        """Allocate ``size`` unsigned 32-bit items."""
        return self._typed("I", size)

    def alloc_i64(self, size: int) -> array:
        """Allocate ``size`` unsigned 64-bit items."""
        return self._typed("Q", size)

    def destroy(self) -> None:
        """Release every buffer handed out; further allocation fails."""
        for buffer in self._buffers:
            del buffer[:]
        self._buffers.clear()
        self._destroyed = True

    def __enter__(self) -> Arena:
        return self

    def __exit__(self, *args: object) -> None:
        self.destroy()


def run_main(entry: Callable[[Sequence[str], int, Arena], int], argv: Sequence[str]) -> int:
    """Run a program entry point inside a fresh arena and return its exit code.

    The entry receives the arguments, their count and the arena to allocate from.
    """
    with Arena() as arena:
        return entry(argv, len(argv), arena)