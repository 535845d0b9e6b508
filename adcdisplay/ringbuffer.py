"""Fixed-capacity circular buffer of integers."""

from __future__ import annotations

from .testbench import TestBench

BUFFER_SIZE = 32


class RingBuffer:
    """A circular buffer of ``BUFFER_SIZE`` slots.

    Adding never fails: once full, writing wraps and overwrites old slots.
    Reading an empty buffer yields 0.
    """

    def __init__(self) -> None:
        self._slots = [0] * BUFFER_SIZE
        self._in = 0
        self._out = 0

    def add(self, value: int) -> None:
        """Store a value in the next slot."""
        self._slots[self._in] = value
        self._in = (self._in + 1) % BUFFER_SIZE

    def read(self) -> int:
        """Take the oldest value, or 0 if the buffer is empty."""
        if self.is_empty():
            return 0
        value = self._slots[self._out]
        self._out = (self._out + 1) % BUFFER_SIZE
        return value

    def is_empty(self) -> bool:
        """Whether there is nothing left to read."""
        return self._in == self._out


def self_test(bench: TestBench) -> None:
    """Run the buffer's built-in checks against ``bench``."""
    buffer = RingBuffer()
    for value in (10, 11, 12, 13):
        buffer.add(value)
    bench.assert_equals("BUF_RET_1", buffer.read(), 10)
    bench.assert_equals("BUF_RET_2", buffer.read(), 11)
    bench.assert_equals("BUF_RET_3", buffer.read(), 12)
    bench.assert_equals("BUF_RET_4", buffer.read(), 13)

    buffer = RingBuffer()
    bench.assert_equals("BUF_EMP_1", buffer.read(), 0)
    buffer.add(10)
    buffer.add(11)
    buffer.read()
    buffer.read()
    bench.assert_equals("BUF_EMP_2", buffer.read(), 0)