"""Multiplexed decimal display: one digit position is lit at a time."""

from __future__ import annotations

from .testbench import TestBench

DISPLAY_POSITIONS = 4


class Display:
    """Holds the digits of a value and the position currently being lit.

    Position 0 holds the least significant digit.
    """

    def __init__(self) -> None:
        self._digits = [0] * DISPLAY_POSITIONS
        self._position = 0

    def reset(self) -> None:
        """Return to the first position; the digits are kept."""
        self._position = 0

    def position(self) -> int:
        """The position to light now."""
        return self._position

    def digit(self) -> int:
        """The digit to show at the current position."""
        return self._digits[self._position]

    def advance(self) -> None:
        """Move on to the next position, wrapping after the last one."""
        self._position = (self._position + 1) % DISPLAY_POSITIONS

    def set_value(self, value: int) -> None:
        """Split ``value`` into base-10 digits; higher digits are dropped."""
        sign = -1 if value < 0 else 1
        magnitude = abs(value)
        digits = []
        for _ in range(DISPLAY_POSITIONS):
            magnitude, digit = divmod(magnitude, 10)
            digits.append(sign * digit)
        self._digits = digits


def self_test(bench: TestBench) -> None:
    """Run the display's built-in checks against ``bench``."""
    display = Display()
    cases = (
        (1234, "DISP_4", (4, 3, 2, 1)),
        (34, "DISP_2", (4, 3, 0, 0)),
    )
    ordinals = ("1ST", "2ND", "3RD", "4TH")
    for value, prefix, expected_digits in cases:
        display.reset()
        display.set_value(value)
        for position, (ordinal, expected) in enumerate(zip(ordinals, expected_digits)):
            bench.assert_equals(f"{prefix}_{ordinal}P", display.position(), position)
            bench.assert_equals(f"{prefix}_{ordinal}D", display.digit(), expected)
            display.advance()