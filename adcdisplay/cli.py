"""Command line entry: run the self-tests or show captured values."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from . import display as display_module
from . import ringbuffer as ringbuffer_module
from .display import DISPLAY_POSITIONS, Display
from .ringbuffer import RingBuffer
from .testbench import TestBench


def _render(display: Display) -> str:
    """Read one full cycle of the display, most significant digit first."""
    shown = {}
    for _ in range(DISPLAY_POSITIONS):
        shown[display.position()] = display.digit()
        display.advance()
    return "".join(str(shown[p]) for p in reversed(range(DISPLAY_POSITIONS)))


def _run_tests() -> int:
    bench = TestBench(sys.stdout)
    bench.start()
    display_module.self_test(bench)
    ringbuffer_module.self_test(bench)
    _, failed = bench.report()
    return 1 if failed else 0


def _show(values: Sequence[int]) -> int:
    buffer = RingBuffer()
    display = Display()
    capture = 0
    for value in values:
        # Only changes of the captured value reach the buffer.
        if value != capture:
            capture = value
            buffer.add(value)
        while not buffer.is_empty():
            display.set_value(buffer.read())
            print(_render(display))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="adcdisplay",
        description="Run the built-in tests, or show captured values on the display.",
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("test", help="run the built-in tests (default)")
    show = commands.add_parser("show", help="feed captured values to the display")
    show.add_argument("values", nargs="*", type=int)
    args = parser.parse_args(argv)

    if args.command == "show":
        return _show(args.values)
    return _run_tests()


if __name__ == "__main__":
    sys.exit(main())