"""Ring buffer, multiplexed four-digit display and assertion bench, with a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "display", "ringbuffer", "testbench"]