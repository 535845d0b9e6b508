# adcdisplay

This package models a small embedded application. Readings from an analog input
go into a ring buffer, but only when they differ from the previous reading. A
four-digit decimal display is multiplexed to show the latest value, one position
at a time.

## Parts

- `adcdisplay.ringbuffer.RingBuffer` is a circular buffer of 32 integer slots
  (`BUFFER_SIZE`). `add(value)` always succeeds. When the buffer is full, writing
  wraps around and overwrites old slots. `read()` returns the oldest value, or `0`
  if the buffer is empty. `is_empty()` tells whether anything is left to read.
- `adcdisplay.display.Display` holds the four digits of a value (`DISPLAY_POSITIONS`)
  and the position currently lit.
  - `set_value(value)` splits a value into base-10 digits and drops any above the
    fourth. Position 0 holds the least significant digit.
  - `position()` and `digit()` give the current position and its digit.
  - `advance()` moves to the next position and wraps after the last one.
  - `reset()` returns to position 0 and keeps the digits.
- `adcdisplay.testbench.TestBench` is a small assertion bench that writes to any text
  stream (standard output by default).
  - `assert_equals`, `assert_within_bounds` and `assert_not_zero` each return whether
    the check passed and write a message when it fails.
  - `start()` resets the counters.
  - `report()` writes the totals and returns `(passed, failed)`.

## Installation

```
pip install .
```

To install the test dependencies as well, use `pip install .[test]`.

## Usage

```python
from adcdisplay.ringbuffer import RingBuffer
from adcdisplay.display import Display

buffer = RingBuffer()
buffer.add(1234)

display = Display()
display.set_value(buffer.read())
for _ in range(4):
    print(display.position(), display.digit())
    display.advance()
```

This prints positions 0 to 3, with the digits 4, 3, 2, 1.

### Built-in self tests

`adcdisplay.display` and `adcdisplay.ringbuffer` each provide a `self_test(bench)`
function. It runs that module's checks against a `TestBench`:

```python
import sys
from adcdisplay.testbench import TestBench
from adcdisplay import display, ringbuffer

bench = TestBench(sys.stdout)
bench.start()
display.self_test(bench)
ringbuffer.self_test(bench)
passed, failed = bench.report()
```

## Command line

```
adcdisplay
adcdisplay test
```

Both forms run the built-in self tests for the display and the ring buffer. They
print any failures and then the number of passed and failed checks. The exit
status is 1 if any check failed and 0 otherwise.

```
adcdisplay show 1234 1234 56 0
```

This feeds the given integers to the display as if they were successive captured
readings. A reading that equals the previous one is skipped. The first reading is
compared against 0. Each reading that gets through is shown as four digits, most
significant first. The example above prints:

```
1234
0056
0000
```

## Limitations

The package does not sample any real analog input and drives no hardware. Readings
come only from the command line or from your own code. The timing of the display
multiplexing is not modelled; you call `advance()` yourself.