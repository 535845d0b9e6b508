import io

from adcdisplay.ringbuffer import BUFFER_SIZE, RingBuffer, self_test
from adcdisplay.testbench import TestBench


def test_can_add_and_retrieve_values():
    buffer = RingBuffer()
    for value in (10, 11, 12, 13):
        buffer.add(value)
    assert [buffer.read() for _ in range(4)] == [10, 11, 12, 13]


def test_returns_zero_when_empty():
    buffer = RingBuffer()
    assert buffer.read() == 0
    buffer.add(10)
    buffer.add(11)
    buffer.read()
    buffer.read()
    assert buffer.read() == 0


def test_is_empty_tracks_contents():
    buffer = RingBuffer()
    assert buffer.is_empty()
    buffer.add(3)
    assert not buffer.is_empty()
    buffer.read()
    assert buffer.is_empty()


def test_values_survive_many_wraps():
    buffer = RingBuffer()
    values = list(range(1, BUFFER_SIZE * 4))
    received = []
    for value in values:
        buffer.add(value)
        received.append(buffer.read())
    assert received == values
    assert buffer.is_empty()


def test_filling_every_slot_looks_empty():
    buffer = RingBuffer()
    for value in range(BUFFER_SIZE):
        buffer.add(value + 1)
    assert buffer.is_empty()
    assert buffer.read() == 0