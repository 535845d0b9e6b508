import io

from adcdisplay.testbench import TestBench


def make_bench():
    out = io.StringIO()
    return TestBench(out), out


def test_start_announces_and_resets():
    bench, out = make_bench()
    bench.assert_equals("X", 1, 2)
    bench.start()
    assert out.getvalue().endswith("\r\nStarting tests...\r\n")
    assert (bench.passed, bench.failed) == (0, 0)


def test_assert_equals_pass_and_fail():
    bench, out = make_bench()
    assert bench.assert_equals("A", 5, 5) is True
    assert out.getvalue() == ""
    assert bench.assert_equals("B", 1, 2) is False
    assert out.getvalue() == "Test B: actual [1], expected [2]\r\n"
    assert (bench.passed, bench.failed) == (1, 1)


def test_assert_within_bounds_is_inclusive():
    bench, out = make_bench()
    assert bench.assert_within_bounds("L", 3, 3, 7)
    assert bench.assert_within_bounds("H", 7, 3, 7)
    assert not bench.assert_within_bounds("O", 8, 3, 7)
    assert out.getvalue() == "Test O: actual [8] outside bounds: [3] to [7]\r\n"
    assert (bench.passed, bench.failed) == (2, 1)


def test_assert_not_zero():
    bench, out = make_bench()
    assert bench.assert_not_zero("N", -1)
    assert not bench.assert_not_zero("Z", 0)
    assert out.getvalue() == "Test Z: actual is zero, but it should not.\r\n"
    assert bench.failed == 1


def test_report_writes_totals():
    bench, out = make_bench()
    bench.assert_equals("A", 1, 1)
    bench.assert_equals("B", 2, 2)
    bench.assert_equals("C", 2, 3)
    out.seek(0)
    out.truncate()
    assert bench.report() == (2, 1)
    assert out.getvalue() == "2 passed tests\r\n1 failed tests\r\n"