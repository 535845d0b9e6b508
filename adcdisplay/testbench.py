"""A minimal assertion bench that counts results and reports failures as text."""

from __future__ import annotations

import sys
from typing import TextIO


class TestBench:
    """Counts passed and failed assertions and writes failure messages to a stream."""

    __test__ = False  # keep pytest from collecting this class

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.passed = 0
        self.failed = 0

    def start(self) -> None:
        """Reset the counters and announce the start of a run."""
        self.passed = 0
        self.failed = 0
        self.out.write("\r\nStarting tests...\r\n")

    def _record(self, ok: bool, message: str) -> bool:
        if ok:
            self.passed += 1
        else:
            self.out.write(message)
            self.failed += 1
        return ok

    def assert_equals(self, test_id: str, actual: int, expected: int) -> bool:
        """Check that ``actual`` equals ``expected``; return whether it passed."""
        return self._record(
            actual == expected,
            f"Test {test_id}: actual [{actual}], expected [{expected}]\r\n",
        )

    def assert_within_bounds(
        self, test_id: str, actual: int, minimum: int, maximum: int
    ) -> bool:
        """Check that ``minimum <= actual <= maximum``; return whether it passed."""
        return self._record(
            minimum <= actual <= maximum,
            f"Test {test_id}: actual [{actual}] outside bounds: "
            f"[{minimum}] to [{maximum}]\r\n",
        )

    def assert_not_zero(self, test_id: str, actual: int) -> bool:
        """Check that ``actual`` is not zero; return whether it passed."""
        return self._record(
            actual != 0,
            f"Test {test_id}: actual is zero, but it should not.\r\n",
        )

    def report(self) -> tuple[int, int]:
        """Write the totals and return them as ``(passed, failed)``."""
        self.out.write(f"{self.passed} passed tests\r\n")
        self.out.write(f"{self.failed} failed tests\r\n")
        return self.passed, self.failed