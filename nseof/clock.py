"""Wall-clock helpers for timing a run."""

from __future__ import annotations

import time

_NS_PER_SECOND = 1_000_000_000


def _trunc_div(a, b):
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class Clock:
    """Measures time elapsed since it was created."""

    def __init__(self):
        self._start = time.perf_counter_ns()

    def elapsed_ns(self):
        """Nanoseconds since the clock was created."""
        return time.perf_counter_ns() - self._start

    def date(self):
        """Current local date in ctime form, without a trailing newline."""
        return time.ctime().replace("\n", "")

    @staticmethod
    def sleep(msec):
        """Sleep for ``msec`` milliseconds."""
        time.sleep(msec / 1000)

    @staticmethod
    def format_hms(t):
        """Format a duration in nanoseconds as HH:MM:SS."""
        hours = _trunc_div(t, 3600 * _NS_PER_SECOND)
        t -= hours * 3600 * _NS_PER_SECOND
        minutes = _trunc_div(t, 60 * _NS_PER_SECOND)
        t -= minutes * 60 * _NS_PER_SECOND
        seconds = _trunc_div(t, _NS_PER_SECOND)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"