"""Wall-clock helpers with microsecond timestamps."""

from __future__ import annotations

import time

MONITOR_INTERVAL_US = 9000
PHILOSOPHER_POLL_US = 100
SLEEP_POLL_US = 50

_MICROS_PER_SECOND = 1_000_000


def now() -> int:
    """Return the current wall-clock time in microseconds since the epoch."""
    return time.time_ns() // 1000


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def diff_ms(start: int, end: int) -> int:
    """Milliseconds from ``start`` to ``end``.

    Seconds and sub-second microseconds are differenced separately and the
    microsecond part is truncated toward zero.
    """
    start_sec, start_usec = divmod(start, _MICROS_PER_SECOND)
    end_sec, end_usec = divmod(end, _MICROS_PER_SECOND)
    return (end_sec - start_sec) * 1000 + _trunc_div(end_usec - start_usec, 1000)


def diff_micro(start: int, end: int) -> int:
    """Microseconds from ``start`` to ``end``."""
    return end - start


def elapsed_ms(start: int) -> int:
    """Milliseconds elapsed since ``start``."""
    return diff_ms(start, now())


def precise_sleep(microseconds: int) -> None:
    """Sleep for at least ``microseconds`` by polling in short naps."""
    start = now()
    while diff_micro(start, now()) < microseconds:
        time.sleep(SLEEP_POLL_US / _MICROS_PER_SECOND)