"""Millisecond clock helpers."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def wait_until(start_time: int | None) -> bool:
    """Block until ``start_time``; return False at once if the start was cancelled."""
    if start_time is None:
        return False
    while True:
        now = now_ms()
        if now >= start_time:
            return True
        time.sleep(0.0005 if start_time - now > 2 else 0.00005)