"""Domain service: order number generation.

Order numbers are human-facing tokens of the form ``PED-<epoch millis>``.
Within one process the numeric part is strictly increasing: when two calls
land on the same millisecond (or the clock steps back) the previous value
is bumped by one.  Uniqueness across processes is backed by the unique
column in storage and the existence check in ``CreateOrderHandler``.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class OrderNumberGenerator:

    def __init__(
        self,
        prefix: str = "PED",
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._prefix = prefix
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_number(self) -> str:
        with self._lock:
            value = max(self._clock(), self._last + 1)
            self._last = value
        return f"{self._prefix}-{value}"
