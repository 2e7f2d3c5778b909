import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class UploadNamer:
    """Builds storage names of the form ``<tick>-<original filename>``.

    The tick is a millisecond timestamp that never repeats within a process: when
    the clock has not moved past the last tick handed out, the last tick plus one
    is used instead.
    """

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self._clock = clock
        self._lock = threading.Lock()
        self._last_tick = 0

    def next_tick(self) -> int:
        with self._lock:
            tick = max(self._clock(), self._last_tick + 1)
            self._last_tick = tick
            return tick

    def name(self, original_filename: str, tick: Optional[int] = None) -> str:
        if tick is None:
            tick = self.next_tick()
        return f"{tick}-{original_filename}"

    @staticmethod
    def tick_to_datetime(tick: int) -> datetime:
        return datetime.fromtimestamp(tick / 1000, tz=timezone.utc)
