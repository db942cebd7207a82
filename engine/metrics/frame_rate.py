from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Tuple

from const import FRAME_HISTORY_SIZE


class FrameRateSampler:
    """
    Rolling frame rate estimate over the last `capacity` inter-frame durations.

    Feed it one monotonic nanosecond timestamp per rendered frame:

        sampler.record_tick(time.perf_counter_ns())
        fps = sampler.current_fps()

    The first tick only primes the previous timestamp; every tick after that
    contributes one duration (in ms). Once full, the oldest duration is dropped.
    """

    def __init__(self, capacity: int = FRAME_HISTORY_SIZE):
        self.capacity = max(1, int(capacity))
        self._durations_ms: Deque[float] = deque(maxlen=self.capacity)
        self._last_ns: Optional[int] = None

    def __len__(self) -> int:
        return len(self._durations_ms)

    def record_tick(self, timestamp_ns: int) -> None:
        if self._last_ns is not None:
            self._durations_ms.append((timestamp_ns - self._last_ns) / 1e6)
        self._last_ns = timestamp_ns

    def average_frame_time_ms(self) -> float:
        if not self._durations_ms:
            return 0.0
        return sum(self._durations_ms) / len(self._durations_ms)

    def current_fps(self) -> int:
        avg = self.average_frame_time_ms()
        if avg <= 0:
            return 0
        return int(1000 / avg)

    def history(self) -> Tuple[float, ...]:
        """Durations in ms, oldest first."""
        return tuple(self._durations_ms)

    def reset(self) -> None:
        self._durations_ms.clear()
        self._last_ns = None


class FpsStats:
    """Min/max of the FPS values seen so far. Zero readings are ignored."""

    def __init__(self):
        self._min: Optional[int] = None
        self._max: Optional[int] = None

    def update(self, fps: int) -> None:
        if fps <= 0:
            return
        self._min = fps if self._min is None else min(self._min, fps)
        self._max = fps if self._max is None else max(self._max, fps)

    @property
    def min_fps(self) -> int:
        return self._min if self._min is not None else 0

    @property
    def max_fps(self) -> int:
        return self._max if self._max is not None else 0

    def reset(self) -> None:
        self._min = None
        self._max = None
