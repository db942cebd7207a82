from __future__ import annotations
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from const import (
    PALETTE,
    RIPPLE_GROWTH_PER_SEC,
    RIPPLE_LIFETIME_SEC,
    RIPPLE_MAX_RADIUS,
)
from engine.util.log import logger

Color = Tuple[int, int, int]
Position = Tuple[float, float]


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def color_for_id(pointer_id: int, palette: Sequence[Color] = PALETTE) -> Color:
    return palette[pointer_id % len(palette)]


@dataclass
class RippleMarker:
    start_time: int  # ms, same clock as the registry

    def age_sec(self, now_ms: int) -> float:
        return max(0, now_ms - self.start_time) / 1000.0

    def radius(self, now_ms: int) -> float:
        return min(float(RIPPLE_MAX_RADIUS), RIPPLE_GROWTH_PER_SEC * self.age_sec(now_ms))

    def alpha(self, now_ms: int) -> float:
        return max(0.0, 1.0 - self.age_sec(now_ms))

    def is_expired(self, now_ms: int) -> bool:
        return (now_ms - self.start_time) > RIPPLE_LIFETIME_SEC * 1000


@dataclass
class TouchPoint:
    id: int
    position: Position
    color: Color
    start_time: int
    # keyed by creation ms; two ripples in the same ms collapse into one
    ripples: Dict[int, RippleMarker] = field(default_factory=dict)

    def add_ripple(self, now_ms: int) -> RippleMarker:
        marker = RippleMarker(now_ms)
        self.ripples[now_ms] = marker
        return marker

    def prune_ripples(self, now_ms: int) -> int:
        expired = [k for k, r in self.ripples.items() if r.is_expired(now_ms)]
        for k in expired:
            del self.ripples[k]
        return len(expired)


@dataclass(frozen=True)
class RippleView:
    start_time: int
    radius: float
    alpha: float


@dataclass(frozen=True)
class PointSnapshot:
    id: int
    position: Position
    color: Color
    ripples: Tuple[RippleView, ...]


class TouchPointRegistry:
    """
    Active contacts keyed by pointer id, plus their fading ripples.

    Not thread-safe: feed events and read snapshots from the same loop.
    A start for an id that is already active replaces the old point.
    """

    def __init__(self, clock: Callable[[], int] = monotonic_ms, palette: Optional[Sequence[Color]] = None):
        self.clock = clock
        self.palette: List[Color] = list(palette or PALETTE)
        self._points: List[TouchPoint] = []

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[TouchPoint]:
        return iter(list(self._points))

    def __contains__(self, pointer_id: int) -> bool:
        return self.get(pointer_id) is not None

    def get(self, pointer_id: int) -> Optional[TouchPoint]:
        for p in self._points:
            if p.id == pointer_id:
                return p
        return None

    # ------------- events -------------
    def on_contact_start(self, pointer_id: int, x: float, y: float) -> TouchPoint:
        now = self.clock()
        if self.on_contact_end(pointer_id):
            logger.debug("contact {} restarted before it ended, replacing", pointer_id)
        point = TouchPoint(
            id=pointer_id,
            position=(float(x), float(y)),
            color=color_for_id(pointer_id, self.palette),
            start_time=now,
        )
        point.add_ripple(now)
        self._points.append(point)
        self._prune(now)
        return point

    def on_contact_move(self, pointer_id: int, x: float, y: float) -> bool:
        point = self.get(pointer_id)
        if point is None:
            return False
        point.position = (float(x), float(y))
        return True

    def on_contact_end(self, pointer_id: int) -> int:
        before = len(self._points)
        self._points = [p for p in self._points if p.id != pointer_id]
        return before - len(self._points)

    def add_ripple(self, pointer_id: int) -> Optional[RippleMarker]:
        point = self.get(pointer_id)
        if point is None:
            return None
        return point.add_ripple(self.clock())

    def clear(self) -> None:
        self._points.clear()

    # ------------- housekeeping -------------
    def _prune(self, now_ms: int) -> int:
        return sum(p.prune_ripples(now_ms) for p in self._points)

    def prune(self) -> int:
        """Drop expired ripples on every active point. Returns how many went."""
        return self._prune(self.clock())

    def snapshot(self) -> List[PointSnapshot]:
        now = self.clock()
        self._prune(now)
        out: List[PointSnapshot] = []
        for p in self._points:
            ripples = tuple(
                RippleView(start_time=r.start_time, radius=r.radius(now), alpha=r.alpha(now))
                for r in p.ripples.values()
            )
            out.append(PointSnapshot(id=p.id, position=p.position, color=p.color, ripples=ripples))
        return out
