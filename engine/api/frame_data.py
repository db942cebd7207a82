from __future__ import annotations
from dataclasses import dataclass
from typing import List, Tuple

from engine.input.touch_registry import PointSnapshot


@dataclass
class FpsReading:
    current: int
    min: int
    max: int
    # inter-frame durations in ms, oldest first
    frame_times_ms: Tuple[float, ...] = ()


@dataclass
class FrameData:
    timestamp: float
    fps: FpsReading
    # active contacts in window pixels, in the order they touched down
    points: List[PointSnapshot]
