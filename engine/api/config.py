from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass
class EngineConfig:
    screen_size: Tuple[int, int]
    target_fps: int = 60
    fullscreen: bool = False
    mirror: bool = False
    debug: bool = False
    log_level: str = "INFO"
