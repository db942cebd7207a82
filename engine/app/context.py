from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
import pygame
from typing import Any, Tuple
from engine.api.config import EngineConfig


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    screen_size: Tuple[int, int]
    # demos/<id>/ folder, for demos that ship their own assets
    demo_root: Path
    resources: dict[str, Any] = field(default_factory=dict)
