from __future__ import annotations
import math
from typing import Dict, Tuple

import pygame

from engine.api.config import EngineConfig
from engine.input.touch_registry import TouchPointRegistry
from engine.util.log import logger

# Pointer id used for the mouse when --debug is on
MOUSE_POINTER_ID = 0


class TouchInput:
    """
    Feeds pygame input into a TouchPointRegistry:
    - FINGERDOWN / FINGERMOTION / FINGERUP (normalized 0..1) -> window pixels.
    - With --debug, a held left mouse button acts as pointer MOUSE_POINTER_ID.
    - Respects --mirror by converting window coords -> logical coords.
    - Optionally drops a trailing ripple every `trail_ripple_distance` px a contact travels.
    """

    def __init__(self, registry: TouchPointRegistry, cfg: EngineConfig, input_manifest: dict | None = None):
        input_manifest = input_manifest or {}
        self.registry = registry
        self.mirror = cfg.mirror
        self.mouse_enabled = cfg.debug
        self.screen_size = cfg.screen_size
        self.trail_ripple_distance = float(input_manifest.get("trail_ripple_distance", 0))

        # where each contact last dropped a ripple, for trail spacing
        self._anchors: Dict[int, Tuple[float, float]] = {}
        self._mouse_down = False

    def _to_logical(self, x: float, y: float) -> Tuple[float, float]:
        w, _ = self.screen_size
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def _finger_to_px(self, event: pygame.event.Event) -> Tuple[float, float]:
        w, h = self.screen_size
        return self._to_logical(event.x * w, event.y * h)

    # ------------- registry plumbing -------------
    def _start(self, pointer_id: int, x: float, y: float) -> None:
        self.registry.on_contact_start(pointer_id, x, y)
        self._anchors[pointer_id] = (x, y)
        logger.debug("contact {} down at ({:.0f}, {:.0f})", pointer_id, x, y)

    def _move(self, pointer_id: int, x: float, y: float) -> None:
        if not self.registry.on_contact_move(pointer_id, x, y):
            return
        if self.trail_ripple_distance <= 0:
            return
        ax, ay = self._anchors.get(pointer_id, (x, y))
        if math.hypot(x - ax, y - ay) >= self.trail_ripple_distance:
            self.registry.add_ripple(pointer_id)
            self._anchors[pointer_id] = (x, y)

    def _end(self, pointer_id: int) -> None:
        self._anchors.pop(pointer_id, None)
        if self.registry.on_contact_end(pointer_id):
            logger.debug("contact {} up", pointer_id)

    def reset(self) -> None:
        self._anchors.clear()
        self._mouse_down = False
        self.registry.clear()

    # ------------- event entry point -------------
    def handle_pygame_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the event was a pointer event this layer consumed."""
        if event.type == pygame.FINGERDOWN:
            self._start(event.finger_id, *self._finger_to_px(event))
            return True

        if event.type == pygame.FINGERMOTION:
            self._move(event.finger_id, *self._finger_to_px(event))
            return True

        if event.type == pygame.FINGERUP:
            self._end(event.finger_id)
            return True

        if event.type == pygame.WINDOWFOCUSLOST:
            # finger-up events are not delivered to an unfocused window
            if len(self.registry):
                logger.debug("focus lost, dropping {} contact(s)", len(self.registry))
            self.reset()
            return False

        if not self.mouse_enabled:
            return False
        # SDL mirrors touches as mouse events; those were handled above
        if getattr(event, "touch", False):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse_down = True
            self._start(MOUSE_POINTER_ID, *self._to_logical(*event.pos))
            return True

        if event.type == pygame.MOUSEMOTION and self._mouse_down:
            self._move(MOUSE_POINTER_ID, *self._to_logical(*event.pos))
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._mouse_down:
            self._mouse_down = False
            self._end(MOUSE_POINTER_ID)
            return True

        return False
