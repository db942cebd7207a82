from __future__ import annotations
from functools import lru_cache
from typing import List, Sequence, Tuple

import numpy as np
import pygame


@lru_cache(maxsize=16)
def _font(size: int) -> pygame.font.Font:
    return pygame.font.SysFont(None, size)


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    surface.blit(_font(size).render(text, True, color), pos)


def draw_text_centered(surface: pygame.Surface, text: str, center: Tuple[float, float], color=(255, 255, 255), size=24):
    img = _font(size).render(text, True, color)
    surface.blit(img, img.get_rect(center=(int(center[0]), int(center[1]))))


def text_size(text: str, size=24) -> Tuple[int, int]:
    return _font(size).size(text)


def draw_card(surface: pygame.Surface, rect: pygame.Rect, rgba=(0, 0, 0, 0xB0), radius: int = 8) -> None:
    """Translucent rounded panel."""
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(card, rgba, card.get_rect(), border_radius=radius)
    surface.blit(card, rect.topleft)


def draw_ring(surface: pygame.Surface, color, center: Tuple[float, float], radius: float, alpha: float, width: int = 2) -> None:
    """Circle outline with alpha in [0, 1]."""
    r = int(radius)
    a = int(max(0.0, min(1.0, alpha)) * 255)
    if r < 1 or a <= 0:
        return
    ring_surf = pygame.Surface((r * 2 + 4, r * 2 + 4), pygame.SRCALPHA)
    pygame.draw.circle(ring_surf, (*color[:3], a), (r + 2, r + 2), r, width=width)
    surface.blit(ring_surf, (int(center[0]) - r - 2, int(center[1]) - r - 2))


def frame_time_graph_points(frame_times_ms: Sequence[float], rect: pygame.Rect, ceiling_ms: float) -> List[Tuple[int, int]]:
    """
    Polyline for a frame time graph: oldest sample on the left, taller is slower.
    Durations above `ceiling_ms` are pinned to the top edge.
    """
    if len(frame_times_ms) < 2 or ceiling_ms <= 0:
        return []
    times = np.clip(np.asarray(frame_times_ms, dtype=np.float64), 0.0, ceiling_ms)
    xs = np.linspace(rect.left, rect.right - 1, num=len(times))
    ys = (rect.bottom - 1) - (times / ceiling_ms) * (rect.height - 1)
    return [(int(round(x)), int(round(y))) for x, y in zip(xs, ys)]


def draw_frame_graph(surface: pygame.Surface, frame_times_ms: Sequence[float], rect: pygame.Rect,
                     ceiling_ms: float, line_color=(80, 220, 120), budget_ms: float | None = None,
                     budget_color=(220, 220, 220)) -> None:
    if budget_ms is not None and 0 < budget_ms <= ceiling_ms:
        y = int((rect.bottom - 1) - (budget_ms / ceiling_ms) * (rect.height - 1))
        pygame.draw.line(surface, budget_color, (rect.left, y), (rect.right - 1, y), 1)
    pts = frame_time_graph_points(frame_times_ms, rect, ceiling_ms)
    if pts:
        pygame.draw.lines(surface, line_color, False, pts, 1)
