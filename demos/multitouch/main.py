from __future__ import annotations
from typing import List
import pygame

from const import (
    BACKGROUND_COLOR,
    GRAPH_BUDGET_COLOR,
    GRAPH_CEILING_MS,
    GRAPH_H,
    GRAPH_LINE_COLOR,
    GRAPH_W,
    HUD_CARD_COLOR,
    HUD_FONT_SIZE,
    HUD_MARGIN,
    HUD_PADDING,
    HUD_SMALL_FONT_SIZE,
    HUD_TEXT_COLOR,
    RIPPLE_STROKE,
    TOUCH_LABEL_SIZE,
    TOUCH_RADIUS,
)
from engine.api import Demo, FrameData, FpsReading
from engine.input.touch_registry import PointSnapshot
from engine.render.shapes import (
    draw_card,
    draw_frame_graph,
    draw_ring,
    draw_text,
    draw_text_centered,
    text_size,
)

LINE_GAP = 4


def fps_lines(fps: FpsReading) -> List[str]:
    return [
        f"FPS: {fps.current}",
        f"Min FPS: {fps.min}",
        f"Max FPS: {fps.max}",
    ]


def touch_lines(points: List[PointSnapshot]) -> List[str]:
    if not points:
        return ["Waiting for touch..."]
    lines = [f"{len(points)} touch point(s) detected:"]
    for p in points:
        x, y = p.position
        lines.append(f"ID: {p.id}, X: {int(x)}, Y: {int(y)}")
    return lines


class MultitouchFps(Demo):
    def on_load(self, ctx, manifest):
        self.ctx = ctx
        self.manifest = manifest
        opts = manifest.get("options", {})
        self.show_hud = bool(opts.get("show_hud", True))
        self.show_graph = bool(opts.get("show_frame_graph", True))
        self.background = tuple(opts.get("background", BACKGROUND_COLOR))
        self.budget_ms = 1000.0 / ctx.cfg.target_fps if ctx.cfg.target_fps > 0 else None

        self.fps = FpsReading(current=0, min=0, max=0)
        self.points: List[PointSnapshot] = []

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        self.fps = frame.fps
        self.points = frame.points

    # ------------- drawing -------------
    def _draw_point(self, surface: pygame.Surface, p: PointSnapshot) -> None:
        for r in p.ripples:
            draw_ring(surface, p.color, p.position, r.radius, r.alpha, width=RIPPLE_STROKE)
        x, y = int(p.position[0]), int(p.position[1])
        pygame.draw.circle(surface, p.color, (x, y), TOUCH_RADIUS)
        draw_text_centered(surface, str(p.id), (x, y), HUD_TEXT_COLOR, size=TOUCH_LABEL_SIZE)

    def _draw_lines(self, surface, lines: List[str], x: int, y: int) -> int:
        for i, line in enumerate(lines):
            size = HUD_FONT_SIZE if i == 0 else HUD_SMALL_FONT_SIZE
            draw_text(surface, line, (x, y), HUD_TEXT_COLOR, size=size)
            y += text_size(line, size)[1] + LINE_GAP
        return y

    def _card_height(self, lines: List[str]) -> int:
        h = 0
        for i, line in enumerate(lines):
            size = HUD_FONT_SIZE if i == 0 else HUD_SMALL_FONT_SIZE
            h += text_size(line, size)[1] + LINE_GAP
        return h + HUD_PADDING * 2 - LINE_GAP

    def _draw_fps_card(self, surface: pygame.Surface) -> None:
        lines = fps_lines(self.fps)
        width = max(text_size(l, HUD_FONT_SIZE)[0] for l in lines) + HUD_PADDING * 2
        height = self._card_height(lines)
        if self.show_graph:
            width = max(width, GRAPH_W + HUD_PADDING * 2)
            height += GRAPH_H + HUD_PADDING
        card = pygame.Rect(HUD_MARGIN, HUD_MARGIN, width, height)
        draw_card(surface, card, HUD_CARD_COLOR)

        y = self._draw_lines(surface, lines, card.x + HUD_PADDING, card.y + HUD_PADDING)
        if self.show_graph:
            graph = pygame.Rect(card.x + HUD_PADDING, y - LINE_GAP + HUD_PADDING, GRAPH_W, GRAPH_H)
            draw_frame_graph(surface, self.fps.frame_times_ms, graph, GRAPH_CEILING_MS,
                             GRAPH_LINE_COLOR, self.budget_ms, GRAPH_BUDGET_COLOR)

    def _draw_touch_card(self, surface: pygame.Surface) -> None:
        w, h = self.ctx.screen_size
        lines = touch_lines(self.points)
        height = self._card_height(lines)
        card = pygame.Rect(HUD_MARGIN, h - HUD_MARGIN - height, int(w * 0.8), height)
        draw_card(surface, card, HUD_CARD_COLOR)
        self._draw_lines(surface, lines, card.x + HUD_PADDING, card.y + HUD_PADDING)

    def on_draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.background)
        for p in self.points:
            self._draw_point(surface, p)
        if self.show_hud:
            self._draw_fps_card(surface)
            self._draw_touch_card(surface)

    def on_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_h:
            self.show_hud = not self.show_hud
        elif event.key == pygame.K_g:
            self.show_graph = not self.show_graph

    def on_reset(self) -> None:
        self.fps = FpsReading(current=0, min=0, max=0)
        self.points = []

    def on_unload(self) -> None:
        pass


def get_demo():
    return MultitouchFps()
