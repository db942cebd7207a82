from __future__ import annotations
import dataclasses
import time
import pygame

from engine.api.config import EngineConfig
from engine.api.frame_data import FrameData, FpsReading
from engine.app.context import Context
from engine.app.loader import demo_root_for, load_demo_manifest, load_demo_module
from engine.input.touch_input import TouchInput
from engine.input.touch_registry import TouchPointRegistry
from engine.metrics.frame_rate import FrameRateSampler, FpsStats
from engine.util.log import logger


def reset_session(sampler: FrameRateSampler, stats: FpsStats, touch: TouchInput, demo) -> None:
    sampler.reset()
    stats.reset()
    touch.reset()
    demo.on_reset()
    logger.debug("session reset")


def run_demo(demo_id: str, cfg: EngineConfig):
    # load demo first so a bad id fails before a window opens
    demo_root = demo_root_for(demo_id)
    manifest = load_demo_manifest(demo_root)
    module = load_demo_module(demo_root)
    demo = module.get_demo()

    pygame.init()
    pygame.display.set_caption(manifest.get("title", f"Multitouch – {demo_id}"))
    flags = pygame.FULLSCREEN if cfg.fullscreen else 0
    screen = pygame.display.set_mode(cfg.screen_size, flags)
    clock = pygame.time.Clock()

    # the display may not honour the requested size in fullscreen
    screen_size = screen.get_size()
    cfg = dataclasses.replace(cfg, screen_size=screen_size)
    logger.info("Running demo '{}' at {}x{}, target {} fps", demo_id,
                screen_size[0], screen_size[1], cfg.target_fps or "uncapped")

    sampler = FrameRateSampler()
    stats = FpsStats()
    registry = TouchPointRegistry()
    touch = TouchInput(registry, cfg, manifest.get("input", {}))

    # Render target: draw to off-screen if mirroring, otherwise draw directly to screen
    render_surface = screen if not cfg.mirror else pygame.Surface(
        screen_size).convert()

    ctx = Context(
        screen=render_surface,
        clock=clock,
        cfg=cfg,
        screen_size=screen_size,
        demo_root=demo_root,
    )

    demo.on_load(ctx, manifest)

    running = True
    try:
        while running:
            dt = clock.tick(cfg.target_fps)
            sampler.record_tick(time.perf_counter_ns())
            fps = sampler.current_fps()
            stats.update(fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r:
                        reset_session(sampler, stats, touch, demo)
                if touch.handle_pygame_event(event):
                    continue
                demo.on_event(event)

            frame_data = FrameData(
                timestamp=time.time(),
                fps=FpsReading(current=fps, min=stats.min_fps, max=stats.max_fps,
                               frame_times_ms=sampler.history()),
                points=registry.snapshot(),
            )

            # ---- draw to render_surface ----
            demo.on_update(dt, frame_data)
            demo.on_draw(render_surface)

            # ---- present to window ----
            if cfg.mirror:
                flipped = pygame.transform.flip(render_surface, True, False)
                screen.blit(flipped, (0, 0))

            pygame.display.flip()

    finally:
        demo.on_unload()
        pygame.quit()
        logger.info("Demo '{}' stopped", demo_id)
