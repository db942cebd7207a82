import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = "hide"

import pygame
import pytest

from engine.input.touch_registry import TouchPointRegistry


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self, start_ms: int = 10_000):
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def registry(clock):
    return TouchPointRegistry(clock=clock)


@pytest.fixture
def pygame_fonts():
    # left initialised: rendered fonts are cached across tests
    pygame.font.init()
