import argparse
import importlib.util
from pathlib import Path

import pytest

from const import SCREEN_H, SCREEN_W, TARGET_FPS

RUN_PY = Path(__file__).resolve().parents[1] / "launchers" / "run.py"


@pytest.fixture(scope="module")
def run():
    spec = importlib.util.spec_from_file_location("launchers.run", RUN_PY)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parse_screen(run):
    assert run.parse_screen("800x600") == (800, 600)
    assert run.parse_screen("1920X1080") == (1920, 1080)


@pytest.mark.parametrize("bad", ["800", "axb", "0x600", "1x2x3"])
def test_parse_screen_rejects(run, bad):
    with pytest.raises(argparse.ArgumentTypeError):
        run.parse_screen(bad)


def test_defaults(run):
    args = run.build_parser().parse_args([])
    assert args.demo == "multitouch"
    assert args.screen == (SCREEN_W, SCREEN_H)
    assert args.fps == TARGET_FPS
    assert not args.mirror and not args.debug and not args.fullscreen


def test_main_builds_config(run, monkeypatch):
    seen = {}
    monkeypatch.setattr(run, "run_demo", lambda demo_id, cfg: seen.update(demo=demo_id, cfg=cfg))
    run.main(["--screen", "800x600", "--fps", "0", "--mirror", "--log-level", "debug"])
    assert seen["demo"] == "multitouch"
    cfg = seen["cfg"]
    assert cfg.screen_size == (800, 600)
    assert cfg.target_fps == 0
    assert cfg.mirror is True


def test_negative_fps_rejected(run):
    with pytest.raises(SystemExit):
        run.main(["--fps", "-1"])
