from __future__ import annotations
import importlib.util
from pathlib import Path
import yaml
from typing import Dict, Any

DEMOS_DIR = Path(__file__).resolve().parents[2] / "demos"


def demo_root_for(demo_id: str, demos_dir: Path = DEMOS_DIR) -> Path:
    return demos_dir / demo_id


def load_demo_manifest(demo_root: Path) -> Dict[str, Any]:
    manifest = demo_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {demo_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_demo_module(demo_root: Path):
    """
    Loads demos/<id>/main.py module and returns the module object.
    The file must define a get_demo() -> Demo factory.
    """
    main_py = demo_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {demo_root}")
    spec = importlib.util.spec_from_file_location(f"demos.{demo_root.name}.main", main_py)
    assert spec and spec.loader
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore[attr-defined]
    if not hasattr(module, "get_demo"):
        raise AttributeError("Demo module must define get_demo()")
    return module
