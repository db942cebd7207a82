from .demo_base import Demo
from .frame_data import FrameData, FpsReading
from .config import EngineConfig

__all__ = ["Demo", "FrameData", "FpsReading", "EngineConfig"]
