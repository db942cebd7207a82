from __future__ import annotations
import sys

from loguru import logger


def get_logger(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, level=level.upper(),
               format="<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {message}")
    return logger
