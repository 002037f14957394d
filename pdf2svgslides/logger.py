import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import LOG_LEVEL, LOG_ROTATION

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def setup_logger(log_path: Optional[Path] = None, verbose: bool = False):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else LOG_LEVEL, format=LOG_FORMAT)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, rotation=LOG_ROTATION, level="DEBUG" if verbose else LOG_LEVEL)
    return logger
