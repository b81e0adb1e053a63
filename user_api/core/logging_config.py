"""
Logging Configuration
=====================

Configures the root logger with a console handler.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides where those records go and how they look.
"""
import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.
    
    If the root logger already has handlers (uvicorn, pytest's capture or an
    earlier call), only the level is adjusted.
    
    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    
    if root.handlers:
        return
    
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
