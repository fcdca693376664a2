"""Logging setup for udiff"""

import logging
import sys

_CONFIGURED = False
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler to the udiff logger once; later calls only change the level."""
    global _CONFIGURED
    root = logging.getLogger("udiff")
    root.setLevel(level.upper())
    if _CONFIGURED:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module."""
    return logging.getLogger(f"udiff.{name}")
