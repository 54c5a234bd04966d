from __future__ import annotations

from .config import LoggingConfig
from .core import (
    configure_logging,
    get_logger,
    reset_logging,
)

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
