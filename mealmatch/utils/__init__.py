"""Configuration and logging helpers."""

from .config import AppConfig
from .logging import get_logger

__all__ = [
    "AppConfig",
    "get_logger",
]
