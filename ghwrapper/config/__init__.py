"""Configuration package."""

from ghwrapper.config.logging import setup_logging
from ghwrapper.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    "setup_logging",
]
