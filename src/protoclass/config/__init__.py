"""Configuration module using Pydantic Settings.

Usage:
    from protoclass.config import configure

    configure(diamond_disambiguation=True)
"""

from protoclass.config.settings import (
    CompositionSettings,
    configure,
    get_settings,
    mark_in_use,
    reset,
)

__all__ = [
    "CompositionSettings",
    "configure",
    "get_settings",
    "mark_in_use",
    "reset",
]
