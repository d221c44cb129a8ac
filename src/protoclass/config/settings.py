"""Configuration settings using Pydantic Settings.

Provides the process-wide composition settings with environment variable
support.

Usage:
    from protoclass.config import configure, get_settings

    # Load from environment variables (PROTOCLASS_*)
    settings = get_settings()

    # Or override explicitly, before the first inherit() call
    configure(diamond_disambiguation=True)
"""

from __future__ import annotations

import warnings
from typing import Any

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for protoclass. Install with: pip install protoclass"
    ) from e


class CompositionSettings(BaseSettings):  # type: ignore[misc]
    """Settings read by the merge engine.

    Attributes:
        diamond_disambiguation: If True, members implemented by different
            functions in several parents are replaced by a function raising
            AmbiguousMemberError until the child overrides them.

    Environment Variables:
        PROTOCLASS_DIAMOND_DISAMBIGUATION
    """

    model_config = SettingsConfigDict(
        env_prefix="PROTOCLASS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    diamond_disambiguation: bool = False


# Module-level settings instance
_settings = CompositionSettings()
_in_use = False


def get_settings() -> CompositionSettings:
    """Access the process-wide composition settings.

    Returns:
        The current CompositionSettings instance.
    """
    return _settings


def mark_in_use() -> CompositionSettings:
    """Record that the merge engine has read the settings.

    Returns:
        The current CompositionSettings instance.
    """
    global _in_use
    _in_use = True
    return _settings


def configure(**overrides: Any) -> CompositionSettings:
    """Replace the process-wide settings.

    Settings are meant to be written once, before the first ``inherit`` call.
    Reconfiguring later is allowed but warned about, since definitions merged
    earlier keep the behavior they were built with.

    Args:
        **overrides: Field values for the new CompositionSettings.

    Returns:
        The new settings instance.
    """
    global _settings
    if _in_use:
        warnings.warn(
            "protoclass settings changed after the first inherit() call. "
            "Definitions merged earlier are not affected.",
            stacklevel=2,
        )
    _settings = CompositionSettings(**overrides)
    return _settings


def reset() -> CompositionSettings:
    """Reload settings from the environment and clear the in-use marker."""
    global _settings, _in_use
    _settings = CompositionSettings()
    _in_use = False
    return _settings
