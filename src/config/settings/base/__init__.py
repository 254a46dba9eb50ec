"""Settings base (ambiente, logging, servidor HTTP)."""

from __future__ import annotations

from config.settings.base.core import (
    VALID_ENVIRONMENTS,
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "VALID_ENVIRONMENTS",
    "BaseSettings",
    "Environment",
    "get_base_settings",
]
