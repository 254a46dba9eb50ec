"""Agregador de settings do coletor de comentários.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# YouTube settings
from config.settings.youtube import (
    YOUTUBE_API_SERVICE_NAME,
    YOUTUBE_API_VERSION,
    YOUTUBE_MAX_PAGE_SIZE,
    YOUTUBE_SCOPE,
    YouTubeSettings,
    get_youtube_settings,
)

__all__ = [
    # Constants
    "YOUTUBE_API_SERVICE_NAME",
    "YOUTUBE_API_VERSION",
    "YOUTUBE_MAX_PAGE_SIZE",
    "YOUTUBE_SCOPE",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "YouTubeSettings",
    "get_base_settings",
    "get_youtube_settings",
]
