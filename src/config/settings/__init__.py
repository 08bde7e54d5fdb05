"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.bluesky import (
    BLUESKY_WEB_URL,
    BlueskySettings,
    get_bluesky_settings,
)

__all__ = [
    # Constants
    "BLUESKY_WEB_URL",
    "DEFAULT_SERVICE_NAME",
    # Base
    "BaseSettings",
    # Channels
    "BlueskySettings",
    "Environment",
    "get_base_settings",
    "get_bluesky_settings",
]
