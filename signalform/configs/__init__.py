"""
Configuration module for the signalform provider.

Provides type-safe configuration loading from Pulumi stack config and
SFX_* environment variables.
"""

from signalform.configs.base import ProviderConfig
from signalform.configs.environment import get_config
from signalform.configs.settings import SignalFxSettings, get_settings
from signalform.configs.constants import (
    API_PATHS,
    CHARTS_RESOLUTIONS,
    TIME_SPAN_TYPES,
)

__all__ = [
    "ProviderConfig",
    "get_config",
    "SignalFxSettings",
    "get_settings",
    "API_PATHS",
    "CHARTS_RESOLUTIONS",
    "TIME_SPAN_TYPES",
]
