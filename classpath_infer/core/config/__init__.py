"""Configuration management for classpath-infer."""

from classpath_infer.core.config.loader import ConfigLoader
from classpath_infer.core.config.settings import (
    InferenceSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "InferenceSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
