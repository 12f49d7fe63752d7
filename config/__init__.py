"""
Configuration Management Module
"""
from .settings import (
    Settings,
    GitHubSettings,
    GeneralSettings,
    LoggingSettings,
    get_settings,
    get_logging_settings,
)

__all__ = [
    "Settings",
    "GitHubSettings",
    "GeneralSettings",
    "LoggingSettings",
    "get_settings",
    "get_logging_settings",
]
