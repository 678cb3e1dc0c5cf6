"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, AssistantSettings, LlmSettings, LoggingSettings, get_settings, load_settings
from .theme import AppPalette

__all__ = [
    "AppSettings",
    "AppPalette",
    "AssistantSettings",
    "LlmSettings",
    "LoggingSettings",
    "get_settings",
    "load_settings",
]
