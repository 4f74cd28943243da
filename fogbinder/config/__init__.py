"""Configuration for Fogbinder."""

from .settings import (
    AnalysisConfig,
    RenderConfig,
    Settings,
    ZoteroConfig,
    configure,
    get_settings,
)

__all__ = [
    "AnalysisConfig",
    "RenderConfig",
    "Settings",
    "ZoteroConfig",
    "configure",
    "get_settings",
]
