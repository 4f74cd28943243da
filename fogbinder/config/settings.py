"""Configuration settings for Fogbinder."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class AnalysisConfig:
    """Configuration for the analysis pipeline."""

    title: str = "Epistemic Analysis"
    layout: str = "random"  # random | hashed
    layout_seed: Optional[int] = None
    canvas_size: float = 1000.0


@dataclass
class RenderConfig:
    """Configuration for SVG rendering."""

    svg_width: float = 1000.0
    svg_height: float = 800.0


@dataclass
class ZoteroConfig:
    """Configuration for the Zotero Web API."""

    base_url: str = "https://api.zotero.org"
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("ZOTERO_API_KEY"))
    library_type: str = "users"  # users | groups
    library_id: Optional[str] = field(default_factory=lambda: os.getenv("ZOTERO_LIBRARY_ID"))
    timeout: int = 30  # Seconds

    @property
    def is_configured(self) -> bool:
        return bool(self.library_id)


@dataclass
class Settings:
    """Main settings container."""

    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    zotero: ZoteroConfig = field(default_factory=ZoteroConfig)

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        settings = cls()

        # Override from environment
        if title := os.getenv("FOGBINDER_TITLE"):
            settings.analysis.title = title

        if layout := os.getenv("FOGBINDER_LAYOUT"):
            if layout in ("random", "hashed"):
                settings.analysis.layout = layout

        if seed := os.getenv("FOGBINDER_LAYOUT_SEED"):
            try:
                settings.analysis.layout_seed = int(seed)
            except ValueError:
                pass

        if url := os.getenv("ZOTERO_BASE_URL"):
            settings.zotero.base_url = url.rstrip("/")

        if library_type := os.getenv("ZOTERO_LIBRARY_TYPE"):
            settings.zotero.library_type = library_type

        if log_level := os.getenv("LOG_LEVEL"):
            settings.log_level = log_level

        if log_file := os.getenv("FOGBINDER_LOG_FILE"):
            settings.log_file = Path(log_file)

        return settings


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings
