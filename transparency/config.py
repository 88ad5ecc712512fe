"""
Application configuration using pydantic-settings.
Loads from environment variables with .env file support.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    project_name: str = "AI Transparency Disclosure Tool"
    version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Export artifacts
    export_filename_prefix: str = "ai-transparency"
    json_indent: int = 2

    # Document snapshot (handed to the rasterizer as-is)
    snapshot_margin_mm: int = 20
    snapshot_image_type: str = "jpeg"
    snapshot_image_quality: float = 0.98
    snapshot_canvas_scale: int = 2
    snapshot_use_cors: bool = True
    snapshot_page_unit: str = "mm"
    snapshot_page_format: str = "a4"
    snapshot_orientation: str = "portrait"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
