"""Configuration data models."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    """Application configuration settings."""
    gallery_directory: Path
    universe_api_url: str
    games_api_url: str
    request_timeout: float
    log_level: str
    gallery_url_prefix: str = "/gallery"
    view_line_offset: int = 1  # Rows below the nav bar used as the scroll view line
