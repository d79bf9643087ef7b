"""Configuration service for managing application settings."""

import json
from pathlib import Path
from urllib.parse import urlparse

import structlog

from ..models import AppConfig
from .errors import ConfigurationError, handle_error
from .game_stats import DEFAULT_GAMES_API_URL, DEFAULT_UNIVERSE_API_URL

log = structlog.stdlib.get_logger()


class ValidationResult:
    """Result of configuration validation."""

    def __init__(self, is_valid: bool, errors: list[str] | None = None) -> None:
        self.is_valid: bool = is_valid
        self.errors: list[str] = errors or []


class ConfigurationService:
    """Service for managing application configuration."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path: Path = config_path or Path.home() / ".config" / "yanns-studios-site" / "config.json"
        log.info("Configuration service initialized", config_path=str(self.config_path))

    def load_config(self) -> AppConfig:
        """Load configuration from file or return default configuration."""
        if not self.config_path.exists():
            log.info("Configuration file not found, using defaults")
            return self._get_default_config()

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data: dict[str, str | int | float | None] = json.load(f)

            config = self._dict_to_config(data)
            validation_result = self.validate_config(config)

            if not validation_result.is_valid:
                log.warning("Invalid configuration loaded, using defaults", errors=validation_result.errors)
                handle_error(
                    ConfigurationError(
                        "The configuration file has invalid settings; defaults are used.",
                        setting=", ".join(validation_result.errors),
                    ),
                    operation="load_config",
                    component="config",
                    context={"path": str(self.config_path)},
                )
                return self._get_default_config()

            log.info("Configuration loaded successfully")
            return config

        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            log.error("Failed to load configuration, using defaults", error=str(e))
            return self._get_default_config()

    def save_config(self, config: AppConfig) -> None:
        """Save configuration to file."""
        validation_result = self.validate_config(config)
        if not validation_result.is_valid:
            raise ValueError(f"Invalid configuration: {', '.join(validation_result.errors)}")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            data = self._config_to_dict(config)
            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)

            log.info("Configuration saved successfully")

        except OSError as e:
            log.error("Failed to save configuration", error=str(e))
            raise

    def validate_config(self, config: AppConfig) -> ValidationResult:
        """Validate configuration settings."""
        errors = []

        if not isinstance(config.gallery_directory, Path):
            errors.append("gallery_directory must be a Path object")

        if not isinstance(config.gallery_url_prefix, str) or not config.gallery_url_prefix.startswith("/"):
            errors.append("gallery_url_prefix must start with '/'")

        for name in ("universe_api_url", "games_api_url"):
            value = getattr(config, name)
            parsed = urlparse(value) if isinstance(value, str) else None
            if parsed is None or parsed.scheme not in ("http", "https") or not parsed.netloc:
                errors.append(f"{name} must be an absolute http(s) URL")

        if not isinstance(config.request_timeout, (int, float)) or config.request_timeout <= 0:
            errors.append("request_timeout must be a positive number")
        elif config.request_timeout > 120:
            errors.append("request_timeout should not exceed 120 seconds")

        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if config.log_level not in valid_log_levels:
            errors.append(f"log_level must be one of: {', '.join(sorted(valid_log_levels))}")

        if not isinstance(config.view_line_offset, int) or config.view_line_offset < 0:
            errors.append("view_line_offset must be a non-negative integer")

        return ValidationResult(len(errors) == 0, errors)

    def _get_default_config(self) -> AppConfig:
        """Get default configuration."""
        return AppConfig(
            gallery_directory=Path("public") / "gallery",
            universe_api_url=DEFAULT_UNIVERSE_API_URL,
            games_api_url=DEFAULT_GAMES_API_URL,
            request_timeout=10.0,
            log_level="INFO",
            gallery_url_prefix="/gallery",
            view_line_offset=1,
        )

    def _config_to_dict(self, config: AppConfig) -> dict[str, str | int | float | None]:
        """Convert AppConfig to dictionary for JSON serialization."""
        return {
            "gallery_directory": str(config.gallery_directory),
            "gallery_url_prefix": config.gallery_url_prefix,
            "universe_api_url": config.universe_api_url,
            "games_api_url": config.games_api_url,
            "request_timeout": config.request_timeout,
            "log_level": config.log_level,
            "view_line_offset": config.view_line_offset,
        }

    def _dict_to_config(self, data: dict[str, str | int | float | None]) -> AppConfig:
        """Convert dictionary to AppConfig, filling missing keys with defaults."""
        defaults = self._get_default_config()

        timeout_raw = data.get("request_timeout", defaults.request_timeout)
        offset_raw = data.get("view_line_offset", defaults.view_line_offset)

        return AppConfig(
            gallery_directory=Path(str(data.get("gallery_directory", defaults.gallery_directory))),
            universe_api_url=str(data.get("universe_api_url", defaults.universe_api_url)),
            games_api_url=str(data.get("games_api_url", defaults.games_api_url)),
            request_timeout=float(timeout_raw) if isinstance(timeout_raw, (int, float)) else defaults.request_timeout,
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            gallery_url_prefix=str(data.get("gallery_url_prefix", defaults.gallery_url_prefix)),
            view_line_offset=int(offset_raw) if isinstance(offset_raw, int) else defaults.view_line_offset,
        )
