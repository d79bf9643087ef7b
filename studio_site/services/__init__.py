"""Service layer for site content and external integrations."""

from .config import ConfigurationService, ValidationResult
from .errors import (
    AppError,
    ConfigurationError,
    EnrichmentError,
    ErrorCategory,
    ErrorHandlingService,
    ErrorSeverity,
    FileSystemError,
    NetworkError,
    UserFriendlyError,
    ValidationError,
    get_error_service,
    handle_error,
)
from .filesystem import FileSystemService
from .gallery import GalleryService
from .game_stats import GameStatsService, merge_details
from .http_client import HttpClientService
from .page import PageService, compute_totals

__all__ = [
    "AppError",
    "ConfigurationError",
    "ConfigurationService",
    "EnrichmentError",
    "ErrorCategory",
    "ErrorHandlingService",
    "ErrorSeverity",
    "FileSystemError",
    "FileSystemService",
    "GalleryService",
    "GameStatsService",
    "HttpClientService",
    "NetworkError",
    "PageService",
    "UserFriendlyError",
    "ValidationError",
    "ValidationResult",
    "compute_totals",
    "get_error_service",
    "handle_error",
    "merge_details",
]
