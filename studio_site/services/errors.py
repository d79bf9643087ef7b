"""Error handling module for the Yanns Studios site application.

This module provides:
- The exception taxonomy of a render cycle (network, file system,
  validation, configuration, enrichment)
- Conversion of raw library exceptions into that taxonomy
- User-friendly messages with suggested actions, logged with technical details

Nothing here is fatal: callers report through ``handle_error`` and degrade
to static content.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
import structlog

log = structlog.stdlib.get_logger()


class ErrorCategory(Enum):
    """Categories of errors for classification and handling."""
    NETWORK = "network"
    FILE_SYSTEM = "file_system"
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    ENRICHMENT = "enrichment"
    UNEXPECTED = "unexpected"


class ErrorSeverity(Enum):
    """Severity levels for errors; selects the log method."""
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class UserFriendlyError:
    """What a screen shows for a handled error."""
    message: str
    category: ErrorCategory
    severity: ErrorSeverity
    suggested_actions: list[str]
    technical_details: str | None = None


# Status-specific advice for the platform API
_STATUS_SUGGESTIONS: dict[int, list[str]] = {
    404: [
        "The place may have been removed or made private",
        "Check the place id in the game catalog",
    ],
    429: [
        "The platform API is rate limiting requests",
        "Wait a minute before reloading",
    ],
}

_STATUS_MESSAGES: dict[int, str] = {
    400: "The platform API rejected the request.",
    403: "Access to the platform API was denied.",
    404: "The requested place or universe was not found.",
    429: "Too many requests to the platform API.",
    500: "The platform API encountered an error.",
    502: "The platform API is temporarily unavailable.",
    503: "The platform API is temporarily unavailable.",
    504: "The platform API took too long to respond.",
}


def _describe(error: Exception) -> str:
    return f"{type(error).__name__}: {error}"


def _join_details(*parts: str | None) -> str | None:
    details = "\n".join(part for part in parts if part)
    return details or None


class AppError(Exception):
    """Base exception class for application errors."""

    category: ErrorCategory = ErrorCategory.UNEXPECTED
    severity: ErrorSeverity = ErrorSeverity.ERROR

    def __init__(
        self,
        message: str,
        suggested_actions: list[str] | None = None,
        technical_details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.suggested_actions = suggested_actions or []
        self.technical_details = technical_details

    def to_user_friendly(self) -> UserFriendlyError:
        """Convert to user-friendly error representation."""
        return UserFriendlyError(
            message=self.message,
            category=self.category,
            severity=self.severity,
            suggested_actions=self.suggested_actions,
            technical_details=self.technical_details,
        )


class NetworkError(AppError):
    """A platform API request failed or returned a non-success status."""

    category = ErrorCategory.NETWORK

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        if status_code in _STATUS_SUGGESTIONS:
            suggested_actions = _STATUS_SUGGESTIONS[status_code]
        elif status_code is not None and status_code >= 500:
            suggested_actions = ["The platform API is experiencing issues", "Try again later"]
        else:
            suggested_actions = ["Check your internet connection", "Try reloading the page in a few moments"]

        super().__init__(
            message,
            suggested_actions=list(suggested_actions),
            technical_details=_join_details(
                f"Status: {status_code}" if status_code else None,
                f"URL: {url}" if url else None,
                _describe(original_error) if original_error else None,
            ),
        )
        self.status_code = status_code


class FileSystemError(AppError):
    """The gallery directory could not be read."""

    category = ErrorCategory.FILE_SYSTEM
    severity = ErrorSeverity.WARNING

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        path: str | None = None,
    ) -> None:
        if isinstance(original_error, PermissionError):
            suggested_actions = ["Check directory permissions", "Choose a different gallery directory"]
        elif isinstance(original_error, FileNotFoundError):
            suggested_actions = [
                "Verify the gallery directory path is correct",
                "Create the directory and add images to it",
            ]
        else:
            suggested_actions = ["Check the path and permissions"]

        super().__init__(
            message,
            suggested_actions=suggested_actions,
            technical_details=_join_details(
                f"Path: {path}" if path else None,
                _describe(original_error) if original_error else None,
            ),
        )


class ValidationError(AppError):
    """A payload or value did not have the expected shape."""

    category = ErrorCategory.VALIDATION
    severity = ErrorSeverity.WARNING

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            message,
            suggested_actions=["Review the input requirements"],
            technical_details=f"Field: {field}" if field else None,
        )
        self.field = field


class ConfigurationError(AppError):
    """The configuration file holds settings that fail validation."""

    category = ErrorCategory.CONFIGURATION

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(
            message,
            suggested_actions=["Check the configuration settings", "Reset to default values if needed"],
            technical_details=f"Setting: {setting}" if setting else None,
        )
        self.setting = setting


class EnrichmentError(AppError):
    """A platform lookup answered, but not with usable data."""

    category = ErrorCategory.ENRICHMENT
    severity = ErrorSeverity.WARNING

    def __init__(
        self,
        message: str,
        place_id: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(
            message,
            suggested_actions=[
                "Static game details are shown instead",
                "The platform API response format may have changed",
            ],
            technical_details=_join_details(
                f"Place: {place_id}" if place_id is not None else None,
                f"URL: {url}" if url else None,
            ),
        )
        self.place_id = place_id


class ErrorHandlingService:
    """Converts exceptions to the application taxonomy and logs them."""

    def handle_error(
        self,
        error: Exception,
        operation: str,
        component: str,
        context: dict[str, Any] | None = None,
    ) -> UserFriendlyError:
        """Handle an error and return a user-friendly representation.

        Args:
            error: The exception that occurred
            operation: The operation being performed
            component: The component where the error occurred
            context: Additional context information (``url``, ``path``)

        Returns:
            User-friendly error representation
        """
        app_error = self.convert(error, context or {})

        log_method = log.error if app_error.severity == ErrorSeverity.ERROR else log.warning
        log_method(
            "Error occurred",
            error_message=app_error.message,
            category=app_error.category.value,
            severity=app_error.severity.value,
            operation=operation,
            component=component,
            technical_details=app_error.technical_details,
            context=context,
        )

        return app_error.to_user_friendly()

    def convert(self, error: Exception, context: dict[str, Any]) -> AppError:
        """Map a raw exception onto the application taxonomy."""
        if isinstance(error, AppError):
            return error

        url = context.get("url")
        path = context.get("path")

        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            return NetworkError(
                _STATUS_MESSAGES.get(status_code, f"HTTP error {status_code} occurred."),
                original_error=error,
                url=str(error.request.url),
                status_code=status_code,
            )
        if isinstance(error, httpx.TimeoutException):
            return NetworkError("The platform API did not answer in time.", original_error=error, url=url)
        if isinstance(error, httpx.ConnectError):
            return NetworkError("Unable to reach the platform API.", original_error=error, url=url)
        if isinstance(error, httpx.RequestError):
            return NetworkError(
                "A network error occurred while fetching live statistics.",
                original_error=error,
                url=url,
            )

        if isinstance(error, PermissionError):
            return FileSystemError("Permission denied while reading the directory.", error, path)
        if isinstance(error, FileNotFoundError):
            return FileSystemError("The directory was not found.", error, path)
        if isinstance(error, OSError):
            return FileSystemError(f"A file system error occurred: {error}", error, path)

        # JSONDecodeError is a ValueError, so it is checked first
        if isinstance(error, json.JSONDecodeError):
            return ValidationError("Invalid JSON format. The response could not be parsed.", field="json_content")
        if isinstance(error, ValueError):
            return ValidationError(str(error), field=context.get("field"))
        if isinstance(error, (TypeError, KeyError)):
            return ValidationError(f"Unexpected data shape: {error}", field=context.get("field"))

        return AppError("An unexpected error occurred.", technical_details=_describe(error))

    def create_user_message(
        self,
        error: UserFriendlyError,
        include_suggestions: bool = True,
    ) -> str:
        """Format a message for display, with up to three suggested actions."""
        parts = [error.message]

        if include_suggestions and error.suggested_actions:
            parts.append("\nSuggested actions:")
            parts.extend(f"  • {action}" for action in error.suggested_actions[:3])

        return "\n".join(parts)


# Global error handling service instance
_error_service: ErrorHandlingService | None = None


def get_error_service() -> ErrorHandlingService:
    """Get the global error handling service instance."""
    global _error_service
    if _error_service is None:
        _error_service = ErrorHandlingService()
    return _error_service


def handle_error(
    error: Exception,
    operation: str,
    component: str,
    context: dict[str, Any] | None = None,
) -> UserFriendlyError:
    """Handle an error through the global service."""
    return get_error_service().handle_error(error, operation, component, context)
