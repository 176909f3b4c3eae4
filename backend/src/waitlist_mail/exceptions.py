"""Custom exception classes for waitlist email rendering.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for application errors.

    All application-specific exceptions should inherit from this class.
    Each exception carries an HTTP status code and optional details.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(AppError):
    """Raised when a preview payload or email input is malformed."""

    def __init__(self, message: str, field: Optional[str] = None):
        detail = f"Field: {field}" if field else None
        super().__init__(message, status_code=400, detail=detail)
        self.field = field


class UnknownEmailError(AppError):
    """Raised when an email identifier is not registered."""

    def __init__(self, email_id: str):
        super().__init__(f"Unknown email: {email_id}", status_code=404)
        self.email_id = email_id


class ConfigurationError(AppError):
    """Raised when a configuration value is missing or invalid.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str, detail: Optional[str] = None):
        super().__init__(
            f"Invalid configuration: {config_name}",
            status_code=500,
            detail=detail,
        )
        self.config_name = config_name


class RenderingCollaboratorError(AppError):
    """Raised when a header, footer, footer-text or localization
    collaborator fails while an email is being rendered.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, collaborator: str, detail: Optional[str] = None):
        super().__init__(
            f"Rendering collaborator failed: {collaborator}",
            status_code=500,
            detail=detail,
        )
        self.collaborator = collaborator
