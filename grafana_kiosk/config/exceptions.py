"""
Configuration exceptions for the Grafana kiosk launcher.

This module defines the error types raised while turning command-line input
into a launch configuration, including URL validation failures that the CLI
entry point converts into a clean exit status.
"""

from typing import Any, Optional


class KioskConfigError(Exception):
    """Base exception for all configuration-related errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context

    Example:
        >>> raise KioskConfigError("Configuration failed", {"flag": "window-size"})
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class URLValidationError(KioskConfigError):
    """Exception raised when the Grafana URL flag is unusable.

    Args:
        message: Human-readable validation error description
        url: The rejected URL value
        reason: ``"missing"`` for an empty URL, ``"malformed"`` otherwise
        validation_errors: Specific parser messages, if any

    Example:
        >>> raise URLValidationError("URL is required", url="", reason="missing")
    """

    MISSING = "missing"
    MALFORMED = "malformed"

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        reason: str = MALFORMED,
        validation_errors: Optional[list[str]] = None,
    ) -> None:
        self.url = url
        self.reason = reason
        self.validation_errors = validation_errors or []

        error_details: dict[str, Any] = {"reason": reason}
        if url:
            error_details["url"] = url
        if self.validation_errors:
            error_details["validation_errors"] = self.validation_errors

        super().__init__(message, error_details)

    @property
    def is_missing(self) -> bool:
        """Whether the URL was absent rather than malformed."""
        return self.reason == self.MISSING


__all__ = [
    "KioskConfigError",
    "URLValidationError",
]
