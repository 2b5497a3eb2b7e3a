"""Launch configuration: enums, models and validation."""

from .exceptions import KioskConfigError, URLValidationError
from .models import (
    BrowserSettings,
    KioskConfig,
    KioskMode,
    LoggingSettings,
    LoginMethod,
    resolve_kiosk_mode,
    resolve_login_method,
)
from .validation import validate_url

__all__ = [
    "BrowserSettings",
    "KioskConfig",
    "KioskConfigError",
    "KioskMode",
    "LoggingSettings",
    "LoginMethod",
    "URLValidationError",
    "resolve_kiosk_mode",
    "resolve_login_method",
    "validate_url",
]
