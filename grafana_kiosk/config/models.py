"""
Launch configuration models using Pydantic for validation and type safety.

This module defines the two closed enumerations that drive the launcher
(login method and kiosk display mode), the total mapping functions that turn
raw flag strings into them, and the Pydantic models holding the resolved
launch configuration.
"""

import logging
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import KioskConfigError

logger = logging.getLogger(__name__)

_POSITION_PATTERN = re.compile(r"^-?\d+,-?\d+$")
_SIZE_PATTERN = re.compile(r"^\d+,\d+$")

LOG_LEVELS = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoginMethod(Enum):
    """Login strategy used before the dashboard is shown.

    Attributes:
        ANONYMOUS: No login, the dashboard must allow anonymous access
        LOCAL: Grafana's own login form
        GCOM: Grafana.com OAuth login
    """

    ANONYMOUS = "anon"
    LOCAL = "local"
    GCOM = "gcom"


class KioskMode(Enum):
    """Grafana kiosk display mode.

    Attributes:
        TV: Hide the sidebar but keep the menu usable
        NORMAL: Hide both the sidebar and the top navigation bar
        NONE: Do not enter kiosk mode
    """

    TV = "tv"
    NORMAL = "default"
    NONE = "false"


_LOGIN_METHODS = {
    "anon": LoginMethod.ANONYMOUS,
    "local": LoginMethod.LOCAL,
    "gcom": LoginMethod.GCOM,
}

_KIOSK_MODES = {
    "tv": KioskMode.TV,
    "false": KioskMode.NONE,
    "default": KioskMode.NORMAL,
}


def resolve_login_method(value: str) -> LoginMethod:
    """Map a ``-login-method`` flag value to a LoginMethod.

    Unrecognised values fall back to ANONYMOUS instead of raising.

    Args:
        value: Raw flag value

    Returns:
        The matching LoginMethod, ANONYMOUS for anything unknown

    Example:
        >>> resolve_login_method("local")
        <LoginMethod.LOCAL: 'local'>
        >>> resolve_login_method("oauth")
        <LoginMethod.ANONYMOUS: 'anon'>
    """
    method = _LOGIN_METHODS.get(value)
    if method is None:
        logger.debug(f"Unknown login method {value!r}, using anonymous login")
        return LoginMethod.ANONYMOUS
    return method


def resolve_kiosk_mode(value: str) -> KioskMode:
    """Map a ``-kiosk-mode`` flag value to a KioskMode.

    Unrecognised values fall back to NORMAL instead of raising.

    Args:
        value: Raw flag value

    Returns:
        The matching KioskMode, NORMAL for anything unknown
    """
    mode = _KIOSK_MODES.get(value)
    if mode is None:
        logger.debug(f"Unknown kiosk mode {value!r}, using normal kiosk mode")
        return KioskMode.NORMAL
    return mode


class LoggingSettings(BaseSettings):
    """Logging configuration, overridable via GRAFANA_KIOSK_LOG_* variables."""

    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="INFO",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(default="DEBUG", description="File log level")
    file_directory: Optional[str] = Field(default=None, description="Directory for log files")
    file_prefix: str = Field(default="grafana-kiosk", description="Log file prefix")
    max_log_files: int = Field(default=5, ge=1, description="Maximum number of log files to keep")

    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )

    model_config = SettingsConfigDict(env_prefix="GRAFANA_KIOSK_LOG_", case_sensitive=False)

    @field_validator("console_level", "file_level", "third_party_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize a log level name and reject unknown ones."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {v!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


class BrowserSettings(BaseSettings):
    """Chromium settings, overridable via GRAFANA_KIOSK_BROWSER_* variables.

    Attributes:
        executable_path: Path or name of the Chromium executable
        ignore_certificate_errors: Accept self-signed Grafana certificates
        window_position: Top-left window corner as ``X,Y``
        window_size: Optional window size as ``W,H``
        scale_factor: Device scale factor passed to Chromium
        display: X display the browser attaches to
        login_timeout: Seconds to wait for login form elements
    """

    executable_path: str = Field(
        default="chromium-browser", description="Path to Chromium executable"
    )
    ignore_certificate_errors: bool = Field(
        default=False, description="Ignore TLS certificate errors"
    )
    window_position: str = Field(default="0,0", description="Window position as X,Y")
    window_size: Optional[str] = Field(default=None, description="Window size as W,H")
    scale_factor: float = Field(default=1.0, gt=0, le=5.0, description="Device scale factor")
    display: str = Field(default=":0", description="X display for the browser window")
    login_timeout: int = Field(
        default=30, ge=1, le=600, description="Seconds to wait for login form elements"
    )

    model_config = SettingsConfigDict(env_prefix="GRAFANA_KIOSK_BROWSER_", case_sensitive=False)

    @field_validator("window_position")
    @classmethod
    def validate_window_position(cls, v: str) -> str:
        """Validate the ``X,Y`` window position.

        Raises:
            KioskConfigError: If the value is not two comma separated integers
        """
        if not _POSITION_PATTERN.match(v):
            raise KioskConfigError(
                f"Invalid window position: {v}", {"expected": "X,Y, e.g. 0,0"}
            )
        return v

    @field_validator("window_size")
    @classmethod
    def validate_window_size(cls, v: Optional[str]) -> Optional[str]:
        """Validate the optional ``W,H`` window size.

        Raises:
            KioskConfigError: If the value is not two comma separated positive integers
        """
        if v is None:
            return v
        if not _SIZE_PATTERN.match(v):
            raise KioskConfigError(f"Invalid window size: {v}", {"expected": "W,H, e.g. 1920,1080"})
        return v


class KioskConfig(BaseModel):
    """Resolved launch configuration for one kiosk session.

    Holds the validated URL, the resolved login method and kiosk mode, the
    credentials and the session options read from the command line.

    Example:
        >>> config = KioskConfig(url="https://play.grafana.org", login_method=LoginMethod.LOCAL)
        >>> config.password
        SecretStr('**********')
    """

    url: str = Field(description="Grafana dashboard or playlist URL")
    login_method: LoginMethod = Field(default=LoginMethod.ANONYMOUS)
    username: str = Field(default="guest")
    password: SecretStr = Field(default=SecretStr("guest"))
    kiosk_mode: KioskMode = Field(default=KioskMode.NORMAL)
    autofit: bool = Field(default=True, description="Autofit panels to the viewport")
    is_playlist: bool = Field(default=False, description="URL points at a playlist")
    lxde_enabled: bool = Field(default=True, description="Initialize LXDE before launching")
    lxde_home: str = Field(
        default="/home/pi", description="Home directory of the LXDE user running the X server"
    )
    browser: BrowserSettings = Field(default_factory=BrowserSettings)


__all__ = [
    "LOG_LEVELS",
    "BrowserSettings",
    "KioskConfig",
    "KioskMode",
    "LoggingSettings",
    "LoginMethod",
    "resolve_kiosk_mode",
    "resolve_login_method",
]
