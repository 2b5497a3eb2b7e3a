"""Build logging and launch configuration from parsed command-line arguments."""

import logging
from typing import Any

from pydantic import ValidationError

from ..config.exceptions import KioskConfigError
from ..config.models import (
    BrowserSettings,
    KioskConfig,
    LoggingSettings,
    resolve_kiosk_mode,
    resolve_login_method,
)
from ..config.validation import validate_url
from ..utils.logging import apply_command_line_overrides, setup_logging

logger = logging.getLogger(__name__)

# argparse dest -> BrowserSettings field
_BROWSER_OVERRIDES = {
    "browser_path": "executable_path",
    "ignore_certificate_errors": "ignore_certificate_errors",
    "window_position": "window_position",
    "window_size": "window_size",
    "scale_factor": "scale_factor",
}


def apply_browser_overrides(args: Any) -> BrowserSettings:
    """Create BrowserSettings with command-line values taking priority.

    Priority: Command-line > Environment > Defaults.

    Raises:
        KioskConfigError: If a browser option is invalid
    """
    overrides = {
        field: getattr(args, dest)
        for dest, field in _BROWSER_OVERRIDES.items()
        if getattr(args, dest, None) is not None
    }
    try:
        return BrowserSettings(**overrides)
    except ValidationError as e:
        raise KioskConfigError(
            "Invalid browser option", {"errors": [err["msg"] for err in e.errors()]}
        ) from e


def configure_logging(args: Any) -> LoggingSettings:
    """Set up logging from GRAFANA_KIOSK_LOG_* settings and the logging flags.

    Raises:
        KioskConfigError: If a logging setting is invalid or the log
            directory cannot be used
    """
    try:
        settings = apply_command_line_overrides(LoggingSettings(), args)
    except ValidationError as e:
        raise KioskConfigError(
            "Invalid logging option", {"errors": [err["msg"] for err in e.errors()]}
        ) from e

    try:
        setup_logging(settings)
    except OSError as e:
        raise KioskConfigError(
            f"Cannot write log files: {e}", {"directory": settings.file_directory}
        ) from e

    return settings


def build_kiosk_config(args: Any) -> KioskConfig:
    """Validate the URL and resolve every flag into a KioskConfig.

    Args:
        args: Parsed command-line arguments

    Returns:
        Resolved launch configuration

    Raises:
        URLValidationError: If the URL is empty or malformed
        KioskConfigError: If another option is invalid
    """
    url = validate_url(args.url)

    login_method = resolve_login_method(args.login_method)
    kiosk_mode = resolve_kiosk_mode(args.kiosk_mode)
    logger.debug(f"Resolved login method {login_method.name}, kiosk mode {kiosk_mode.name}")

    return KioskConfig(
        url=url,
        login_method=login_method,
        username=args.username,
        password=args.password,
        kiosk_mode=kiosk_mode,
        autofit=args.autofit,
        is_playlist=args.playlist,
        lxde_enabled=args.lxde,
        lxde_home=args.lxde_home,
        browser=apply_browser_overrides(args),
    )


__all__ = [
    "apply_browser_overrides",
    "build_kiosk_config",
    "configure_logging",
]
