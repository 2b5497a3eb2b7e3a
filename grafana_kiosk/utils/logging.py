"""Logging configuration and setup utilities."""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from ..config.models import LoggingSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

THIRD_PARTY_LOGGERS = ["pyppeteer", "websockets", "asyncio"]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including custom VERBOSE level.

    Args:
        level_name: Log level name (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Numeric log level value

    Raises:
        AttributeError: If level name is not recognized

    Example:
        >>> get_log_level("verbose")
        15
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of stderr."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb":
            return "none"
        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"
        if term and "color" in term:
            return "basic"
        return "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


class TimestampedFileHandler(logging.FileHandler):
    """Handler that creates one timestamped log file per kiosk launch."""

    def __init__(
        self, log_dir: Union[str, Path], prefix: str = "grafana-kiosk", max_files: int = 5
    ) -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.max_files = max_files

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = self.log_dir / f"{prefix}_{timestamp}.log"

        self.log_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(str(log_path), encoding="utf-8")

        self.cleanup_old_files()

    def cleanup_old_files(self) -> None:
        """Remove log files beyond max_files limit, keeping most recent."""
        log_files = list(self.log_dir.glob(f"{self.prefix}_*.log"))

        if len(log_files) > self.max_files:
            log_files.sort(key=lambda f: f.stat().st_mtime, reverse=True)
            for old_file in log_files[self.max_files :]:
                try:
                    old_file.unlink()
                except OSError:
                    logging.getLogger(__name__).debug(f"Could not remove old log file {old_file}")


def setup_logging(settings: "LoggingSettings") -> logging.Logger:
    """Configure the ``grafana_kiosk`` logger hierarchy from LoggingSettings.

    Console output goes to stderr. File output, when enabled, goes to a new
    timestamped file in ``settings.file_directory`` (``~/.grafana-kiosk/logs``
    when unset).

    Args:
        settings: Logging settings after command-line overrides

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("grafana_kiosk")
    logger.setLevel(logging.DEBUG)  # Handlers filter
    logger.handlers.clear()

    if settings.console_enabled:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(get_log_level(settings.console_level))
        console_handler.setFormatter(
            AutoColoredFormatter(
                "%(asctime)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
                enable_colors=settings.console_colors,
            )
        )
        logger.addHandler(console_handler)

    if settings.file_enabled:
        if settings.file_directory:
            log_dir = Path(settings.file_directory)
        else:
            log_dir = Path.home() / ".grafana-kiosk" / "logs"

        file_handler = TimestampedFileHandler(
            log_dir=log_dir, prefix=settings.file_prefix, max_files=settings.max_log_files
        )
        file_handler.setLevel(get_log_level(settings.file_level))
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {file_handler.baseFilename}")

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    third_party_level = get_log_level(settings.third_party_level)
    for lib in THIRD_PARTY_LOGGERS:
        logging.getLogger(lib).setLevel(third_party_level)

    return logger


def apply_command_line_overrides(settings: "LoggingSettings", args: Any) -> "LoggingSettings":
    """Apply command-line argument overrides to logging settings.

    Priority: Command-line > Environment > Defaults. Modifies the settings
    object in-place and returns it for convenience.

    Args:
        settings: Current logging settings
        args: Parsed command-line arguments from argparse

    Returns:
        Settings object with command-line overrides applied
    """
    if getattr(args, "log_level", None):
        settings.console_level = args.log_level
        settings.file_level = args.log_level

    if getattr(args, "verbose", False):
        settings.console_level = "VERBOSE"
        settings.file_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.file_enabled = True
        settings.file_directory = str(args.log_dir)

    if getattr(args, "no_file_logging", False):
        settings.file_enabled = False

    if getattr(args, "no_log_colors", False):
        settings.console_colors = False

    return settings


__all__ = [
    "VERBOSE",
    "AutoColoredFormatter",
    "TimestampedFileHandler",
    "apply_command_line_overrides",
    "get_log_level",
    "setup_logging",
]
