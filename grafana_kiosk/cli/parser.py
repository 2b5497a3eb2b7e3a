"""Command-line argument parsing for the Grafana kiosk launcher.

Flags follow the Go ``flag`` conventions used by existing kiosk deployments:
a single or double dash (``-URL`` / ``--URL``), values given as ``=value`` or
as the next argument, and booleans that are true when given bare and accept
``-autofit=false``.
"""

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence

from ..config.models import LOG_LEVELS

_TRUE_VALUES = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_VALUES = {"0", "f", "F", "FALSE", "false", "False"}


def parse_bool(value: str) -> bool:
    """Parse a boolean flag value using Go's ``strconv.ParseBool`` spellings.

    Raises:
        argparse.ArgumentTypeError: If the value is not a recognised boolean

    Example:
        >>> parse_bool("false")
        False
        >>> parse_bool("T")
        True
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {value!r}")


class _HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Keep the examples epilog layout."""


def _add_flag(
    parser: "argparse._ActionsContainer", name: str, dest: Optional[str] = None, **kwargs: Any
) -> None:
    parser.add_argument(f"-{name}", f"--{name}", dest=dest or name.replace("-", "_"), **kwargs)


def _add_bool_flag(
    parser: "argparse._ActionsContainer", name: str, default: Optional[bool], help_text: str
) -> None:
    _add_flag(
        parser,
        name,
        nargs="?",
        const=True,
        default=default,
        type=parse_bool,
        metavar="BOOL",
        help=help_text,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the launcher's argument parser.

    Returns:
        Fully configured ArgumentParser

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["-URL=https://play.grafana.org", "-autofit=false"])
        >>> args.autofit
        False
    """
    parser = argparse.ArgumentParser(
        prog="grafana-kiosk",
        description="Launch Chromium in kiosk mode on a Grafana dashboard",
        formatter_class=_HelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  %(prog)s -URL=https://play.grafana.org
  %(prog)s -URL=https://grafana.local/d/abc -login-method=local -username=admin -password=secret
  %(prog)s -URL=https://org.grafana.net/playlists/play/1 -login-method=gcom -playlist
  %(prog)s -URL=https://grafana.local -kiosk-mode=tv -lxde=false
        """,
    )

    _add_flag(
        parser,
        "URL",
        dest="url",
        default="https://play.grafana.org",
        help="URL to Grafana server (Required) (default: %(default)s)",
    )
    _add_flag(
        parser,
        "login-method",
        default="anon",
        help="login method: [anon|local|gcom] (default: %(default)s)",
    )
    _add_flag(parser, "username", default="guest", help="username (default: %(default)s)")
    _add_flag(parser, "password", default="guest", help="password (default: %(default)s)")
    _add_flag(
        parser,
        "kiosk-mode",
        default="default",
        help="kiosk mode [default|tv|false] (default: %(default)s)",
    )
    _add_bool_flag(parser, "autofit", True, "autofit panels in kiosk mode (default: true)")
    _add_bool_flag(parser, "playlist", False, "URL is a playlist: [true|false] (default: false)")
    _add_bool_flag(parser, "lxde", True, "initialize LXDE for kiosk mode (default: true)")
    _add_flag(
        parser,
        "lxde-home",
        default="/home/pi",
        help="path to home directory of LXDE user running X Server (default: %(default)s)",
    )

    # Browser arguments default to None so GRAFANA_KIOSK_BROWSER_* settings apply
    browser_group = parser.add_argument_group("browser", "Chromium options")
    _add_flag(
        browser_group,
        "browser-path",
        default=None,
        help="Chromium executable (default: chromium-browser)",
    )
    _add_bool_flag(
        browser_group,
        "ignore-certificate-errors",
        None,
        "ignore TLS certificate errors (default: false)",
    )
    _add_flag(
        browser_group,
        "window-position",
        default=None,
        help="top left corner of the browser window as X,Y (default: 0,0)",
    )
    _add_flag(
        browser_group,
        "window-size",
        default=None,
        help="browser window size as W,H (default: screen size)",
    )
    _add_flag(
        browser_group,
        "scale-factor",
        type=float,
        default=None,
        help="device scale factor (default: 1.0)",
    )

    logging_group = parser.add_argument_group("logging", "Logging configuration options")
    _add_flag(
        logging_group,
        "log-level",
        choices=LOG_LEVELS,
        default=None,
        help="set both console and file log levels",
    )
    _add_flag(logging_group, "verbose", action="store_true", help="enable verbose logging")
    _add_flag(logging_group, "quiet", action="store_true", help="only show errors on console")
    _add_flag(
        logging_group, "log-dir", type=Path, default=None, help="write log files to this directory"
    )
    _add_flag(
        logging_group,
        "no-file-logging",
        action="store_true",
        help="disable file logging completely",
    )
    _add_flag(
        logging_group, "no-log-colors", action="store_true", help="disable colored console output"
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse ``argv`` (``sys.argv[1:]`` when None) with the launcher parser."""
    return create_parser().parse_args(argv)


__all__ = [
    "LOG_LEVELS",
    "create_parser",
    "parse_args",
    "parse_bool",
]
