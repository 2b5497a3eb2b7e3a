"""CLI module for the Grafana kiosk launcher.

This module provides the command-line interface: argument parsing, URL
validation, logging setup and the kiosk run sequence.
"""

import sys
from typing import Optional, Sequence

from ..config.exceptions import KioskConfigError, URLValidationError
from .config import build_kiosk_config, configure_logging
from .dispatch import dispatch_login, run_kiosk
from .parser import create_parser, parse_bool

EXIT_MISSING_URL = 1
EXIT_USAGE = 2


async def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point: parse, validate, then run the kiosk.

    Configuration errors print the usage text and the error to stderr and
    return an exit code instead of raising.

    Args:
        argv: Arguments to parse, ``sys.argv[1:]`` when None

    Returns:
        Exit code (0 for success, 1 for a missing URL or kiosk failure,
        2 for a malformed URL or other invalid option)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args)
        config = build_kiosk_config(args)
    except URLValidationError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e.message}", file=sys.stderr)
        return EXIT_MISSING_URL if e.is_missing else EXIT_USAGE
    except KioskConfigError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_USAGE

    return await run_kiosk(config)


__all__ = [
    "EXIT_MISSING_URL",
    "EXIT_USAGE",
    "build_kiosk_config",
    "configure_logging",
    "create_parser",
    "dispatch_login",
    "main_entry",
    "parse_bool",
    "run_kiosk",
]
