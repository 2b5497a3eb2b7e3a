"""Entry point for `python -m grafana_kiosk` and the `grafana-kiosk` command."""

import asyncio
import sys

from grafana_kiosk.cli import main_entry


def main() -> None:
    """Run the launcher and exit with its status code."""
    try:
        exit_code = asyncio.run(main_entry())
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
