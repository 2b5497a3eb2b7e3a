"""
LXDE session preparation for kiosk displays.

Before the browser starts, the X session is told not to blank or power down
the screen, and Chromium's profile is marked as cleanly exited so a previous
power cut does not leave a "Restore pages?" bubble over the dashboard.
"""

import json
import logging
import os
import shutil
import subprocess  # nosec B404
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

XSET_COMMANDS = [
    ["xset", "s", "off"],
    ["xset", "-dpms"],
    ["xset", "s", "noblank"],
]

CHROMIUM_PROFILE = Path(".config") / "chromium"
CHROMIUM_PREFERENCES = CHROMIUM_PROFILE / "Default" / "Preferences"


def initialize_lxde(home: Union[str, Path], display: str = ":0") -> None:
    """Prepare the LXDE session owned by ``home`` for a kiosk browser.

    Failures are logged and never raised; the launch continues either way.

    Args:
        home: Home directory of the LXDE user running the X server
        display: X display to configure
    """
    home_path = Path(home)
    logger.info(f"Initializing LXDE session (home={home_path}, display={display})")

    disable_screen_blanking(home_path, display)
    mark_chromium_clean_exit(home_path)


def x_environment(home: Path, display: str) -> dict[str, str]:
    """Environment for X clients talking to the kiosk user's display."""
    env = os.environ.copy()
    env.update(
        {
            "DISPLAY": display,
            "XAUTHORITY": str(home / ".Xauthority"),
        }
    )
    return env


def disable_screen_blanking(home: Path, display: str = ":0") -> bool:
    """Turn off the X screensaver and DPMS.

    Returns:
        True if every xset command succeeded, False otherwise
    """
    if shutil.which("xset") is None:
        logger.warning("xset not found, screen blanking left unchanged")
        return False

    env = x_environment(home, display)
    success = True
    for cmd in XSET_COMMANDS:
        try:
            subprocess.run(cmd, env=env, check=True, capture_output=True, timeout=5)  # nosec B603
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, OSError) as e:
            logger.warning(f"Command {' '.join(cmd)} failed: {e}")
            success = False
    return success


def mark_chromium_clean_exit(home: Path, preferences: Optional[Path] = None) -> bool:
    """Mark the Chromium profile under ``home`` as having exited cleanly.

    Args:
        home: Home directory holding ``.config/chromium``
        preferences: Explicit Preferences path, overrides the default location

    Returns:
        True if the Preferences file was updated, False if it was skipped
    """
    pref_file = preferences or home / CHROMIUM_PREFERENCES
    if not pref_file.exists():
        logger.debug(f"No Chromium preferences at {pref_file}, nothing to reset")
        return False

    try:
        prefs = json.loads(pref_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read Chromium preferences {pref_file}: {e}")
        return False

    if not isinstance(prefs, dict):
        logger.warning(f"Unexpected Chromium preferences layout in {pref_file}")
        return False

    profile = prefs.setdefault("profile", {})
    profile["exited_cleanly"] = True
    profile["exit_type"] = "Normal"

    try:
        pref_file.write_text(json.dumps(prefs), encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not write Chromium preferences {pref_file}: {e}")
        return False

    logger.debug(f"Chromium profile marked as cleanly exited: {pref_file}")
    return True


__all__ = [
    "disable_screen_blanking",
    "initialize_lxde",
    "mark_chromium_clean_exit",
]
