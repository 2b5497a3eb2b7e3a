"""
Chromium browser control for Grafana kiosk sessions.

This module builds the Chromium command line for an unattended dashboard
display and drives the browser through pyppeteer (Chrome DevTools Protocol),
which the login launchers use to fill in login forms.

Classes:
    BrowserConfig: Browser configuration for one kiosk session
    KioskBrowser: pyppeteer-driven Chromium instance
    KioskError: Exception for browser and login failures

Example:
    >>> browser = KioskBrowser(BrowserConfig(window_size="1920,1080"))
    >>> page = await browser.open()
    >>> await browser.navigate(page, "https://play.grafana.org/?kiosk=1")
    >>> await browser.wait_for_close()
"""

import asyncio
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from pyppeteer import launch
from pyppeteer.errors import PyppeteerError
from pyppeteer.errors import TimeoutError as PageTimeoutError

from ..session.lxde import CHROMIUM_PROFILE
from ..utils.logging import VERBOSE

if TYPE_CHECKING:
    from ..config.models import BrowserSettings

logger = logging.getLogger(__name__)

# Chromium checks for updates at most once a year
UPDATE_CHECK_INTERVAL = 31536000


@dataclass
class BrowserConfig:
    """Browser configuration for one kiosk session.

    Attributes:
        executable_path: Path to Chromium executable
        ignore_certificate_errors: Accept invalid TLS certificates
        window_position: Window position as ``X,Y``
        window_size: Optional window size as ``W,H``
        scale_factor: Device scale factor
        display: X display the browser attaches to
        xauthority: Optional X authority file for the display
        user_data_dir: Chromium profile directory, a throwaway profile when unset
        login_timeout: Seconds to wait for login form elements
    """

    executable_path: str = "chromium-browser"
    ignore_certificate_errors: bool = False
    window_position: str = "0,0"
    window_size: Optional[str] = None
    scale_factor: float = 1.0
    display: str = ":0"
    xauthority: Optional[str] = None
    user_data_dir: Optional[str] = None
    login_timeout: int = 30

    @classmethod
    def from_settings(
        cls, settings: "BrowserSettings", home: Optional[str] = None
    ) -> "BrowserConfig":
        """Build a BrowserConfig from validated BrowserSettings.

        Args:
            settings: Browser settings after CLI overrides
            home: Home directory of the X session user, used for XAUTHORITY
                and the Chromium profile under ``.config/chromium``
        """
        return cls(
            executable_path=settings.executable_path,
            ignore_certificate_errors=settings.ignore_certificate_errors,
            window_position=settings.window_position,
            window_size=settings.window_size,
            scale_factor=settings.scale_factor,
            display=settings.display,
            xauthority=str(Path(home) / ".Xauthority") if home else None,
            user_data_dir=str(Path(home) / CHROMIUM_PROFILE) if home else None,
            login_timeout=settings.login_timeout,
        )


class KioskError(Exception):
    """Exception raised for browser and login failures.

    Attributes:
        message: Error description
        error_code: Optional error code for categorization
    """

    def __init__(self, message: str, error_code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code


def build_chromium_args(config: BrowserConfig) -> list[str]:
    """Build Chromium command line flags for an unattended kiosk display.

    Args:
        config: Browser configuration

    Returns:
        List of Chromium flags
    """
    args = [
        "--kiosk",
        "--noerrdialogs",
        "--bwsi",
        "--incognito",
        "--disable-sync",
        "--disable-notifications",
        "--disable-overlay-scrollbar",
        "--disable-infobars",
        "--no-first-run",
        "--no-default-browser-check",
        f"--check-for-update-interval={UPDATE_CHECK_INTERVAL}",
        f"--window-position={config.window_position}",
    ]

    if config.window_size:
        args.append(f"--window-size={config.window_size}")
    if config.scale_factor != 1.0:
        args.append(f"--force-device-scale-factor={config.scale_factor}")
    if config.ignore_certificate_errors:
        args.extend(["--ignore-certificate-errors", "--test-type"])

    return args


class KioskBrowser:
    """Chromium instance driven over the DevTools protocol.

    The browser is started headful with pyppeteer's default flags minus
    ``--enable-automation``, so no automation banner covers the dashboard.
    """

    def __init__(self, config: BrowserConfig) -> None:
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.KioskBrowser")
        self._browser: Optional[Any] = None
        self._closed = asyncio.Event()

    @property
    def is_open(self) -> bool:
        """Whether a browser is running and still connected."""
        return self._browser is not None and not self._closed.is_set()

    def _launch_env(self) -> dict[str, str]:
        # pyppeteer hands env straight to Popen, so start from our own environment
        env = os.environ.copy()
        env["DISPLAY"] = self.config.display
        if self.config.xauthority:
            env["XAUTHORITY"] = self.config.xauthority
        return env

    async def open(self) -> Any:
        """Start Chromium and return its first page.

        Raises:
            KioskError: If the browser cannot be started
        """
        args = build_chromium_args(self.config)
        self.logger.info(f"Starting Chromium: {self.config.executable_path}")
        self.logger.log(VERBOSE, f"Chromium flags: {' '.join(args)}")

        options: dict[str, Any] = {
            "executablePath": self.config.executable_path,
            "headless": False,
            "args": args,
            "ignoreDefaultArgs": ["--enable-automation"],
            "defaultViewport": None,
            "env": self._launch_env(),
            "handleSIGINT": False,
            "handleSIGTERM": False,
            "handleSIGHUP": False,
        }
        # Without userDataDir pyppeteer creates a temporary profile
        if self.config.user_data_dir:
            self.logger.debug(f"Chromium profile: {self.config.user_data_dir}")
            options["userDataDir"] = self.config.user_data_dir

        try:
            self._browser = await launch(**options)
        except (PyppeteerError, OSError) as e:
            raise KioskError(f"Failed to start browser: {e}", "LAUNCH_FAILED") from e

        self._closed.clear()
        self._browser.on("disconnected", self._closed.set)

        pages = await self._browser.pages()
        return pages[0] if pages else await self._browser.newPage()

    async def navigate(self, page: Any, url: str) -> None:
        """Load ``url`` in ``page``.

        Raises:
            KioskError: If the page fails to load
        """
        self.logger.info(f"Navigating to {url}")
        try:
            await page.goto(url)
        except (PyppeteerError, PageTimeoutError) as e:
            raise KioskError(f"Failed to load {url}: {e}", "NAVIGATION_FAILED") from e

    async def wait_for(self, page: Any, selector: str) -> Any:
        """Wait until ``selector`` is visible in ``page``.

        Raises:
            KioskError: If the element does not appear within login_timeout
        """
        self.logger.debug(f"Waiting for {selector}")
        try:
            return await page.waitForSelector(
                selector, visible=True, timeout=self.config.login_timeout * 1000
            )
        except (PyppeteerError, PageTimeoutError) as e:
            raise KioskError(
                f"Timed out after {self.config.login_timeout}s waiting for {selector}",
                "LOGIN_TIMEOUT",
            ) from e

    async def wait_for_close(self) -> None:
        """Block until the browser window is closed or the browser exits."""
        if self._browser is None:
            return
        await self._closed.wait()
        self.logger.info("Browser closed")

    async def close(self) -> None:
        """Close the browser if it is still connected."""
        if self._browser is None:
            return
        if not self._closed.is_set():
            try:
                await self._browser.close()
            except PyppeteerError:
                self.logger.exception("Error closing browser")
        self._browser = None


__all__ = [
    "BrowserConfig",
    "KioskBrowser",
    "KioskError",
    "build_chromium_args",
]
