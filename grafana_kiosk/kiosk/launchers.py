"""
Kiosk launchers, one per login method.

Each launcher opens Chromium on the generated kiosk URL, performs its login
sequence and then blocks until the browser is closed.
"""

import logging
from typing import Any, Optional

from ..config.models import KioskMode
from .browser import BrowserConfig, KioskBrowser
from .url import generate_url

logger = logging.getLogger(__name__)

LOCAL_USER_FIELD = 'input[name="user"]'
LOCAL_PASSWORD_FIELD = 'input[name="password"]'
GCOM_LOGIN_LINK = 'a[href="login/grafana_com"]'
GCOM_LOGIN_FIELD = 'input[name="login"]'
GCOM_PASSWORD_FIELD = 'input[name="password"]'


async def _run_session(
    url: str,
    autofit: bool,
    kiosk_mode: KioskMode,
    is_playlist: bool,
    browser_config: Optional[BrowserConfig],
    login: Optional[Any] = None,
) -> None:
    target = generate_url(url, kiosk_mode, autofit, is_playlist)
    browser = KioskBrowser(browser_config or BrowserConfig())
    try:
        page = await browser.open()
        await browser.navigate(page, target)
        if login is not None:
            await login(browser, page)
        await browser.wait_for_close()
    finally:
        await browser.close()


async def grafana_kiosk_anonymous(
    url: str,
    autofit: bool,
    *,
    kiosk_mode: KioskMode = KioskMode.NORMAL,
    is_playlist: bool = False,
    browser_config: Optional[BrowserConfig] = None,
) -> None:
    """Show ``url`` without logging in.

    Raises:
        KioskError: If the browser cannot start or the page fails to load
    """
    await _run_session(url, autofit, kiosk_mode, is_playlist, browser_config)


async def grafana_kiosk_local(
    url: str,
    username: str,
    password: str,
    autofit: bool,
    *,
    kiosk_mode: KioskMode = KioskMode.NORMAL,
    is_playlist: bool = False,
    browser_config: Optional[BrowserConfig] = None,
) -> None:
    """Show ``url`` after signing in through Grafana's login form.

    Raises:
        KioskError: If the browser cannot start or the login form never appears
    """

    async def login(browser: KioskBrowser, page: Any) -> None:
        await browser.wait_for(page, LOCAL_USER_FIELD)
        logger.info(f"Logging in to Grafana as {username}")
        await page.type(LOCAL_USER_FIELD, username)
        await page.type(LOCAL_PASSWORD_FIELD, password)
        await page.keyboard.press("Enter")

    await _run_session(url, autofit, kiosk_mode, is_playlist, browser_config, login)


async def grafana_kiosk_gcom(
    url: str,
    username: str,
    password: str,
    autofit: bool,
    *,
    kiosk_mode: KioskMode = KioskMode.NORMAL,
    is_playlist: bool = False,
    browser_config: Optional[BrowserConfig] = None,
) -> None:
    """Show ``url`` after signing in with a Grafana.com account.

    Raises:
        KioskError: If the browser cannot start or a login step times out
    """

    async def login(browser: KioskBrowser, page: Any) -> None:
        await browser.wait_for(page, GCOM_LOGIN_LINK)
        await page.click(GCOM_LOGIN_LINK)
        await browser.wait_for(page, GCOM_LOGIN_FIELD)
        logger.info(f"Logging in to Grafana.com as {username}")
        await page.type(GCOM_LOGIN_FIELD, username)
        await browser.wait_for(page, GCOM_PASSWORD_FIELD)
        await page.type(GCOM_PASSWORD_FIELD, password)
        await page.keyboard.press("Enter")

    await _run_session(url, autofit, kiosk_mode, is_playlist, browser_config, login)


__all__ = [
    "grafana_kiosk_anonymous",
    "grafana_kiosk_gcom",
    "grafana_kiosk_local",
]
