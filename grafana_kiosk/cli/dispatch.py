"""Kiosk run sequence: optional LXDE setup, then the login launcher."""

import logging

from ..config.models import KioskConfig, LoginMethod
from ..kiosk.browser import BrowserConfig, KioskError
from ..kiosk.launchers import grafana_kiosk_anonymous, grafana_kiosk_gcom, grafana_kiosk_local
from ..session.lxde import initialize_lxde

logger = logging.getLogger(__name__)


async def dispatch_login(config: KioskConfig) -> None:
    """Start the launcher matching ``config.login_method``.

    Blocks for the lifetime of the kiosk browser session.

    Raises:
        KioskError: If the browser or the login sequence fails
    """
    browser_config = BrowserConfig.from_settings(
        config.browser, home=config.lxde_home if config.lxde_enabled else None
    )
    options = {
        "kiosk_mode": config.kiosk_mode,
        "is_playlist": config.is_playlist,
        "browser_config": browser_config,
    }

    if config.login_method is LoginMethod.LOCAL:
        logger.info("Launching local login kiosk")
        await grafana_kiosk_local(
            config.url,
            config.username,
            config.password.get_secret_value(),
            config.autofit,
            **options,
        )
    elif config.login_method is LoginMethod.GCOM:
        logger.info("Launching GCOM login kiosk")
        await grafana_kiosk_gcom(
            config.url,
            config.username,
            config.password.get_secret_value(),
            config.autofit,
            **options,
        )
    else:
        logger.info("Launching ANON login kiosk")
        await grafana_kiosk_anonymous(config.url, config.autofit, **options)


async def run_kiosk(config: KioskConfig) -> int:
    """Run one kiosk session from a resolved configuration.

    Returns:
        Exit code (0 when the browser was closed normally, 1 on failure)
    """
    if config.is_playlist:
        logger.info("playlist")

    if config.lxde_enabled:
        initialize_lxde(config.lxde_home, display=config.browser.display)

    try:
        await dispatch_login(config)
    except KioskError as e:
        logger.error(f"Kiosk failed ({e.error_code}): {e.message}")
        return 1

    return 0


__all__ = [
    "dispatch_login",
    "run_kiosk",
]
