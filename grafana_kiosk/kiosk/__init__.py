"""
Grafana Kiosk Browser Module.

This module starts Chromium in kiosk mode on a Grafana dashboard and drives
the login sequence for each supported login method.

Components:
    KioskBrowser: pyppeteer-driven Chromium instance
    BrowserConfig: Browser configuration for one session
    KioskError: Browser and login failures
    grafana_kiosk_anonymous / grafana_kiosk_local / grafana_kiosk_gcom: Launchers
    generate_url: Kiosk query parameter handling
"""

from .browser import BrowserConfig, KioskBrowser, KioskError, build_chromium_args
from .launchers import grafana_kiosk_anonymous, grafana_kiosk_gcom, grafana_kiosk_local
from .url import generate_url

__all__ = [
    "BrowserConfig",
    "KioskBrowser",
    "KioskError",
    "build_chromium_args",
    "generate_url",
    "grafana_kiosk_anonymous",
    "grafana_kiosk_gcom",
    "grafana_kiosk_local",
]
