"""Grafana display URL generation."""

from urllib.parse import urlsplit, urlunsplit

from ..config.models import KioskMode

_MANAGED_PARAMS = {"kiosk", "autofitpanels", "inactive"}

_KIOSK_PARAM = {
    KioskMode.TV: "tv",
    KioskMode.NORMAL: "1",
}


def generate_url(url: str, kiosk_mode: KioskMode, autofit: bool, is_playlist: bool) -> str:
    """Add Grafana's kiosk query parameters to a dashboard or playlist URL.

    Existing query parameters are kept byte for byte; ``kiosk``,
    ``autofitpanels`` and ``inactive`` are replaced if already present.

    Args:
        url: Validated Grafana URL
        kiosk_mode: Kiosk display mode, NONE adds no ``kiosk`` parameter
        autofit: Add ``autofitpanels=true``
        is_playlist: Add ``inactive=1`` so playlist controls stay hidden

    Returns:
        URL to open in the browser

    Example:
        >>> generate_url("https://play.grafana.org/d/abc?orgId=1", KioskMode.TV, True, False)
        'https://play.grafana.org/d/abc?orgId=1&kiosk=tv&autofitpanels=true'
    """
    parts = urlsplit(url)
    query = [
        param
        for param in parts.query.split("&")
        if param and param.split("=", 1)[0] not in _MANAGED_PARAMS
    ]

    kiosk_value = _KIOSK_PARAM.get(kiosk_mode)
    if kiosk_value is not None:
        query.append(f"kiosk={kiosk_value}")
    if autofit:
        query.append("autofitpanels=true")
    if is_playlist:
        query.append("inactive=1")

    return urlunsplit(parts._replace(query="&".join(query)))
