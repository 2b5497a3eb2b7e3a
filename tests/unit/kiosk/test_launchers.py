"""Unit tests for the anonymous, local and Grafana.com kiosk launchers."""

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock, call, patch

import pytest

from grafana_kiosk.config.models import KioskMode
from grafana_kiosk.kiosk.browser import BrowserConfig, KioskError
from grafana_kiosk.kiosk.launchers import (
    GCOM_LOGIN_FIELD,
    GCOM_LOGIN_LINK,
    GCOM_PASSWORD_FIELD,
    LOCAL_PASSWORD_FIELD,
    LOCAL_USER_FIELD,
    grafana_kiosk_anonymous,
    grafana_kiosk_gcom,
    grafana_kiosk_local,
)


@pytest.fixture
def mock_page() -> MagicMock:
    """Create a mock page accepting typing, clicks and key presses."""
    page = MagicMock()
    page.type = AsyncMock()
    page.click = AsyncMock()
    page.keyboard.press = AsyncMock()
    return page


@pytest.fixture
def mock_browser(mock_page: MagicMock) -> Iterator[MagicMock]:
    """Patch KioskBrowser in the launchers module and yield the instance."""
    instance = MagicMock()
    instance.open = AsyncMock(return_value=mock_page)
    instance.navigate = AsyncMock()
    instance.wait_for = AsyncMock()
    instance.wait_for_close = AsyncMock()
    instance.close = AsyncMock()

    with patch("grafana_kiosk.kiosk.launchers.KioskBrowser", return_value=instance) as mock_cls:
        instance.cls = mock_cls
        yield instance


class TestAnonymousLauncher:
    """Test grafana_kiosk_anonymous."""

    async def test_anonymous_when_started_then_kiosk_url_opened_until_closed(
        self, mock_browser: MagicMock, mock_page: MagicMock
    ) -> None:
        """Test the anonymous launcher opens the kiosk URL and waits for close."""
        await grafana_kiosk_anonymous("https://play.grafana.org", True)

        mock_browser.navigate.assert_awaited_once_with(
            mock_page, "https://play.grafana.org?kiosk=1&autofitpanels=true"
        )
        mock_browser.wait_for.assert_not_awaited()
        mock_page.type.assert_not_awaited()
        mock_browser.wait_for_close.assert_awaited_once()
        mock_browser.close.assert_awaited_once()

    async def test_anonymous_when_browser_config_given_then_passed_to_browser(
        self, mock_browser: MagicMock
    ) -> None:
        """Test the launcher uses the given browser configuration."""
        config = BrowserConfig(window_size="1280,720")

        await grafana_kiosk_anonymous(
            "https://play.grafana.org",
            False,
            kiosk_mode=KioskMode.TV,
            is_playlist=True,
            browser_config=config,
        )

        mock_browser.cls.assert_called_once_with(config)
        mock_browser.navigate.assert_awaited_once()
        assert mock_browser.navigate.call_args.args[1] == (
            "https://play.grafana.org?kiosk=tv&inactive=1"
        )


class TestLocalLauncher:
    """Test grafana_kiosk_local."""

    async def test_local_when_login_form_shown_then_credentials_submitted(
        self, mock_browser: MagicMock, mock_page: MagicMock
    ) -> None:
        """Test the local launcher fills Grafana's login form."""
        await grafana_kiosk_local("https://grafana.local", "admin", "secret", False)

        mock_browser.navigate.assert_awaited_once_with(mock_page, "https://grafana.local?kiosk=1")
        mock_browser.wait_for.assert_awaited_once_with(mock_page, LOCAL_USER_FIELD)
        assert mock_page.type.await_args_list == [
            call(LOCAL_USER_FIELD, "admin"),
            call(LOCAL_PASSWORD_FIELD, "secret"),
        ]
        mock_page.keyboard.press.assert_awaited_once_with("Enter")
        mock_browser.wait_for_close.assert_awaited_once()

    async def test_local_when_login_form_missing_then_error_and_browser_closed(
        self, mock_browser: MagicMock, mock_page: MagicMock
    ) -> None:
        """Test a login timeout propagates and the browser is still closed."""
        mock_browser.wait_for.side_effect = KioskError("Timed out", "LOGIN_TIMEOUT")

        with pytest.raises(KioskError) as exc_info:
            await grafana_kiosk_local("https://grafana.local", "admin", "secret", True)

        assert exc_info.value.error_code == "LOGIN_TIMEOUT"
        mock_page.type.assert_not_awaited()
        mock_browser.wait_for_close.assert_not_awaited()
        mock_browser.close.assert_awaited_once()


class TestGcomLauncher:
    """Test grafana_kiosk_gcom."""

    async def test_gcom_when_login_pages_shown_then_grafana_com_login_completed(
        self, mock_browser: MagicMock, mock_page: MagicMock
    ) -> None:
        """Test the Grafana.com launcher follows the OAuth login pages."""
        await grafana_kiosk_gcom("https://org.grafana.net", "ops@example.com", "secret", True)

        assert mock_browser.wait_for.await_args_list == [
            call(mock_page, GCOM_LOGIN_LINK),
            call(mock_page, GCOM_LOGIN_FIELD),
            call(mock_page, GCOM_PASSWORD_FIELD),
        ]
        mock_page.click.assert_awaited_once_with(GCOM_LOGIN_LINK)
        assert mock_page.type.await_args_list == [
            call(GCOM_LOGIN_FIELD, "ops@example.com"),
            call(GCOM_PASSWORD_FIELD, "secret"),
        ]
        mock_page.keyboard.press.assert_awaited_once_with("Enter")
        mock_browser.wait_for_close.assert_awaited_once()
        mock_browser.close.assert_awaited_once()

    async def test_gcom_when_browser_fails_to_start_then_error_propagates(
        self, mock_browser: MagicMock
    ) -> None:
        """Test launch failures propagate to the caller."""
        mock_browser.open.side_effect = KioskError("Failed to start browser", "LAUNCH_FAILED")

        with pytest.raises(KioskError):
            await grafana_kiosk_gcom("https://org.grafana.net", "u", "p", True)

        mock_browser.navigate.assert_not_awaited()
        mock_browser.close.assert_awaited_once()
