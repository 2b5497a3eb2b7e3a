"""Unit tests for building KioskConfig from command-line arguments."""

import pytest

from grafana_kiosk.cli.config import build_kiosk_config
from grafana_kiosk.cli.parser import parse_args
from grafana_kiosk.config.exceptions import KioskConfigError, URLValidationError
from grafana_kiosk.config.models import KioskMode, LoginMethod


class TestBuildKioskConfig:
    """Test flag resolution into KioskConfig."""

    def test_build_config_when_local_login_flags_then_resolved(self) -> None:
        """Test the local login scenario resolves every field."""
        args = parse_args(
            [
                "-URL=https://play.grafana.org",
                "-login-method=local",
                "-username=u",
                "-password=p",
                "-autofit=false",
            ]
        )

        config = build_kiosk_config(args)

        assert config.url == "https://play.grafana.org"
        assert config.login_method is LoginMethod.LOCAL
        assert config.username == "u"
        assert config.password.get_secret_value() == "p"
        assert config.autofit is False
        assert config.kiosk_mode is KioskMode.NORMAL
        assert config.lxde_enabled is True

    @pytest.mark.parametrize(
        ("flag", "expected"),
        [
            ("anon", LoginMethod.ANONYMOUS),
            ("local", LoginMethod.LOCAL),
            ("gcom", LoginMethod.GCOM),
            ("oauth", LoginMethod.ANONYMOUS),
        ],
    )
    def test_build_config_when_login_method_flag_then_mapped(
        self, flag: str, expected: LoginMethod
    ) -> None:
        """Test login method resolution including the fallback."""
        config = build_kiosk_config(parse_args([f"-login-method={flag}"]))

        assert config.login_method is expected

    @pytest.mark.parametrize(
        ("flag", "expected"),
        [
            ("tv", KioskMode.TV),
            ("false", KioskMode.NONE),
            ("default", KioskMode.NORMAL),
            ("fullscreen", KioskMode.NORMAL),
        ],
    )
    def test_build_config_when_kiosk_mode_flag_then_mapped(
        self, flag: str, expected: KioskMode
    ) -> None:
        """Test kiosk mode resolution including the fallback."""
        config = build_kiosk_config(parse_args([f"-kiosk-mode={flag}"]))

        assert config.kiosk_mode is expected

    def test_build_config_when_empty_url_then_missing_url_error(self) -> None:
        """Test an empty URL is reported as missing."""
        with pytest.raises(URLValidationError) as exc_info:
            build_kiosk_config(parse_args(["-URL="]))

        assert exc_info.value.is_missing is True

    def test_build_config_when_malformed_url_then_malformed_url_error(self) -> None:
        """Test a malformed URL is reported as malformed."""
        with pytest.raises(URLValidationError) as exc_info:
            build_kiosk_config(parse_args(["-URL=not a url"]))

        assert exc_info.value.is_missing is False

    def test_build_config_when_browser_flags_then_browser_settings_overridden(self) -> None:
        """Test browser flags override the browser settings."""
        args = parse_args(
            [
                "-browser-path=/usr/bin/chromium",
                "-ignore-certificate-errors",
                "-window-size=1920,1080",
                "-scale-factor=2",
            ]
        )

        browser = build_kiosk_config(args).browser

        assert browser.executable_path == "/usr/bin/chromium"
        assert browser.ignore_certificate_errors is True
        assert browser.window_size == "1920,1080"
        assert browser.scale_factor == 2.0
        assert browser.window_position == "0,0"

    def test_build_config_when_browser_env_and_no_flag_then_env_used(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test environment defaults apply when the flag is absent."""
        monkeypatch.setenv("GRAFANA_KIOSK_BROWSER_EXECUTABLE_PATH", "/snap/bin/chromium")

        config = build_kiosk_config(parse_args([]))

        assert config.browser.executable_path == "/snap/bin/chromium"

    def test_build_config_when_invalid_window_size_then_config_error(self) -> None:
        """Test an invalid window size is a configuration error."""
        with pytest.raises(KioskConfigError) as exc_info:
            build_kiosk_config(parse_args(["-window-size=big"]))

        assert not isinstance(exc_info.value, URLValidationError)

    def test_build_config_when_out_of_range_scale_then_config_error(self) -> None:
        """Test pydantic range errors become configuration errors."""
        with pytest.raises(KioskConfigError) as exc_info:
            build_kiosk_config(parse_args(["-scale-factor=0"]))

        assert "Invalid browser option" in str(exc_info.value)
