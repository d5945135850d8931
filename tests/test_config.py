"""Tests for waypoint.config — AppConfig frozen dataclass and env loading."""

import pytest

from waypoint.config import AppConfig
from waypoint.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.log_level == "info"
        assert cfg.timezone == "UTC"

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, debug=True)

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log_level"):
            AppConfig(log_level="loud")

    @pytest.mark.parametrize("port", [0, 70000])
    def test_rejects_out_of_range_port(self, port: int) -> None:
        with pytest.raises(ConfigurationError, match="port"):
            AppConfig(port=port)

    def test_unknown_timezone_rejected_at_construction(self) -> None:
        with pytest.raises(ConfigurationError, match="Not/AZone"):
            AppConfig(timezone="Not/AZone")

    def test_tzinfo(self) -> None:
        assert AppConfig(timezone="Europe/Paris").tzinfo.key == "Europe/Paris"


class TestFromEnv:
    def test_empty_environment_gives_defaults(self) -> None:
        assert AppConfig.from_env({}) == AppConfig()

    def test_reads_prefixed_variables(self) -> None:
        cfg = AppConfig.from_env(
            {
                "WAYPOINT_HOST": "0.0.0.0",
                "WAYPOINT_PORT": "9000",
                "WAYPOINT_DEBUG": "true",
                "WAYPOINT_LOG_LEVEL": "DEBUG",
                "WAYPOINT_TIMEZONE": "Europe/Paris",
            }
        )

        assert cfg == AppConfig(
            host="0.0.0.0",
            port=9000,
            debug=True,
            log_level="debug",
            timezone="Europe/Paris",
        )

    def test_custom_prefix(self) -> None:
        cfg = AppConfig.from_env({"API_PORT": "8080", "WAYPOINT_PORT": "1"}, prefix="API_")
        assert cfg.port == 8080

    def test_ignores_unprefixed(self) -> None:
        assert AppConfig.from_env({"PORT": "9000"}).port == 8000

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WAYPOINT_PORT", "8123")
        assert AppConfig.from_env().port == 8123

    @pytest.mark.parametrize(("raw", "expected"), [("1", True), ("off", False), ("", False)])
    def test_debug_flags(self, raw: str, expected: bool) -> None:
        assert AppConfig.from_env({"WAYPOINT_DEBUG": raw}).debug is expected

    def test_bad_port(self) -> None:
        with pytest.raises(ConfigurationError, match="WAYPOINT_PORT"):
            AppConfig.from_env({"WAYPOINT_PORT": "eighty"})

    def test_bad_debug(self) -> None:
        with pytest.raises(ConfigurationError, match="WAYPOINT_DEBUG"):
            AppConfig.from_env({"WAYPOINT_DEBUG": "maybe"})

    def test_bad_timezone(self) -> None:
        with pytest.raises(ConfigurationError, match="Mars/Olympus"):
            AppConfig.from_env({"WAYPOINT_TIMEZONE": "Mars/Olympus"})
