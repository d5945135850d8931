"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups. ``from_env`` builds one from ``WAYPOINT_*``
environment variables for deployments that configure through the
environment.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from waypoint.errors import ConfigurationError

_LOG_LEVELS = frozenset({"critical", "error", "warning", "info", "debug"})
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=3000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False

    # Logging
    log_level: str = "info"

    # IANA zone name used by handlers for timestamps
    timezone: str = "UTC"

    def __post_init__(self) -> None:
        if self.log_level not in _LOG_LEVELS:
            msg = f"log_level must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)
        if not 0 < self.port < 65536:
            msg = f"port must be between 1 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        # Resolve once so an unknown zone fails at boot.
        _ = self.tzinfo

    @property
    def tzinfo(self) -> ZoneInfo:
        """The configured timezone as a ``ZoneInfo``."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown timezone {self.timezone!r}"
            raise ConfigurationError(msg) from exc

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        prefix: str = "WAYPOINT_",
    ) -> AppConfig:
        """Build a config from environment variables.

        Reads ``{prefix}HOST``, ``PORT``, ``DEBUG``, ``LOG_LEVEL`` and
        ``TIMEZONE``. Unset variables keep their defaults.

        Raises ``ConfigurationError`` for values that do not parse.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}

        if (host := env.get(f"{prefix}HOST")) is not None:
            values["host"] = host
        if (port := env.get(f"{prefix}PORT")) is not None:
            try:
                values["port"] = int(port)
            except ValueError:
                msg = f"{prefix}PORT must be an integer, got {port!r}"
                raise ConfigurationError(msg) from None
        if (debug := env.get(f"{prefix}DEBUG")) is not None:
            values["debug"] = _parse_bool(f"{prefix}DEBUG", debug)
        if (level := env.get(f"{prefix}LOG_LEVEL")) is not None:
            values["log_level"] = level.lower()
        if (tz := env.get(f"{prefix}TIMEZONE")) is not None:
            values["timezone"] = tz

        return cls(**values)  # type: ignore[arg-type]


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    msg = f"{name} must be a boolean flag, got {raw!r}"
    raise ConfigurationError(msg)
