"""Environment configuration for the ghcolumns service and CLI.

Usage
-----
Create a configuration with defaults:

>>> config = ColumnsConfig()
>>> config.has_private_access
False

Or load from environment variables:

>>> import os
>>> os.environ["GHCOLUMNS_HAS_PRIVATE_ACCESS"] = "true"
>>> ColumnsConfig.from_env().has_private_access
True

"""

from __future__ import annotations

import dataclasses as dc
import os

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


class ConfigError(ValueError):
    """Raised when an environment variable holds an invalid value."""

    @classmethod
    def invalid_bool(cls, env_var: str, raw: str) -> ConfigError:
        """Return an error for a value that is not a recognised boolean."""
        return cls(f"{env_var} must be a boolean, got: {raw!r}")

    @classmethod
    def invalid_port(cls, env_var: str, raw: str) -> ConfigError:
        """Return an error for a value that is not a usable TCP port."""
        return cls(
            f"{env_var} must be an integer in {_MIN_PORT}-{_MAX_PORT}, got: {raw!r}"
        )


@dc.dataclass(frozen=True, slots=True)
class ColumnsConfig:
    """Runtime settings shared by the HTTP API and the CLI.

    Attributes
    ----------
    log_level
        Raw log level; normalised by :func:`ghcolumns.logging.configure_logging`.
    has_private_access
        Whether the dashboard holds private repository access. Used when a
        request or command does not say.
    host
        Bind address for the HTTP runtime.
    port
        Listen port for the HTTP runtime.

    """

    log_level: str = "INFO"
    has_private_access: bool = False
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080

    @staticmethod
    def _parse_bool(env_var: str, *, default: bool) -> bool:
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        lowered = raw.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ConfigError.invalid_bool(env_var, raw)

    @staticmethod
    def _parse_port(env_var: str, default: int) -> int:
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        try:
            port = int(raw)
        except ValueError as exc:
            raise ConfigError.invalid_port(env_var, raw) from exc
        if not (_MIN_PORT <= port <= _MAX_PORT):
            raise ConfigError.invalid_port(env_var, raw)
        return port

    @classmethod
    def from_env(cls) -> ColumnsConfig:
        """Create configuration from environment variables.

        Reads ``GHCOLUMNS_LOG_LEVEL``, ``GHCOLUMNS_HAS_PRIVATE_ACCESS``,
        ``GHCOLUMNS_HOST`` and ``GHCOLUMNS_PORT``, falling back to defaults
        for unset or blank values.

        Raises
        ------
        ConfigError
            If a boolean or port variable holds an unusable value.

        """
        log_level = os.environ.get("GHCOLUMNS_LOG_LEVEL", "").strip() or "INFO"
        host = os.environ.get("GHCOLUMNS_HOST", "").strip() or "0.0.0.0"  # noqa: S104
        return cls(
            log_level=log_level,
            has_private_access=cls._parse_bool(
                "GHCOLUMNS_HAS_PRIVATE_ACCESS", default=False
            ),
            host=host,
            port=cls._parse_port("GHCOLUMNS_PORT", 8080),
        )
