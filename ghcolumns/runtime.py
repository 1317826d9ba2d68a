"""ghcolumns runtime entrypoint.

``ghcolumns.runtime:create_app`` is the Granian factory target; it delegates
to :func:`ghcolumns.api.app.create_app`.

Configuration is driven by environment variables:

- ``GHCOLUMNS_HOST``: Bind address (default ``0.0.0.0``)
- ``GHCOLUMNS_PORT``: Listen port (default ``8080``)
- ``GHCOLUMNS_LOG_LEVEL``: Log level (default ``INFO``)
- ``GHCOLUMNS_HAS_PRIVATE_ACCESS``: Default private repository access for
  requests that do not state it (default ``false``)

Run the service directly with ``python -m ghcolumns.runtime``.
"""

from __future__ import annotations

import typing as typ

from ghcolumns.config import ColumnsConfig, ConfigError
from ghcolumns.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)


def create_app() -> falcon.asgi.App:
    """Create the Falcon ASGI application with environment defaults."""
    from ghcolumns.api.app import create_app as _create_api_app

    return _create_api_app()


def _load_config() -> ColumnsConfig:
    try:
        return ColumnsConfig.from_env()
    except ConfigError as exc:
        log_error(logger, "Invalid configuration: %s", exc)
        raise SystemExit(1) from exc


def main() -> None:
    """Start the ghcolumns runtime server using Granian."""
    from granian import Granian
    from granian.constants import Interfaces

    config = _load_config()

    normalized_level, invalid_level = configure_logging(config.log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GHCOLUMNS_LOG_LEVEL %r, falling back to %s",
            config.log_level,
            normalized_level,
        )

    log_info(
        logger,
        "Starting ghcolumns runtime on %s:%d (log_level=%s, private_access=%s)",
        config.host,
        config.port,
        normalized_level,
        config.has_private_access,
    )

    server = Granian(
        "ghcolumns.runtime:create_app",
        address=config.host,
        port=config.port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
