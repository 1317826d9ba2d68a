"""Application factory for the ghcolumns Falcon ASGI application.

Usage
-----
Create an app whose defaults come from the environment::

    app = create_app()

Or inject collaborators explicitly::

    from ghcolumns.api.app import create_app
    from ghcolumns.api.columns.resources import ColumnResourceDependencies

    deps = ColumnResourceDependencies(has_private_access=True)
    app = create_app(deps)

"""

from __future__ import annotations

import falcon.asgi

from ghcolumns.api.columns.resources import (
    ActivityColumnResource,
    ColumnResourceDependencies,
    NotificationColumnResource,
)
from ghcolumns.api.errors import InvalidInputError, handle_invalid_input
from ghcolumns.api.health.resources import HealthResource, ReadyResource
from ghcolumns.api.middleware import RequestLogger
from ghcolumns.config import ColumnsConfig

__all__ = ["create_app"]


def create_app(
    dependencies: ColumnResourceDependencies | None = None,
) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    dependencies
        Collaborators for the column resources. When ``None``, the default
        privacy predicates and merge are used and the private access default
        is read from ``GHCOLUMNS_HAS_PRIVATE_ACCESS``.

    Returns
    -------
    falcon.asgi.App
        Application serving ``/health``, ``/ready``,
        ``/columns/notifications`` and ``/columns/events``.

    """
    if dependencies is None:
        config = ColumnsConfig.from_env()
        dependencies = ColumnResourceDependencies(
            has_private_access=config.has_private_access
        )

    app = falcon.asgi.App(middleware=[RequestLogger()])  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route("/health", HealthResource())
    app.add_route("/ready", ReadyResource())
    app.add_route("/columns/notifications", NotificationColumnResource(dependencies))
    app.add_route("/columns/events", ActivityColumnResource(dependencies))

    app.add_error_handler(InvalidInputError, handle_invalid_input)

    return app
