"""Request logging middleware for the Falcon ASGI application.

Usage
-----
Register the middleware when creating the Falcon app::

    app = falcon.asgi.App(middleware=[RequestLogger()])

"""

from __future__ import annotations

import typing as typ

from ghcolumns.logging import get_logger, log_debug, log_error

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["RequestLogger"]

logger = get_logger(__name__)


class RequestLogger:
    """Falcon middleware logging each request's outcome.

    Server errors are logged at ERROR and everything else at DEBUG. Falcon
    renders unhandled exceptions as 500 responses before this hook runs.
    """

    async def process_response(
        self,
        req: Request,
        resp: Response,
        _resource: object,
        _req_succeeded: bool,  # noqa: FBT001 - Falcon middleware signature
    ) -> None:
        """Log the request method, path and response status."""
        status = str(resp.status)
        if status.startswith("5"):
            log_error(logger, "%s %s -> %s", req.method, req.path, status)
            return
        log_debug(logger, "%s %s -> %s", req.method, req.path, status)
