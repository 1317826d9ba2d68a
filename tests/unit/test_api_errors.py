"""Unit tests for ghcolumns.api.errors and the HTTP 400 handler.

Usage
-----
Run with pytest::

    pytest tests/unit/test_api_errors.py

"""

from __future__ import annotations

import falcon.asgi
import falcon.testing
import pytest

from ghcolumns.api.errors import InvalidInputError, handle_invalid_input


class _RejectingResource:
    """Resource that rejects every request with the configured error."""

    def __init__(self, error: InvalidInputError) -> None:
        self._error = error

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        raise self._error


def _client(error: InvalidInputError) -> falcon.testing.TestClient:
    app = falcon.asgi.App()
    app.add_route("/columns/reject", _RejectingResource(error))
    app.add_error_handler(InvalidInputError, handle_invalid_input)
    return falcon.testing.TestClient(app)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        pytest.param(
            InvalidInputError("request body must be a JSON object"),
            {
                "title": "Invalid input",
                "description": "request body must be a JSON object",
            },
            id="without_field",
        ),
        pytest.param(
            InvalidInputError("expected a boolean", field="hasPrivateAccess"),
            {
                "title": "Invalid input",
                "description": "expected a boolean",
                "field": "hasPrivateAccess",
            },
            id="with_field",
        ),
    ],
)
def test_handler_maps_to_400(
    error: InvalidInputError, expected: dict[str, str]
) -> None:
    """InvalidInputError becomes a JSON 400 naming the offending field."""
    result = _client(error).simulate_post("/columns/reject")

    assert result.status == falcon.HTTP_400, "expected HTTP 400"
    assert result.json == expected, "wrong error body"


@pytest.mark.parametrize(
    ("field", "message"),
    [
        pytest.param(None, "not an array", id="reason_only"),
        pytest.param("items", "items: not an array", id="field_prefixed"),
    ],
)
def test_error_message(field: str | None, message: str) -> None:
    """The exception message carries the field when one is given."""
    ex = InvalidInputError("not an array", field=field)

    assert str(ex) == message, "unexpected exception message"
    assert ex.reason == "not an array", "reason attribute mismatch"
    assert ex.field == field, "field attribute mismatch"
