"""Unit tests for the ghcolumns.api application factory and column resources.

Usage
-----
Run with pytest::

    pytest tests/unit/test_api_app.py

"""

from __future__ import annotations

import falcon.asgi
import falcon.testing
import msgspec
import pytest

from ghcolumns.api.app import create_app
from ghcolumns.api.columns.resources import ColumnResourceDependencies
from ghcolumns.github.merge import keep_events_unmerged
from tests.helpers.feed_builders import build_event, build_notification


def _body(**fields: object) -> bytes:
    return msgspec.json.encode(fields)


@pytest.fixture
def client() -> falcon.testing.TestClient:
    """Build a test client without private access by default."""
    return falcon.testing.TestClient(create_app(ColumnResourceDependencies()))


@pytest.fixture
def private_client() -> falcon.testing.TestClient:
    """Build a test client whose default grants private access."""
    deps = ColumnResourceDependencies(has_private_access=True)
    return falcon.testing.TestClient(create_app(deps))


class TestCreateApp:
    """Tests for create_app()."""

    def test_returns_falcon_app(self) -> None:
        """create_app() returns a Falcon ASGI App."""
        app = create_app(ColumnResourceDependencies())
        assert isinstance(app, falcon.asgi.App), "expected Falcon ASGI App"

    def test_reads_private_access_default_from_env(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without explicit dependencies the environment default applies."""
        monkeypatch.setenv("GHCOLUMNS_HAS_PRIVATE_ACCESS", "true")
        client = falcon.testing.TestClient(create_app())
        private = build_notification("n1", private=True)

        result = client.simulate_post(
            "/columns/notifications",
            body=_body(items=[private], filters={"private": True}),
        )

        assert result.json["count"] == 1, "expected private item with access"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            pytest.param("/health", {"status": "ok"}, id="health"),
            pytest.param("/ready", {"status": "ready"}, id="ready"),
        ],
    )
    def test_probe_routes(
        self,
        client: falcon.testing.TestClient,
        path: str,
        expected: dict[str, str],
    ) -> None:
        """Health and readiness probes answer with their status."""
        result = client.simulate_get(path)
        assert result.status == falcon.HTTP_200, f"expected HTTP 200 from {path}"
        assert result.json == expected, f"wrong {path} body"


class TestNotificationColumnResource:
    """Tests for POST /columns/notifications."""

    def test_filters_and_orders_items(self, client: falcon.testing.TestClient) -> None:
        """The response holds the filtered, ordered column."""
        items = [
            build_notification("read", updated=5),
            build_notification("unread", unread=True, updated=1),
            build_notification("read", updated=9),
        ]

        result = client.simulate_post(
            "/columns/notifications",
            body=_body(items=items, filters={"saved": False}),
        )

        assert result.status == falcon.HTTP_200, "expected HTTP 200"
        assert result.headers["content-type"].startswith("application/json")
        assert result.json["count"] == 2, "expected de-duplicated count"
        assert [item["id"] for item in result.json["items"]] == ["unread", "read"]

    @pytest.mark.parametrize(
        ("has_private_access", "expected_ids"),
        [
            pytest.param(None, ["public"], id="service_default"),
            pytest.param(True, ["private", "public"], id="explicit_access"),
        ],
    )
    def test_private_access_resolution(
        self,
        client: falcon.testing.TestClient,
        has_private_access: bool | None,
        expected_ids: list[str],
    ) -> None:
        """A request flag overrides the service default."""
        items = [
            build_notification("private", private=True, updated=2),
            build_notification("public", updated=1),
        ]
        body: dict[str, object] = {"items": items, "filters": {"private": False}}
        if has_private_access is not None:
            body = {**body, "filters": {}, "hasPrivateAccess": has_private_access}

        result = client.simulate_post(
            "/columns/notifications", body=msgspec.json.encode(body)
        )

        assert [item["id"] for item in result.json["items"]] == expected_ids

    def test_cleared_at_uses_wire_key(self, client: falcon.testing.TestClient) -> None:
        """clearedAt in the body hides older read notifications."""
        items = [
            build_notification("old", updated=0),
            build_notification("new", updated=30),
        ]

        result = client.simulate_post(
            "/columns/notifications",
            body=_body(items=items, filters={"clearedAt": "2099-01-01T00:10:00Z"}),
        )

        assert [item["id"] for item in result.json["items"]] == ["new"]


class TestActivityColumnResource:
    """Tests for POST /columns/events."""

    def test_private_events_withheld_without_access(
        self, client: falcon.testing.TestClient
    ) -> None:
        """Private events never reach a configured view without access."""
        items = [
            build_event("private", private=True, created=2),
            build_event("public", created=1),
        ]

        result = client.simulate_post(
            "/columns/events", body=_body(items=items, filters={})
        )

        assert [item["id"] for item in result.json["items"]] == ["public"]

    def test_missing_filters_leave_events_unfiltered(
        self, client: falcon.testing.TestClient
    ) -> None:
        """A body without filters only orders and merges the events."""
        items = [
            build_event("private", private=True, created=2),
            build_event("public", created=1),
        ]

        result = client.simulate_post("/columns/events", body=_body(items=items))

        assert [item["id"] for item in result.json["items"]] == ["private", "public"]

    def test_similar_events_are_merged(
        self, private_client: falcon.testing.TestClient
    ) -> None:
        """The default merge folds adjacent similar events."""
        items = [
            build_event("2", repo="octo/widgets", created=2),
            build_event("1", repo="octo/widgets", created=1),
        ]

        result = private_client.simulate_post(
            "/columns/events", body=_body(items=items)
        )

        assert result.json["count"] == 1, "expected one merged event"
        assert [merged["id"] for merged in result.json["items"][0]["merged"]] == ["1"]

    def test_injected_merge_is_used(self) -> None:
        """Dependencies can replace the merge strategy."""
        deps = ColumnResourceDependencies(
            has_private_access=True, merge_events=keep_events_unmerged
        )
        client = falcon.testing.TestClient(create_app(deps))
        items = [
            build_event("2", repo="octo/widgets", created=2),
            build_event("1", repo="octo/widgets", created=1),
        ]

        result = client.simulate_post("/columns/events", body=_body(items=items))

        assert result.json["count"] == 2, "expected events left unmerged"


class TestInvalidBodies:
    """Malformed requests map to HTTP 400."""

    @pytest.mark.parametrize(
        "path", ["/columns/notifications", "/columns/events"]
    )
    @pytest.mark.parametrize(
        "body",
        [
            pytest.param(b"", id="empty"),
            pytest.param(b"{not json", id="malformed"),
            pytest.param(b'{"items": {}}', id="items_not_array"),
            pytest.param(b'{"filters": {"saved": "yes"}}', id="bad_filter_value"),
        ],
    )
    def test_returns_400(
        self, client: falcon.testing.TestClient, path: str, body: bytes
    ) -> None:
        """Bodies that do not decode are rejected with a description."""
        result = client.simulate_post(path, body=body)

        assert result.status == falcon.HTTP_400, "expected HTTP 400"
        assert result.json["title"] == "Invalid input", "wrong title"
        assert result.json["description"], "missing description"
