"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_ghcolumns_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide any ``GHCOLUMNS_*`` settings from the developer's shell."""
    for name in list(os.environ):
        if name.startswith("GHCOLUMNS_"):
            monkeypatch.delenv(name)
