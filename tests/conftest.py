"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import os

import pytest

_ENV_PREFIX = "HOOKWARDEN_"


@pytest.fixture(autouse=True)
def _isolate_hookwarden_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop ambient ``HOOKWARDEN_*`` settings so tests start from defaults."""
    for name in [key for key in os.environ if key.startswith(_ENV_PREFIX)]:
        monkeypatch.delenv(name)
