"""Shared pytest fixtures for schema-tour tests."""

import os
from typing import Any

import pytest

from core import samples
from core.config import AppSettings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep user/project .env files and SCHEMA_TOUR_* variables out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SCHEMA_TOUR_"):
            monkeypatch.delenv(key)


@pytest.fixture
def user_data() -> dict[str, Any]:
    """A valid user payload (camelCase keys)."""
    return samples.sample_user()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()
