"""Shared fixtures for unit tests."""

import pytest

from cmdparts.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from the caller's CMDPARTS_* environment."""
    monkeypatch.delenv("CMDPARTS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CMDPARTS_LOG_FORMAT", raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def write_yaml(tmp_path):
    """Write a YAML document to a temporary file and return its path."""

    def _write(content: str, name: str = "command.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
