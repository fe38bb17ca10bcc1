"""Shared fixtures for partsplit tests."""

import os

import pytest


@pytest.fixture
def make_file(tmp_path):
    def _make(content, name="input.bin"):
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def sample_bytes():
    return os.urandom(100_003)


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr("partsplit.client.LOG_DIR", str(tmp_path / "logs"))
