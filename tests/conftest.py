"""Shared pytest fixtures for text-inserts tests."""

from pathlib import Path

import pytest

GREET_FILE = """\
prefix
// greet: say hello
old text
// greet:end
suffix
"""


@pytest.fixture
def tagged_file(tmp_path):
    """Factory fixture writing a UTF-8 file and returning its path."""

    def _create(content: str = GREET_FILE, name: str = "source.swift") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _create


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with no config files, no TEXT_INSERTS_* env vars, and CWD in tmp_path."""
    for key in (
        "TEXT_INSERTS_CONFIG",
        "TEXT_INSERTS_TAG_PREFIX",
        "TEXT_INSERTS_ENCODING",
        "TEXT_INSERTS_DEBUG",
        "TEXT_INSERTS_LOG_FILE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path
