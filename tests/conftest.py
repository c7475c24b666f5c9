"""
Root conftest.py — Shared fixtures for all tests.
"""

import os
from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_pigeon_env(monkeypatch):
    """Remove any PIGEON_* variables inherited from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("PIGEON_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """An empty working directory for project-level config files."""
    d = tmp_path / "project"
    d.mkdir()
    monkeypatch.chdir(d)
    return d


@pytest.fixture
def home_dir(tmp_path, monkeypatch):
    """An empty home directory; ~/.pigeon lives under it."""
    d = tmp_path / "home"
    d.mkdir()
    monkeypatch.setenv("HOME", str(d))
    monkeypatch.setenv("USERPROFILE", str(d))
    return d


@pytest.fixture
def isolated(project_dir, home_dir):
    """Working directory and home directory both empty."""
    return project_dir, home_dir


@pytest.fixture
def write_file():
    """Write text to a path, creating parent directories."""
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def restore_environ():
    """Undo process environment changes made by dotenv loading."""
    saved = dict(os.environ)
    yield os.environ
    os.environ.clear()
    os.environ.update(saved)
