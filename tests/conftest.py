"""
conftest.py
-----------
Shared pytest fixtures for the blog tests.

Provides fixtures for:
- Temporary entries directories and an entry writer
- A Flask test client pointed at the temporary directory
- Deterministic creation times
"""
import os

import pytest

import entries
from app import app


# ----- Filesystem Fixtures -----

@pytest.fixture
def entries_dir(tmp_path):
    """Empty entries directory."""
    path = tmp_path / "entries"
    path.mkdir()
    return path


@pytest.fixture
def write_entry(entries_dir):
    """Write a markdown file into the entries directory."""
    def _write(name, content):
        path = entries_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


# ----- Timestamp Fixtures -----

@pytest.fixture
def creation_times(monkeypatch):
    """
    Map of filename -> creation time used instead of the filesystem.

    Not every platform exposes a birth time, so tests assign them here.
    """
    times = {}

    def fake_created_at(path, mtime_fallback=False):
        return times[os.path.basename(path)]

    monkeypatch.setattr(entries, "created_at", fake_created_at)
    return times


# ----- App Fixtures -----

@pytest.fixture
def client(entries_dir):
    """Flask test client reading entries from the temporary directory."""
    saved = dict(app.config)
    app.config.update(TESTING=True, ENTRIES_DIR=str(entries_dir))
    with app.test_client() as client:
        yield client
    app.config.clear()
    app.config.update(saved)
