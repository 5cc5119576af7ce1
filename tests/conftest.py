"""Pytest configuration - isolate the app data dir and provide fixtures.

Every test gets its own RECENT_REGISTRY_DATA_DIR so nothing ever touches
the real per-user recent files record.
"""
from __future__ import annotations

from pathlib import Path
import pytest

from recent_registry.registry import RecentFilesStore


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the default app data dir at a temp directory."""
    data_dir = tmp_path / "appdata"
    monkeypatch.setenv("RECENT_REGISTRY_DATA_DIR", str(data_dir))
    return data_dir


@pytest.fixture
def files_dir(tmp_path):
    """Directory holding the documents being tracked."""
    d = tmp_path / "docs"
    d.mkdir()
    return d


@pytest.fixture
def make_file(files_dir):
    """Create a document and return its path as a string."""
    def _make(name: str, content: str = "data") -> str:
        p = files_dir / name
        p.write_text(content, encoding="utf-8")
        return str(p)
    return _make


@pytest.fixture
def record_path(isolated_data_dir) -> Path:
    return isolated_data_dir / "recent_files.json"


@pytest.fixture
def store(record_path):
    return RecentFilesStore(record_path)
