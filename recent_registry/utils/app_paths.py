"""App path helpers (cross-platform).

SSOT for the registry's private data paths.

Environment overrides (useful for portable/dev launches):
- RECENT_REGISTRY_DATA_DIR: base dir containing recent_files.json
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

from recent_registry.config import APP_NAME, ENV_DATA_DIR, RECENT_FILES_FILENAME


def _env_path(name: str) -> Path | None:
    v = os.environ.get(name)
    if not v:
        return None
    return Path(os.path.expanduser(v)).resolve()


def get_app_data_dir() -> Path:
    """Base app data dir. Not created here; the store creates it on first write."""
    data_dir = _env_path(ENV_DATA_DIR)
    if data_dir is not None:
        return data_dir
    return Path(user_data_dir(APP_NAME, appauthor=False, roaming=True)).resolve()


def get_recent_files_path(data_dir: Path | None = None) -> Path:
    base = Path(data_dir).expanduser().resolve() if data_dir is not None else get_app_data_dir()
    return base / RECENT_FILES_FILENAME
