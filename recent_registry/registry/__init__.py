"""
Registry module - bounded MRU list of recent files, persisted to disk.
"""

from .entry import RecentFile, format_timestamp, parse_timestamp

from .errors import (
    RecentFilesError,
    RecentFileNotFoundError,
    RecentIoError,
    CorruptStateError,
    PersistError,
    TrackedIoError,
    RegistryUpdateError,
)

from .recent_list import RecentFilesData
from .store import RecentFilesStore, lock_for_path
from .service import RecentRegistry

__all__ = [
    "RecentFile",
    "format_timestamp",
    "parse_timestamp",
    "RecentFilesError",
    "RecentFileNotFoundError",
    "RecentIoError",
    "CorruptStateError",
    "PersistError",
    "TrackedIoError",
    "RegistryUpdateError",
    "RecentFilesData",
    "RecentFilesStore",
    "lock_for_path",
    "RecentRegistry",
]
