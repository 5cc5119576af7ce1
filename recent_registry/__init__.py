"""
Recent Registry - most-recently-used file list for host applications.
"""

from .registry import (
    RecentFile,
    RecentFilesStore,
    RecentRegistry,
    RecentFilesError,
    RecentFileNotFoundError,
    RecentIoError,
    CorruptStateError,
    PersistError,
    TrackedIoError,
    RegistryUpdateError,
)

__version__ = "0.1.0"

__all__ = [
    "RecentFile",
    "RecentFilesStore",
    "RecentRegistry",
    "RecentFilesError",
    "RecentFileNotFoundError",
    "RecentIoError",
    "CorruptStateError",
    "PersistError",
    "TrackedIoError",
    "RegistryUpdateError",
]
