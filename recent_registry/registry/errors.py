"""
Recent files error taxonomy.

All registry errors derive from RecentFilesError. None are retried;
each is terminal for the operation that raised it.
"""

from typing import Optional


class RecentFilesError(Exception):
    """Base class for registry failures."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class RecentFileNotFoundError(RecentFilesError):
    """Referenced path does not exist at insertion time."""
    pass


class RecentIoError(RecentFilesError):
    """Reading the record or a file's metadata failed."""
    pass


class CorruptStateError(RecentFilesError):
    """The record exists but cannot be parsed. Never treated as empty."""
    pass


class PersistError(RecentFilesError):
    """Writing the record back failed. The previous record is left intact."""
    pass


class TrackedIoError(RecentFilesError):
    """The primary file read/write failed. The registry was not touched."""
    pass


class RegistryUpdateError(RecentFilesError):
    """
    The primary file read/write succeeded but the registry update failed.

    The I/O is not rolled back. For tracked reads, `content` holds the
    text that was read.
    """

    def __init__(self, message: str, path: Optional[str] = None,
                 content: Optional[str] = None):
        super().__init__(message, path)
        self.content = content
