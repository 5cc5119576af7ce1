"""
Recent files store - load/persist the record and run full-cycle operations.

Every public operation reloads the record from disk, mutates it in memory
and rewrites the whole record before returning. Cycles against the same
record path are serialized by a process-wide per-path lock, so independent
store instances never lose each other's updates.
"""

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from recent_registry.config import MAX_RECENT, RECENT_FILES_VERSION
from recent_registry.utils.app_paths import get_recent_files_path
from recent_registry.utils.logger import logger
from .entry import RecentFile
from .errors import (
    CorruptStateError,
    PersistError,
    RecentFileNotFoundError,
    RecentFilesError,
    RecentIoError,
    RegistryUpdateError,
    TrackedIoError,
)
from .recent_list import RecentFilesData


_path_locks: Dict[str, threading.Lock] = {}
_path_locks_guard = threading.Lock()


def lock_for_path(path: Path) -> threading.Lock:
    """Return the single-writer lock shared by every store using this record path."""
    key = os.path.normcase(str(path))
    with _path_locks_guard:
        lock = _path_locks.get(key)
        if lock is None:
            lock = _path_locks[key] = threading.Lock()
        return lock


class RecentFilesStore:
    """
    Durable binding of the recent files list.

    Usage:
        store = RecentFilesStore()          # <app data dir>/recent_files.json
        store.add_or_touch("/docs/plan.txt", preview="Q3 plan")
        for f in store.list():
            print(f.identifier, f.location)
    """

    def __init__(self, path: Optional[Path] = None, max_recent: int = MAX_RECENT):
        if max_recent < 1:
            raise ValueError(f"max_recent must be >= 1, got {max_recent}")
        if path is None:
            path = get_recent_files_path()
        self.path = Path(path).expanduser().resolve()
        self.max_recent = max_recent
        self._lock = lock_for_path(self.path)

    # -------------------------------------------------------------------------
    # Load / persist
    # -------------------------------------------------------------------------

    def read(self) -> RecentFilesData:
        """
        Load the record and drop entries whose target no longer exists.

        Missing record: empty list.

        Raises:
            RecentIoError: If the record cannot be read
            CorruptStateError: If the record exists but cannot be parsed
        """
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return RecentFilesData(max_recent=self.max_recent)
        except OSError as e:
            logger.error("Failed to read recent files", component="STORE", details=str(e))
            raise RecentIoError(f"Failed to read recent files: {e}", str(self.path)) from e

        try:
            files = self._parse(raw)
        except (ValueError, TypeError) as e:
            logger.error("Recent files record is corrupt", component="STORE",
                         details=f"{self.path}: {e}")
            raise CorruptStateError(
                f"Recent files record is corrupt: {e}", str(self.path)
            ) from e

        data = RecentFilesData.from_stored(files, max_recent=self.max_recent)
        dropped = len(files) - len(data)
        if dropped:
            logger.recent(f"Dropped {dropped} stale or duplicate entries", details=str(self.path))
        return data

    def _parse(self, raw: bytes) -> List[RecentFile]:
        payload = json.loads(raw.decode("utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Expected an object, got {type(payload).__name__}")

        version = payload.get("version", RECENT_FILES_VERSION)
        if isinstance(version, bool) or not isinstance(version, int):
            raise ValueError(f"Invalid version: {version!r}")
        if version > RECENT_FILES_VERSION:
            raise ValueError(f"Unsupported version {version} (max {RECENT_FILES_VERSION})")

        files = payload.get("files")
        if not isinstance(files, list):
            raise ValueError("Missing 'files' list")
        return [RecentFile.from_dict(item) for item in files]

    def write(self, data: RecentFilesData) -> None:
        """
        Replace the whole record atomically.

        The record is written to a temp file in the same directory, then
        committed with os.replace. Readers see either the old or the new
        record, never a partial one.

        Raises:
            PersistError: If the directory or record cannot be written
        """
        payload = {
            "version": RECENT_FILES_VERSION,
            "files": [f.to_dict() for f in data],
        }
        json_str = json.dumps(payload, indent=2)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                suffix='.tmp',
                prefix='.recent_files_',
                dir=self.path.parent
            )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(json_str)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(temp_path, self.path)
            except Exception:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise
        except (OSError, UnicodeError) as e:
            logger.error("Failed to save recent files", component="STORE", details=str(e))
            raise PersistError(f"Failed to save recent files: {e}", str(self.path)) from e

        logger.store(f"Wrote {len(data)} recent file(s)", details=str(self.path))

    @contextmanager
    def transaction(self) -> Iterator[RecentFilesData]:
        """
        Hold the path lock across load -> mutate -> persist.

        The record is only rewritten if the block exits without error.
        """
        with self._lock:
            data = self.read()
            yield data
            self.write(data)

    # -------------------------------------------------------------------------
    # Full-cycle operations
    # -------------------------------------------------------------------------

    def list(self) -> List[RecentFile]:
        """Current entries, most recent first. Cleanup is not written back."""
        with self._lock:
            return self.read().get_files()

    get_all = list

    def add_or_touch(self, location: str, preview: Optional[str] = None) -> None:
        """
        Add location to the front of the list, or move it there.

        Raises:
            RecentFileNotFoundError: If location does not exist
            RecentIoError: If its metadata or the record cannot be read
            CorruptStateError: If the record cannot be parsed
            PersistError: If the record cannot be written
        """
        if not os.path.exists(location):
            raise RecentFileNotFoundError(f"File does not exist: {location}", location)
        try:
            recent_file = RecentFile.from_path(location, preview)
        except OSError as e:
            raise RecentIoError(f"Failed to read file metadata: {e}", location) from e

        with self.transaction() as data:
            data.add_file(recent_file)
        logger.recent("Added recent file", details=location)

    def remove(self, location: str) -> None:
        """Remove location if present. Absent locations are not an error."""
        with self.transaction() as data:
            removed = data.remove_file(location)
        if removed:
            logger.recent("Removed recent file", details=location)

    def clear(self) -> None:
        """Persist an empty list without loading the current record."""
        with self._lock:
            self.write(RecentFilesData(max_recent=self.max_recent))
        logger.info("Cleared recent files", component="RECENT")

    def prune(self) -> int:
        """Write back the cleaned list. Returns how many entries were dropped."""
        with self._lock:
            before = self._count_stored()
            data = self.read()
            self.write(data)
        dropped = max(before - len(data), 0)
        if dropped:
            logger.info(f"Pruned {dropped} recent file(s)", component="RECENT")
        return dropped

    def _count_stored(self) -> int:
        """Number of entries in the raw record, before cleanup and capping."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return 0
        except OSError as e:
            raise RecentIoError(f"Failed to read recent files: {e}", str(self.path)) from e
        try:
            return len(self._parse(raw))
        except (ValueError, TypeError) as e:
            raise CorruptStateError(
                f"Recent files record is corrupt: {e}", str(self.path)
            ) from e

    # -------------------------------------------------------------------------
    # Tracked file access
    # -------------------------------------------------------------------------

    def tracked_write(self, content: str, location: str) -> None:
        """
        Write content to location, then record it as recent.

        Raises:
            TrackedIoError: If the write failed (registry untouched)
            RegistryUpdateError: If the write succeeded but the registry update failed
        """
        try:
            with open(location, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            logger.error("Failed to write file", component="RECENT", details=str(e))
            raise TrackedIoError(f"Failed to write file: {e}", location) from e
        self._track(location)

    def tracked_read(self, location: str) -> str:
        """
        Read location as text, then record it as recent.

        Raises:
            TrackedIoError: If the read failed (registry untouched)
            RegistryUpdateError: If the read succeeded but the registry update
                failed; the text is available as the error's `content`
        """
        try:
            with open(location, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read file", component="RECENT", details=str(e))
            raise TrackedIoError(f"Failed to read file: {e}", location) from e
        self._track(location, content)
        return content

    def _track(self, location: str, content: Optional[str] = None) -> None:
        try:
            self.add_or_touch(location)
        except RecentFilesError as e:
            logger.warning("Failed to add to recent files", component="RECENT", details=str(e))
            raise RegistryUpdateError(
                f"Failed to add to recent files: {e}", location, content=content
            ) from e
