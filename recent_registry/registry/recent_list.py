"""
In-memory MRU list of recent files.

Pure data structure: nothing here touches the record on disk.
Front (index 0) is always the most recently used entry.
"""

import os
from typing import Callable, Iterable, List, Optional

from recent_registry.config import MAX_RECENT
from .entry import RecentFile


def _dedup(files: Iterable[RecentFile]) -> List[RecentFile]:
    # First occurrence wins: earlier means more recent
    seen = set()
    out = []
    for f in files:
        if f.location in seen:
            continue
        seen.add(f.location)
        out.append(f)
    return out


class RecentFilesData:
    """
    Bounded, deduplicated MRU list.

    Invariants:
    - len(files) <= max_recent
    - locations are pairwise distinct (exact string equality)
    - order is most recently added/touched first
    """

    def __init__(self, files: Optional[Iterable[RecentFile]] = None,
                 max_recent: int = MAX_RECENT):
        if max_recent < 1:
            raise ValueError(f"max_recent must be >= 1, got {max_recent}")
        self.max_recent = max_recent
        self._files = _dedup(files or ())
        del self._files[max_recent:]

    @classmethod
    def from_stored(cls, files: Iterable[RecentFile], max_recent: int = MAX_RECENT,
                    exists: Callable[[str], bool] = os.path.exists) -> "RecentFilesData":
        """
        Rebuild a list read back from disk.

        Missing targets are dropped before capping, so stale entries never
        push live ones past max_recent.
        """
        data = cls(max_recent=max_recent)
        data._files = [f for f in _dedup(files) if exists(f.location)][:max_recent]
        return data

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self):
        return iter(self._files)

    def add_file(self, recent_file: RecentFile) -> None:
        """Add to front, replacing any entry with the same location, then cap."""
        self._files = [f for f in self._files if f.location != recent_file.location]
        self._files.insert(0, recent_file)
        del self._files[self.max_recent:]

    def remove_file(self, location: str) -> bool:
        """Remove the entry for location. Returns False if it was absent."""
        before = len(self._files)
        self._files = [f for f in self._files if f.location != location]
        return len(self._files) != before

    def cleanup_nonexistent_files(self, exists: Callable[[str], bool] = os.path.exists) -> int:
        """Drop entries whose target no longer exists. Returns number dropped."""
        before = len(self._files)
        self._files = [f for f in self._files if exists(f.location)]
        return before - len(self._files)

    def get_files(self) -> List[RecentFile]:
        """Snapshot of the entries, most recent first."""
        return list(self._files)

    def locations(self) -> List[str]:
        return [f.location for f in self._files]
