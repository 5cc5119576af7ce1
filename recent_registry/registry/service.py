"""
Async facade over RecentFilesStore for host applications.

Each call runs one whole load -> mutate -> persist cycle in a worker
thread, so the event loop never blocks on filesystem I/O. Cycles for the
same record path are serialized by the store's path lock.
"""

import asyncio
from pathlib import Path
from typing import List, Optional

from recent_registry.config import MAX_RECENT
from .entry import RecentFile
from .store import RecentFilesStore


class RecentRegistry:
    """
    Host-facing recent files operations.

    Usage:
        registry = RecentRegistry()
        content = await registry.tracked_read("/docs/board.json")
        files = await registry.list()
    """

    def __init__(self, store: Optional[RecentFilesStore] = None, *,
                 path: Optional[Path] = None, max_recent: int = MAX_RECENT):
        self.store = store if store is not None else RecentFilesStore(path, max_recent=max_recent)

    async def list(self) -> List[RecentFile]:
        return await asyncio.to_thread(self.store.list)

    get_all = list

    async def add_or_touch(self, location: str, preview: Optional[str] = None) -> None:
        await asyncio.to_thread(self.store.add_or_touch, location, preview)

    async def remove(self, location: str) -> None:
        await asyncio.to_thread(self.store.remove, location)

    async def clear(self) -> None:
        await asyncio.to_thread(self.store.clear)

    async def prune(self) -> int:
        return await asyncio.to_thread(self.store.prune)

    async def tracked_write(self, content: str, location: str) -> None:
        await asyncio.to_thread(self.store.tracked_write, content, location)

    async def tracked_read(self, location: str) -> str:
        return await asyncio.to_thread(self.store.tracked_read, location)
