"""
Tests for the in-memory MRU list (recent_registry/registry/recent_list.py)
"""

from datetime import datetime, timezone

import pytest

from recent_registry.config import MAX_RECENT
from recent_registry.registry.entry import RecentFile
from recent_registry.registry.recent_list import RecentFilesData

T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def entry(location, preview=None):
    return RecentFile(location.rsplit("/", 1)[-1], location, T0, preview)


class TestAddFile:
    """Add-or-touch: dedup, move to front, evict oldest."""

    def test_add_to_empty(self):
        data = RecentFilesData()
        data.add_file(entry("/a.txt"))
        assert data.locations() == ["/a.txt"]

    def test_newest_first(self):
        data = RecentFilesData()
        data.add_file(entry("/a.txt"))
        data.add_file(entry("/b.txt"))
        assert data.locations() == ["/b.txt", "/a.txt"]

    def test_re_add_moves_to_front_without_duplicate(self):
        """A, B, A -> [A, B]."""
        data = RecentFilesData()
        for loc in ("/a.txt", "/b.txt", "/a.txt"):
            data.add_file(entry(loc))
        assert data.locations() == ["/a.txt", "/b.txt"]

    def test_re_add_replaces_entry_fields(self):
        data = RecentFilesData()
        data.add_file(entry("/a.txt", preview="old"))
        data.add_file(entry("/a.txt", preview="new"))
        assert len(data) == 1
        assert data.get_files()[0].preview == "new"

    def test_eleven_adds_evict_oldest(self):
        data = RecentFilesData()
        locs = [f"/f{i}.txt" for i in range(11)]
        for loc in locs:
            data.add_file(entry(loc))
        assert len(data) == MAX_RECENT
        assert data.locations() == list(reversed(locs[1:]))
        assert "/f0.txt" not in data.locations()

    def test_invariants_hold_for_long_sequence(self):
        data = RecentFilesData()
        for i in range(100):
            data.add_file(entry(f"/f{(i * 7) % 13}.txt"))
            locs = data.locations()
            assert len(locs) <= MAX_RECENT
            assert len(set(locs)) == len(locs)
            assert locs[0] == f"/f{(i * 7) % 13}.txt"

    def test_capacity_one_keeps_latest(self):
        data = RecentFilesData(max_recent=1)
        data.add_file(entry("/a.txt"))
        data.add_file(entry("/b.txt"))
        assert data.locations() == ["/b.txt"]

    def test_capacity_must_be_positive(self):
        with pytest.raises(ValueError):
            RecentFilesData(max_recent=0)

    def test_exact_string_match_only(self):
        """Locations are compared as strings; no path normalisation."""
        data = RecentFilesData()
        data.add_file(entry("/a.txt"))
        data.add_file(entry("//a.txt"))
        assert data.locations() == ["//a.txt", "/a.txt"]


class TestRemoveFile:

    def test_remove_keeps_order(self):
        data = RecentFilesData([entry("/a"), entry("/b"), entry("/c")])
        assert data.remove_file("/b") is True
        assert data.locations() == ["/a", "/c"]

    def test_remove_absent_is_noop(self):
        data = RecentFilesData([entry("/a")])
        assert data.remove_file("/zzz") is False
        assert data.locations() == ["/a"]

    def test_remove_twice_same_as_once(self):
        data = RecentFilesData([entry("/a"), entry("/b")])
        data.remove_file("/a")
        once = data.get_files()
        data.remove_file("/a")
        assert data.get_files() == once


class TestConstructionAndCleanup:

    def test_duplicates_collapse_to_first(self):
        data = RecentFilesData([entry("/a", "first"), entry("/b"), entry("/a", "second")])
        assert data.locations() == ["/a", "/b"]
        assert data.get_files()[0].preview == "first"

    def test_construction_caps_length(self):
        data = RecentFilesData([entry(f"/f{i}") for i in range(15)])
        assert len(data) == MAX_RECENT
        assert data.locations()[0] == "/f0"

    def test_cleanup_drops_missing_preserving_order(self):
        data = RecentFilesData([entry("/a"), entry("/gone"), entry("/b")])
        dropped = data.cleanup_nonexistent_files(exists=lambda p: p != "/gone")
        assert dropped == 1
        assert data.locations() == ["/a", "/b"]

    def test_cleanup_against_filesystem(self, make_file, files_dir):
        kept = make_file("kept.txt")
        data = RecentFilesData([entry(kept), entry(str(files_dir / "missing.txt"))])
        assert data.cleanup_nonexistent_files() == 1
        assert data.locations() == [kept]

    def test_from_stored_cleans_before_capping(self):
        """Stale entries at the front never push live ones past capacity."""
        stale = [entry(f"/gone{i}") for i in range(3)]
        live = [entry(f"/live{i}") for i in range(MAX_RECENT)]

        data = RecentFilesData.from_stored(
            stale + live, exists=lambda p: p.startswith("/live"))

        assert data.locations() == [f"/live{i}" for i in range(MAX_RECENT)]

    def test_from_stored_dedups_then_caps(self):
        files = [entry("/a", "first"), entry("/a", "second")]
        files += [entry(f"/f{i}") for i in range(15)]
        data = RecentFilesData.from_stored(files, max_recent=3, exists=lambda p: True)
        assert data.locations() == ["/a", "/f0", "/f1"]
        assert data.get_files()[0].preview == "first"

    def test_get_files_is_a_copy(self):
        data = RecentFilesData([entry("/a")])
        files = data.get_files()
        files.clear()
        assert len(data) == 1
