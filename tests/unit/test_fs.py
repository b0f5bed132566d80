"""Unit tests for directory walking."""

import pytest
from bootpack.core.fs import walk


class TestWalk:
    def test_prunable(self, tmp_path):
        (tmp_path / "keep").mkdir()
        (tmp_path / "skip").mkdir()
        (tmp_path / "skip" / "inner").mkdir()

        seen = []
        for dirpath, dirnames, _ in walk(tmp_path):
            dirnames[:] = [d for d in dirnames if d != "skip"]
            seen.append(dirpath)

        assert sorted(seen) == [str(tmp_path), str(tmp_path / "keep")]

    def test_unreadable_directory_raises(self, tmp_path, deny_directory):
        (tmp_path / "locked").mkdir()
        deny_directory(tmp_path / "locked")
        with pytest.raises(PermissionError):
            list(walk(tmp_path))

    def test_unreadable_root_raises(self, tmp_path, deny_directory):
        deny_directory(tmp_path)
        with pytest.raises(PermissionError):
            list(walk(tmp_path))
