"""Shared fixtures."""

import os

import pytest


@pytest.fixture
def deny_directory(monkeypatch):
    """Make listing the given directories fail with PermissionError.

    Use with tmp_path so cleanup runs after the patch is undone.
    """
    real_scandir = os.scandir
    blocked: set[str] = set()

    def scandir(path="."):
        if not isinstance(path, int) and os.path.normpath(os.fspath(path)) in blocked:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    def deny(path) -> None:
        blocked.add(os.path.normpath(os.fspath(path)))

    return deny
