"""Filesystem walking shared by the scanners."""

import os
from pathlib import Path
from typing import Iterator


def _raise(error: OSError) -> None:
    raise error


def walk(root: str | Path) -> Iterator[tuple[str, list[str], list[str]]]:
    """``os.walk`` that raises on unreadable directories instead of skipping them.

    Callers may prune or reorder ``dirnames`` in place, as with ``os.walk``.
    """
    return os.walk(str(root), onerror=_raise)
