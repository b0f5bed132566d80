"""Partition an application's files into layering slices."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from bootpack.core.fs import walk

LAUNCH = "launch"
DEPENDENCY = "dependency"
SNAPSHOT = "snapshot"
APPLICATION = "application"
REMAINDER = "remainder"

# Consumers assemble layers in this order; never reorder.
SLICE_ORDER = (LAUNCH, DEPENDENCY, SNAPSHOT, APPLICATION, REMAINDER)


@dataclass
class Slice:
    """A named group of paths relative to the application root."""

    name: str
    paths: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "paths": list(self.paths)}


def _posix(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


class Slicer:
    """Classify files by their path relative to the application root.

    Rules are evaluated in a fixed order and the first match wins. When the
    classes and lib prefixes overlap, a path under both is an application
    file.
    """

    def __init__(self, classes: str, lib: str):
        self.classes = _posix(classes)
        self.lib = _posix(lib)

    def is_application(self, path: str) -> bool:
        return path.startswith(self.classes)

    def is_dependency(self, path: str) -> bool:
        return path.startswith(self.lib) and path.endswith(".jar") and "SNAPSHOT" not in path

    def is_launch(self, path: str) -> bool:
        return (
            not path.startswith(self.classes)
            and not path.startswith(self.lib)
            and not path.startswith("META-INF/")
        )

    def is_snapshot(self, path: str) -> bool:
        return path.startswith(self.lib) and path.endswith(".jar") and "SNAPSHOT" in path

    def classify(self, path: str) -> str:
        """Return the slice name for a relative path."""
        path = _posix(path)
        if self.is_application(path):
            return APPLICATION
        if self.is_dependency(path):
            return DEPENDENCY
        if self.is_launch(path):
            return LAUNCH
        if self.is_snapshot(path):
            return SNAPSHOT
        return REMAINDER

    def slice(self, root: str | Path) -> list[Slice]:
        """Walk ``root`` once and return the five slices in layering order."""
        slices = {name: Slice(name) for name in SLICE_ORDER}

        for rel in iter_files(root):
            slices[self.classify(rel)].paths.append(rel)

        return [slices[name] for name in SLICE_ORDER]


def iter_files(root: str | Path):
    """Yield regular files under ``root`` as native relative paths, sorted."""
    root = str(root)
    for dirpath, dirnames, filenames in walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            full = os.path.join(dirpath, name)
            # os.walk lists broken symlinks and sockets as files
            if not os.path.isfile(full):
                continue
            yield os.path.relpath(full, root)


def compute_slices(root: str | Path, classes: str, lib: str) -> list[Slice]:
    """Slice every file under ``root`` given the classes and lib prefixes."""
    return Slicer(classes, lib).slice(root)
