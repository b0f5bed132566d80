"""Layer directories, environment files and launch metadata."""

import json
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable

from bootpack.slices.slicer import Slice

BUILD = "build"
CACHE = "cache"
LAUNCH = "launch"


@dataclass
class Process:
    """A launchable process type."""

    type: str
    command: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "command": self.command}


@dataclass
class LaunchMetadata:
    """Application-level launch metadata: processes and slices."""

    processes: list[Process] = field(default_factory=list)
    slices: list[Slice] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "processes": [p.to_dict() for p in self.processes],
            "slices": [s.to_dict() for s in self.slices],
        }


class Layer:
    """A single named layer under the layers root.

    Files written:
      - {root}/{name}/: layer contents, including env/ and env.launch/
      - {root}/{name}.json: flags and metadata
    """

    def __init__(self, layers_root: Path, name: str):
        self.name = name
        self.root = layers_root / name
        self.metadata_path = layers_root / f"{name}.json"

    def contribute(
        self,
        metadata: dict[str, Any],
        contributor: Callable[["Layer"], None],
        *flags: str,
    ) -> None:
        """Recreate the layer, run ``contributor`` on it, then record metadata."""
        if self.root.exists():
            shutil.rmtree(self.root)
        self.root.mkdir(parents=True)

        contributor(self)

        self.metadata_path.write_text(json.dumps({
            "build": BUILD in flags,
            "cache": CACHE in flags,
            "launch": LAUNCH in flags,
            "metadata": metadata,
        }, indent=2))

    def read_metadata(self) -> dict[str, Any] | None:
        if not self.metadata_path.exists():
            return None
        return json.loads(self.metadata_path.read_text())

    def _write_env(self, directory: str, filename: str, value: str) -> Path:
        env_dir = self.root / directory
        env_dir.mkdir(parents=True, exist_ok=True)
        path = env_dir / filename
        path.write_text(value)
        return path

    def prepend_path_shared_env(self, name: str, value: str) -> None:
        """Prepend to a path-like variable at build and launch time."""
        self._write_env("env", f"{name}.prepend", value)
        self._write_env("env", f"{name}.delim", os.pathsep)

    def append_launch_env(self, name: str, value: str) -> None:
        """Append to a variable at launch time only."""
        self._write_env("env.launch", f"{name}.append", value)


class Layers:
    """Root directory holding every layer and the launch metadata."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    @property
    def launch_metadata_path(self) -> Path:
        return self.root / "launch.json"

    def layer(self, name: str) -> Layer:
        return Layer(self.root, name)

    def write_application_metadata(self, metadata: LaunchMetadata) -> None:
        """Write launch.json. Called last so failures never leave it half-built."""
        self.root.mkdir(parents=True, exist_ok=True)
        self.launch_metadata_path.write_text(json.dumps(metadata.to_dict(), indent=2))

    def read_application_metadata(self) -> dict[str, Any] | None:
        if not self.launch_metadata_path.exists():
            return None
        return json.loads(self.launch_metadata_path.read_text())
