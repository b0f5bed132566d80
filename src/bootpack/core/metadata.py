"""Spring Boot application metadata derived from the manifest."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from bootpack.core.manifest import read_manifest

DEFAULT_CLASSES = "BOOT-INF/classes/"
DEFAULT_LIB = "BOOT-INF/lib/"


@dataclass(frozen=True)
class ApplicationMetadata:
    """Facts about an exploded Spring Boot application.

    Attributes:
        classes: Application classes directory, relative to the root.
        classpath: Absolute classpath entries, classes directory first.
        lib: Dependency directory, relative to the root.
        start_class: Main class launched by the process command.
        version: Spring Boot version recorded in the manifest.
    """

    classes: str
    lib: str
    start_class: str
    version: str
    classpath: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the plan/layer metadata keys."""
        return {
            "classes": self.classes,
            "classpath": list(self.classpath),
            "lib": self.lib,
            "start-class": self.start_class,
            "version": self.version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApplicationMetadata":
        return cls(
            classes=data["classes"],
            lib=data["lib"],
            start_class=data["start-class"],
            version=data["version"],
            classpath=tuple(data.get("classpath", ())),
        )


def _classpath(root: Path, classes: str, lib: str) -> tuple[str, ...]:
    entries = [str(root / classes)]
    lib_dir = root / lib
    if lib_dir.is_dir():
        entries.extend(str(p) for p in sorted(lib_dir.glob("*.jar")))
    return tuple(entries)


def load_metadata(root: str | Path) -> ApplicationMetadata | None:
    """Build metadata from ``<root>/META-INF/MANIFEST.MF``.

    Returns None when there is no manifest or it carries no
    ``Spring-Boot-Version``. A malformed manifest raises ManifestError.
    """
    root = Path(root)
    manifest = read_manifest(root)
    if manifest is None:
        return None

    version = manifest.get("Spring-Boot-Version", "").strip()
    if not version:
        return None

    classes = manifest.get("Spring-Boot-Classes", "").strip() or DEFAULT_CLASSES
    lib = manifest.get("Spring-Boot-Lib", "").strip() or DEFAULT_LIB

    return ApplicationMetadata(
        classes=classes,
        lib=lib,
        start_class=manifest.get("Start-Class", "").strip(),
        version=version,
        classpath=_classpath(root, classes, lib),
    )
