"""JAR dependency model and the per-entry probe used by the scanner."""

import hashlib
import re
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from bootpack.logging.build_logger import BuildLogger

ZIP_SIGNATURE = b"PK\x03\x04"

# <artifact>-<version>.jar, where the version starts at the first "-<digit>"
_FILENAME_PATTERN = re.compile(r"^(?P<artifact>.+?)-(?P<version>\d[^/]*)\.jar$")


@dataclass(frozen=True)
class JARDependency:
    """A single JAR found under the application's lib directory.

    Coordinates are None when they cannot be determined. ``exploded`` marks
    a directory named like a JAR rather than an archive file.
    """

    path: str
    group: str | None = None
    artifact: str | None = None
    version: str | None = None
    sha256: str | None = None
    exploded: bool = False

    def sort_key(self) -> tuple:
        # None sorts ahead of any value
        return (
            (self.group is not None, self.group or ""),
            (self.artifact is not None, self.artifact or ""),
            (self.version is not None, self.version or ""),
            self.path,
        )

    def __lt__(self, other: "JARDependency") -> bool:
        return self.sort_key() < other.sort_key()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "path": self.path,
            "group": self.group,
            "artifact": self.artifact,
            "version": self.version,
            "sha256": self.sha256,
            "exploded": self.exploded,
        }


JARDependencies = list[JARDependency]


def parse_filename(name: str) -> tuple[str | None, str | None]:
    """Split ``spring-core-5.2.3.RELEASE.jar`` into artifact and version."""
    match = _FILENAME_PATTERN.match(name)
    if not match:
        return None, None
    return match.group("artifact"), match.group("version")


def parse_pom_properties(text: str) -> dict[str, str]:
    """Parse the ``key=value`` lines of a Maven pom.properties file."""
    properties: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith(("#", "!")):
            continue
        key, sep, value = line.partition("=")
        if sep:
            properties[key.strip()] = value.strip()
    return properties


def _select_pom(candidates: list[dict[str, str]], artifact_hint: str | None) -> dict[str, str] | None:
    if not candidates:
        return None
    if len(candidates) == 1:
        return candidates[0]
    # Shaded jars embed several poms; prefer the one named like the file
    for props in candidates:
        if artifact_hint and props.get("artifactId") == artifact_hint:
            return props
    return None


def _archive_poms(path: Path) -> list[dict[str, str]]:
    poms = []
    try:
        with zipfile.ZipFile(path) as archive:
            for info in archive.infolist():
                name = PurePosixPath(info.filename)
                if name.name == "pom.properties" and name.parts[:2] == ("META-INF", "maven"):
                    poms.append(parse_pom_properties(archive.read(info).decode("utf-8", errors="replace")))
    except zipfile.BadZipFile:
        # A valid local header followed by a broken central directory
        return []
    return poms


def _exploded_poms(path: Path) -> list[dict[str, str]]:
    maven = path / "META-INF" / "maven"
    if not maven.is_dir():
        return []
    return [
        parse_pom_properties(p.read_text(encoding="utf-8", errors="replace"))
        for p in sorted(maven.glob("*/*/pom.properties"))
    ]


def _sha256(path: Path) -> str:
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def is_archive(path: Path) -> bool:
    """Check for the ZIP local file header signature."""
    with open(path, "rb") as f:
        return f.read(len(ZIP_SIGNATURE)) == ZIP_SIGNATURE


def probe_jar(path: str | Path, logger: BuildLogger | None = None) -> JARDependency | None:
    """Turn a filesystem entry into a JARDependency.

    Returns None for entries that are not JARs. I/O errors propagate.
    """
    path = Path(path)
    if path.suffix != ".jar":
        return None

    artifact, version = parse_filename(path.name)

    if path.is_dir():
        poms = _exploded_poms(path)
        exploded, digest = True, None
    elif path.is_file():
        if not is_archive(path):
            if logger:
                logger.debug(f"Skipping {path}: not a zip archive", path=str(path))
            return None
        poms = _archive_poms(path)
        exploded, digest = False, _sha256(path)
    else:
        return None

    group = None
    pom = _select_pom(poms, artifact)
    if pom:
        group = pom.get("groupId") or None
        artifact = pom.get("artifactId") or artifact
        version = pom.get("version") or version

    return JARDependency(
        path=str(path),
        group=group,
        artifact=artifact,
        version=version,
        sha256=digest,
        exploded=exploded,
    )
