"""JAR manifest (META-INF/MANIFEST.MF) parsing."""

from pathlib import Path

MANIFEST_PATH = Path("META-INF") / "MANIFEST.MF"


class ManifestError(ValueError):
    """Raised when a manifest is present but malformed."""


def parse_manifest(text: str) -> dict[str, str]:
    """Parse the main section of a JAR manifest.

    Attributes are ``Name: value`` lines. A line starting with a single
    space continues the previous value. The main section ends at the first
    blank line; per-entry sections after it are ignored.
    """
    attributes: dict[str, str] = {}
    current: str | None = None

    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            if attributes:
                break
            continue

        if line.startswith(" "):
            if current is None:
                raise ManifestError(f"Line {number}: continuation without an attribute")
            attributes[current] += line[1:]
            continue

        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            raise ManifestError(f"Line {number}: expected 'Name: value', got {line!r}")

        current = name.strip()
        # values may be wrapped mid-word, so only the separator space is dropped
        attributes[current] = value[1:] if value.startswith(" ") else value

    return attributes


def read_manifest(root: str | Path) -> dict[str, str] | None:
    """Read ``<root>/META-INF/MANIFEST.MF``; None when the file is absent."""
    path = Path(root) / MANIFEST_PATH
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ManifestError(f"{path} is not valid UTF-8") from e
    return parse_manifest(text)
