"""Core data models for bootpack."""

from bootpack.core.manifest import ManifestError, parse_manifest, read_manifest
from bootpack.core.metadata import ApplicationMetadata, load_metadata

__all__ = ["ManifestError", "parse_manifest", "read_manifest", "ApplicationMetadata", "load_metadata"]
