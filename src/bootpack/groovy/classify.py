"""Lightweight classification of Groovy source files.

Spring Boot CLI applications are plain Groovy scripts: classes (POGOs) or
``beans { }`` configuration. Classification uses regular expressions over
the file content rather than a real parser.
"""

import os
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from bootpack.core.fs import walk

EXTENSION = "groovy"

# Directories with this exact name are never searched
SKIPPED_DIRECTORY = EXTENSION

_LOGBACK_FILES = {"logback.groovy", "logback-test.groovy"}

_POGO = re.compile(
    r"^\s*(?:@[\w.$]+(?:\([^)]*\))?\s+)*"
    r"(?:(?:public|protected|private|abstract|final|static)\s+)*"
    r"(?:class|interface|trait|enum)\s+[A-Za-z_$][\w$]*[^{;]*\{",
    re.MULTILINE,
)
_CONFIG = re.compile(r"^\s*beans\s*\{", re.MULTILINE)


class GroovyKind(Enum):
    """How a Groovy file participates in the launch."""

    IGNORE = "ignore"
    POGO = "pogo"
    CONFIG = "config"
    INVALID = "invalid"

    @property
    def qualifies(self) -> bool:
        """Whether this kind alone makes the application a CLI app."""
        return self in (GroovyKind.POGO, GroovyKind.CONFIG)

    @property
    def launched(self) -> bool:
        return self is not GroovyKind.IGNORE


@dataclass(frozen=True)
class GroovyFile:
    path: str
    kind: GroovyKind


def _is_logback(path: str) -> bool:
    posix = "/" + path.replace(os.sep, "/")
    return os.path.basename(path) in _LOGBACK_FILES or "/ch/qos/logback/" in posix


def classify(path: str | Path, content: bytes) -> GroovyKind:
    """Classify a Groovy file from its path relative to the application root and its content."""
    path = str(path)
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError:
        return GroovyKind.INVALID

    if _is_logback(path):
        return GroovyKind.IGNORE
    if _POGO.search(text):
        return GroovyKind.POGO
    if _CONFIG.search(text):
        return GroovyKind.CONFIG
    return GroovyKind.INVALID


def find_groovy_files(root: str | Path) -> list[GroovyFile]:
    """Classify every ``*.groovy`` file under ``root``.

    Directories named exactly ``groovy`` are pruned with everything below
    them. Results are in walk order (lexical).
    """
    root = os.path.abspath(root)
    found = []
    suffix = "." + EXTENSION

    for dirpath, dirnames, filenames in walk(root):
        dirnames[:] = sorted(d for d in dirnames if d != SKIPPED_DIRECTORY)
        for name in sorted(filenames):
            if not name.endswith(suffix):
                continue
            full = os.path.abspath(os.path.join(dirpath, name))
            if not os.path.isfile(full):
                continue
            with open(full, "rb") as f:
                content = f.read()
            found.append(GroovyFile(full, classify(os.path.relpath(full, root), content)))

    return found
