"""Spring Boot CLI (Groovy script) detection."""

from bootpack.groovy.classify import GroovyFile, GroovyKind, classify, find_groovy_files
from bootpack.groovy.command import Command, join_files, launch_files

__all__ = [
    "GroovyFile", "GroovyKind", "classify", "find_groovy_files",
    "Command", "join_files", "launch_files",
]
