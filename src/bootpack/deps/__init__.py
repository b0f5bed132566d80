"""JAR dependency inventory."""

from bootpack.deps.jar_dependency import JARDependencies, JARDependency, parse_filename, probe_jar
from bootpack.deps.scanner import scan_dependencies

__all__ = ["JARDependencies", "JARDependency", "parse_filename", "probe_jar", "scan_dependencies"]
