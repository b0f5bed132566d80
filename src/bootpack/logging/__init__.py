"""Build logging."""

from bootpack.logging.build_logger import BuildLogger

__all__ = ["BuildLogger"]
