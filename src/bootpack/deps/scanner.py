"""Concurrent inventory of the JARs under an application's lib directory."""

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from bootpack.core.fs import walk
from bootpack.deps.jar_dependency import JARDependencies, JARDependency, probe_jar
from bootpack.logging.build_logger import BuildLogger


def _entries(lib_dir: Path):
    """Yield every entry below ``lib_dir`` in lexical order.

    Directories named ``*.jar`` are yielded but not descended into.
    """
    for dirpath, dirnames, filenames in walk(lib_dir):
        dirnames.sort()
        base = Path(dirpath)
        for name in list(dirnames):
            yield base / name
            if name.endswith(".jar"):
                dirnames.remove(name)
        for name in sorted(filenames):
            yield base / name


def scan_dependencies(
    lib_dir: str | Path,
    logger: BuildLogger | None = None,
    max_workers: int = 8,
) -> JARDependencies:
    """Probe every entry under ``lib_dir`` concurrently and collect the JARs.

    Each entry gets its own probe task; the scan returns only after every
    task has finished. The first probe error is raised once all tasks are
    done, so partial inventories are never returned. The result is sorted
    by group, artifact, version and path, independent of completion order.
    """
    lib_dir = Path(lib_dir)
    if not lib_dir.exists():
        return []

    dependencies: JARDependencies = []
    error: BaseException | None = None

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: list[Future[JARDependency | None]] = [
            executor.submit(probe_jar, path, logger) for path in _entries(lib_dir)
        ]

        for future in as_completed(futures):
            try:
                dependency = future.result()
            except Exception as e:
                if error is None:
                    error = e
                continue
            if dependency is not None:
                dependencies.append(dependency)

    if error is not None:
        raise error

    dependencies.sort(key=JARDependency.sort_key)
    return dependencies
