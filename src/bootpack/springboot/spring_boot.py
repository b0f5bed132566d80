"""Spring Boot contribution for exploded JVM applications."""

import os
from pathlib import Path
from typing import TYPE_CHECKING

from bootpack.core.metadata import ApplicationMetadata, load_metadata
from bootpack.deps.jar_dependency import JARDependencies
from bootpack.deps.scanner import scan_dependencies
from bootpack.layers.layers import BUILD, CACHE, LAUNCH, LaunchMetadata, Process
from bootpack.layers.plan import Plan
from bootpack.slices.slicer import Slice, compute_slices

if TYPE_CHECKING:
    from bootpack.build import Build

DEPENDENCY = "spring-boot"


def launch_command(start_class: str) -> str:
    return f"java -cp $CLASSPATH $JAVA_OPTS {start_class}"


class SpringBoot:
    """A Spring Boot application with a ``Spring-Boot-Version`` manifest entry."""

    name = DEPENDENCY

    def __init__(self, build: "Build", metadata: ApplicationMetadata):
        self.build = build
        self.metadata = metadata
        self.layer = build.layers.layer(DEPENDENCY)

    @classmethod
    def from_build(cls, build: "Build") -> "SpringBoot | None":
        """Return None when the application is not a Spring Boot application.

        Manifest and filesystem errors are raised rather than reported as
        "not applicable".
        """
        metadata = load_metadata(build.application_root)
        if metadata is None:
            return None
        return cls(build, metadata)

    @property
    def root(self) -> Path:
        return self.build.application_root

    def dependencies(self) -> JARDependencies:
        return scan_dependencies(
            self.root / self.metadata.lib,
            logger=self.build.logger,
            max_workers=self.build.config.max_workers,
        )

    def slices(self) -> list[Slice]:
        return compute_slices(self.root, self.metadata.classes, self.metadata.lib)

    def plan(self) -> Plan:
        """Plan entry carrying the metadata and the dependency inventory."""
        metadata = self.metadata.to_dict()
        metadata["dependencies"] = [d.to_dict() for d in self.dependencies()]
        return Plan(name=DEPENDENCY, metadata=metadata)

    def contribute(self) -> None:
        """Contribute the classpath layer, then the slices and processes.

        Steps run in order and the first failure aborts the contribution.
        Launch metadata is written last.
        """
        logger = self.build.logger
        logger.title("Spring Boot", self.metadata.version)

        classpath = os.pathsep.join(self.metadata.classpath)
        self.layer.contribute(
            self.metadata.to_dict(),
            lambda layer: layer.prepend_path_shared_env("CLASSPATH", classpath),
            BUILD, CACHE, LAUNCH,
        )

        slices = self.slices()
        for s in slices:
            logger.debug(f"Slice {s.name}: {len(s.paths)} files", slice=s.name, count=len(s.paths))

        dependencies = self.dependencies()
        logger.info(f"Found {len(dependencies)} JAR dependencies", count=len(dependencies))
        for d in dependencies:
            if d.exploded:
                logger.debug(f"Exploded dependency {d.path}", path=d.path)

        command = launch_command(self.metadata.start_class)

        self.build.layers.write_application_metadata(LaunchMetadata(
            slices=slices,
            processes=[
                Process(type=DEPENDENCY, command=command),
                Process(type="task", command=command),
                Process(type="web", command=command),
            ],
        ))
        logger.info(f"Process types: {DEPENDENCY}, task, web")
