"""Spring Boot CLI launch contribution for Groovy script applications."""

import os
from typing import TYPE_CHECKING

from bootpack.groovy.classify import GroovyFile, GroovyKind, find_groovy_files
from bootpack.layers.layers import LAUNCH, LaunchMetadata, Process
from bootpack.layers.plan import Plan

if TYPE_CHECKING:
    from bootpack.build import Build

DEPENDENCY = "spring-boot-cli"
LAYER_NAME = "command"
GROOVY_FILES = "GROOVY_FILES"
COMMAND = "spring run -cp $CLASSPATH $GROOVY_FILES"


def launch_files(files: list[GroovyFile]) -> list[str]:
    """Sorted, deduplicated paths of every file that takes part in the launch."""
    return sorted({f.path for f in files if f.kind.launched})


def join_files(paths: list[str]) -> str:
    """Join with the path-list separator, keeping a leading empty element."""
    return os.pathsep.join(["", *paths])


class Command:
    """Launches Groovy scripts with ``spring run``."""

    name = DEPENDENCY

    def __init__(self, build: "Build", files: list[GroovyFile]):
        self.build = build
        self.files = files
        self.layer = build.layers.layer(LAYER_NAME)

    @classmethod
    def from_build(cls, build: "Build") -> "Command | None":
        """Return a Command when at least one POGO or config script exists.

        Files classified as invalid are launched anyway, with a warning,
        once some other file qualifies.
        """
        files = find_groovy_files(build.application_root)
        if not any(f.kind.qualifies for f in files):
            return None

        for f in files:
            if f.kind is GroovyKind.INVALID:
                build.logger.warning(
                    f"{f.path} is neither a POGO nor a configuration script; including it anyway",
                    path=f.path,
                )

        return cls(build, files)

    @property
    def groovy_files(self) -> list[str]:
        return launch_files(self.files)

    def plan(self) -> Plan:
        return Plan(name=DEPENDENCY, metadata={"groovy-files": self.groovy_files})

    def contribute(self) -> None:
        """Expose GROOVY_FILES at launch and register the processes."""
        logger = self.build.logger
        logger.title("Spring Boot CLI")

        value = join_files(self.groovy_files)
        self.layer.contribute(
            {"groovy-files": self.groovy_files},
            lambda layer: layer.append_launch_env(GROOVY_FILES, value),
            LAUNCH,
        )
        logger.info(f"Contributed {len(self.groovy_files)} Groovy files", count=len(self.groovy_files))

        self.build.layers.write_application_metadata(LaunchMetadata(
            processes=[
                Process(type=DEPENDENCY, command=COMMAND),
                Process(type="task", command=COMMAND),
                Process(type="web", command=COMMAND),
            ],
        ))
        logger.info(f"Process types: {DEPENDENCY}, task, web")
