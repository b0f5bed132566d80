"""Build context and the detect/build entry points."""

from dataclasses import dataclass, field
from pathlib import Path

from bootpack.config import BuildConfig
from bootpack.groovy.command import Command
from bootpack.layers.layers import Layers
from bootpack.layers.plan import Plans
from bootpack.logging.build_logger import BuildLogger
from bootpack.springboot.spring_boot import SpringBoot


@dataclass
class Build:
    """Everything a detector needs for one build invocation."""

    application_root: Path
    layers: Layers
    logger: BuildLogger
    config: BuildConfig = field(default_factory=BuildConfig)

    @classmethod
    def create(
        cls,
        application_root: str | Path,
        layers_root: str | Path,
        config: BuildConfig | None = None,
    ) -> "Build":
        config = config or BuildConfig()
        return cls(
            application_root=Path(application_root).resolve(),
            layers=Layers(layers_root),
            logger=BuildLogger(log_file=config.log_file, debug=config.debug),
            config=config,
        )


def run_detect(build: Build) -> Plans:
    """Evaluate both detectors and collect plan entries for those that apply."""
    plans = Plans()

    spring_boot = SpringBoot.from_build(build)
    if spring_boot is not None:
        plans.add(spring_boot.plan())

    command = Command.from_build(build)
    if command is not None:
        plans.add(command.plan())

    return plans


def run_build(build: Build) -> list[str]:
    """Contribute every applicable detector; returns the names that ran."""
    contributed = []

    spring_boot = SpringBoot.from_build(build)
    if spring_boot is not None:
        spring_boot.contribute()
        contributed.append(spring_boot.name)

    command = Command.from_build(build)
    if command is not None:
        command.contribute()
        contributed.append(command.name)

    return contributed
