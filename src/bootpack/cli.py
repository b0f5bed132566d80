"""bootpack CLI - Spring Boot detection, slicing and dependency inventory."""

import json
import sys
from pathlib import Path

import click

from bootpack import __version__
from bootpack.build import Build, run_build, run_detect
from bootpack.config import BuildConfig, ConfigError, load_config
from bootpack.core.manifest import ManifestError
from bootpack.core.metadata import ApplicationMetadata, load_metadata
from bootpack.deps.scanner import scan_dependencies
from bootpack.slices.slicer import compute_slices

# Buildpack detect convention: 100 means "does not apply"
DETECT_FAIL = 100


def _config(path: str | None) -> BuildConfig:
    try:
        return load_config(path)
    except ConfigError as e:
        raise click.UsageError(str(e)) from e


def _metadata(app: str) -> ApplicationMetadata | None:
    try:
        return load_metadata(app)
    except ManifestError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.version_option(__version__)
def main() -> None:
    """bootpack: Spring Boot layering and launch configuration."""
    pass


@main.command()
@click.option("--app", "-a", default=".", type=click.Path(exists=True, file_okay=False), help="Application root")
@click.option("--layers", "-l", default="layers", help="Layers directory")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="Config YAML")
@click.option("--plan", "-p", "plan_path", help="Write detected plans to this file")
def detect(app: str, layers: str, config_path: str | None, plan_path: str | None) -> None:
    """Decide whether either detector applies."""
    build = Build.create(app, layers, _config(config_path))
    try:
        plans = run_detect(build)
    except (ManifestError, OSError) as e:
        click.echo(f"Detection failed: {e}", err=True)
        sys.exit(1)

    if not plans.entries:
        click.echo("No Spring Boot or Spring Boot CLI application detected")
        sys.exit(DETECT_FAIL)

    click.echo(f"Detected: {', '.join(plans.names())}")
    if plan_path:
        plans.save(plan_path)


@main.command()
@click.option("--app", "-a", default=".", type=click.Path(exists=True, file_okay=False), help="Application root")
@click.option("--layers", "-l", default="layers", help="Layers directory")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="Config YAML")
def build(app: str, layers: str, config_path: str | None) -> None:
    """Contribute layers and launch metadata for every applicable detector."""
    context = Build.create(app, layers, _config(config_path))
    try:
        contributed = run_build(context)
    except (ManifestError, OSError) as e:
        click.echo(f"Build failed: {e}", err=True)
        sys.exit(1)

    if not contributed:
        click.echo("Nothing to contribute", err=True)
        sys.exit(DETECT_FAIL)


@main.command()
@click.option("--app", "-a", default=".", type=click.Path(exists=True, file_okay=False), help="Application root")
def slices(app: str) -> None:
    """Print the five slices of a Spring Boot application as JSON."""
    metadata = _metadata(app)
    if metadata is None:
        raise click.ClickException(f"{app} is not a Spring Boot application")

    result = compute_slices(app, metadata.classes, metadata.lib)
    click.echo(json.dumps([s.to_dict() for s in result], indent=2))


@main.command()
@click.option("--app", "-a", default=".", type=click.Path(exists=True, file_okay=False), help="Application root")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="Config YAML")
def dependencies(app: str, config_path: str | None) -> None:
    """Print the JAR dependency inventory as JSON."""
    config = _config(config_path)
    metadata = _metadata(app)
    if metadata is None:
        raise click.ClickException(f"{app} is not a Spring Boot application")

    result = scan_dependencies(Path(app) / metadata.lib, max_workers=config.max_workers)
    click.echo(json.dumps([d.to_dict() for d in result], indent=2))


if __name__ == "__main__":
    main()
