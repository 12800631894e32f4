"""
figtok CLI utilities.

Shared helpers for version output, logging setup and configuration loading.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from figtok._version import get_version
from figtok.core.manifest import FigtokConfig, find_manifest, load_manifest, validate_config

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"figtok version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging once per process.

    ``--verbose`` selects DEBUG; otherwise the ``LOG_LEVEL`` environment
    variable is used, defaulting to WARNING.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("figtok").setLevel(level)


def load_config(config_path: Path | None) -> FigtokConfig:
    """Load ``--config`` if given, else ``figtok.toml`` from the cwd (or defaults)."""
    if config_path is not None:
        return load_manifest(config_path)
    return find_manifest()


def apply_overrides(
    config: FigtokConfig,
    *,
    entry: Path | None = None,
    output: Path | None = None,
    format: str | None = None,
    theme_scope: str | None = None,
    clean: bool | None = None,
    strict_names: bool | None = None,
) -> FigtokConfig:
    """Apply command line options on top of file configuration, then validate."""
    if entry is not None:
        config.build.entry = entry
    if output is not None:
        config.build.output = output
    if format is not None:
        config.build.format = format
    if theme_scope is not None:
        config.build.theme_scope = theme_scope
    if clean is not None:
        config.build.clean = clean
    if strict_names is not None:
        config.resolve.strict_names = strict_names
    validate_config(config)
    return config
