"""
Project configuration (``figtok.toml``).
"""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError, ErrorContext

CONFIG_FILE = "figtok.toml"

OUTPUT_FORMATS = ("css", "json")
THEME_SCOPES = ("root", "attribute")


@dataclass
class BuildConfig:
    """Where tokens are read from and how they are written."""

    entry: Path = Path("./tokens")  # .json export or directory of set files
    output: Path = Path("./build")
    format: str = "css"  # "css" | "json"
    clean: bool = True  # Remove the output directory before writing
    theme_scope: str = "root"  # "root" | "attribute"


@dataclass
class ResolveConfig:
    """Reference resolution options."""

    strict_names: bool = False


@dataclass
class FigtokConfig:
    build: BuildConfig = field(default_factory=BuildConfig)
    resolve: ResolveConfig = field(default_factory=ResolveConfig)
    path: Path | None = None  # File the config was read from, if any


def load_manifest(path: Path) -> FigtokConfig:
    """
    Read a ``figtok.toml`` file.

    Relative ``entry`` and ``output`` paths are relative to the file's directory.

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError("Could not read config", ErrorContext(file=path, detail=str(exc))) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError("Invalid TOML", ErrorContext(file=path, detail=str(exc))) from exc

    build_data = data.get("build", {})
    resolve_data = data.get("resolve", {})
    base = path.parent

    build = BuildConfig(
        entry=base / build_data.get("entry", "./tokens"),
        output=base / build_data.get("output", "./build"),
        format=build_data.get("format", "css"),
        clean=build_data.get("clean", True),
        theme_scope=build_data.get("theme_scope", "root"),
    )
    resolve = ResolveConfig(strict_names=resolve_data.get("strict_names", False))

    config = FigtokConfig(build=build, resolve=resolve, path=path)
    validate_config(config)
    return config


def find_manifest(directory: Path | None = None) -> FigtokConfig:
    """Load ``figtok.toml`` from ``directory`` (default: cwd), or defaults if absent."""
    path = (directory or Path.cwd()) / CONFIG_FILE
    if path.exists():
        return load_manifest(path)
    return FigtokConfig()


def validate_config(config: FigtokConfig) -> None:
    """Raise ``ConfigError`` for unsupported option values."""
    context = ErrorContext(file=config.path) if config.path else None
    if config.build.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format '{config.build.format}' "
            f"(expected one of: {', '.join(OUTPUT_FORMATS)})",
            context,
        )
    if config.build.theme_scope not in THEME_SCOPES:
        raise ConfigError(
            f"Unknown theme scope '{config.build.theme_scope}' "
            f"(expected one of: {', '.join(THEME_SCOPES)})",
            context,
        )
    if not isinstance(config.build.clean, bool) or not isinstance(
        config.resolve.strict_names, bool
    ):
        raise ConfigError("'clean' and 'strict_names' must be true or false", context)
