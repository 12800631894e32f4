"""figtok version lookup."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"
UNKNOWN_VERSION = "0.0.0"


def get_version() -> str:
    """Installed distribution version, else the one in a source checkout's pyproject.toml."""
    try:
        return _metadata_version("figtok")
    except PackageNotFoundError:
        return _source_version()


def _source_version() -> str:
    if not _PYPROJECT.is_file():
        return UNKNOWN_VERSION
    with _PYPROJECT.open("rb") as fh:
        project = tomllib.load(fh).get("project", {})
    return str(project.get("version", UNKNOWN_VERSION))
