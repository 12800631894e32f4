"""
Output serializers.

Usage:
    from figtok.serialize import get_serializer, write_outputs

    serializer = get_serializer("css", theme_scope="attribute")
    outputs = serializer.render(library, Resolver(library))
    write_outputs(outputs, Path("build"))
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from ..core.errors import ConfigError
from .base import Serializer
from .css import CssSerializer
from .json import JsonSerializer

logger = logging.getLogger(__name__)


def get_serializer(format: str, theme_scope: str = "root") -> Serializer:
    """
    Return the serializer for an output format.

    Raises:
        ConfigError: If the format is not ``css`` or ``json``
    """
    if format == "css":
        return CssSerializer(theme_scope=theme_scope)
    if format == "json":
        return JsonSerializer()
    raise ConfigError(f"Unknown output format '{format}' (expected one of: css, json)")


def write_outputs(outputs: dict[str, str], output_dir: Path, clean: bool = True) -> list[Path]:
    """
    Write rendered files below ``output_dir``.

    Args:
        outputs: Relative path -> contents, as returned by ``render``
        output_dir: Destination directory, created if missing
        clean: Remove ``output_dir`` first so stale files do not survive

    Returns:
        Paths written, in ``outputs`` order
    """
    if clean and output_dir.exists():
        logger.debug("Removing %s", output_dir)
        shutil.rmtree(output_dir)

    written: list[Path] = []
    for relative, contents in outputs.items():
        path = output_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        written.append(path)

    return written


__all__ = [
    "CssSerializer",
    "JsonSerializer",
    "Serializer",
    "get_serializer",
    "write_outputs",
]
