"""
figtok - design token compiler for Tokens Studio exports.

Loads token sets and themes, resolves ``{references}`` and writes CSS custom
properties or nested JSON.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import ConfigError, FigtokError, LoadError, ResolutionError
from .core.loader import load
from .core.resolver import ReplaceMethod, Resolver

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ConfigError",
    "FigtokError",
    "LoadError",
    "ResolutionError",
    "ReplaceMethod",
    "Resolver",
    "load",
]
