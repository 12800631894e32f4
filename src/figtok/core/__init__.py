"""Core figtok functionality: IR, loading, the token store and value resolution."""

from . import ir
from .errors import (
    AmbiguousReferenceError,
    ConfigError,
    CyclicReferenceError,
    ErrorContext,
    FigtokError,
    InvalidColorLiteralError,
    LoadError,
    ResolutionError,
    UnknownThemeError,
    UnknownTokenError,
)
from .loader import load
from .manifest import FigtokConfig, find_manifest, load_manifest
from .resolver import BROKEN_REF, ReplaceMethod, Resolver
from .store import TokenLibrary, TokenStore

__all__ = [
    "ir",
    # Errors
    "AmbiguousReferenceError",
    "ConfigError",
    "CyclicReferenceError",
    "ErrorContext",
    "FigtokError",
    "InvalidColorLiteralError",
    "LoadError",
    "ResolutionError",
    "UnknownThemeError",
    "UnknownTokenError",
    # Loading and config
    "load",
    "FigtokConfig",
    "find_manifest",
    "load_manifest",
    # Resolution
    "BROKEN_REF",
    "ReplaceMethod",
    "Resolver",
    "TokenLibrary",
    "TokenStore",
]
