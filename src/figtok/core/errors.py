"""
Error types for figtok loading, configuration, and value resolution.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class FigtokError(Exception):
    """Base exception for all figtok errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class LoadError(FigtokError):
    """
    Raised when token input cannot be read or parsed.

    Examples:
    - Missing or unreadable token files
    - Invalid JSON
    - Unknown token type
    - Token value that does not match its type's shape
    """

    pass


class ConfigError(FigtokError):
    """
    Raised when figtok.toml or CLI options are invalid.

    Examples:
    - Unsupported output format
    - Unknown theme scope
    - Malformed TOML
    """

    pass


class ResolutionError(FigtokError):
    """Raised when a token value cannot be computed."""

    pass


class InvalidColorLiteralError(ResolutionError):
    """A color token holds a ``#`` literal that is not a valid hex color."""

    def __init__(self, literal: str, token_id: str | None = None):
        self.literal = literal
        context = ErrorContext(token=token_id) if token_id else None
        super().__init__(f"Invalid color literal: {literal!r}", context)


class CyclicReferenceError(ResolutionError):
    """A chain of ``{references}`` leads back to a token already being resolved."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__("Cyclic token reference: " + " -> ".join(chain))


class UnknownTokenError(ResolutionError):
    """No token with the given id exists in the store."""

    pass


class UnknownThemeError(ResolutionError):
    """No theme with the given name exists in the store."""

    pass


class AmbiguousReferenceError(ResolutionError):
    """More than one active token shares a referenced name (strict mode only)."""

    def __init__(self, name: str, candidates: list[str]):
        self.name = name
        self.candidates = candidates
        super().__init__(
            f"Reference {{{name}}} is ambiguous, matching tokens: {', '.join(candidates)}"
        )


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Source file the error relates to
        token: Dot path or id of the token involved
        detail: Optional extra detail (e.g. the underlying parser message)
    """

    file: Path | None = None
    token: str | None = None
    detail: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens/global.json at color.red.1"
        """
        parts: list[str] = []
        if self.file:
            parts.append(str(self.file))
        if self.token:
            parts.append(f"at {self.token}")
        location = " ".join(parts) or "<unknown>"
        if self.detail:
            return f"{location}\n  {self.detail}"
        return location


def make_load_error(
    message: str,
    file: Path | None = None,
    token: str | None = None,
    detail: str | None = None,
) -> LoadError:
    """
    Helper to create a LoadError with optional context.

    Args:
        message: Error description
        file: Optional source file path
        token: Optional token path inside the file
        detail: Optional underlying error text

    Returns:
        LoadError with context if any location was provided
    """
    if file or token or detail:
        return LoadError(message, ErrorContext(file=file, token=token, detail=detail))
    return LoadError(message)
