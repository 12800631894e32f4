"""
figtok Intermediate Representation (IR) types.

Tokens, token sets and themes as loaded from a Tokens Studio export.
All types are re-exported from this package.
"""

from .themes import Theme, TokenSet, TokenSetStatus
from .tokens import (
    REFERENCE_PATTERN,
    CompositionToken,
    ShadowLayer,
    ShadowLayerKind,
    ShadowToken,
    StandardToken,
    Token,
    TokenKind,
    make_token,
)

__all__ = [
    # Tokens
    "REFERENCE_PATTERN",
    "CompositionToken",
    "ShadowLayer",
    "ShadowLayerKind",
    "ShadowToken",
    "StandardToken",
    "Token",
    "TokenKind",
    "make_token",
    # Sets and themes
    "Theme",
    "TokenSet",
    "TokenSetStatus",
]
