"""
String utility functions for figtok.

Provides the name transformations shared by the resolver and serializers.
"""

from __future__ import annotations

import re

# Word separators inside a token path segment
_SEPARATORS = re.compile(r"[_\- ]+")
# lowerUpper and ACRONYMWord boundaries
_CASE_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def css_stringify(name: str) -> str:
    """
    Convert a dotted token name into a kebab-case CSS identifier.

    Dots become hyphens, then the name is split at lower->upper, underscore,
    hyphen, space and acronym boundaries. Digits do not start a new word.

    Args:
        name: Dot path such as ``"text.headings.h1.fontSize"``

    Returns:
        Kebab-case identifier

    Examples:
        >>> css_stringify("text.headings.h1.fontSize")
        'text-headings-h1-font-size'
        >>> css_stringify("ColorPalette.primaryColor.100")
        'color-palette-primary-color-100'
        >>> css_stringify("HTMLParser")
        'html-parser'
    """
    words: list[str] = []
    for chunk in _SEPARATORS.split(name.replace(".", "-")):
        words.extend(word for word in _CASE_BOUNDARY.split(chunk) if word)
    return "-".join(word.lower() for word in words)


def css_variable(name: str) -> str:
    """Return the ``var()`` lookup for a token name."""
    return f"var(--{css_stringify(name)})"
