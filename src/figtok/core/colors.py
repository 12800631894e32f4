"""
Color literal helpers.

Color tokens are emitted as bare ``R, G, B`` channel lists so that CSS can
compose them (``rgb(var(--brand))``, ``rgba(var(--brand), 0.5)``).
"""

from __future__ import annotations

import re

from .errors import InvalidColorLiteralError

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_CHANNEL_TRIPLET = re.compile(r"^\d{1,3}, \d{1,3}, \d{1,3}$")


def hex_to_channels(literal: str, token_id: str | None = None) -> str:
    """
    Convert ``#RRGGBB`` (or ``#RGB``) into ``"R, G, B"``.

    Args:
        literal: Hex color literal, including the leading ``#``
        token_id: Token id used in the error message

    Returns:
        Decimal channels joined by ``", "``

    Raises:
        InvalidColorLiteralError: If the literal is not a valid hex color
    """
    if not _HEX_COLOR.match(literal):
        raise InvalidColorLiteralError(literal, token_id)
    digits = literal[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    return f"{red}, {green}, {blue}"


def is_hex_literal(value: str) -> bool:
    return value.startswith("#")


def is_channel_triplet(value: str) -> bool:
    """True for values shaped like ``"12, 34, 56"``."""
    return _CHANNEL_TRIPLET.match(value) is not None


def wrap_rgb(value: str) -> str:
    """Wrap ``value`` in ``rgb()`` unless it already is an rgb/rgba call."""
    if value.startswith("rgb"):
        return value
    return f"rgb({value})"
