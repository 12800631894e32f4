"""
Token IR types.

A token is one of three value shapes, modelled as a closed union:

- StandardToken: a single string, literal or ``{reference}``
- ShadowToken: an ordered list of shadow layers
- CompositionToken: a property -> value map (composition and typography)

Every token carries an ``id`` (``<set.name>.<path>``, globally unique), a
``name`` (the dot path inside its set, used for references and CSS names)
and a ``kind``.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

REFERENCE_PATTERN = re.compile(r"\{([^{}]+)\}")


# =============================================================================
# Enums
# =============================================================================


class TokenKind(StrEnum):
    """Token types, valued by the alias used in Tokens Studio exports."""

    BORDER_RADIUS = "borderRadius"
    BORDER_WIDTH = "borderWidth"
    BOX_SHADOW = "boxShadow"
    COLOR = "color"
    COMPOSITION = "composition"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamilies"
    FONT_SIZE = "fontSizes"
    FONT_WEIGHT = "fontWeights"
    LETTER_SPACING = "letterSpacing"
    LINE_HEIGHT = "lineHeights"
    OPACITY = "opacity"
    SIZING = "sizing"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    OTHER = "other"

    @property
    def css_property(self) -> str:
        """CSS property family, e.g. ``fontWeights`` -> ``font-weight``."""
        return _CSS_PROPERTIES[self]

    @property
    def is_composite(self) -> bool:
        """True for kinds whose value is a property bundle."""
        return self in (TokenKind.COMPOSITION, TokenKind.TYPOGRAPHY)


_CSS_PROPERTIES: dict[TokenKind, str] = {
    TokenKind.BORDER_RADIUS: "border-radius",
    TokenKind.BORDER_WIDTH: "border-width",
    TokenKind.BOX_SHADOW: "box-shadow",
    TokenKind.COLOR: "color",
    TokenKind.COMPOSITION: "composition",
    TokenKind.DIMENSION: "dimension",
    TokenKind.FONT_FAMILY: "font-family",
    TokenKind.FONT_SIZE: "font-size",
    TokenKind.FONT_WEIGHT: "font-weight",
    TokenKind.LETTER_SPACING: "letter-spacing",
    TokenKind.LINE_HEIGHT: "line-height",
    TokenKind.OPACITY: "opacity",
    TokenKind.SIZING: "sizing",
    TokenKind.SPACING: "spacing",
    TokenKind.TYPOGRAPHY: "typography",
    TokenKind.OTHER: "other",
}


class ShadowLayerKind(StrEnum):
    """Shadow layer placement."""

    INNER_SHADOW = "innerShadow"
    DROP_SHADOW = "dropShadow"


# =============================================================================
# Value shapes
# =============================================================================


def _stringify(value: Any) -> Any:
    # JSON numbers (fontWeights: 400, opacity: 0.5) are formatted as written
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    return value


class ShadowLayer(BaseModel):
    """One layer of a box shadow. Every field may contain a reference."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    color: str
    kind: ShadowLayerKind = Field(alias="type")
    x: str
    y: str
    blur: str
    spread: str

    @field_validator("color", "x", "y", "blur", "spread", mode="before")
    @classmethod
    def _coerce_numbers(cls, value: Any) -> Any:
        return _stringify(value)


class _TokenBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Globally unique id: <set.name>.<path>")
    name: str = Field(description="Dot path inside the token set")
    kind: TokenKind


class StandardToken(_TokenBase):
    """A token whose value is a single string."""

    value: str

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        return _stringify(value)

    @property
    def has_reference(self) -> bool:
        return REFERENCE_PATTERN.search(self.value) is not None


class ShadowToken(_TokenBase):
    """A box-shadow token made of one or more layers."""

    value: list[ShadowLayer]

    @field_validator("value", mode="before")
    @classmethod
    def _wrap_single_layer(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return [value]
        return value


class CompositionToken(_TokenBase):
    """A bundle of CSS properties (composition and typography kinds)."""

    value: dict[str, str]

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_properties(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {key: _stringify(v) for key, v in value.items()}
        return value


# =============================================================================
# Union type
# =============================================================================

Token = StandardToken | ShadowToken | CompositionToken


def make_token(id: str, name: str, kind: TokenKind | str, value: Any) -> Token:
    """Build the token variant matching ``kind``.

    Raises:
        ValueError: If ``kind`` is not a known token type.
        pydantic.ValidationError: If ``value`` does not fit the variant.
    """
    kind = TokenKind(kind)
    if kind == TokenKind.BOX_SHADOW:
        return ShadowToken(id=id, name=name, kind=kind, value=value)
    if kind.is_composite:
        return CompositionToken(id=id, name=name, kind=kind, value=value)
    return StandardToken(id=id, name=name, kind=kind, value=value)
