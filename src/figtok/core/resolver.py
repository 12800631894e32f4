"""
Token value resolution.

Computes the final, formatted value of a token, following ``{dot.path}``
references either into CSS ``var()`` lookups or into the referenced token's
own computed value.

    "{spacing.base} * 2"
        CSS_VARIABLES -> "calc(var(--spacing-base) * 2)"
        STATIC_VALUES -> "calc(8px * 2)"

    "0px 4px 24px 0px rgba({theme.shadow}, 16%)"
        CSS_VARIABLES -> "0px 4px 24px 0px rgba(var(--theme-shadow), 16%)"
        STATIC_VALUES -> "0px 4px 24px 0px rgba(0, 0, 0, 16%)"

A reference to an unknown name degrades to ``BROKEN_REF`` so that one bad
token does not block a whole build.
"""

from __future__ import annotations

import logging
import re
from enum import StrEnum

from .colors import hex_to_channels, is_channel_triplet, is_hex_literal, wrap_rgb
from .css_math import is_calc_expression
from .errors import CyclicReferenceError, ResolutionError
from .ir import (
    REFERENCE_PATTERN,
    CompositionToken,
    ShadowLayer,
    ShadowLayerKind,
    ShadowToken,
    StandardToken,
    Token,
    TokenKind,
)
from .store import TokenStore
from .strings import css_variable

logger = logging.getLogger(__name__)

BROKEN_REF = "BROKEN_REF"


class ReplaceMethod(StrEnum):
    """How ``{references}`` are substituted."""

    # var(--name), the value is left to the stylesheet cascade
    CSS_VARIABLES = "variables"
    # The referenced token's fully computed value
    STATIC_VALUES = "static"


class Resolver:
    """
    Computes token values against a read-only ``TokenStore``.

    The resolver holds no state besides the store, so resolving the same
    token twice yields identical output.
    """

    def __init__(self, store: TokenStore) -> None:
        self.store = store

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def resolve(
        self, reference: str, method: ReplaceMethod, theme: str | None = None
    ) -> str:
        """Substitute every ``{dot.path}`` in ``reference``."""
        return self._resolve(reference, method, theme, ())

    def value(
        self,
        token: Token,
        method: ReplaceMethod,
        nested: bool = False,
        theme: str | None = None,
    ) -> str:
        """
        Compute a standard or shadow token's value.

        Args:
            token: Token to compute
            method: Reference substitution method
            nested: True when the value is being substituted into another
                token's value; color tokens then skip their ``rgb()`` wrapper
            theme: Theme whose active tokens references are resolved against

        Raises:
            CyclicReferenceError: If the token's references lead back to it
            InvalidColorLiteralError: If a color holds a malformed hex literal
            ResolutionError: If called with a composition token
        """
        return self._value(token, method, nested, theme, ())

    def composition_values(
        self, token: CompositionToken, method: ReplaceMethod, theme: str | None = None
    ) -> dict[str, str]:
        """Resolve every property of a composition/typography token, keeping key order."""
        chain = (token.id,)
        return {
            prop: self._resolve(raw, method, theme, chain) for prop, raw in token.value.items()
        }

    def css_value(
        self, token: StandardToken | ShadowToken, method: ReplaceMethod, theme: str | None = None
    ) -> str:
        """
        Value as written by the serializers.

        Static output wraps literal colors in ``rgb()`` exactly once. Variable
        output keeps the bare channel list so ``rgb(var(--x))`` and
        ``rgba(var(--x), 0.5)`` stay valid wherever the token is referenced.
        """
        value = self.value(token, method, theme=theme)
        if (
            method == ReplaceMethod.STATIC_VALUES
            and token.kind == TokenKind.COLOR
            and is_channel_triplet(value)
        ):
            value = f"rgb({value})"
        return value

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _resolve(
        self,
        reference: str,
        method: ReplaceMethod,
        theme: str | None,
        chain: tuple[str, ...],
    ) -> str:
        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)

            if method == ReplaceMethod.CSS_VARIABLES:
                return css_variable(name)

            token = self.store.find(name, theme)
            if token is None:
                logger.warning(
                    "Broken reference {%s}%s", name, f" in theme {theme!r}" if theme else ""
                )
                return BROKEN_REF
            if isinstance(token, CompositionToken):
                logger.warning(
                    "Reference {%s} points at %s token %s, which has no single value",
                    name,
                    token.kind.value,
                    token.id,
                )
                return BROKEN_REF
            return self._value(token, method, True, theme, chain)

        return REFERENCE_PATTERN.sub(substitute, reference)

    def _value(
        self,
        token: Token,
        method: ReplaceMethod,
        nested: bool,
        theme: str | None,
        chain: tuple[str, ...],
    ) -> str:
        if token.id in chain:
            raise CyclicReferenceError([*chain, token.id])
        chain = (*chain, token.id)

        if isinstance(token, StandardToken):
            value = self._standard_value(token, method, nested, theme, chain)
        elif isinstance(token, ShadowToken):
            value = self._shadow_value(token, method, theme, chain)
        elif isinstance(token, CompositionToken):
            raise ResolutionError(
                f"{token.kind.value} token '{token.id}' has no single value; "
                "use composition_values()"
            )
        else:
            raise ResolutionError(f"Unknown token type: {type(token).__name__}")

        # Arithmetic is left to CSS; calc() keeps var() references live
        if is_calc_expression(value):
            logger.debug("Wrapping %s in calc(): %s", token.id, value)
            value = f"calc({value})"

        return value

    def _standard_value(
        self,
        token: StandardToken,
        method: ReplaceMethod,
        nested: bool,
        theme: str | None,
        chain: tuple[str, ...],
    ) -> str:
        if token.has_reference:
            value = self._resolve(token.value, method, theme, chain)
            if token.kind == TokenKind.COLOR and not nested and not value.startswith("rgb"):
                value = f"rgb({value})"
            return value

        if token.kind == TokenKind.COLOR and is_hex_literal(token.value):
            return hex_to_channels(token.value, token.id)

        return token.value

    def _shadow_value(
        self,
        token: ShadowToken,
        method: ReplaceMethod,
        theme: str | None,
        chain: tuple[str, ...],
    ) -> str:
        layers = [self._format_layer(token, layer) for layer in token.value]
        return self._resolve(", ".join(layers), method, theme, chain)

    @staticmethod
    def _format_layer(token: ShadowToken, layer: ShadowLayer) -> str:
        color = layer.color
        if is_hex_literal(color):
            color = wrap_rgb(hex_to_channels(color, token.id))
        elif REFERENCE_PATTERN.search(color):
            color = wrap_rgb(color)

        prefix = "inset " if layer.kind == ShadowLayerKind.INNER_SHADOW else ""
        return f"{prefix}{layer.x}px {layer.y}px {layer.blur}px {layer.spread}px {color}"
