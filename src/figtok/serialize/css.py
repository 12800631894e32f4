"""
CSS serializer.

Standard and shadow tokens become custom properties; composition and
typography tokens become classes holding one declaration per property:

    :root {
      --spacing-base: 8px;
      --spacing-large: calc(var(--spacing-base) * 2);
    }

    .heading-h1 {
      font-family: var(--font-family-heading);
      font-size: var(--font-size-h1);
    }

With themes there is one file per theme in variable mode, otherwise one file
per token set with static values.
"""

from __future__ import annotations

import logging

from ..core.errors import ResolutionError
from ..core.ir import CompositionToken, ShadowToken, StandardToken, Theme, Token
from ..core.resolver import ReplaceMethod, Resolver
from ..core.store import TokenLibrary
from ..core.strings import css_stringify
from .base import Serializer

logger = logging.getLogger(__name__)

HEADER = "/* Generated by figtok - do not edit */"


class CssSerializer(Serializer):
    """
    Args:
        theme_scope: ``"root"`` writes each theme's variables under ``:root``,
            ``"attribute"`` under ``[data-theme="<theme>"]``
    """

    format = "css"

    def __init__(self, theme_scope: str = "root") -> None:
        self.theme_scope = theme_scope

    def render(self, library: TokenLibrary, resolver: Resolver) -> dict[str, str]:
        outputs: dict[str, str] = {}

        if library.themes:
            for theme in library.themes:
                tokens = library.active_tokens(theme.name)
                outputs[f"{theme.file_stem}.css"] = self.render_tokens(
                    tokens,
                    resolver,
                    ReplaceMethod.CSS_VARIABLES,
                    theme=theme.name,
                    selector=self.theme_selector(theme),
                )
        else:
            for token_set in library.token_sets:
                tokens = library.tokens_in_set(token_set.name)
                outputs[f"{token_set.name}.css"] = self.render_tokens(
                    tokens, resolver, ReplaceMethod.STATIC_VALUES
                )

        logger.debug("Rendered %d CSS files", len(outputs))
        return outputs

    def theme_selector(self, theme: Theme) -> str:
        if self.theme_scope == "attribute":
            return f'[data-theme="{css_stringify(theme.file_stem)}"]'
        return ":root"

    def render_tokens(
        self,
        tokens: list[Token],
        resolver: Resolver,
        method: ReplaceMethod,
        theme: str | None = None,
        selector: str = ":root",
    ) -> str:
        """Render one CSS file from ``tokens``, in order."""
        variables: list[str] = []
        classes: list[str] = []

        for token in tokens:
            if isinstance(token, CompositionToken):
                classes.append(_class_block(token, resolver.composition_values(token, method, theme)))
            elif isinstance(token, (StandardToken, ShadowToken)):
                value = resolver.css_value(token, method, theme)
                variables.append(f"  --{css_stringify(token.name)}: {value};")
            else:
                raise ResolutionError(f"Unknown token type: {type(token).__name__}")

        lines = [HEADER, ""]
        if variables:
            lines.append(f"{selector} {{")
            lines.extend(variables)
            lines.append("}")
            lines.append("")
        for block in classes:
            lines.append(block)
            lines.append("")

        return "\n".join(lines)


def _class_block(token: CompositionToken, properties: dict[str, str]) -> str:
    lines = [f".{css_stringify(token.name)} {{"]
    for prop, value in properties.items():
        lines.append(f"  {css_stringify(prop)}: {value};")
    lines.append("}")
    return "\n".join(lines)
