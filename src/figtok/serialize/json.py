"""
JSON serializer.

Each token's dot path becomes nested objects, ``"color.brand.primary"``
becoming ``{"color": {"brand": {"primary": ...}}}``. Values are always
static. Composition tokens nest their property map at the leaf.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..core.errors import ResolutionError
from ..core.ir import CompositionToken, ShadowToken, StandardToken, Token
from ..core.resolver import ReplaceMethod, Resolver
from ..core.store import TokenLibrary
from .base import Serializer

logger = logging.getLogger(__name__)


class JsonSerializer(Serializer):
    format = "json"

    def render(self, library: TokenLibrary, resolver: Resolver) -> dict[str, str]:
        outputs: dict[str, str] = {}

        if library.themes:
            for theme in library.themes:
                tree = self.build_tree(library.active_tokens(theme.name), resolver, theme.name)
                outputs[f"{theme.file_stem}.json"] = _dump(tree)
        else:
            for token_set in library.token_sets:
                tree = self.build_tree(library.tokens_in_set(token_set.name), resolver)
                outputs[f"{token_set.name}.json"] = _dump(tree)

        logger.debug("Rendered %d JSON files", len(outputs))
        return outputs

    def build_tree(
        self, tokens: list[Token], resolver: Resolver, theme: str | None = None
    ) -> dict[str, Any]:
        """Deep-merge the nested objects of ``tokens``, in order."""
        tree: dict[str, Any] = {}
        method = ReplaceMethod.STATIC_VALUES

        for token in tokens:
            value: Any
            if isinstance(token, CompositionToken):
                value = resolver.composition_values(token, method, theme)
            elif isinstance(token, (StandardToken, ShadowToken)):
                value = resolver.css_value(token, method, theme)
            else:
                raise ResolutionError(f"Unknown token type: {type(token).__name__}")

            tree = _deep_merge(tree, nest(token.name.split("."), value))

        return tree


def nest(path: list[str], value: Any) -> dict[str, Any]:
    """Build ``{path[0]: {path[1]: ... value}}``."""
    result: Any = value
    for key in reversed(path):
        result = {key: result}
    return result


def _deep_merge(
    base: dict[str, Any], overrides: dict[str, Any], path: tuple[str, ...] = ()
) -> dict[str, Any]:
    """Deep merge overrides into a copy of base."""
    result = dict(base)
    for key, value in overrides.items():
        if key not in result:
            result[key] = value
        elif isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value, (*path, key))
        else:
            logger.warning("JSON key %s is defined twice, keeping the later value", ".".join((*path, key)))
            result[key] = value
    return result


def _dump(tree: dict[str, Any]) -> str:
    return json.dumps(tree, indent=2) + "\n"
