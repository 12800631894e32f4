"""Shared pytest fixtures for figtok tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from figtok.core.ir import Theme, Token, TokenSet, make_token
from figtok.core.resolver import Resolver
from figtok.core.store import TokenLibrary


@pytest.fixture
def export_data() -> dict[str, Any]:
    """A small Tokens Studio single-file export with two themes."""
    return {
        "$metadata": {"tokenSetOrder": ["global", "light", "dark"]},
        "$themes": [
            {
                "name": "Light",
                "selectedTokenSets": {"global": "source", "light": "enabled", "dark": "disabled"},
            },
            {
                "name": "Dark",
                "selectedTokenSets": {"global": "source", "dark": "enabled"},
            },
        ],
        "global": {
            "color": {
                "black": {"value": "#000000", "type": "color"},
                "white": {"value": "#fff", "type": "color"},
            },
            "spacing": {
                "base": {"value": "8px", "type": "spacing"},
                "large": {"value": "{spacing.base} * 2", "type": "spacing"},
            },
            "font": {
                "family": {"value": "Inter, sans-serif", "type": "fontFamilies"},
                "weight": {"value": 700, "type": "fontWeights"},
            },
            "heading": {
                "value": {"fontFamily": "{font.family}", "fontWeight": "{font.weight}"},
                "type": "typography",
            },
        },
        "light": {
            "theme": {
                "background": {"value": "{color.white}", "type": "color"},
                "shadow": {
                    "value": {
                        "x": 0,
                        "y": 4,
                        "blur": 24,
                        "spread": 0,
                        "color": "#000000",
                        "type": "dropShadow",
                    },
                    "type": "boxShadow",
                },
            }
        },
        "dark": {
            "theme": {
                "background": {"value": "{color.black}", "type": "color"},
            }
        },
    }


@pytest.fixture
def tokens_file(tmp_path: Path, export_data: dict[str, Any]) -> Path:
    """Write the export as a single ``tokens.json``."""
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps(export_data))
    return path


@pytest.fixture
def tokens_dir(tmp_path: Path, export_data: dict[str, Any]) -> Path:
    """Write the export in directory mode, one file per set."""
    root = tmp_path / "tokens"
    root.mkdir()
    (root / "$metadata.json").write_text(json.dumps(export_data["$metadata"]))
    (root / "$themes.json").write_text(json.dumps(export_data["$themes"]))
    for slug in export_data["$metadata"]["tokenSetOrder"]:
        (root / f"{slug}.json").write_text(json.dumps(export_data[slug]))
    return root


LibraryFactory = Callable[..., TokenLibrary]


@pytest.fixture
def make_library() -> LibraryFactory:
    """
    Build a ``TokenLibrary`` from ``(set, name, kind, value)`` tuples.

    Themes are given as ``{theme name: {set name: status}}``.
    """

    def factory(
        *specs: tuple[str, str, str, Any],
        themes: dict[str, dict[str, str]] | None = None,
        strict_names: bool = False,
    ) -> TokenLibrary:
        tokens: dict[str, Token] = {}
        set_ids: dict[str, list[str]] = {}
        for set_name, name, kind, value in specs:
            token = make_token(f"{set_name}.{name}", name, kind, value)
            tokens[token.id] = token
            set_ids.setdefault(set_name, []).append(token.id)

        token_sets = {name: TokenSet(name=name, token_ids=ids) for name, ids in set_ids.items()}
        theme_map = {
            name: Theme.model_validate({"name": name, "sets": sets})
            for name, sets in (themes or {}).items()
        }
        return TokenLibrary(tokens, token_sets, theme_map, strict_names=strict_names)

    return factory


@pytest.fixture
def make_resolver(make_library: LibraryFactory) -> Callable[..., Resolver]:
    """Shortcut: ``make_resolver(*specs)`` builds a library and wraps it in a resolver."""

    def factory(*specs: tuple[str, str, str, Any], **kwargs: Any) -> Resolver:
        return Resolver(make_library(*specs, **kwargs))

    return factory
