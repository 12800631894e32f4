"""Tests for the in-memory token store."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from figtok.core.errors import (
    AmbiguousReferenceError,
    LoadError,
    UnknownThemeError,
    UnknownTokenError,
)
from figtok.core.ir import TokenSet, make_token
from figtok.core.store import TokenLibrary

LibraryFactory = Callable[..., TokenLibrary]

THEMES = {
    "Light": {"global": "source", "light": "enabled"},
    "Dark": {"dark": "enabled", "global": "source"},
}


@pytest.fixture
def library(make_library: LibraryFactory) -> TokenLibrary:
    return make_library(
        ("global", "color.black", "color", "#000"),
        ("global", "spacing.base", "spacing", "8px"),
        ("light", "bg", "color", "#fff"),
        ("dark", "bg", "color", "#000"),
        themes=THEMES,
    )


class TestLookup:
    def test_lookup_by_id(self, library: TokenLibrary) -> None:
        assert library.lookup("light.bg").name == "bg"

    def test_unknown_id(self, library: TokenLibrary) -> None:
        with pytest.raises(UnknownTokenError):
            library.lookup("nope.bg")

    def test_unknown_theme(self, library: TokenLibrary) -> None:
        with pytest.raises(UnknownThemeError):
            library.theme("Sepia")


class TestActiveTokens:
    def test_all_tokens_without_theme(self, library: TokenLibrary) -> None:
        assert [token.id for token in library.active_tokens()] == [
            "global.color.black",
            "global.spacing.base",
            "light.bg",
            "dark.bg",
        ]

    def test_source_sets_before_enabled(self, library: TokenLibrary) -> None:
        assert [token.id for token in library.active_tokens("Dark")] == [
            "global.color.black",
            "global.spacing.base",
            "dark.bg",
        ]

    def test_returns_a_copy(self, library: TokenLibrary) -> None:
        library.active_tokens("Light").clear()
        assert len(library.active_tokens("Light")) == 3

    def test_unknown_theme(self, library: TokenLibrary) -> None:
        with pytest.raises(UnknownThemeError):
            library.active_tokens("Sepia")


class TestFind:
    def test_find_by_theme(self, library: TokenLibrary) -> None:
        light = library.find("bg", "Light")
        dark = library.find("bg", "Dark")
        assert light is not None and light.id == "light.bg"
        assert dark is not None and dark.id == "dark.bg"

    def test_missing_name(self, library: TokenLibrary) -> None:
        assert library.find("nope") is None

    def test_first_match_wins(self, library: TokenLibrary, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="figtok.core.store"):
            token = library.find("bg")
        assert token is not None and token.id == "light.bg"
        assert any("'bg'" in record.message for record in caplog.records)

    def test_duplicate_names(self, library: TokenLibrary) -> None:
        assert library.duplicate_names() == {"bg": ["light.bg", "dark.bg"]}
        assert library.duplicate_names("Light") == {}

    def test_strict_names(self, make_library: LibraryFactory) -> None:
        library = make_library(
            ("light", "bg", "color", "#fff"),
            ("dark", "bg", "color", "#000"),
            strict_names=True,
        )
        with pytest.raises(AmbiguousReferenceError) as exc_info:
            library.find("bg")
        assert exc_info.value.candidates == ["light.bg", "dark.bg"]


class TestConstruction:
    def test_set_with_unknown_token(self) -> None:
        token = make_token("a.x", "x", "spacing", "1px")
        with pytest.raises(LoadError):
            TokenLibrary({token.id: token}, {"a": TokenSet(name="a", token_ids=["a.x", "a.y"])})

    def test_collections(self, library: TokenLibrary) -> None:
        assert [token_set.name for token_set in library.token_sets] == ["global", "light", "dark"]
        assert [theme.name for theme in library.themes] == ["Light", "Dark"]
        assert [token.id for token in library.tokens_in_set("light")] == ["light.bg"]
