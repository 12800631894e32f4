"""Tests for token, token set and theme models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from figtok.core.ir import (
    CompositionToken,
    ShadowLayerKind,
    ShadowToken,
    StandardToken,
    Theme,
    TokenKind,
    TokenSetStatus,
    make_token,
)


class TestMakeToken:
    def test_standard(self) -> None:
        token = make_token("global.spacing.base", "spacing.base", "spacing", "8px")
        assert isinstance(token, StandardToken)
        assert token.kind == TokenKind.SPACING
        assert not token.has_reference

    def test_numbers_become_strings(self) -> None:
        token = make_token("g.opacity", "opacity", "opacity", 0.5)
        assert isinstance(token, StandardToken)
        assert token.value == "0.5"

    def test_reference_detection(self) -> None:
        token = make_token("g.gap", "gap", "spacing", "{spacing.base} * 2")
        assert isinstance(token, StandardToken)
        assert token.has_reference

    def test_shadow_single_layer(self) -> None:
        token = make_token(
            "g.shadow",
            "shadow",
            "boxShadow",
            {"x": 0, "y": 1, "blur": 2, "spread": 0, "color": "#000", "type": "innerShadow"},
        )
        assert isinstance(token, ShadowToken)
        assert len(token.value) == 1
        assert token.value[0].kind == ShadowLayerKind.INNER_SHADOW
        assert token.value[0].blur == "2"

    @pytest.mark.parametrize("kind", ["typography", "composition"])
    def test_composite_kinds(self, kind: str) -> None:
        token = make_token("g.h1", "h1", kind, {"fontSize": 32})
        assert isinstance(token, CompositionToken)
        assert token.value == {"fontSize": "32"}

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            make_token("g.x", "x", "gradient", "linear-gradient(red, blue)")

    def test_shape_mismatch(self) -> None:
        with pytest.raises(ValidationError):
            make_token("g.shadow", "shadow", "boxShadow", "0 0 4px black")

    def test_tokens_are_frozen(self) -> None:
        token = make_token("g.gap", "gap", "spacing", "8px")
        with pytest.raises(ValidationError):
            token.value = "16px"  # type: ignore[misc]


class TestTheme:
    def test_disabled_sets_are_dropped(self) -> None:
        theme = Theme.model_validate(
            {"name": "Light", "sets": {"global": "source", "dark": "disabled", "light": "enabled"}}
        )
        assert theme.sets == {"global": TokenSetStatus.SOURCE, "light": TokenSetStatus.ENABLED}

    def test_source_sets_come_first(self) -> None:
        theme = Theme.model_validate(
            {"name": "Light", "sets": {"light": "enabled", "global": "source", "base": "source"}}
        )
        assert theme.active_sets == ["global", "base", "light"]

    @pytest.mark.parametrize(
        "name,stem",
        [("Light", "Light"), ("Brand / Dark", "Brand-Dark"), ("a/b/c", "a-b-c")],
    )
    def test_file_stem(self, name: str, stem: str) -> None:
        assert Theme(name=name).file_stem == stem


class TestTokenKind:
    @pytest.mark.parametrize(
        "kind,prop",
        [
            ("borderRadius", "border-radius"),
            ("boxShadow", "box-shadow"),
            ("fontFamilies", "font-family"),
            ("fontSizes", "font-size"),
            ("fontWeights", "font-weight"),
            ("letterSpacing", "letter-spacing"),
            ("lineHeights", "line-height"),
            ("color", "color"),
            ("other", "other"),
        ],
    )
    def test_css_property(self, kind: str, prop: str) -> None:
        assert TokenKind(kind).css_property == prop

    def test_every_kind_has_a_property(self) -> None:
        assert all(kind.css_property for kind in TokenKind)

    @pytest.mark.parametrize("kind", ["typography", "composition"])
    def test_is_composite(self, kind: str) -> None:
        assert TokenKind(kind).is_composite
