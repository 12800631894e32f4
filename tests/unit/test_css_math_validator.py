"""Tests for the CSS math validator and the calc() wrap decision."""

from __future__ import annotations

import pytest

from figtok.core.css_math import (
    CalcValidationError,
    ValidateErrorKind,
    check_expression,
    is_calc_expression,
    tokenize,
    validate,
)


class TestValidExpressions:
    @pytest.mark.parametrize(
        "source",
        [
            "100% - 50px",
            "(100% - 60px) / 4",
            "var(--spacing-base) * 2",
            "-1 - 1",
            "10 - -1",
            "2 * 8px",
            "8px * 2 + 4px * 3",
            "calc(8px * 2) * 2",
            "((1 + 2) * 3) / 4",
            "var(--a) + var(--b)",
            "100vh / 5",
        ],
    )
    def test_accepted(self, source: str) -> None:
        validate(tokenize(source))
        assert is_calc_expression(source)


class TestInvalidExpressions:
    @pytest.mark.parametrize(
        "source,kind",
        [
            ("100px * 2px", ValidateErrorKind.MULTIPLICATION_WITH_UNITS),
            ("100px / 0", ValidateErrorKind.DIVISION_BY_ZERO),
            ("(100px", ValidateErrorKind.MISMATCHED_PARENTHESES),
            ("100px)", ValidateErrorKind.MISMATCHED_PARENTHESES),
            ("100px", ValidateErrorKind.NO_OPERATORS),
            ("10 / 2px", ValidateErrorKind.INVALID_DIVISION_RHS),
            ("1. + 2", ValidateErrorKind.INVALID_NUMBER),
            ("10 +", ValidateErrorKind.INCOMPLETE_EXPRESSION),
            ("()", ValidateErrorKind.INVALID_SYNTAX),
            ("+ 1", ValidateErrorKind.INVALID_SYNTAX),
            ("1 + + 2", ValidateErrorKind.INVALID_SYNTAX),
            ("1 2", ValidateErrorKind.INVALID_SYNTAX),
            ("px + 1", ValidateErrorKind.INVALID_SYNTAX),
            ("2 (1 + 1)", ValidateErrorKind.INVALID_SYNTAX),
        ],
    )
    def test_rejected(self, source: str, kind: ValidateErrorKind) -> None:
        with pytest.raises(CalcValidationError) as exc_info:
            validate(tokenize(source))
        assert exc_info.value.kind == kind
        assert not is_calc_expression(source)

    def test_division_by_zero_reports_the_zero(self) -> None:
        with pytest.raises(CalcValidationError) as exc_info:
            validate(tokenize("100px / 0"))
        assert exc_info.value.fragment == "0"
        assert exc_info.value.pos == 8

    def test_unit_multiplication_allowed_after_addition(self) -> None:
        # "+" starts a new term, so the second unit is fine
        assert is_calc_expression("10px * 2 + 5px")


class TestWhitespace:
    @pytest.mark.parametrize(
        "source",
        [
            " 1 + 2",
            "1 + 2 ",
            "1  + 2",
            "( 1 + 2) * 3",
            "(1 + 2 ) * 3",
            "1+2",
            "1 +2",
            "1* 2",
        ],
    )
    def test_invalid_whitespace(self, source: str) -> None:
        error = check_expression(source)
        assert error is not None
        assert error.kind == ValidateErrorKind.INVALID_WHITESPACE


class TestCheckExpression:
    def test_valid_returns_none(self) -> None:
        assert check_expression("1 + 2") is None

    def test_tokenize_errors_are_reported(self) -> None:
        error = check_expression("Inter, sans-serif")
        assert error is not None
        assert error.fragment == ","

    @pytest.mark.parametrize(
        "value",
        ["8px", "Inter, sans-serif", "0, 0, 0", "#ffffff", "rgba(0, 0, 0, 16%)", "700", "m²"],
    )
    def test_plain_token_values_are_not_calc(self, value: str) -> None:
        assert not is_calc_expression(value)
