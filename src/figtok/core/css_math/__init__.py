"""
CSS math expressions.

Tokenizer and validator for the body of a CSS ``calc()``. The resolver uses
``is_calc_expression`` to decide whether a computed token value gets wrapped
in ``calc(...)``, so the wrap decision and the accepted grammar are the same
code path.

Usage:
    from figtok.core.css_math import check_expression, is_calc_expression

    is_calc_expression("var(--spacing-base) * 2")   # True
    check_expression("100px * 2px").kind            # MultiplicationWithUnits
"""

from __future__ import annotations

from .errors import (
    CalcError,
    CalcValidationError,
    TokenizeError,
    TokenizeErrorKind,
    ValidateErrorKind,
)
from .tokenizer import CalcToken, CalcTokenKind, tokenize
from .validator import validate


def check_expression(source: str) -> CalcError | None:
    """Return why ``source`` is not a valid calc body, or None if it is."""
    try:
        validate(tokenize(source))
    except CalcError as exc:
        return exc
    return None


def is_calc_expression(source: str) -> bool:
    """True if ``source`` is a two-sided CSS arithmetic expression."""
    return check_expression(source) is None


__all__ = [
    "CalcError",
    "CalcToken",
    "CalcTokenKind",
    "CalcValidationError",
    "TokenizeError",
    "TokenizeErrorKind",
    "ValidateErrorKind",
    "check_expression",
    "is_calc_expression",
    "tokenize",
    "validate",
]
