"""
Error types for CSS math tokenization and validation.

These are diagnostics, not build failures: a value whose expression is
rejected is emitted without a ``calc()`` wrapper.
"""

from __future__ import annotations

from enum import StrEnum


class TokenizeErrorKind(StrEnum):
    UNRECOGNIZED_CHARACTER = "UnrecognizedCharacter"
    UNRECOGNIZED_TOKEN = "UnrecognizedToken"
    INVALID_VARIABLE = "InvalidVariable"
    INVALID_NEGATIVE_OPERATOR = "InvalidNegativeOperator"


class ValidateErrorKind(StrEnum):
    MISMATCHED_PARENTHESES = "MismatchedParentheses"
    NO_OPERATORS = "NoOperators"
    INVALID_SYNTAX = "InvalidSyntax"
    INVALID_NUMBER = "InvalidNumber"
    INVALID_DIVISION_RHS = "InvalidDivisionRHS"
    DIVISION_BY_ZERO = "DivisionByZero"
    MULTIPLICATION_WITH_UNITS = "MultiplicationWithUnits"
    INCOMPLETE_EXPRESSION = "IncompleteExpression"
    INVALID_WHITESPACE = "InvalidWhitespace"
    INVALID_VARIABLE = "InvalidVariable"


class CalcError(Exception):
    """Base error for CSS math expressions.

    Attributes:
        kind: Error kind
        fragment: Offending substring or token text
        pos: Offset of the fragment in the source string
    """

    def __init__(self, kind: TokenizeErrorKind | ValidateErrorKind, fragment: str, pos: int) -> None:
        self.kind = kind
        self.fragment = fragment
        self.pos = pos
        super().__init__(f"{kind.value}: {fragment!r} at {pos}")


class TokenizeError(CalcError):
    """Error during CSS math tokenization."""

    kind: TokenizeErrorKind


class CalcValidationError(CalcError):
    """Error during CSS math validation."""

    kind: ValidateErrorKind
