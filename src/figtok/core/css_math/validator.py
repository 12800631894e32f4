"""
Validator for CSS math token streams.

Accepts the subset of ``calc()`` syntax design tokens use: numbers with
optional units, ``var(--name)`` lookups, ``+ - * /`` and parentheses. It is a
structural gate, not an evaluator: it knows that ``100px * 2px`` has too many
units but not that ``100% * 50%`` is dimensionally odd.

Each parenthesis level gets its own scope tracking the latest operator,
whether a unit has been seen in the current multiplicative run, and the
kind of the last significant token.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import CalcValidationError, ValidateErrorKind
from .tokenizer import CalcToken, CalcTokenKind

_VARIABLE_RE = re.compile(r"^var\(--[a-zA-Z0-9_-]+\)$")

# Operators that start a new additive term
_ADDITIVE = {"+", "-"}


@dataclass
class _Scope:
    opener: CalcToken | None = None
    latest_operator: str | None = None
    unit_seen: bool = False
    last_kind: CalcTokenKind | None = None


def validate(tokens: list[CalcToken]) -> None:
    """Validate a token stream produced by ``tokenize``.

    Raises:
        CalcValidationError: On the first rule the stream breaks.
    """
    scopes = [_Scope()]
    previous: CalcToken | None = None
    has_operator = False

    for index, token in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        scope = scopes[-1]

        if token.kind == CalcTokenKind.WHITESPACE:
            _check_whitespace(token, previous, following)

        elif token.kind == CalcTokenKind.LPAREN:
            if scope.last_kind not in (None, CalcTokenKind.OPERATOR):
                raise _error(ValidateErrorKind.INVALID_SYNTAX, token)
            scope.last_kind = CalcTokenKind.LPAREN
            scopes.append(_Scope(opener=token))

        elif token.kind == CalcTokenKind.RPAREN:
            if len(scopes) == 1:
                raise _error(ValidateErrorKind.MISMATCHED_PARENTHESES, token)
            inner = scopes.pop()
            if inner.last_kind is None:
                raise _error(ValidateErrorKind.INVALID_SYNTAX, token)
            if inner.last_kind == CalcTokenKind.OPERATOR:
                raise _error(ValidateErrorKind.INCOMPLETE_EXPRESSION, token)
            scopes[-1].last_kind = CalcTokenKind.RPAREN

        elif token.kind == CalcTokenKind.NUMBER:
            _check_operand_position(token, scope)
            if token.value.endswith("."):
                raise _error(ValidateErrorKind.INVALID_NUMBER, token)
            if scope.latest_operator == "/" and token.value == "0":
                raise _error(ValidateErrorKind.DIVISION_BY_ZERO, token)
            scope.last_kind = CalcTokenKind.NUMBER

        elif token.kind == CalcTokenKind.VARIABLE:
            _check_operand_position(token, scope)
            if not _VARIABLE_RE.match(token.value):
                raise _error(ValidateErrorKind.INVALID_VARIABLE, token)
            scope.last_kind = CalcTokenKind.VARIABLE

        elif token.kind == CalcTokenKind.UNIT:
            # Units attach directly to a number: "10px", never "10 px"
            if previous is None or previous.kind != CalcTokenKind.NUMBER:
                raise _error(ValidateErrorKind.INVALID_SYNTAX, token)
            if scope.latest_operator == "/":
                raise _error(ValidateErrorKind.INVALID_DIVISION_RHS, token)
            if scope.latest_operator == "*" and scope.unit_seen:
                raise _error(ValidateErrorKind.MULTIPLICATION_WITH_UNITS, token)
            scope.unit_seen = True
            scope.last_kind = CalcTokenKind.UNIT

        elif token.kind == CalcTokenKind.OPERATOR:
            if scope.last_kind in (None, CalcTokenKind.OPERATOR):
                raise _error(ValidateErrorKind.INVALID_SYNTAX, token)
            if previous is None or previous.kind != CalcTokenKind.WHITESPACE:
                raise _error(ValidateErrorKind.INVALID_WHITESPACE, token)
            if following is not None and following.kind != CalcTokenKind.WHITESPACE:
                raise _error(ValidateErrorKind.INVALID_WHITESPACE, token)
            scope.latest_operator = token.value
            if token.value in _ADDITIVE:
                scope.unit_seen = False
            scope.last_kind = CalcTokenKind.OPERATOR
            has_operator = True

        previous = token

    opener = scopes[-1].opener
    if opener is not None:
        raise _error(ValidateErrorKind.MISMATCHED_PARENTHESES, opener)

    if scopes[0].last_kind == CalcTokenKind.OPERATOR and previous is not None:
        raise _error(ValidateErrorKind.INCOMPLETE_EXPRESSION, previous)

    if not has_operator:
        source = "".join(token.value for token in tokens)
        raise CalcValidationError(ValidateErrorKind.NO_OPERATORS, source, 0)


def _check_operand_position(token: CalcToken, scope: _Scope) -> None:
    """Numbers and variables open a scope or follow an operator."""
    if scope.last_kind not in (None, CalcTokenKind.OPERATOR):
        raise _error(ValidateErrorKind.INVALID_SYNTAX, token)


def _check_whitespace(
    token: CalcToken, previous: CalcToken | None, following: CalcToken | None
) -> None:
    """Single spaces only, never at the edges or just inside parentheses."""
    if previous is None or following is None:
        raise _error(ValidateErrorKind.INVALID_WHITESPACE, token)
    if previous.kind in (CalcTokenKind.WHITESPACE, CalcTokenKind.LPAREN):
        raise _error(ValidateErrorKind.INVALID_WHITESPACE, token)
    if following.kind == CalcTokenKind.RPAREN:
        raise _error(ValidateErrorKind.INVALID_WHITESPACE, token)


def _error(kind: ValidateErrorKind, token: CalcToken) -> CalcValidationError:
    return CalcValidationError(kind, token.value, token.pos)
