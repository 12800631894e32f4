"""
Tokenizer for CSS math expressions.

Converts the body of a ``calc()`` (e.g. ``"var(--gutter) * 2 - 1px"``) into a
flat sequence of typed tokens. Whitespace is kept as tokens because CSS
requires spaces around ``+`` and ``-``; the validator checks placement.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from .errors import TokenizeError, TokenizeErrorKind


class CalcTokenKind(StrEnum):
    """Token types for CSS math."""

    NUMBER = auto()
    UNIT = auto()
    VARIABLE = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()
    WHITESPACE = auto()


class CalcToken:
    """A single token from the CSS math tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: CalcTokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    def __repr__(self) -> str:
        return f"CalcToken({self.kind}, {self.value!r}, pos={self.pos})"


# Optional sign, then digits and dots; the validator rejects a trailing dot
_NUMBER_RE = re.compile(r"-?[0-9.]+")
# Units (px, rem, %, ...) and the leading "var"/"calc" of a function
_WORD_RE = re.compile(r"[a-zA-Z%]+")
_VARIABLE_RE = re.compile(r"var\(--[a-zA-Z0-9_-]+\)")
# Span reported for a malformed var(): up to the next space
_FRAGMENT_RE = re.compile(r"\S+")

_OPERATORS = {"+", "*", "/"}
# ASCII only: str.isdigit() also accepts "²" and "①"
_NUMBER_START = set("0123456789.")


def tokenize(source: str) -> list[CalcToken]:
    """Tokenize a CSS math expression into a list of tokens.

    Raises:
        TokenizeError: On characters or spans that are not CSS math tokens.
    """
    tokens: list[CalcToken] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c == " ":
            tokens.append(CalcToken(CalcTokenKind.WHITESPACE, c, i))
            i += 1
            continue

        # A minus is a sign only when a digit (or dot) follows directly
        if c == "-":
            following = source[i + 1] if i + 1 < n else ""
            if following == "-":
                raise TokenizeError(TokenizeErrorKind.INVALID_NEGATIVE_OPERATOR, "--", i)
            if following in _NUMBER_START:
                i = _read_number(source, i, tokens)
            else:
                tokens.append(CalcToken(CalcTokenKind.OPERATOR, c, i))
                i += 1
            continue

        if c in _NUMBER_START:
            i = _read_number(source, i, tokens)
            continue

        if c in _OPERATORS:
            tokens.append(CalcToken(CalcTokenKind.OPERATOR, c, i))
            i += 1
            continue

        if c == "(":
            tokens.append(CalcToken(CalcTokenKind.LPAREN, c, i))
            i += 1
            continue

        if c == ")":
            tokens.append(CalcToken(CalcTokenKind.RPAREN, c, i))
            i += 1
            continue

        if c.isascii() and (c.isalpha() or c == "%"):
            i = _read_word(source, i, tokens)
            continue

        raise TokenizeError(TokenizeErrorKind.UNRECOGNIZED_CHARACTER, c, i)

    return tokens


def _read_number(source: str, start: int, tokens: list[CalcToken]) -> int:
    """Read a (possibly signed) number literal."""
    m = _NUMBER_RE.match(source, start)
    if m is None:
        raise TokenizeError(TokenizeErrorKind.UNRECOGNIZED_CHARACTER, source[start], start)
    number = m.group(0)
    if number.count(".") > 1:
        raise TokenizeError(TokenizeErrorKind.UNRECOGNIZED_TOKEN, number, start)
    tokens.append(CalcToken(CalcTokenKind.NUMBER, number, start))
    return m.end()


def _read_word(source: str, start: int, tokens: list[CalcToken]) -> int:
    """Read a unit, a ``var(--name)`` lookup or a nested ``calc(`` opener."""
    m = _WORD_RE.match(source, start)
    if m is None:
        raise TokenizeError(TokenizeErrorKind.UNRECOGNIZED_CHARACTER, source[start], start)
    word = m.group(0)

    if word.startswith("var"):
        variable = _VARIABLE_RE.match(source, start)
        if variable is None:
            fragment = _FRAGMENT_RE.match(source, start)
            text = fragment.group(0) if fragment else word
            raise TokenizeError(TokenizeErrorKind.INVALID_VARIABLE, text, start)
        tokens.append(CalcToken(CalcTokenKind.VARIABLE, variable.group(0), start))
        return variable.end()

    if word == "calc" and source.startswith("(", m.end()):
        tokens.append(CalcToken(CalcTokenKind.LPAREN, "calc(", start))
        return m.end() + 1

    tokens.append(CalcToken(CalcTokenKind.UNIT, word, start))
    return m.end()
