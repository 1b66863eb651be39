"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from loxfront.ast import Expr
from loxfront.parser import parse_source
from loxfront.scanner import scan
from loxfront.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = scan(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def parse_one():
    """Return a helper that parses source holding exactly one expression."""

    def _parse(source: str) -> Expr:
        exprs = parse_source(source, "test.lox")
        assert len(exprs) == 1, f"Expected 1 expression, got {len(exprs)}"
        return exprs[0]

    return _parse


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
