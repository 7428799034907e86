"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from lox.errors import ErrorReporter
from lox.scanner import Scanner
from lox.tokens import Token, TokenType


@pytest.fixture
def scan():
    """Return a helper that scans source and returns (tokens, reporter)."""

    def _scan(source: str) -> tuple[list[Token], ErrorReporter]:
        reporter = ErrorReporter()
        tokens = Scanner(source, reporter).scan_tokens()
        return tokens, reporter

    return _scan


@pytest.fixture
def lex(scan):
    """Return a helper that scans error-free source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens, reporter = scan(source)
        assert not reporter.had_error, reporter.diagnostics
        assert tokens[-1].type == TokenType.EOF
        return tokens[:-1]

    return _lex


def tok(tt: TokenType, lexeme: str, literal=None, line: int = 1) -> Token:
    """Build a token by hand, for constructing expression trees."""
    return Token(tt, lexeme, literal, line)


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
