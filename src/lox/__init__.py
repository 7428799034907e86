"""Lox front end: scanner, expression tree model, and reference printer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lox.errors import Diagnostic
    from lox.tokens import Token

__version__ = "0.1.0"


def scan(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """Scan Lox source, returning the tokens and any diagnostics reported."""
    from lox.errors import ErrorReporter
    from lox.scanner import Scanner

    reporter = ErrorReporter()
    tokens = Scanner(source, reporter).scan_tokens()
    return tokens, reporter.diagnostics
