"""Reference printer: renders an expression tree as parenthesized prefix text."""

from __future__ import annotations

from lox.ast import Binary, Expr, ExprVisitor, Grouping, Literal, Unary, accept
from lox.tokens import format_number


class AstPrinter(ExprVisitor[str]):
    """Fully parenthesized structural dump, e.g. ``(* (- 123) (group 45.67))``.

    Every composite node gets its own parentheses; nothing is elided on
    precedence.
    """

    def print(self, expr: Expr) -> str:
        return accept(expr, self)

    def visit_literal(self, expr: Literal) -> str:
        value = expr.value
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            return format_number(value)
        return str(value)

    def visit_grouping(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_unary(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def visit_binary(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name]
        parts.extend(accept(e, self) for e in exprs)
        return f"({' '.join(parts)})"
