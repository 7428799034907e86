"""Expression tree node types and the visitor protocol over them.

The variant set is closed: ``Expr`` is the union of the four node classes,
and ``accept`` matches on it exhaustively so a type checker reports any
visitor dispatch that misses a case.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeAlias, TypeVar, assert_never

from lox.tokens import LiteralValue, Token

R_co = TypeVar("R_co", covariant=True)


@dataclass(frozen=True, slots=True)
class Literal:
    """A literal number, string, boolean or nil (``None``)."""

    value: LiteralValue | int


@dataclass(frozen=True, slots=True)
class Grouping:
    """A parenthesized expression."""

    expression: Expr


@dataclass(frozen=True, slots=True)
class Unary:
    """A prefix operator applied to one operand."""

    operator: Token
    right: Expr


@dataclass(frozen=True, slots=True)
class Binary:
    """An infix operator applied to two operands."""

    left: Expr
    operator: Token
    right: Expr


Expr: TypeAlias = Literal | Grouping | Unary | Binary


class ExprVisitor(Protocol[R_co]):
    def visit_literal(self, expr: Literal) -> R_co: ...

    def visit_grouping(self, expr: Grouping) -> R_co: ...

    def visit_unary(self, expr: Unary) -> R_co: ...

    def visit_binary(self, expr: Binary) -> R_co: ...


def accept(expr: Expr, visitor: ExprVisitor[R_co]) -> R_co:
    """Dispatch *expr* to the visitor method for its variant."""
    match expr:
        case Literal():
            return visitor.visit_literal(expr)
        case Grouping():
            return visitor.visit_grouping(expr)
        case Unary():
            return visitor.visit_unary(expr)
        case Binary():
            return visitor.visit_binary(expr)
        case _:
            assert_never(expr)
