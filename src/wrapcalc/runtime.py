"""wrapcalc runtime — evaluate an expression tree under one integer kind."""

from __future__ import annotations

from typing import Callable

from .ast import (
    Add,
    Binary,
    BitAnd,
    BitNot,
    BitOr,
    BitXor,
    Div,
    Expr,
    Literal,
    Mul,
    Negate,
    Rem,
    ShiftLeft,
    ShiftRight,
    Sub,
)
from .errors import DivisionByZero, EvalError, LiteralOutOfRange
from .kinds import IntKind, Value


def _binary_ops(kind: IntKind) -> dict[type[Binary], Callable[[int, int], int]]:
    return {
        Mul: kind.mul,
        Div: kind.div,
        Rem: kind.rem,
        Add: kind.add,
        Sub: kind.sub,
        ShiftRight: kind.shr,
        ShiftLeft: kind.shl,
        BitAnd: kind.and_,
        BitXor: kind.xor,
        BitOr: kind.or_,
    }


class Evaluator:
    """Post-order tree walker bound to a single integer kind."""

    def __init__(self, kind: IntKind):
        self.kind: IntKind = kind
        self._ops = _binary_ops(kind)

    def eval(self, expr: Expr) -> int:
        kind = self.kind

        if isinstance(expr, Literal):
            return self._literal(expr.value, expr)

        if isinstance(expr, Negate):
            operand = expr.operand
            if kind.signed and isinstance(operand, Literal):
                # -MIN is not representable, so negate before narrowing
                return self._literal(-operand.value, operand)
            return kind.neg(self.eval(operand))

        if isinstance(expr, BitNot):
            return kind.not_(self.eval(expr.operand))

        if isinstance(expr, Binary):
            op = self._ops.get(type(expr))
            if op is None:
                raise EvalError("unknown binary operator '" + expr.op + "'", expr.pos)
            left = self.eval(expr.left)
            right = self.eval(expr.right)
            try:
                return op(left, right)
            except DivisionByZero as e:
                raise DivisionByZero(e.msg, expr.pos) from None

        raise EvalError("unknown expression node " + type(expr).__name__, expr.pos)

    def _literal(self, value: int, lit: Literal) -> int:
        try:
            return self.kind.from_literal(value)
        except LiteralOutOfRange:
            raise LiteralOutOfRange(value, self.kind, lit.pos) from None


def evaluate(expr: Expr, kind: IntKind) -> Value:
    """Evaluate expr with wrapping arithmetic in kind."""
    return Value(kind, Evaluator(kind).eval(expr))
