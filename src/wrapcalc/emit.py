"""wrapcalc emitter — converts an expression tree back into text.

Output uses the minimum parentheses needed for `parse` to rebuild the same
tree shape.
"""

from __future__ import annotations

from .ast import Binary, Expr, Literal, Unary


def to_source(expr: Expr) -> str:
    """Render an `Expr` back into expression text."""
    return _Emitter().render(expr)


class _Emitter:
    # Expression precedence (higher binds tighter)
    _PREC_BITOR: int = 1
    _PREC_BITXOR: int = 2
    _PREC_BITAND: int = 3
    _PREC_SHIFT: int = 4
    _PREC_SUM: int = 5
    _PREC_PRODUCT: int = 6
    _PREC_UNARY: int = 7
    _PREC_PRIMARY: int = 8

    _BIN_PREC: dict[str, int] = {
        "|": _PREC_BITOR,
        "^": _PREC_BITXOR,
        "&": _PREC_BITAND,
        "<<": _PREC_SHIFT,
        ">>": _PREC_SHIFT,
        "+": _PREC_SUM,
        "-": _PREC_SUM,
        "*": _PREC_PRODUCT,
        "/": _PREC_PRODUCT,
        "%": _PREC_PRODUCT,
    }

    def render(self, expr: Expr) -> str:
        return self._render_expr(expr, 0)

    def _expr_prec(self, expr: Expr) -> int:
        if isinstance(expr, Binary):
            if expr.op not in self._BIN_PREC:
                raise ValueError(f"unknown binary operator: {expr.op}")
            return self._BIN_PREC[expr.op]
        if isinstance(expr, Unary):
            return self._PREC_UNARY
        return self._PREC_PRIMARY

    def _render_expr(self, expr: Expr, parent_prec: int, side: str = "") -> str:
        prec = self._expr_prec(expr)
        text = self._render_expr_inner(expr, prec)
        # Every binary tier is left-associative
        if prec < parent_prec or (
            prec == parent_prec and side == "right" and prec < self._PREC_UNARY
        ):
            return f"({text})"
        return text

    def _render_expr_inner(self, expr: Expr, prec: int) -> str:
        if isinstance(expr, Literal):
            return expr.raw
        if isinstance(expr, Unary):
            operand = self._render_expr(expr.operand, prec)
            # Keep "- -1" from reading as a doubled operator
            if isinstance(expr.operand, Unary) and not operand.startswith("("):
                return expr.op + " " + operand
            return expr.op + operand
        if isinstance(expr, Binary):
            left = self._render_expr(expr.left, prec, "left")
            right = self._render_expr(expr.right, prec, "right")
            return f"{left} {expr.op} {right}"
        raise ValueError(f"unknown expression node: {type(expr).__name__}")
