"""wrapcalc AST — parse-time expression node definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


# ============================================================
# POSITION
# ============================================================


@dataclass(frozen=True)
class Pos:
    """Source position, 1-indexed."""

    line: int
    col: int


# ============================================================
# EXPRESSIONS
# ============================================================


@dataclass(frozen=True)
class Expr:
    """Base for all expressions."""

    pos: Pos


@dataclass(frozen=True)
class Literal(Expr):
    """Integer literal. value is the unsigned magnitude, range-checked at eval."""

    value: int
    raw: str


@dataclass(frozen=True)
class Unary(Expr):
    """op operand."""

    op: ClassVar[str] = ""
    operand: Expr


@dataclass(frozen=True)
class Negate(Unary):
    op: ClassVar[str] = "-"


@dataclass(frozen=True)
class BitNot(Unary):
    op: ClassVar[str] = "~"


@dataclass(frozen=True)
class Binary(Expr):
    """left op right."""

    op: ClassVar[str] = ""
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Mul(Binary):
    op: ClassVar[str] = "*"


@dataclass(frozen=True)
class Div(Binary):
    op: ClassVar[str] = "/"


@dataclass(frozen=True)
class Rem(Binary):
    op: ClassVar[str] = "%"


@dataclass(frozen=True)
class Add(Binary):
    op: ClassVar[str] = "+"


@dataclass(frozen=True)
class Sub(Binary):
    op: ClassVar[str] = "-"


@dataclass(frozen=True)
class ShiftRight(Binary):
    op: ClassVar[str] = ">>"


@dataclass(frozen=True)
class ShiftLeft(Binary):
    op: ClassVar[str] = "<<"


@dataclass(frozen=True)
class BitAnd(Binary):
    op: ClassVar[str] = "&"


@dataclass(frozen=True)
class BitXor(Binary):
    op: ClassVar[str] = "^"


@dataclass(frozen=True)
class BitOr(Binary):
    op: ClassVar[str] = "|"


# Operator symbol -> node class
UNARY_OPS: dict[str, type[Unary]] = {
    "-": Negate,
    "~": BitNot,
    "!": BitNot,
}

BINARY_OPS: dict[str, type[Binary]] = {
    cls.op: cls
    for cls in (
        Mul,
        Div,
        Rem,
        Add,
        Sub,
        ShiftRight,
        ShiftLeft,
        BitAnd,
        BitXor,
        BitOr,
    )
}
