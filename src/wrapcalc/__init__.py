"""wrapcalc — fixed-width integer expression calculator, public API."""

from __future__ import annotations

from .ast import Expr
from .display import HEX, OCT, RADIXES, Radix, format_value
from .emit import to_source
from .errors import (
    CalcError as CalcError,
    DivisionByZero as DivisionByZero,
    EvalError as EvalError,
    InvalidToken as InvalidToken,
    LiteralOutOfRange as LiteralOutOfRange,
    LiteralParseError as LiteralParseError,
    NestingTooDeep as NestingTooDeep,
    ParseError as ParseError,
    UnbalancedParens as UnbalancedParens,
    UnexpectedToken as UnexpectedToken,
)
from .kinds import KINDS as KINDS, IntKind as IntKind, Value as Value, kind_by_name
from .parse import Parser as Parser, parse as _parse
from .runtime import evaluate as _evaluate

__all__ = [
    "CalcError",
    "DivisionByZero",
    "EvalError",
    "Expr",
    "HEX",
    "IntKind",
    "InvalidToken",
    "KINDS",
    "LiteralOutOfRange",
    "LiteralParseError",
    "NestingTooDeep",
    "OCT",
    "ParseError",
    "Parser",
    "RADIXES",
    "Radix",
    "UnbalancedParens",
    "UnexpectedToken",
    "Value",
    "emit",
    "evaluate",
    "format",
    "kind_by_name",
    "parse",
]


def parse(source: str) -> Expr:
    """Parse expression text into an `Expr` tree."""
    return _parse(source)


def evaluate(expr: Expr, kind: IntKind | str) -> Value:
    """Evaluate a tree in the given kind (an `IntKind` or a name like 'i32')."""
    if isinstance(kind, str):
        kind = kind_by_name(kind)
    return _evaluate(expr, kind)


def format(value: Value, radix: Radix | str = HEX) -> str:
    """Render a value as decimal, alternate-radix and binary lines."""
    if isinstance(radix, str):
        radix = RADIXES[radix]
    return format_value(value, radix)


def emit(expr: Expr) -> str:
    """Emit an `Expr` as canonical expression text."""
    return to_source(expr)
