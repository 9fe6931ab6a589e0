"""wrapcalc diagnostics — errors raised by the lexer, parser and evaluator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ast import Pos
    from .kinds import IntKind


class CalcError(Exception):
    """Base error for everything wrapcalc raises."""


# ============================================================
# Parse-time
# ============================================================


class ParseError(CalcError):
    """Parse error with location info."""

    def __init__(self, msg: str, line: int, col: int):
        self.msg: str = msg
        self.line: int = line
        self.col: int = col
        super().__init__(msg + " at line " + str(line) + " col " + str(col))


class InvalidToken(ParseError):
    """The lexer could not classify a character."""


class UnexpectedToken(ParseError):
    """A token that the grammar does not allow here."""


class UnbalancedParens(UnexpectedToken):
    """A missing or stray parenthesis."""


class LiteralParseError(ParseError):
    """A literal that does not fit the 128-bit literal container."""

    def __init__(self, raw: str, line: int, col: int):
        self.raw: str = raw
        super().__init__("error parsing literal: " + raw, line, col)


class NestingTooDeep(ParseError):
    """Expression exceeds the parser's nesting or depth limit."""


# ============================================================
# Evaluation-time
# ============================================================


class EvalError(CalcError):
    """Base error for evaluation failures."""

    def __init__(self, msg: str, pos: Pos | None = None):
        if pos is None:
            super().__init__(msg)
        else:
            super().__init__(f"{msg} at line {pos.line} col {pos.col}")
        self.msg = msg
        self.pos = pos


class LiteralOutOfRange(EvalError):
    """A literal that cannot be represented exactly in the evaluation kind."""

    def __init__(self, value: int, kind: IntKind, pos: Pos | None = None):
        self.value = value
        self.kind = kind
        super().__init__(f"literal '{value}' invalid for {kind.name}", pos)


class DivisionByZero(EvalError):
    """Division or remainder with a zero divisor."""
