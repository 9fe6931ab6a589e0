"""wrapcalc parser — recursive descent, one method per precedence tier."""

from __future__ import annotations

from .ast import BINARY_OPS, UNARY_OPS, Binary, Expr, Literal, Pos, Unary
from .errors import (
    LiteralParseError,
    NestingTooDeep,
    ParseError,
    UnbalancedParens,
    UnexpectedToken,
)
from .tokens import TK_EOF, TK_INT, TK_OP, Token, tokenize

# Widest literal container: unsigned 128-bit
LITERAL_MAX: int = 2**128 - 1

# Radix -> digits in LITERAL_MAX
LITERAL_DIGITS: dict[int, int] = {
    8: 43,
    10: 39,
    16: 32,
}

MAX_NESTING: int = 64
MAX_DEPTH: int = 256

# Tiers, loosest first. Each tier is left-associative over the next one.
BIT_OR_OPS: tuple[str, ...] = ("|",)
BIT_XOR_OPS: tuple[str, ...] = ("^",)
BIT_AND_OPS: tuple[str, ...] = ("&",)
SHIFT_OPS: tuple[str, ...] = ("<<", ">>")
SUM_OPS: tuple[str, ...] = ("+", "-")
PRODUCT_OPS: tuple[str, ...] = ("*", "/", "%")


class Parser:
    """Recursive descent parser for wrapcalc expressions."""

    def __init__(
        self,
        tokens: list[Token],
        *,
        max_nesting: int = MAX_NESTING,
        max_depth: int = MAX_DEPTH,
    ):
        self.tokens: list[Token] = tokens
        self.pos: int = 0
        self.max_nesting: int = max_nesting
        self.max_depth: int = max_depth
        self._nesting: int = 0
        # id(node) -> depth of the subtree rooted there
        self._depths: dict[int, int] = {}

    # ── Helpers ──────────────────────────────────────────────

    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def at(self, value: str) -> bool:
        tok = self.current()
        return tok.type == TK_OP and tok.value == value

    def at_any(self, values: tuple[str, ...]) -> bool:
        tok = self.current()
        return tok.type == TK_OP and tok.value in values

    def at_type(self, type_: str) -> bool:
        return self.current().type == type_

    def expect(self, value: str, cls: type[ParseError] = UnexpectedToken) -> Token:
        if not self.at(value):
            raise self.error(
                "expected '" + value + "', got " + self._describe(self.current()), cls
            )
        return self.advance()

    def error(self, msg: str, cls: type[ParseError] = UnexpectedToken) -> ParseError:
        tok = self.current()
        return cls(msg, tok.line, tok.col)

    def _describe(self, tok: Token) -> str:
        if tok.type == TK_EOF:
            return "end of input"
        return "'" + tok.value + "'"

    def _pos(self) -> Pos:
        tok = self.current()
        return Pos(tok.line, tok.col)

    def _depth(self, node: Expr) -> int:
        return self._depths.get(id(node), 1)

    def _record(self, node: Expr, *children: Expr) -> Expr:
        depth = 1 + max(self._depth(c) for c in children)
        if depth > self.max_depth:
            raise self.error(
                "expression deeper than " + str(self.max_depth) + " levels",
                NestingTooDeep,
            )
        self._depths[id(node)] = depth
        return node

    def _enter(self) -> None:
        self._nesting += 1
        if self._nesting > self.max_nesting:
            raise self.error(
                "expression nested deeper than " + str(self.max_nesting) + " levels",
                NestingTooDeep,
            )

    def _leave(self) -> None:
        self._nesting -= 1

    def _binary(self, op: str, left: Expr, right: Expr) -> Binary:
        node = BINARY_OPS[op](left.pos, left, right)
        self._record(node, left, right)
        return node

    # ── Top Level ────────────────────────────────────────────

    def parse_program(self) -> Expr:
        """Program = Expr EOF"""
        expr = self.parse_expr()
        if not self.at_type(TK_EOF):
            tok = self.current()
            if self.at(")"):
                raise self.error("unmatched ')'", UnbalancedParens)
            raise self.error("unexpected " + self._describe(tok) + " after expression")
        return expr

    # ── Expressions ──────────────────────────────────────────

    def parse_expr(self) -> Expr:
        return self.parse_bit_or()

    def parse_bit_or(self) -> Expr:
        """BitOr = BitXor ( '|' BitXor )*"""
        left = self.parse_bit_xor()
        while self.at_any(BIT_OR_OPS):
            op = self.advance().value
            right = self.parse_bit_xor()
            left = self._binary(op, left, right)
        return left

    def parse_bit_xor(self) -> Expr:
        """BitXor = BitAnd ( '^' BitAnd )*"""
        left = self.parse_bit_and()
        while self.at_any(BIT_XOR_OPS):
            op = self.advance().value
            right = self.parse_bit_and()
            left = self._binary(op, left, right)
        return left

    def parse_bit_and(self) -> Expr:
        """BitAnd = Shift ( '&' Shift )*"""
        left = self.parse_shift()
        while self.at_any(BIT_AND_OPS):
            op = self.advance().value
            right = self.parse_shift()
            left = self._binary(op, left, right)
        return left

    def parse_shift(self) -> Expr:
        """Shift = Sum ( ( '<<' | '>>' ) Sum )*"""
        left = self.parse_sum()
        while self.at_any(SHIFT_OPS):
            op = self.advance().value
            right = self.parse_sum()
            left = self._binary(op, left, right)
        return left

    def parse_sum(self) -> Expr:
        """Sum = Product ( ( '+' | '-' ) Product )*"""
        left = self.parse_product()
        while self.at_any(SUM_OPS):
            op = self.advance().value
            right = self.parse_product()
            left = self._binary(op, left, right)
        return left

    def parse_product(self) -> Expr:
        """Product = Unary ( ( '*' | '/' | '%' ) Unary )*"""
        left = self.parse_unary()
        while self.at_any(PRODUCT_OPS):
            op = self.advance().value
            right = self.parse_unary()
            left = self._binary(op, left, right)
        return left

    def parse_unary(self) -> Expr:
        """Unary = ( '-' | '~' | '!' ) Unary | Primary"""
        tok = self.current()
        if tok.type == TK_OP and tok.value in UNARY_OPS:
            pos = self._pos()
            op = self.advance().value
            self._enter()
            operand = self.parse_unary()
            self._leave()
            node: Unary = UNARY_OPS[op](pos, operand)
            self._record(node, operand)
            return node
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        """Primary = INT | '(' Expr ')'"""
        tok = self.current()
        pos = self._pos()

        if tok.type == TK_INT:
            self.advance()
            # int() refuses very long decimal strings, so reject those first
            if len(tok.digits.lstrip("0")) > LITERAL_DIGITS[tok.radix]:
                raise LiteralParseError(tok.value, tok.line, tok.col)
            value = int(tok.digits, tok.radix)
            if value > LITERAL_MAX:
                raise LiteralParseError(tok.value, tok.line, tok.col)
            return Literal(pos, value, tok.value)

        if self.at("("):
            self.advance()
            self._enter()
            expr = self.parse_expr()
            self._leave()
            self.expect(")", UnbalancedParens)
            return expr

        if self.at(")") and self._nesting == 0:
            raise self.error("unmatched ')'", UnbalancedParens)
        raise self.error("expected expression, got " + self._describe(tok))


def parse(
    source: str, *, max_nesting: int = MAX_NESTING, max_depth: int = MAX_DEPTH
) -> Expr:
    """Parse expression text into an Expr tree."""
    tokens = tokenize(source)
    parser = Parser(tokens, max_nesting=max_nesting, max_depth=max_depth)
    return parser.parse_program()
