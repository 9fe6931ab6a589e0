"""wrapcalc tokenizer — lexes expression text into a flat token list."""

from __future__ import annotations

from .errors import InvalidToken


# Token type constants
TK_INT = "INT"
TK_OP = "OP"
TK_EOF = "EOF"

# Multi-character operators, matched before single-character ones
MULTI_OPS: list[str] = [
    "<<",
    ">>",
]

SINGLE_OPS: set[str] = {
    "+",
    "-",
    "*",
    "/",
    "%",
    "&",
    "|",
    "^",
    "~",
    "!",
    "(",
    ")",
}

# Skipped between tokens; newlines also advance the line counter
WHITESPACE: str = " \t\r\f\v\n"

# Literal prefix letter -> radix
RADIX_PREFIXES: dict[str, int] = {
    "x": 16,
    "X": 16,
    "o": 8,
    "O": 8,
}


class Token:
    """A token with type, value, and position.

    For integer tokens, ``radix`` is the literal's base and ``digits`` the
    digit run without its prefix.
    """

    def __init__(self, type_: str, value: str, line: int, col: int):
        self.type: str = type_
        self.value: str = value
        self.line: int = line
        self.col: int = col
        self.radix: int = 10
        self.digits: str = ""

    def __repr__(self) -> str:
        return (
            "Token("
            + self.type
            + ", "
            + repr(self.value)
            + ", "
            + str(self.line)
            + ", "
            + str(self.col)
            + ")"
        )


def _is_digit(c: str) -> bool:
    return c >= "0" and c <= "9"


def _is_hex(c: str) -> bool:
    return (c >= "0" and c <= "9") or (c >= "a" and c <= "f") or (c >= "A" and c <= "F")


def _is_octal(c: str) -> bool:
    return c >= "0" and c <= "7"


def _is_alnum(c: str) -> bool:
    return _is_digit(c) or (c >= "a" and c <= "z") or (c >= "A" and c <= "Z") or c == "_"


def _digit_pred(radix: int):
    if radix == 16:
        return _is_hex
    if radix == 8:
        return _is_octal
    return _is_digit


def tokenize(source: str) -> list[Token]:
    """Tokenize expression text into a flat list ending with TK_EOF."""
    tokens: list[Token] = []
    pos = 0
    line = 1
    col = 1
    length = len(source)

    while pos < length:
        c = source[pos]

        # Newlines
        if c == "\n":
            pos += 1
            line += 1
            col = 1
            continue

        # Whitespace
        if c in WHITESPACE:
            pos += 1
            col += 1
            continue

        start_pos = pos
        start_col = col

        # Number: 0x hex, 0o octal, or decimal
        if _is_digit(c):
            radix = 10
            if c == "0" and pos + 1 < length and source[pos + 1] in RADIX_PREFIXES:
                radix = RADIX_PREFIXES[source[pos + 1]]
                pos += 2
                col += 2
            is_digit = _digit_pred(radix)
            digit_start = pos
            while pos < length and is_digit(source[pos]):
                pos += 1
                col += 1
            # A literal runs until the next non-alphanumeric character; anything
            # left in that run is not a digit of this radix.
            if pos < length and _is_alnum(source[pos]):
                raise InvalidToken(
                    "invalid character in literal: " + repr(source[pos]), line, col
                )
            if pos == digit_start:
                raise InvalidToken(
                    "literal prefix " + repr(source[start_pos:pos]) + " has no digits",
                    line,
                    start_col,
                )
            tok = Token(TK_INT, source[start_pos:pos], line, start_col)
            tok.radix = radix
            tok.digits = source[digit_start:pos]
            tokens.append(tok)
            continue

        # Multi-character operators
        matched = False
        for op in MULTI_OPS:
            op_len = len(op)
            if pos + op_len <= length and source[pos : pos + op_len] == op:
                tokens.append(Token(TK_OP, op, line, start_col))
                pos += op_len
                col += op_len
                matched = True
                break
        if matched:
            continue

        # Single-character operators
        if c in SINGLE_OPS:
            tokens.append(Token(TK_OP, c, line, start_col))
            pos += 1
            col += 1
            continue

        raise InvalidToken("unexpected character: " + repr(c), line, col)

    tokens.append(Token(TK_EOF, "", line, col))
    return tokens
