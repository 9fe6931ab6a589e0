"""wrapcalc integer kinds — fixed-width two's-complement arithmetic on Python ints.

Each `IntKind` is one concrete width/signedness. Values handled by a kind are
plain Python ints already reduced into that kind's range; every operation
returns a value reduced the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import DivisionByZero, LiteralOutOfRange


def _int_divmod_trunc(a: int, b: int) -> tuple[int, int]:
    if b == 0:
        raise ZeroDivisionError
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    r = a - q * b
    return (q, r)


@dataclass(frozen=True)
class IntKind:
    """An integer representation: bit width plus signedness."""

    name: str
    bits: int
    signed: bool
    mask: int = field(init=False, repr=False, compare=False)
    min: int = field(init=False, repr=False, compare=False)
    max: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "mask", (1 << self.bits) - 1)
        if self.signed:
            object.__setattr__(self, "min", -(1 << (self.bits - 1)))
            object.__setattr__(self, "max", (1 << (self.bits - 1)) - 1)
        else:
            object.__setattr__(self, "min", 0)
            object.__setattr__(self, "max", self.mask)

    def __str__(self) -> str:
        return self.name

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    # ── Conversion ──────────────────────────────────────────

    def wrap(self, n: int) -> int:
        """Reduce any int modulo 2**bits into this kind's range."""
        n &= self.mask
        if self.signed and n > self.max:
            n -= 1 << self.bits
        return n

    def contains(self, n: int) -> bool:
        return self.min <= n <= self.max

    def from_literal(self, n: int) -> int:
        """Exact conversion from the literal container; no wrapping."""
        if not self.contains(n):
            raise LiteralOutOfRange(n, self)
        return n

    def unsigned(self, n: int) -> int:
        """The bit pattern of n, read as the same-width unsigned kind."""
        return n & self.mask

    # ── Arithmetic ──────────────────────────────────────────

    def add(self, a: int, b: int) -> int:
        return self.wrap(a + b)

    def sub(self, a: int, b: int) -> int:
        return self.wrap(a - b)

    def mul(self, a: int, b: int) -> int:
        return self.wrap(a * b)

    def neg(self, a: int) -> int:
        return self.wrap(-a)

    def div(self, a: int, b: int) -> int:
        """Truncating division. MIN / -1 wraps back to MIN."""
        try:
            q, _ = _int_divmod_trunc(a, b)
        except ZeroDivisionError:
            raise DivisionByZero("division by zero") from None
        return self.wrap(q)

    def rem(self, a: int, b: int) -> int:
        """Remainder with the sign of the dividend."""
        try:
            _, r = _int_divmod_trunc(a, b)
        except ZeroDivisionError:
            raise DivisionByZero("remainder by zero") from None
        return self.wrap(r)

    # ── Shifts ──────────────────────────────────────────────

    def shift_amount(self, b: int) -> int:
        return b & (self.bits - 1)

    def shl(self, a: int, b: int) -> int:
        return self.wrap(a << self.shift_amount(b))

    def shr(self, a: int, b: int) -> int:
        """Arithmetic for signed kinds, logical for unsigned ones."""
        return self.wrap(a >> self.shift_amount(b))

    # ── Bitwise ─────────────────────────────────────────────

    def not_(self, a: int) -> int:
        return self.wrap(~a)

    def and_(self, a: int, b: int) -> int:
        return self.wrap(a & b)

    def or_(self, a: int, b: int) -> int:
        return self.wrap(a | b)

    def xor(self, a: int, b: int) -> int:
        return self.wrap(a ^ b)


U8 = IntKind("u8", 8, False)
U16 = IntKind("u16", 16, False)
U32 = IntKind("u32", 32, False)
U64 = IntKind("u64", 64, False)
U128 = IntKind("u128", 128, False)
I8 = IntKind("i8", 8, True)
I16 = IntKind("i16", 16, True)
I32 = IntKind("i32", 32, True)
I64 = IntKind("i64", 64, True)
I128 = IntKind("i128", 128, True)

KINDS: dict[str, IntKind] = {
    k.name: k for k in (U8, U16, U32, U64, U128, I8, I16, I32, I64, I128)
}

UNSIGNED: dict[int, IntKind] = {k.bits: k for k in KINDS.values() if not k.signed}


def kind_by_name(name: str) -> IntKind:
    """Look up a kind by its name, e.g. 'i32'."""
    try:
        return KINDS[name.lower()]
    except KeyError:
        raise KeyError(
            "unknown integer type '" + name + "' (expected one of "
            + ", ".join(KINDS)
            + ")"
        ) from None


@dataclass(frozen=True)
class Value:
    """An evaluated integer together with the kind it was computed in."""

    kind: IntKind
    value: int

    @property
    def unsigned(self) -> int:
        return self.kind.unsigned(self.value)

    @property
    def unsigned_kind(self) -> IntKind:
        return UNSIGNED[self.kind.bits]

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
