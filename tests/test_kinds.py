"""Integer kind tests.

Each operation is checked against plain Python arithmetic reduced modulo
2**bits, over a spread of boundary operands for every kind.
"""

import pytest

from wrapcalc.errors import DivisionByZero, LiteralOutOfRange
from wrapcalc.kinds import I8, I32, KINDS, U8, U32, U128, Value, kind_by_name


def samples(kind) -> list[int]:
    """Boundary-heavy operands inside the kind's range."""
    values = {
        0,
        1,
        2,
        3,
        7,
        kind.max,
        kind.max - 1,
        kind.min,
        kind.min + 1,
        kind.max // 3,
    }
    if kind.signed:
        values |= {-1, -2, -7, kind.min // 3}
    return sorted(values)


def reference_wrap(kind, n: int) -> int:
    n %= 1 << kind.bits
    if kind.signed and n >= 1 << (kind.bits - 1):
        n -= 1 << kind.bits
    return n


def trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def test_registry_has_ten_kinds() -> None:
    assert sorted(KINDS) == sorted(
        ["u8", "u16", "u32", "u64", "u128", "i8", "i16", "i32", "i64", "i128"]
    )


def test_bounds(kind) -> None:
    if kind.signed:
        assert kind.min == -(2 ** (kind.bits - 1))
        assert kind.max == 2 ** (kind.bits - 1) - 1
    else:
        assert kind.min == 0
        assert kind.max == 2**kind.bits - 1
    assert kind.zero == 0
    assert kind.one == 1
    assert kind.mask == 2**kind.bits - 1


def test_wrap_matches_modular_reduction(kind) -> None:
    for n in [0, 1, -1, kind.max + 1, kind.min - 1, 3 * kind.mask + 5, -(2**200)]:
        assert kind.wrap(n) == reference_wrap(kind, n)
        assert kind.contains(kind.wrap(n))


def test_add_sub_mul_wrap(kind) -> None:
    for a in samples(kind):
        for b in samples(kind):
            assert kind.add(a, b) == reference_wrap(kind, a + b)
            assert kind.sub(a, b) == reference_wrap(kind, a - b)
            assert kind.mul(a, b) == reference_wrap(kind, a * b)


def test_div_rem_truncate(kind) -> None:
    for a in samples(kind):
        for b in samples(kind):
            if b == 0:
                continue
            q = trunc_div(a, b)
            assert kind.div(a, b) == reference_wrap(kind, q)
            assert kind.rem(a, b) == reference_wrap(kind, a - q * b)


def test_div_by_zero_raises(kind) -> None:
    with pytest.raises(DivisionByZero, match="division by zero"):
        kind.div(1, 0)
    with pytest.raises(DivisionByZero, match="remainder by zero"):
        kind.rem(1, 0)


def test_neg(kind) -> None:
    for a in samples(kind):
        assert kind.neg(a) == reference_wrap(kind, -a)
    # negating the minimum wraps back to itself
    assert kind.neg(kind.min) == kind.min


def test_signed_min_div_minus_one(kind) -> None:
    if not kind.signed:
        pytest.skip("signed only")
    assert kind.div(kind.min, -1) == kind.min
    assert kind.rem(kind.min, -1) == 0


def test_shift_amount_masked(kind) -> None:
    for amount in [0, 1, kind.bits - 1, kind.bits, kind.bits + 3, 2 * kind.bits + 1]:
        masked = amount & (kind.bits - 1)
        assert kind.shl(1, amount) == reference_wrap(kind, 1 << masked)
        assert kind.shr(kind.max, amount) == kind.max >> masked


def test_shr_signedness(kind) -> None:
    if kind.signed:
        assert kind.shr(-1, 1) == -1
        assert kind.shr(kind.min, kind.bits - 1) == -1
    else:
        assert kind.shr(kind.max, 1) == kind.max // 2
        assert kind.shr(kind.max, kind.bits - 1) == 1


def test_bitwise(kind) -> None:
    for a in samples(kind):
        assert kind.not_(a) == reference_wrap(kind, ~a)
        for b in samples(kind):
            assert kind.and_(a, b) == reference_wrap(kind, a & b)
            assert kind.or_(a, b) == reference_wrap(kind, a | b)
            assert kind.xor(a, b) == reference_wrap(kind, a ^ b)


def test_from_literal(kind) -> None:
    assert kind.from_literal(kind.max) == kind.max
    assert kind.from_literal(kind.min) == kind.min
    with pytest.raises(LiteralOutOfRange) as info:
        kind.from_literal(kind.max + 1)
    assert info.value.value == kind.max + 1
    assert info.value.kind is kind


def test_unsigned_view(kind) -> None:
    assert kind.unsigned(0) == 0
    assert kind.unsigned(kind.max) == kind.max & kind.mask
    if kind.signed:
        assert kind.unsigned(-1) == kind.mask
        assert kind.unsigned(kind.min) == 1 << (kind.bits - 1)


def test_kind_by_name() -> None:
    assert kind_by_name("u8") is U8
    assert kind_by_name("I32") is I32
    with pytest.raises(KeyError, match="unknown integer type 'u7'"):
        kind_by_name("u7")


def test_value() -> None:
    v = Value(I8, -1)
    assert int(v) == -1
    assert str(v) == "-1"
    assert v.unsigned == 0xFF
    assert v.unsigned_kind is U8
    assert Value(U32, 7).unsigned_kind is U32
    assert Value(U128, 5) == Value(U128, 5)
