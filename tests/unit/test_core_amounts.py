import math
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from fixdec.core import (
    UINT64_MAX,
    MAX_PRECISION,
    UDec64,
    Wide,
    convert,
    to_float64,
    from_float64,
    parse_udec64,
    AmountDomainError,
    MagnitudeRangeError,
)


# -----------------------------
# UDec64 construction & domain
# -----------------------------

@pytest.mark.parametrize(
    "call,name",
    [
        (lambda: UDec64(-1), "UDec64(-1)"),
        (lambda: UDec64(UINT64_MAX + 1), "UDec64(2^64)"),
        (lambda: UDec64(1.5), "UDec64(1.5)"),
        (lambda: UDec64("1"), "UDec64('1')"),
    ],
)
def test_out_of_domain_values_rejected(call, name):
    print(f"[udec64-domain] {name} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        call()


def test_udec64_is_immutable_value():
    a = UDec64(5)
    with pytest.raises(FrozenInstanceError):
        a.value = 6  # type: ignore[misc]
    assert UDec64(5) == a
    assert hash(UDec64(5)) == hash(a)
    assert int(a) == 5
    assert UDec64.zero().is_zero()
    assert not a.is_zero()


def test_to_decimal_is_exact():
    print("[to_decimal] 425143693331510191 at p=15 -> Decimal('425.143693331510191')")
    assert UDec64(425143693331510191).to_decimal(15) == Decimal("425.143693331510191")
    assert UDec64(UINT64_MAX).to_decimal(0) == Decimal(UINT64_MAX)


# -----------------------------
# Arithmetic methods
# -----------------------------

def test_methods_delegate_to_wide_engine():
    print("[udec64-arith] mul/div/mul_full accept UDec64 or int operands")
    a = UDec64(349884939232)
    b = UDec64(495983892892)
    assert a.mul(b, 8) == UDec64(1735372942245682)
    assert a.mul(495983892892, 8) == UDec64(1735372942245682)
    assert UDec64(243720511291235).div(UDec64(443992839213), 10) == UDec64(5489289235457)
    assert UDec64(UINT64_MAX).mul_full(UINT64_MAX) == Wide(UINT64_MAX - 1, 1)


def test_div_by_zero_udec64():
    with pytest.raises(ZeroDivisionError):
        UDec64(1).div(UDec64.zero(), 2)


# -----------------------------
# Precision converter
# -----------------------------

@pytest.mark.parametrize(
    "value,src,dest,rounding,expected",
    [
        (12345, 2, 5, False, 12345000),
        (12345, 5, 2, False, 12),
        (12345, 5, 2, True, 12),
        (12355, 5, 2, True, 12),      # remainder 355 < 500
        (12500, 5, 2, True, 13),      # remainder 500 == half -> up
        (19, 1, 0, True, 2),
        (19, 1, 0, False, 1),
        (7, 3, 3, True, 7),
        (1, 0, 19, False, 10 ** 19),
        (UINT64_MAX, 19, 0, False, 1),
        (UINT64_MAX, 19, 0, True, 2),
    ],
)
def test_convert_cases(value, src, dest, rounding, expected):
    print(f"[convert] v={value} {src}->{dest} round={rounding} -> expect {expected}")
    assert convert(value, src, dest, rounding) == expected
    assert UDec64(value).convert(src, dest, rounding) == UDec64(expected)


def test_convert_upward_overflow_is_range_error():
    print("[convert-overflow] 2 at p=0 -> p=19 needs 2e19 > uint64 max")
    with pytest.raises(MagnitudeRangeError):
        convert(2, 0, 19)
    with pytest.raises(MagnitudeRangeError):
        convert(UINT64_MAX, 0, 1)


@pytest.mark.parametrize("rounding", [False, True])
@pytest.mark.parametrize("p1,p2", [(0, 0), (0, 5), (2, 9), (5, 14), (0, 14)])
def test_convert_round_trip(p1, p2, rounding):
    for v in (0, 1, 12345, 99999):
        up = convert(v, p1, p2, rounding)
        assert convert(up, p2, p1, rounding) == v


def test_convert_rejects_bad_precision():
    with pytest.raises(AmountDomainError):
        convert(1, 0, MAX_PRECISION + 1)
    with pytest.raises(AmountDomainError):
        convert(1, -1, 0)


# -----------------------------
# Float bridge
# -----------------------------

@pytest.mark.parametrize(
    "value,precision,expected",
    [
        (0, 5, 0.0),
        (15, 1, 1.5),
        (1, 1, 0.1),
        (3, 1, 0.3),
        (425143693331510191, 15, 425.143693331510191),
        (1, 19, 1e-19),
        (UINT64_MAX, 0, 18446744073709551615.0),
    ],
)
def test_to_float64_is_correctly_rounded(value, precision, expected):
    print(f"[to_float64] v={value} p={precision} -> expect {expected!r}")
    assert to_float64(value, precision) == expected
    assert UDec64(value).to_float64(precision) == expected


@pytest.mark.parametrize(
    "x,precision,expected",
    [
        (0.0, 5, 0),
        (1.5, 1, 15),
        (0.1, 1, 1),
        (0.3, 2, 30),
        (425.143693331510191, 3, 425144),
        (2.5, 0, 2),          # tie -> even
        (3.5, 0, 4),
        (1e-30, 19, 0),
        (18446744073709549568.0, 0, 18446744073709549568),
    ],
)
def test_from_float64_rounds_to_nearest(x, precision, expected):
    print(f"[from_float64] x={x!r} p={precision} -> expect {expected}")
    assert from_float64(x, precision) == expected
    assert UDec64.from_float64(x, precision) == UDec64(expected)


@pytest.mark.parametrize(
    "x,precision",
    [
        (-1.0, 2),
        (-1e-300, 0),
        (math.inf, 0),
        (math.nan, 0),
        (18446744073709551616.0, 0),
        (1.9, 19),
    ],
)
def test_from_float64_range_errors(x, precision):
    print(f"[from_float64-range] x={x!r} p={precision} -> expect MagnitudeRangeError")
    with pytest.raises(MagnitudeRangeError):
        from_float64(x, precision)


def test_float_round_trip_for_short_decimals():
    for text in ("0.1", "12.34", "999.999", "0.000001"):
        v = parse_udec64(text, 6).value
        assert from_float64(to_float64(v, 6), 6) == v
