"""
Wide (128-bit) arithmetic primitives for 64-bit fixed-point magnitudes.

- Products are exact double-width values, exposed as a (hi, lo) pair.
- Division is 128-by-64: the dividend is a (hi, lo) pair, the divisor a uint64.
- mul/div rescale by 10^precision and return the low 64 bits of the quotient.

Python ints are the wide-integer facility; `Wide` is the explicit pair view
callers receive from mul_full and hand to div_full.

# Alignment notes:
# - mul rounds half-up on the remainder (2 * rem >= divisor); with divisor 1
#   (precision 0) the remainder is always 0 and nothing is rounded.
# - div_full faults when the quotient would not fit in 64 bits (hi >= divisor),
#   the same precondition a hardware 128/64 divide imposes.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from .constants import UINT64_BITS, UINT64_MAX, UINT64_MASK, MAX_PRECISION, UINT64_POWERS
from .exc import AmountDomainError, InvariantViolation

# Debug printing control
DEBUG_WIDE = False

def _dbg(msg: str) -> None:
    if DEBUG_WIDE:
        print(msg)


# ----------------------------
# Domain checks (centralised)
# ----------------------------

def _check_u64(x: int, name: str = "value") -> int:
    if not isinstance(x, int) or isinstance(x, bool):
        raise AmountDomainError(f"{name} must be int, got {type(x).__name__}")
    if x < 0 or x > UINT64_MAX:
        raise AmountDomainError(f"{name} outside uint64 range: {x}")
    return x


def _check_precision(precision: int, name: str = "precision") -> int:
    if not isinstance(precision, int) or isinstance(precision, bool):
        raise AmountDomainError(f"{name} must be int, got {type(precision).__name__}")
    if precision < 0 or precision > MAX_PRECISION:
        raise AmountDomainError(f"{name} must be in [0, {MAX_PRECISION}], got {precision}")
    return precision


def _ten_pow(precision: int) -> int:
    """Return 10**precision from the powers table (0 <= precision <= 19)."""
    return UINT64_POWERS[_check_precision(precision)]


# ----------------------------
# Wide pair
# ----------------------------

class Wide(NamedTuple):
    """Unsigned 128-bit value as (hi, lo) 64-bit halves."""
    hi: int
    lo: int

    @classmethod
    def from_int(cls, x: int) -> "Wide":
        if x < 0 or x >> (2 * UINT64_BITS):
            raise AmountDomainError(f"value outside uint128 range: {x}")
        return cls(x >> UINT64_BITS, x & UINT64_MASK)

    @property
    def value(self) -> int:
        return (self.hi << UINT64_BITS) | self.lo


def _div_wide(n: int, d: int) -> Tuple[int, int]:
    if d == 0:
        raise ZeroDivisionError("division by zero divisor")
    return divmod(n, d)


# ----------------------------
# Public primitives
# ----------------------------

def mul_full(a: int, b: int) -> Wide:
    """Exact double-width product of two uint64 values, unscaled."""
    _check_u64(a, "a")
    _check_u64(b, "b")
    return Wide.from_int(a * b)


def div_full(hi: int, lo: int, b: int) -> Tuple[int, int]:
    """Divide the 128-bit value (hi, lo) by b; return (quotient, remainder).

    The quotient must fit in 64 bits, i.e. hi < b; otherwise InvariantViolation.
    """
    _check_u64(hi, "hi")
    _check_u64(lo, "lo")
    _check_u64(b, "b")
    if b == 0:
        raise ZeroDivisionError("division by zero divisor")
    if hi >= b:
        raise InvariantViolation(f"div_full quotient overflow (hi={hi}, b={b})")
    return _div_wide(Wide(hi, lo).value, b)


def mul(a: int, b: int, precision: int, rounding: bool = False) -> int:
    """Fixed-point multiply: (a * b) / 10^precision, optionally rounded half-up.

    Returns the low 64 bits of the quotient. A quotient wider than 64 bits is
    the caller's responsibility and is not re-checked here.
    """
    _check_u64(a, "a")
    _check_u64(b, "b")
    divisor = _ten_pow(precision)
    quo, rem = _div_wide(mul_full(a, b).value, divisor)
    if rounding and 2 * rem >= divisor:
        quo += 1
    _dbg(f"mul: a={a}, b={b}, p={precision}, quo={quo}, rem={rem}")
    return quo & UINT64_MASK


def div(a: int, b: int, precision: int) -> int:
    """Fixed-point divide: (a * 10^precision) // b.

    b == 0 raises ZeroDivisionError. Returns the low 64 bits of the quotient.
    """
    _check_u64(a, "a")
    _check_u64(b, "b")
    if b == 0:
        raise ZeroDivisionError("division by zero divisor")
    scaled = mul_full(a, _ten_pow(precision))
    quo, rem = _div_wide(scaled.value, b)
    _dbg(f"div: a={a}, b={b}, p={precision}, quo={quo}, rem={rem}")
    return quo & UINT64_MASK


__all__ = [
    "Wide",
    "mul",
    "mul_full",
    "div",
    "div_full",
]
