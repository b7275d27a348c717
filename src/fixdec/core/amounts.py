"""
UDec64: unsigned 64-bit decimal fixed-point magnitude.

- The value is an integer magnitude; its meaning is value * 10^-precision.
- Precision (0..19) is supplied to every operation and never stored, so the
  same magnitude denotes different numbers under different precisions.
- Non-negative domain: magnitudes are in [0, 2^64 - 1]; anything else is
  rejected at construction.
- Float bridges are lossy and exist for interop only; all arithmetic stays in
  the integer domain.

# Alignment notes:
# - convert() reuses mul() for both directions so the half-up rule is shared.
# - to_float64() converts through Decimal in a single rounding step.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from fractions import Fraction
import math
from typing import Optional

from .constants import UINT64_MAX, DEFAULT_DECIMAL_PRECISION
from .exc import MagnitudeRangeError
from .wide import Wide, mul, mul_full, div, _check_u64, _check_precision, _ten_pow
from .parse import parse_fixed, parse_fixed_bytes, BytesLike
from .fmt import format_fixed, format_fixed_bytes

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


def _value_of(x: "int | UDec64", name: str = "value") -> int:
    if isinstance(x, UDec64):
        return x.value
    return _check_u64(x, name)


# ----------------------------
# Precision converter
# ----------------------------

def convert(value: int, src_precision: int, dest_precision: int, rounding: bool = False) -> int:
    """Rescale `value` from `src_precision` to `dest_precision`.

    Scaling up that overflows 64 bits raises MagnitudeRangeError; scaling down
    truncates, or rounds half-up when `rounding` is set.
    """
    _check_u64(value)
    _check_precision(src_precision, "src_precision")
    _check_precision(dest_precision, "dest_precision")
    if dest_precision == src_precision:
        return value
    if dest_precision > src_precision:
        factor = _ten_pow(dest_precision - src_precision)
        if mul_full(value, factor).hi != 0:
            raise MagnitudeRangeError(
                f"convert overflow: {value} from precision {src_precision} to {dest_precision}"
            )
        return mul(value, factor, 0)
    return mul(value, 1, src_precision - dest_precision, rounding)


# ----------------------------
# Float bridge
# ----------------------------

def to_float64(value: int, precision: int) -> float:
    """Nearest double to value * 10^-precision."""
    _check_u64(value)
    _check_precision(precision)
    with localcontext() as ctx:
        ctx.prec = DEFAULT_DECIMAL_PRECISION
        return float(Decimal(value).scaleb(-precision))


def from_float64(x: float, precision: int) -> int:
    """Nearest magnitude to x * 10^precision (ties to even).

    Negative, NaN, infinite, or out-of-range input raises MagnitudeRangeError.
    """
    _check_precision(precision)
    x = float(x)
    if math.isnan(x) or math.isinf(x):
        raise MagnitudeRangeError(f"non-finite float: {x!r}", text=repr(x))
    if x < 0:
        raise MagnitudeRangeError(f"negative float not allowed: {x!r}", text=repr(x))
    scaled = Fraction(x) * _ten_pow(precision)
    if scaled > UINT64_MAX:
        raise MagnitudeRangeError(f"float out of range at precision {precision}: {x!r}", text=repr(x))
    v = round(scaled)
    if v > UINT64_MAX:
        raise MagnitudeRangeError(f"float out of range at precision {precision}: {x!r}", text=repr(x))
    _dbg(f"from_float64: x={x!r}, p={precision}, v={v}")
    return v


# ----------------------------
# UDec64 (integer fixed-point)
# ----------------------------

@dataclass(frozen=True)
class UDec64:
    """Unsigned 64-bit decimal fixed-point magnitude (precision supplied per call)."""
    value: int

    def __post_init__(self):
        _check_u64(self.value)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "UDec64":
        return UDec64(0)

    @classmethod
    def parse(cls, text: str, precision: int, rounding: bool = False) -> "UDec64":
        return cls(parse_fixed(text, precision, rounding))

    @classmethod
    def parse_bytes(cls, data: BytesLike, precision: int, rounding: bool = False) -> "UDec64":
        return cls(parse_fixed_bytes(data, precision, rounding))

    @classmethod
    def from_float64(cls, x: float, precision: int) -> "UDec64":
        return cls(from_float64(x, precision))

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    # ------------- arithmetic (integer domain) -------------

    def mul(self, other: "int | UDec64", precision: int, rounding: bool = False) -> "UDec64":
        """Multiply two magnitudes at the same precision."""
        return UDec64(mul(self.value, _value_of(other, "other"), precision, rounding))

    def mul_full(self, other: "int | UDec64") -> Wide:
        """Exact unscaled product as a (hi, lo) pair."""
        return mul_full(self.value, _value_of(other, "other"))

    def div(self, other: "int | UDec64", precision: int) -> "UDec64":
        """Divide two magnitudes at the same precision (floor)."""
        return UDec64(div(self.value, _value_of(other, "other"), precision))

    def convert(self, src_precision: int, dest_precision: int, rounding: bool = False) -> "UDec64":
        return UDec64(convert(self.value, src_precision, dest_precision, rounding))

    # ------------- conversions -------------

    def to_float64(self, precision: int) -> float:
        return to_float64(self.value, precision)

    def to_decimal(self, precision: int) -> Decimal:
        """Exact Decimal value, for logs/printing only."""
        _check_precision(precision)
        return Decimal(self.value).scaleb(-precision)

    # ------------- formatting -------------

    def format(self, precision: int, trim_zeroes: bool = False) -> str:
        return format_fixed(self.value, precision, precision, trim_zeroes)

    def format_new(self, precision: int, display_precision: int, trim_zeroes: bool = False) -> str:
        return format_fixed(self.value, precision, display_precision, trim_zeroes)

    def format_bytes(self, precision: int, trim_zeroes: bool = False) -> bytes:
        return format_fixed_bytes(self.value, precision, precision, trim_zeroes)

    def format_new_bytes(self, precision: int, display_precision: int, trim_zeroes: bool = False) -> bytes:
        return format_fixed_bytes(self.value, precision, display_precision, trim_zeroes)

    def __int__(self) -> int:
        return self.value


def parse_udec64(text: str, precision: int, rounding: bool = False) -> UDec64:
    """Parse decimal text into a UDec64 at the given precision."""
    return UDec64.parse(text, precision, rounding)


def parse_udec64_bytes(data: BytesLike, precision: int, rounding: bool = False) -> UDec64:
    """Parse a decimal byte sequence into a UDec64 at the given precision."""
    return UDec64.parse_bytes(data, precision, rounding)


def format_udec64(
    value: "int | UDec64",
    precision: int,
    display_precision: Optional[int] = None,
    trim_zeroes: bool = False,
) -> str:
    return format_fixed(_value_of(value), precision, display_precision, trim_zeroes)


def format_udec64_bytes(
    value: "int | UDec64",
    precision: int,
    display_precision: Optional[int] = None,
    trim_zeroes: bool = False,
) -> bytes:
    return format_fixed_bytes(_value_of(value), precision, display_precision, trim_zeroes)


__all__ = [
    "UDec64",
    "convert",
    "to_float64",
    "from_float64",
    "parse_udec64",
    "parse_udec64_bytes",
    "format_udec64",
    "format_udec64_bytes",
]
