"""
fixdec Core
===========

Unified exports for the integer-domain fixed-point engine.
All arithmetic is exact on unsigned 64-bit magnitudes with 128-bit
intermediates; precision (0..19) is passed to every operation.
Decimal and float appear only in the float bridge and for display.
"""

# NOTE:
#   A magnitude is meaningless without its precision. Nothing in `core`
#   stores precision; callers keep it alongside the value.

# Integer-domain constants
from .constants import (
    UINT64_BITS,
    UINT64_MAX,
    MAX_PRECISION,
    UINT64_POWERS,
    EXPONENT_MIN,
    EXPONENT_MAX,
    DEFAULT_DECIMAL_PRECISION,
)

# Wide arithmetic engine
from .wide import (
    Wide,
    mul,
    mul_full,
    div,
    div_full,
)

# Text codec (int magnitudes)
from .parse import (
    parse_fixed,
    parse_fixed_bytes,
    parse_uint_bytes,
)
from .fmt import (
    format_fixed,
    format_fixed_bytes,
)

# Value type, converter and float bridge
from .amounts import (
    UDec64,
    convert,
    to_float64,
    from_float64,
    parse_udec64,
    parse_udec64_bytes,
    format_udec64,
    format_udec64_bytes,
)

# Core exceptions
from .exc import (
    FixedPointError,
    NumeralSyntaxError,
    MagnitudeRangeError,
    AmountDomainError,
    InvariantViolation,
)

__all__ = [
    # constants
    "UINT64_BITS",
    "UINT64_MAX",
    "MAX_PRECISION",
    "UINT64_POWERS",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
    "DEFAULT_DECIMAL_PRECISION",
    # wide
    "Wide",
    "mul",
    "mul_full",
    "div",
    "div_full",
    # parse / fmt
    "parse_fixed",
    "parse_fixed_bytes",
    "parse_uint_bytes",
    "format_fixed",
    "format_fixed_bytes",
    # amounts
    "UDec64",
    "convert",
    "to_float64",
    "from_float64",
    "parse_udec64",
    "parse_udec64_bytes",
    "format_udec64",
    "format_udec64_bytes",
    # exceptions
    "FixedPointError",
    "NumeralSyntaxError",
    "MagnitudeRangeError",
    "AmountDomainError",
    "InvariantViolation",
]
