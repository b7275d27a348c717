"""
fixdec Core Constants (integer domain)
======================================

Only integer-domain constants live here, plus the Decimal context precision
used by the float bridge. Formatting and parsing helpers live in `fmt.py`
and `parse.py`.
"""

# NOTE: precision is never stored with a magnitude; every index into
# UINT64_POWERS is a caller-supplied precision in [0, MAX_PRECISION].

# ---------------------------------------------------------------------------
# Unsigned 64-bit magnitude domain
# ---------------------------------------------------------------------------

#: Width of a magnitude in bits.
UINT64_BITS: int = 64
UINT64_MAX: int = (1 << UINT64_BITS) - 1   # 18446744073709551615
UINT64_MASK: int = UINT64_MAX

#: Largest supported precision (number of implied fractional digits).
MAX_PRECISION: int = 19

#: Powers of ten 10^0 .. 10^19; index = precision. 10^19 still fits in 64 bits.
UINT64_POWERS: tuple = tuple(10 ** p for p in range(MAX_PRECISION + 1))


# ---------------------------------------------------------------------------
# Scientific notation
# ---------------------------------------------------------------------------

#: Exponent after an 'e'/'E' marker must fit a signed 8-bit integer.
EXPONENT_MIN: int = -128
EXPONENT_MAX: int = 127


# ---------------------------------------------------------------------------
# Float bridge
# ---------------------------------------------------------------------------

#: Decimal context precision for decimal<->double conversion. Wide enough to
#: hold any 20-digit magnitude without rounding before the final conversion.
DEFAULT_DECIMAL_PRECISION: int = 40


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "UINT64_BITS",
    "UINT64_MAX",
    "UINT64_MASK",
    "MAX_PRECISION",
    "UINT64_POWERS",
    "EXPONENT_MIN",
    "EXPONENT_MAX",
    "DEFAULT_DECIMAL_PRECISION",
]
