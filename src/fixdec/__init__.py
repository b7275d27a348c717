# Top-level API for fixdec (integer-domain).
"""
Top-level API for fixdec.

Exact unsigned 64-bit decimal fixed point: a magnitude `value` read as
`value * 10^-precision`, with the precision supplied per call.

  - UDec64: immutable magnitude wrapper with arithmetic/format methods
  - mul/div/mul_full/div_full: 128-bit-intermediate arithmetic on ints
  - parse_udec64 / format_udec64: plain numeral text codec
  - locale_format / locale_parse: glyph and grouping substitution per language

Errors: NumeralSyntaxError and MagnitudeRangeError (both FixedPointError,
a ValueError) for bad input; AmountDomainError for caller precondition
violations.
"""

from __future__ import annotations

from .core import (
    UINT64_MAX,
    MAX_PRECISION,
    Wide,
    UDec64,
    mul,
    mul_full,
    div,
    div_full,
    convert,
    to_float64,
    from_float64,
    parse_udec64,
    parse_udec64_bytes,
    format_udec64,
    format_udec64_bytes,
    FixedPointError,
    NumeralSyntaxError,
    MagnitudeRangeError,
    AmountDomainError,
    InvariantViolation,
)
from .locales import (
    LocaleFormat,
    lookup_locale,
    locale_format,
    locale_format_bytes,
    locale_parse,
    locale_parse_bytes,
)

__version__ = "0.1.0"

__all__ = [
    "UINT64_MAX",
    "MAX_PRECISION",
    # value type and arithmetic
    "Wide",
    "UDec64",
    "mul",
    "mul_full",
    "div",
    "div_full",
    "convert",
    "to_float64",
    "from_float64",
    # text codec
    "parse_udec64",
    "parse_udec64_bytes",
    "format_udec64",
    "format_udec64_bytes",
    # locale layer
    "LocaleFormat",
    "lookup_locale",
    "locale_format",
    "locale_format_bytes",
    "locale_parse",
    "locale_parse_bytes",
    # exceptions
    "FixedPointError",
    "NumeralSyntaxError",
    "MagnitudeRangeError",
    "AmountDomainError",
    "InvariantViolation",
]
