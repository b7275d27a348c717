"""
Numeral text -> fixed-point magnitude (integer domain).

Grammar: digits['.' digits][('e'|'E')['+'|'-']digits], either side of the
point may be empty but not both.

- Scientific notation is folded into the fractional digit count: the point
  moves `exponent` places, so the effective fraction length is
  len(fraction) - exponent (negative means trailing zeros are appended).
- With at least `precision` fractional digits, exactly `precision` are kept.
  Rounding (when enabled) looks at the first dropped digit only.
- With fewer fractional digits, the digit string is scaled up by the missing
  power of ten.
- Any overflow of the uint64 accumulator is a MagnitudeRangeError.

Text and bytes entry points share one implementation.
"""

from __future__ import annotations

from typing import Tuple, Union

from .constants import UINT64_MAX, EXPONENT_MIN, EXPONENT_MAX
from .exc import NumeralSyntaxError, MagnitudeRangeError, AmountDomainError
from .wide import _ten_pow

# Debug printing control
DEBUG_PARSE = False

def _dbg(msg: str) -> None:
    if DEBUG_PARSE:
        print(msg)


_DIGITS = frozenset("0123456789")

BytesLike = Union[bytes, bytearray, memoryview]


# ----------------------------
# Helpers
# ----------------------------

def _is_digits(s: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits; only ASCII is valid here.
    return all(c in _DIGITS for c in s)


def _decode_ascii(data: BytesLike) -> str:
    try:
        return bytes(data).decode("ascii")
    except UnicodeDecodeError as e:
        raise NumeralSyntaxError(f"non-ASCII byte in numeral at offset {e.start}", text=repr(bytes(data))) from e


def _parse_uint(s: str, bits: int, text: str) -> int:
    if not s or not _is_digits(s):
        raise NumeralSyntaxError(f"invalid unsigned integer: {s!r}", text=text)
    v = int(s)
    if v > (1 << bits) - 1:
        raise MagnitudeRangeError(f"value out of range for uint{bits}: {s}", text=text)
    return v


def _split_exponent(text: str) -> Tuple[str, int]:
    """Return (mantissa, exponent) for text with an optional trailing e/E part."""
    epos = max(text.rfind("e"), text.rfind("E"))
    if epos == -1:
        return text, 0
    if epos + 1 == len(text):
        raise NumeralSyntaxError("exponent marker without exponent", text=text)
    exp_text = text[epos + 1:]
    body = exp_text[1:] if exp_text[0] in "+-" else exp_text
    if not body or not _is_digits(body):
        raise NumeralSyntaxError(f"invalid exponent: {exp_text!r}", text=text)
    exponent = int(exp_text)
    if exponent < EXPONENT_MIN or exponent > EXPONENT_MAX:
        raise MagnitudeRangeError(f"exponent out of range: {exponent}", text=text)
    return text[:epos], exponent


def _split_mantissa(mantissa: str, text: str) -> Tuple[str, str]:
    """Split mantissa into (integer digits, fractional digits)."""
    int_part, dot, frac_part = mantissa.rpartition(".")
    if not dot:
        int_part, frac_part = frac_part, ""
    if not _is_digits(int_part) or not _is_digits(frac_part):
        raise NumeralSyntaxError(f"invalid character in numeral: {text!r}", text=text)
    if not int_part and not frac_part:
        raise NumeralSyntaxError(f"numeral has no digits: {text!r}", text=text)
    return int_part, frac_part


def _to_fixed(digits: str, frac_count: int, precision: int, rounding: bool, text: str) -> int:
    """Convert a digit string with `frac_count` implied fractional digits."""
    if frac_count < 0:
        digits += "0" * (-frac_count)
        frac_count = 0
    if frac_count >= precision:
        if frac_count > len(digits):
            digits = "0" * (frac_count - len(digits)) + digits
        cut = len(digits) - frac_count + precision
        kept = digits[:cut]
        v = _parse_uint(kept, 64, text) if kept else 0
        if rounding and cut < len(digits) and digits[cut] >= "5":
            v += 1
            if v > UINT64_MAX:
                raise MagnitudeRangeError("rounding overflows uint64", text=text)
        _dbg(f"parse: kept={kept!r}, next={digits[cut:cut + 1]!r}, v={v}")
        return v
    v = _parse_uint(digits, 64, text)
    scaled = v * _ten_pow(precision - frac_count)
    _dbg(f"parse: digits={digits!r}, frac={frac_count}, scaled={scaled}")
    if scaled > UINT64_MAX:
        raise MagnitudeRangeError(f"value out of range at precision {precision}", text=text)
    return scaled


# ----------------------------
# Public entry points
# ----------------------------

def parse_fixed(text: str, precision: int, rounding: bool = False) -> int:
    """Parse decimal text into a magnitude at the given precision.

    Raises NumeralSyntaxError for malformed text and MagnitudeRangeError when
    the magnitude does not fit in 64 bits.
    """
    if not isinstance(text, str):
        raise AmountDomainError(f"parse_fixed expects str, got {type(text).__name__}")
    _ten_pow(precision)
    if not text:
        raise NumeralSyntaxError("empty numeral", text=text)
    mantissa, exponent = _split_exponent(text)
    int_part, frac_part = _split_mantissa(mantissa, text)
    _dbg(f"parse: text={text!r}, int={int_part!r}, frac={frac_part!r}, exp={exponent}")
    return _to_fixed(int_part + frac_part, len(frac_part) - exponent, precision, rounding, text)


def parse_fixed_bytes(data: BytesLike, precision: int, rounding: bool = False) -> int:
    """Byte-sequence form of parse_fixed; results are identical for identical input."""
    return parse_fixed(_decode_ascii(data), precision, rounding)


def parse_uint_bytes(data: BytesLike, bits: int = 64) -> int:
    """Parse an unsigned decimal integer that must fit in `bits` bits."""
    if bits <= 0 or bits > 64:
        raise AmountDomainError(f"bits must be in [1, 64], got {bits}")
    text = _decode_ascii(data)
    return _parse_uint(text, bits, text)


__all__ = [
    "parse_fixed",
    "parse_fixed_bytes",
    "parse_uint_bytes",
]
