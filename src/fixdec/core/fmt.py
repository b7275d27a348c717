"""
Fixed-point magnitude -> decimal text (integer domain, no Decimal).

Rendering rules:
  0 at any precision         -> '0.0'
  precision == 0             -> bare integer
  otherwise                  -> '<int>.<frac>' with frac split `precision`
                                digits from the right (implicit '0' integer part)

  trim_zeroes        strip trailing fractional zeros, keep at least one digit
  display < precision  truncate the fraction to `display` digits
  display > precision  right-pad with zeros (only when not trimming)

An empty fraction is always rendered as a single '0'.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .wide import _check_u64, _check_precision

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


def _split_digits(value: int, precision: int) -> Tuple[str, str]:
    digits = str(value)
    if len(digits) <= precision:
        return "0", digits.rjust(precision, "0")
    cut = len(digits) - precision
    return digits[:cut], digits[cut:]


def _trim(frac: str) -> str:
    return frac.rstrip("0") or "0"


def format_fixed(
    value: int,
    precision: int,
    display_precision: Optional[int] = None,
    trim_zeroes: bool = False,
) -> str:
    """Render `value * 10^-precision` as decimal text.

    `display_precision` defaults to `precision`. The input is never modified.

      format_fixed(425143693331510191, 15)           -> '425.143693331510191'
      format_fixed(33000000000000000, 15, 15, True)  -> '33.0'
      format_fixed(425143693331510191, 15, 17)       -> '425.14369333151019100'
    """
    _check_u64(value)
    _check_precision(precision)
    if display_precision is None:
        display_precision = precision
    else:
        _check_precision(display_precision, "display_precision")

    if value == 0:
        return "0.0"
    if precision == 0:
        return str(value)

    int_part, frac = _split_digits(value, precision)
    if trim_zeroes:
        frac = _trim(frac)
    if display_precision < precision:
        frac = frac[:display_precision]
        if trim_zeroes:
            frac = frac.rstrip("0")
    elif display_precision > precision and not trim_zeroes:
        frac = frac.ljust(display_precision, "0")
    if not frac:
        frac = "0"
    _dbg(f"format: v={value}, p={precision}, d={display_precision}, trim={trim_zeroes} -> {int_part}.{frac}")
    return f"{int_part}.{frac}"


def format_fixed_bytes(
    value: int,
    precision: int,
    display_precision: Optional[int] = None,
    trim_zeroes: bool = False,
) -> bytes:
    """Byte-sequence form of format_fixed (ASCII, content-identical)."""
    return format_fixed(value, precision, display_precision, trim_zeroes).encode("ascii")


__all__ = [
    "format_fixed",
    "format_fixed_bytes",
]
