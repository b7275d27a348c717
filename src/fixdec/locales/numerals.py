"""
Locale-aware formatting and parsing around the plain fixed-point codec.

Formatting renders the plain text first (fixdec.core.fmt), then substitutes
digit glyphs, inserts grouping glyphs into the integer part and replaces the
decimal point. Parsing maps glyphs back to ASCII and hands the result to the
plain parser, so precision handling and rounding behave identically.
Exponent markers are not locale glyphs and are rejected.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.amounts import UDec64
from ..core.exc import NumeralSyntaxError, AmountDomainError
from ..core.fmt import format_fixed
from ..core.parse import parse_fixed
from .registry import LocaleFormat, lookup_locale

# Debug printing control
DEBUG_NUMERALS = False

def _dbg(msg: str) -> None:
    if DEBUG_NUMERALS:
        print(msg)


_ASCII_DIGITS = "0123456789"

BytesLike = Union[bytes, bytearray, memoryview]


def _needs_group_sep(remaining: int, indian: bool) -> bool:
    """True if a separator goes before a digit with `remaining` digits left (itself included)."""
    if indian:
        return remaining == 3 or (remaining > 3 and (remaining - 3) % 2 == 0)
    return remaining % 3 == 0


def _group_integer(int_part: str, loc: LocaleFormat) -> str:
    n = len(int_part)
    out = []
    for k, ch in enumerate(int_part):
        if k > 0 and _needs_group_sep(n - k, loc.indian_grouping):
            out.append(loc.group_sep)
        out.append(loc.digits[ord(ch) - 48])
    return "".join(out)


def localize(plain: str, loc: LocaleFormat, no_group_sep: bool = False) -> str:
    """Substitute locale glyphs into plain numeral text ('1234.5' -> '1,234.5')."""
    int_part, dot, frac = plain.partition(".")
    if no_group_sep:
        head = "".join(loc.digits[ord(ch) - 48] for ch in int_part)
    else:
        head = _group_integer(int_part, loc)
    if not dot:
        return head
    return head + loc.decimal_sep + "".join(loc.digits[ord(ch) - 48] for ch in frac)


def delocalize(text: str, loc: LocaleFormat) -> str:
    """Map locale numeral text back to ASCII; unknown glyphs are a syntax error."""
    out = []
    for ch in text:
        if ch in _ASCII_DIGITS:
            out.append(ch)
        elif ch == loc.group_sep or ch == loc.group_sep2:
            continue
        elif ch == loc.decimal_sep:
            out.append(".")
        else:
            d = loc.digit_value(ch)
            if d < 0:
                raise NumeralSyntaxError(f"unrecognised glyph {ch!r} in {text!r}", text=text)
            out.append(_ASCII_DIGITS[d])
    return "".join(out)


def _value_of(value: "int | UDec64") -> int:
    return value.value if isinstance(value, UDec64) else value


# ----------------------------
# Public entry points
# ----------------------------

def locale_format(
    tag: str,
    value: "int | UDec64",
    precision: int,
    display_precision: Optional[int] = None,
    trim_zeroes: bool = False,
    no_group_sep: bool = False,
) -> str:
    """Format a magnitude with the digit, grouping and decimal glyphs of `tag`.

      locale_format("de", 12345678901234567891, 10) -> '1.234.567.890,1234567891'
      locale_format("hi", 12345678901234567891, 10) -> '1,23,45,67,890.1234567891'
    """
    loc = lookup_locale(tag)
    plain = format_fixed(_value_of(value), precision, display_precision, trim_zeroes)
    out = localize(plain, loc, no_group_sep)
    _dbg(f"locale_format: tag={tag!r}, plain={plain!r} -> {out!r}")
    return out


def locale_format_bytes(
    tag: str,
    value: "int | UDec64",
    precision: int,
    display_precision: Optional[int] = None,
    trim_zeroes: bool = False,
    no_group_sep: bool = False,
) -> bytes:
    """UTF-8 encoded form of locale_format."""
    return locale_format(tag, value, precision, display_precision, trim_zeroes, no_group_sep).encode("utf-8")


def locale_parse(tag: str, text: str, precision: int, rounding: bool = False) -> UDec64:
    """Parse locale numeral text into a UDec64 at the given precision."""
    if not isinstance(text, str):
        raise AmountDomainError(f"locale_parse expects str, got {type(text).__name__}")
    if not text:
        raise NumeralSyntaxError("empty numeral", text=text)
    loc = lookup_locale(tag)
    plain = delocalize(text, loc)
    _dbg(f"locale_parse: tag={tag!r}, text={text!r} -> {plain!r}")
    return UDec64(parse_fixed(plain, precision, rounding))


def locale_parse_bytes(tag: str, data: BytesLike, precision: int, rounding: bool = False) -> UDec64:
    """Parse UTF-8 encoded locale numeral text into a UDec64."""
    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise NumeralSyntaxError(f"invalid UTF-8 in numeral at offset {e.start}", text=repr(bytes(data))) from e
    return locale_parse(tag, text, precision, rounding)


__all__ = [
    "localize",
    "delocalize",
    "locale_format",
    "locale_format_bytes",
    "locale_parse",
    "locale_parse_bytes",
]
