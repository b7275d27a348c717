"""
Locale formatting records and the process-wide registry.

The registry is built once at import time and exposed read-only
(MappingProxyType); lookups never mutate it and need no locking.

Tags are resolved on their language subtag: 'pl', 'pl_PL', 'pl-PL' and
'pl_PL.UTF-8' all resolve to 'pl'. Unknown tags ('', 'C', 'xx') fall back to
DEFAULT_LOCALE_FORMAT.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

# Debug printing control
DEBUG_LOCALES = False

def _dbg(msg: str) -> None:
    if DEBUG_LOCALES:
        print(msg)


# ---------------------------------------------------------------------------
# LocaleFormat
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LocaleFormat:
    """Numeral glyphs for one language.

    Fields:
    - decimal_sep: glyph replacing '.'.
    - group_sep: glyph inserted between digit groups of the integer part.
    - group_sep2: alternate grouping glyph, accepted (and skipped) when parsing.
    - indian_grouping: True for 3-then-2 grouping (1,23,45,67,890), False for
      uniform groups of three.
    - digits: ten glyphs for 0..9.
    """

    decimal_sep: str
    group_sep: str
    group_sep2: str
    indian_grouping: bool
    digits: str

    def __post_init__(self):
        if len(self.digits) != 10:
            raise ValueError(f"digits must hold 10 glyphs, got {len(self.digits)}")

    def digit_value(self, glyph: str) -> int:
        """Return 0..9 for a locale digit glyph, or -1 if it is not one."""
        return self.digits.find(glyph)


# ---------------------------------------------------------------------------
# Digit glyph tables
# ---------------------------------------------------------------------------

LATIN_DIGITS = "0123456789"
ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"
DEVANAGARI_DIGITS = "०१२३४५६७८९"
MYANMAR_DIGITS = "၀၁၂၃၄၅၆၇၈၉"

#: No-break space, the grouping glyph of space-grouped locales.
NBSP = "\u00a0"


def _fmt(decimal_sep: str, group_sep: str, indian: bool = False, digits: str = LATIN_DIGITS,
         group_sep2: Optional[str] = None) -> LocaleFormat:
    return LocaleFormat(decimal_sep, group_sep, group_sep if group_sep2 is None else group_sep2, indian, digits)


# Common shapes
_DOT_COMMA = _fmt(".", ",")        # 1,234,567.89
_COMMA_DOT = _fmt(",", ".")        # 1.234.567,89
_COMMA_SPACE = _fmt(",", NBSP, group_sep2=" ")   # 1 234 567,89 (no-break spaces)
_DOT_COMMA_IN = _fmt(".", ",", indian=True)   # 12,34,567.89

DEFAULT_LOCALE_TAG = "en"
DEFAULT_LOCALE_FORMAT: LocaleFormat = _DOT_COMMA

_LOCALE_FORMATS = {
    "af": _COMMA_SPACE,
    "am": _DOT_COMMA,
    "ar": _fmt("٫", "٬", digits=ARABIC_INDIC_DIGITS),
    "az": _COMMA_DOT,
    "bg": _COMMA_SPACE,
    "bn": _fmt(".", ",", indian=True, digits=BENGALI_DIGITS),
    "ca": _COMMA_DOT,
    "cs": _COMMA_SPACE,
    "da": _COMMA_DOT,
    "de": _COMMA_DOT,
    "el": _COMMA_DOT,
    "en": _DOT_COMMA,
    "es": _COMMA_DOT,
    "et": _COMMA_SPACE,
    "fa": _fmt("٫", "٬", digits=PERSIAN_DIGITS),
    "fi": _COMMA_SPACE,
    "fil": _DOT_COMMA,
    "fr": _COMMA_SPACE,
    "gu": _DOT_COMMA_IN,
    "he": _DOT_COMMA,
    "hi": _DOT_COMMA_IN,
    "hr": _COMMA_DOT,
    "hu": _COMMA_SPACE,
    "hy": _COMMA_SPACE,
    "id": _COMMA_DOT,
    "is": _COMMA_DOT,
    "it": _COMMA_DOT,
    "ja": _DOT_COMMA,
    "ka": _COMMA_SPACE,
    "kk": _COMMA_SPACE,
    "km": _COMMA_DOT,
    "kn": _DOT_COMMA,
    "ko": _DOT_COMMA,
    "ky": _COMMA_SPACE,
    "lo": _COMMA_DOT,
    "lt": _COMMA_SPACE,
    "lv": _COMMA_SPACE,
    "mk": _COMMA_DOT,
    "ml": _DOT_COMMA_IN,
    "mn": _DOT_COMMA,
    "mo": _COMMA_DOT,
    "mr": _fmt(".", ",", indian=True, digits=DEVANAGARI_DIGITS),
    "ms": _DOT_COMMA,
    "mul": _DOT_COMMA,
    "my": _fmt(".", ",", digits=MYANMAR_DIGITS),
    "nb": _COMMA_SPACE,
    "ne": _fmt(".", ",", digits=DEVANAGARI_DIGITS),
    "nl": _COMMA_DOT,
    "no": _DOT_COMMA,
    "pa": _DOT_COMMA_IN,
    "pl": _COMMA_SPACE,
    "pt": _COMMA_DOT,
    "ro": _COMMA_DOT,
    "ru": _COMMA_SPACE,
    "sh": _COMMA_DOT,
    "si": _DOT_COMMA,
    "sk": _COMMA_SPACE,
    "sl": _COMMA_DOT,
    "sq": _COMMA_SPACE,
    "sr": _COMMA_DOT,
    "sv": _COMMA_SPACE,
    "sw": _DOT_COMMA,
    "ta": _DOT_COMMA_IN,
    "te": _DOT_COMMA,
    "th": _DOT_COMMA,
    "tl": _DOT_COMMA,
    "tn": _DOT_COMMA,
    "tr": _COMMA_DOT,
    "uk": _COMMA_SPACE,
    "ur": _DOT_COMMA,
    "uz": _COMMA_SPACE,
    "vi": _COMMA_DOT,
    "zh": _DOT_COMMA,
    "zu": _DOT_COMMA,
}

#: Read-only tag -> LocaleFormat registry.
LOCALE_FORMATS: Mapping[str, LocaleFormat] = MappingProxyType(_LOCALE_FORMATS)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def language_subtag(tag: str) -> str:
    """Return the language part of a POSIX/BCP-47 style tag.

      'pl_PL.UTF-8' -> 'pl', 'fil-PH' -> 'fil', 'de' -> 'de', 'C' -> 'c'
    """
    lang = tag.split(".", 1)[0].split("@", 1)[0]
    if len(lang) >= 3 and lang[2] in "_-":
        lang = lang[:2]
    elif len(lang) >= 4 and lang[3] in "_-":
        lang = lang[:3]
    return lang.lower()


def lookup_locale(tag: str) -> LocaleFormat:
    """Resolve a language tag to its LocaleFormat (default: English-like)."""
    lang = language_subtag(tag)
    fmt = LOCALE_FORMATS.get(lang)
    if fmt is None:
        _dbg(f"lookup_locale: unknown tag {tag!r} -> default")
        return DEFAULT_LOCALE_FORMAT
    return fmt


__all__ = [
    "LocaleFormat",
    "LATIN_DIGITS",
    "ARABIC_INDIC_DIGITS",
    "PERSIAN_DIGITS",
    "BENGALI_DIGITS",
    "DEVANAGARI_DIGITS",
    "MYANMAR_DIGITS",
    "NBSP",
    "DEFAULT_LOCALE_TAG",
    "DEFAULT_LOCALE_FORMAT",
    "LOCALE_FORMATS",
    "language_subtag",
    "lookup_locale",
]
