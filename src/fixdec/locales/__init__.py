"""
Locale layer: read-only registry of numeral glyphs per language, plus
format/parse wrappers around the plain fixed-point codec.
"""

from .registry import (
    LocaleFormat,
    DEFAULT_LOCALE_TAG,
    DEFAULT_LOCALE_FORMAT,
    LOCALE_FORMATS,
    language_subtag,
    lookup_locale,
)
from .numerals import (
    localize,
    delocalize,
    locale_format,
    locale_format_bytes,
    locale_parse,
    locale_parse_bytes,
)

__all__ = [
    "LocaleFormat",
    "DEFAULT_LOCALE_TAG",
    "DEFAULT_LOCALE_FORMAT",
    "LOCALE_FORMATS",
    "language_subtag",
    "lookup_locale",
    "localize",
    "delocalize",
    "locale_format",
    "locale_format_bytes",
    "locale_parse",
    "locale_parse_bytes",
]
