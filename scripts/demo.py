#!/usr/bin/env python3
"""Command-line demo for fixdec: plain and locale-aware fixed-point codec.

Sub-commands:
  format         VALUE PRECISION [--display N] [--trim]
  parse          TEXT PRECISION [--round]
  locale-format  TAG VALUE PRECISION [--display N] [--trim] [--no-group]
  locale-parse   TAG TEXT PRECISION [--round]
  convert        VALUE SRC DEST [--round]
  locales        (list registered language tags)

Examples:
  python scripts/demo.py format 425143693331510191 15
  python scripts/demo.py locale-format hi 12345678901234567891 10
  python scripts/demo.py parse 42.5143693331510191e1 15
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fixdec import (
    FixedPointError,
    AmountDomainError,
    convert,
    format_udec64,
    parse_udec64,
    locale_format,
    locale_parse,
)
from fixdec.locales import LOCALE_FORMATS


def _magnitude(text: str) -> int:
    # Accept decimal or 0x-prefixed hex magnitudes.
    return int(text, 0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="fixdec fixed-point codec demo")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("format", help="Render a magnitude as decimal text")
    p.add_argument("value", type=_magnitude)
    p.add_argument("precision", type=int)
    p.add_argument("--display", type=int, default=None, help="Display precision (default: precision)")
    p.add_argument("--trim", action="store_true", help="Trim trailing fractional zeros")

    p = sub.add_parser("parse", help="Parse decimal text into a magnitude")
    p.add_argument("text")
    p.add_argument("precision", type=int)
    p.add_argument("--round", action="store_true", help="Round half-up on the first dropped digit")

    p = sub.add_parser("locale-format", help="Render a magnitude with locale glyphs")
    p.add_argument("tag")
    p.add_argument("value", type=_magnitude)
    p.add_argument("precision", type=int)
    p.add_argument("--display", type=int, default=None)
    p.add_argument("--trim", action="store_true")
    p.add_argument("--no-group", action="store_true", help="Do not insert grouping separators")

    p = sub.add_parser("locale-parse", help="Parse locale numeral text into a magnitude")
    p.add_argument("tag")
    p.add_argument("text")
    p.add_argument("precision", type=int)
    p.add_argument("--round", action="store_true")

    p = sub.add_parser("convert", help="Rescale a magnitude to another precision")
    p.add_argument("value", type=_magnitude)
    p.add_argument("src", type=int)
    p.add_argument("dest", type=int)
    p.add_argument("--round", action="store_true")

    sub.add_parser("locales", help="List registered language tags")
    return parser


def run(args: argparse.Namespace) -> str:
    if args.command == "format":
        return format_udec64(args.value, args.precision, args.display, args.trim)
    if args.command == "parse":
        return str(parse_udec64(args.text, args.precision, args.round).value)
    if args.command == "locale-format":
        return locale_format(args.tag, args.value, args.precision, args.display, args.trim, args.no_group)
    if args.command == "locale-parse":
        return str(locale_parse(args.tag, args.text, args.precision, args.round).value)
    if args.command == "convert":
        return str(convert(args.value, args.src, args.dest, args.round))
    if args.command == "locales":
        return " ".join(sorted(LOCALE_FORMATS))
    raise ValueError(f"unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    try:
        print(run(args))
    except (FixedPointError, AmountDomainError) as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
