#!/usr/bin/env python3
"""
numcn — Entry Point
===================

Demonstrates round trips between Chinese numerals and numbers.

Usage:
    python main.py                      # Built-in examples
    python main.py 廿一 三点一四 壹佰   # Decode your own numerals
"""

from __future__ import annotations

import sys

from numcn.converter import parse_numeral
from numcn.decoder import decode_float, decode_int
from numcn.encoder import encode_float, encode_int
from numcn.exceptions import NumeralError
from numcn.models import NumberKind
from numcn.settings import configure_logging

# ─── Load .env (NUMCN_LOG_LEVEL) if available ───────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 60


# ─── Examples ───────────────────────────────────────────────────────


def _run_examples() -> None:
    """Integer and float round trips."""
    ch_num = "负十七亿零五十三万七千零一十六"
    num = decode_int(ch_num)
    print(f"  {ch_num}  {_DIM}→{_RESET}  {num}")
    print(f"  {num}  {_DIM}→{_RESET}  {encode_int(num)}")

    ch_float = "负零点零七三零六"
    f_num = decode_float(ch_float)
    print(f"  {ch_float}  {_DIM}→{_RESET}  {f_num:f}")
    print(f"  {f_num:f}  {_DIM}→{_RESET}  {encode_float(f_num)}")


def _decode_argument(text: str) -> int:
    """Decode one argument as an integer, falling back to the float grammar.

    Returns:
        0 on success, 1 if the text could not be decoded.
    """
    for kind in (NumberKind.INTEGER, NumberKind.FLOAT):
        try:
            conversion = parse_numeral(text, kind)
        except NumeralError as e:
            last_error = e
            continue
        note = "" if conversion.is_canonical else f"  {_YELLOW}(canonical: {conversion.canonical}){_RESET}"
        print(f"  {text}  {_DIM}→{_RESET}  {_BOLD}{conversion.value}{_RESET}{note}")
        return 0

    print(f"  {_RED}{text}  [{last_error.code}] {last_error}{_RESET}")
    return 1


# ─── Main ────────────────────────────────────────────────────────────


def main() -> None:
    """Decode the command-line arguments, or run the built-in examples."""
    configure_logging()
    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}  CHINESE NUMERALS{_RESET}")
    print(f"{'=' * _WIDTH}")

    args = sys.argv[1:]
    if not args:
        _run_examples()
        print(f"{'=' * _WIDTH}\n")
        sys.exit(0)

    failures = sum(_decode_argument(arg) for arg in args)
    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} numeral(s) could not be decoded{_RESET}\n")
    else:
        print(f"  {_GREEN}{_BOLD}ALL NUMERALS DECODED{_RESET}\n")
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
