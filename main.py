#!/usr/bin/env python3
"""
Numtext — Entry Point
=====================

Converts each command-line argument in whichever direction fits.

Usage:
    python main.py                                      # Run the built-in samples
    python main.py 60502                                # → sixty thousand, five hundred and two
    python main.py "six hundred, sixty five" 1000       # Several values at once
    NUMTEXT_LOG_LEVEL=DEBUG python main.py "sixty two"  # Show token streams
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from numtext.converter import describe
from numtext.exceptions import NumtextError
from numtext.models import Direction

# ─── Configuration (.env, then environment) ─────────────────────────

load_dotenv()


# ─── Samples — a mix of both directions and both failure kinds ──────

SAMPLES = [
    "0",
    "23",
    "102",
    "60502",
    "102500",
    "six hundred, sixty five",
    "sixty thousand five hundred and two",
    "60 thousand, 5 hundred and 2",
    "two hundred and fifty thousand",
    "999000000000000000",
    "sixty frobnicate two",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_conversion(value: str) -> bool:
    """Convert one value and print the outcome.

    Returns:
        True if the conversion succeeded.
    """
    try:
        result = describe(value)
    except NumtextError as e:
        print(f"  {_BOLD}{value}{_RESET}")
        print(f"    {_RED}[{e.code}]{_RESET} {e}")
        for k, v in e.details.items():
            print(f"      {_DIM}{k}: {v}{_RESET}")
        return False

    if result.direction == Direction.TO_TEXT:
        output = result.text
    else:
        output = f"{result.number:,}"
    print(f"  {_BOLD}{value}{_RESET}")
    print(f"    {_DIM}{result.direction.value} →{_RESET} {_GREEN}{output}{_RESET}")
    return True


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Convert every argument (or the samples) and report.

    Returns:
        0 if every value converted, 1 otherwise.
    """
    logging.basicConfig(level=os.environ.get("NUMTEXT_LOG_LEVEL", "WARNING").upper())

    parser = argparse.ArgumentParser(
        description="Convert numerals to English text and English text to numerals."
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Numerals or quoted English number text (default: built-in samples)",
    )
    args = parser.parse_args(argv)
    values = args.values or SAMPLES

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  NUMTEXT{_RESET}")
    print(f"{'=' * _WIDTH}")

    failures = sum(1 for value in values if not print_conversion(value))

    print(f"{'=' * _WIDTH}")
    if failures:
        print(f"  {_RED}{_BOLD}{failures} of {len(values)} value(s) failed{_RESET}")
    else:
        print(f"  {_GREEN}{_BOLD}ALL {len(values)} VALUE(S) CONVERTED{_RESET}")
    print(f"{'=' * _WIDTH}\n")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
