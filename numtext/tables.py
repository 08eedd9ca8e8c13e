"""
Lookup tables shared by the formatter and the parser.

All tables are module constants, built once on import and never mutated.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ─── Base Words ──────────────────────────────────────────────────────
# 0–20, then the decades 30–90. Everything else is composed from these.

BASE_WORDS: Mapping[int, str] = MappingProxyType({
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
})

# Reverse direction, plus spellings we read but never write
BASE_VALUES: Mapping[str, int] = MappingProxyType({
    **{word: number for number, word in BASE_WORDS.items()},
    "fourty": 40,
})

# ─── Denominations ───────────────────────────────────────────────────

DENOMINATIONS: Mapping[str, int] = MappingProxyType({
    "hundred": 2,
    "thousand": 3,
    "million": 6,
    "billion": 9,
    "trillion": 12,
    "quadrillion": 15,
})

# Padded digit count → name of the leading 3-digit group
GROUP_WIDTHS: Mapping[int, str] = MappingProxyType({
    exponent + 3: name
    for name, exponent in DENOMINATIONS.items()
    if name != "hundred"
})

CONNECTIVE = "and"

# Exclusive upper bound: 999 quadrillion
UPPER_BOUND = 999 * 10**15


def is_denomination(token: str) -> bool:
    return token in DENOMINATIONS


def multiplier(denomination: str) -> int:
    """Power of ten for a denomination word, e.g. "thousand" → 1000."""
    return 10 ** DENOMINATIONS[denomination]
