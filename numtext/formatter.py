"""
Numeral → English text.

The numeral is handled as a digit string and decomposed top-down:

    base word        13        → "thirteen"
    tens-ones        23        → "twenty-three"
    hundreds         102       → "one hundred and two"
    bigger denoms    60502     → "sixty thousand, five hundred and two"

Bigger denominations are padded to a multiple of three digits; the leading
group is spelled and named by the padded width, then the remainder is
joined with ", " (remainder ≥ 100) or " and " (remainder < 100).
"""

from __future__ import annotations

import re

from .exceptions import InvalidNumeral, OutOfRange
from .tables import BASE_WORDS, GROUP_WIDTHS, UPPER_BOUND

_INTEGER_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)


# ─── Public API ──────────────────────────────────────────────────────


def to_text(numeral: int | str) -> str:
    """Spell out a non-negative integer in English.

    Args:
        numeral: A native int or a decimal digit string ("60502", " 007 ").

    Returns:
        The English text, e.g. "sixty thousand, five hundred and two".

    Raises:
        OutOfRange: If the numeral is negative or ≥ 999 quadrillion.
        InvalidNumeral: If a string is not a decimal integer.
        TypeError: For any other input type.
    """
    value = _coerce(numeral)
    if value < 0:
        raise OutOfRange(
            f"Input must not be negative, got {value}",
            {"value": value, "limit": 0},
        )
    if value >= UPPER_BOUND:
        raise OutOfRange(
            f"Input must be less than 999 quadrillion, got {value}",
            {"value": value, "limit": UPPER_BOUND},
        )
    return _spell(str(value))


def is_integer_literal(value: str) -> bool:
    """True for an optionally signed run of ASCII digits."""
    return _INTEGER_LITERAL.fullmatch(value.strip()) is not None


# ─── Input Coercion ──────────────────────────────────────────────────


def _coerce(numeral: int | str) -> int:
    # bool is an int subclass, but True is not a numeral
    if isinstance(numeral, bool):
        raise TypeError(f"Expected int or digit string, got {numeral!r}")
    if isinstance(numeral, int):
        return numeral
    if isinstance(numeral, str):
        if not is_integer_literal(numeral):
            raise InvalidNumeral(
                f"Not a decimal integer: {numeral!r}", {"value": numeral}
            )
        return int(numeral.strip())
    raise TypeError(f"Expected int or digit string, got {type(numeral).__name__}")


# ─── Recursive Speller ───────────────────────────────────────────────


def _spell(digits: str) -> str:
    """Spell a digit string that may carry leading zeros (e.g. a "023" group)."""
    number = int(digits)
    if number in BASE_WORDS:
        return BASE_WORDS[number]
    if len(digits) == 2:
        tens = int(digits[0]) * 10
        return f"{BASE_WORDS[tens]}-{BASE_WORDS[int(digits[1])]}"
    if len(digits) == 3:
        return _spell_hundreds(digits)
    return _spell_large(digits)


def _spell_hundreds(digits: str) -> str:
    hundreds = digits[0]
    remainder = int(digits) % 100

    head = ""
    if hundreds != "0":
        head = f"{_spell(hundreds)} hundred"

    if remainder == 0:
        return head
    tail = _spell(str(remainder))
    return f"{head} and {tail}" if head else tail


def _spell_large(digits: str) -> str:
    width = len(digits) + (-len(digits) % 3)
    padded = digits.zfill(width)
    name = GROUP_WIDTHS[width]

    text = f"{_spell(padded[:3])} {name}"
    remainder = int(padded[3:])

    if remainder >= 100:
        text += f", {_spell(str(remainder))}"
    elif remainder != 0:
        text += f" and {_spell(str(remainder))}"
    return text
