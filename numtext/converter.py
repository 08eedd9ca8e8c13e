"""
Top-level dispatch: numeric-looking input goes to the formatter, anything
else is treated as English text and parsed.
"""

from __future__ import annotations

import logging

from .formatter import is_integer_literal, to_text
from .models import ConversionResult, Direction
from .parser import to_number
from .tables import UPPER_BOUND

logger = logging.getLogger(__name__)


def convert(value: int | str) -> str | int:
    """Return the other form of `value`.

    convert(60502)                                  → "sixty thousand, five hundred and two"
    convert("60502")                                → "sixty thousand, five hundred and two"
    convert("sixty thousand, five hundred and two") → 60502

    Raises:
        OutOfRange: For a numeral outside [0, 999 quadrillion).
        UnrecognizedToken: For text that does not parse.
    """
    if _is_numeric(value):
        logger.debug("Converting numeral %r to text", value)
        return to_text(value)

    logger.debug("Converting text %r to a number", value)
    return to_number(value)


def describe(
    value: int | str, direction: Direction | None = None
) -> ConversionResult:
    """Convert `value` and report both forms along with the direction taken.

    Args:
        value: A numeral or English number text.
        direction: Force a direction instead of inferring it from `value`.
            Forcing TO_TEXT on text raises InvalidNumeral; forcing TO_NUMBER
            on a numeral parses its digits like any other text.

    For parsed text at or above 999 quadrillion `text` is None.
    """
    if direction is None:
        direction = Direction.TO_TEXT if _is_numeric(value) else Direction.TO_NUMBER

    if direction == Direction.TO_TEXT:
        text = to_text(value)
        # to_text already validated the literal
        number = int(str(value).strip())
    else:
        number = to_number(str(value))
        # parsing is unbounded; only values the formatter accepts get a spelling
        text = to_text(number) if number < UPPER_BOUND else None

    return ConversionResult(
        input=str(value), direction=direction, text=text, number=number
    )


def _is_numeric(value: int | str) -> bool:
    if isinstance(value, bool):
        raise TypeError(f"Expected int or str, got {value!r}")
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return is_integer_literal(value)
    raise TypeError(f"Expected int or str, got {type(value).__name__}")
