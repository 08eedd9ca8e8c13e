"""
English number words → integer.

The parser walks the token list left to right with an explicit cursor,
building one additive `unit` per step and adding it to the running total.
At each cursor position the branches are tried in this order:

    1. hundred-and          "two hundred and fifty thousand"
    2. double denomination  "five hundred thousand"
    3. plain denomination   "sixty thousand"
    4. no denomination      "twenty three thousand" / "sixty"

A connective "and" right after a unit is skipped. Units are additive, so
"six hundred, sixty five" is 600 + 60 + 5 = 665.

Supported patterns:
    "sixty thousand, five hundred and two"      → 60,502
    "one hundred and two thousand, five hundred" → 102,500
    "60 thousand, 5 hundred and 2"              → 60,502
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .exceptions import UnrecognizedToken
from .tables import BASE_VALUES, CONNECTIVE, is_denomination, multiplier
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


# ─── Public API ──────────────────────────────────────────────────────


def to_number(text: str) -> int:
    """Convert English number text to an int.

    Args:
        text: e.g. "sixty thousand, five hundred and two"

    Returns:
        60502

    Raises:
        UnrecognizedToken: If the text is empty or holds a word that is not
            a number word in its position.
        OutOfRange: If an embedded digit literal is ≥ 999 quadrillion.
    """
    tokens = tokenize(text)
    if not tokens:
        raise UnrecognizedToken(
            f"No number words found in: {text!r}",
            {"token": None, "position": None, "text": text},
        )
    return parse(tokens, source=text)


def parse(tokens: Sequence[str], source: str | None = None) -> int:
    """Accumulate a token list into an int.

    `source` is only used to make error messages quote the caller's text.
    """
    source = source if source is not None else " ".join(tokens)
    total = 0
    i = 0

    while i < len(tokens):
        label = _peek(tokens, i + 1)

        if label is not None and is_denomination(label):
            unit = _value(tokens, i, source) * multiplier(label)
            after = _peek(tokens, i + 2)

            if label == "hundred" and after == CONNECTIVE:
                unit, i = _absorb_hundred_and(tokens, i + 3, unit, source)
            elif after is not None and is_denomination(after):
                unit *= multiplier(after)
                i += 2
            else:
                i += 1
        else:
            unit = _value(tokens, i, source)
            after = _peek(tokens, i + 2)

            if label is not None and after is not None and is_denomination(after):
                unit = (unit + _value(tokens, i + 1, source)) * multiplier(after)
                i += 2

        if _peek(tokens, i + 1) == CONNECTIVE:
            i += 1

        total += unit
        i += 1

    logger.debug("Parsed %s -> %d", list(tokens), total)
    return total


# ─── Branch Helpers ──────────────────────────────────────────────────


def _absorb_hundred_and(
    tokens: Sequence[str], i: int, unit: int, source: str
) -> tuple[int, int]:
    """Fold the words after "X hundred and" into `unit`.

    Adds base words until a denomination (or the end) is reached, then
    scales the whole unit by that denomination.

    Returns:
        (unit, cursor) with the cursor left on the denomination word, or
        at the end of the tokens.
    """
    while i < len(tokens) and not is_denomination(tokens[i]):
        unit += _value(tokens, i, source)
        i += 1

    if i < len(tokens):
        unit *= multiplier(tokens[i])
    return unit, i


def _peek(tokens: Sequence[str], i: int) -> Optional[str]:
    return tokens[i] if i < len(tokens) else None


def _value(tokens: Sequence[str], i: int, source: str) -> int:
    token = tokens[i]
    if token in BASE_VALUES:
        return BASE_VALUES[token]
    raise UnrecognizedToken(
        f"Unrecognized number word: {token!r} at position {i} in {source!r}",
        {"token": token, "position": i, "text": source},
    )
