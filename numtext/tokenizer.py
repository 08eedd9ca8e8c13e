"""
English number text → token list.

Commas and hyphens are plain separators. Digit literals embedded in the
text ("60 thousand, 5 hundred and 2") are spelled out and re-tokenized in
place, so the parser only ever sees words.
"""

from __future__ import annotations

import logging
import re

from .formatter import to_text

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\-]")
_DIGITS = re.compile(r"\d+", re.ASCII)


def tokenize(text: str) -> list[str]:
    """Split number text into lowercase word tokens.

    Raises:
        OutOfRange: If an embedded digit literal is ≥ 999 quadrillion.
    """
    words = _SEPARATORS.sub(" ", text).lower().split()

    tokens: list[str] = []
    for word in words:
        if _DIGITS.fullmatch(word):
            tokens.extend(tokenize(to_text(word)))
        else:
            tokens.append(word)

    logger.debug("Tokenized %r -> %s", text, tokens)
    return tokens
