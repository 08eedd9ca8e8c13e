"""
Custom exception hierarchy for number conversion.

Each exception type maps to a specific category of conversion failure,
so callers can tell "invalid input" apart from a legitimate zero.
All of them are ValueErrors, which keeps plain `except ValueError` working.
"""

from __future__ import annotations


class NumtextError(ValueError):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class OutOfRange(NumtextError):
    """The numeral falls outside the supported magnitude."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)


class UnrecognizedToken(NumtextError):
    """The text contains a word that is not a number word in that position."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNRECOGNIZED_TOKEN", message, details)


class InvalidNumeral(NumtextError):
    """A value handed to the formatter is not a decimal integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMERAL", message, details)
