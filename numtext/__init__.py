"""
Numtext — English number words in both directions.

Formatter: 60502 → "sixty thousand, five hundred and two"
Parser:    "sixty thousand, five hundred and two" → 60502
Range:     0 up to (but not including) 999 quadrillion
"""

from .converter import convert, describe
from .exceptions import InvalidNumeral, NumtextError, OutOfRange, UnrecognizedToken
from .formatter import to_text
from .parser import parse, to_number
from .tokenizer import tokenize

__version__ = "1.0.0"

__all__ = [
    "InvalidNumeral",
    "NumtextError",
    "OutOfRange",
    "UnrecognizedToken",
    "convert",
    "describe",
    "parse",
    "to_number",
    "to_text",
    "tokenize",
]
