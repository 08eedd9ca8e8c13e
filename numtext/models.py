"""
Pydantic models describing a conversion — the shape the API and CLI report.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Which way a conversion went."""

    TO_TEXT = "TO_TEXT"  # numeral → words
    TO_NUMBER = "TO_NUMBER"  # words → numeral


class ConversionResult(BaseModel):
    """Both forms of a converted value, plus the direction taken."""

    input: str = Field(description="The value as it was supplied")
    direction: Direction
    text: Optional[str] = Field(
        default=None,
        description="Canonical English text form; None when out of spelling range",
    )
    number: int = Field(ge=0, description="Numeric form")
