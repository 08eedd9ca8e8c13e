"""
Numtext — FastAPI Server
========================

RESTful API for converting between numerals and English number words.

Endpoints:
    POST /convert           Convert a value in whichever direction fits
    GET  /text/{number}     Spell out a numeral
    GET  /number?text=...   Parse English number words
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import logging
import os
from typing import Union

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, StrictInt

from numtext import __version__
from numtext.converter import describe
from numtext.exceptions import NumtextError
from numtext.models import ConversionResult, Direction

# ─── Configuration (.env, then environment) ─────────────────────────

load_dotenv()
logging.basicConfig(level=os.environ.get("NUMTEXT_LOG_LEVEL", "WARNING").upper())

logger = logging.getLogger(__name__)


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numtext API",
    description=(
        "Converts integers below 999 quadrillion into English text "
        "and parses English number text back into integers."
    ),
    version=__version__,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    # StrictInt keeps JSON booleans from being coerced to 1
    value: Union[StrictInt, str] = Field(
        ...,
        description="A numeral (int or digit string) or English number text.",
        json_schema_extra={"example": "sixty thousand, five hundred and two"},
    )


class ConvertResponse(ConversionResult):
    """API-facing conversion result (inherits all fields from ConversionResult)."""

    model_config = {"json_schema_extra": {"example": {
        "input": "60502",
        "direction": "TO_TEXT",
        "text": "sixty thousand, five hundred and two",
        "number": 60502,
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _run(value: int | str, direction: Direction | None = None) -> ConvertResponse:
    """Convert `value`, turning conversion failures into 422 responses."""
    try:
        result = describe(value, direction)
    except NumtextError as e:
        logger.info("Conversion of %r failed: [%s] %s", value, e.code, e)
        raise HTTPException(
            status_code=422,
            detail={"code": e.code, "message": str(e), "details": e.details},
        ) from e
    return ConvertResponse.model_validate(result, from_attributes=True)


# ─── Endpoints ───────────────────────────────────────────────────────

_CONVERSION_ERRORS = {422: {"description": "Value out of range or unparseable"}}


@app.post(
    "/convert",
    summary="Convert a numeral or English number text",
    tags=["Conversion"],
    responses=_CONVERSION_ERRORS,
)
def convert_value(request: ConvertRequest) -> ConvertResponse:
    """Numeric input is spelled out; anything else is parsed as English text.

    Returns both forms of the value and the **direction** taken.
    """
    return _run(request.value)


@app.get(
    "/text/{number}",
    summary="Spell out a numeral",
    tags=["Conversion"],
    responses=_CONVERSION_ERRORS,
)
def number_to_text(number: str) -> ConvertResponse:
    """`/text/60502` → "sixty thousand, five hundred and two"."""
    return _run(number, Direction.TO_TEXT)


@app.get(
    "/number",
    summary="Parse English number text",
    tags=["Conversion"],
    responses=_CONVERSION_ERRORS,
)
def text_to_number(
    text: str = Query(..., min_length=1, description="English number text"),
) -> ConvertResponse:
    """`/number?text=six hundred, sixty five` → 665."""
    return _run(text, Direction.TO_NUMBER)


@app.get("/health", summary="Health check", tags=["System"])
def health_check() -> HealthResponse:
    """Returns service status and version."""
    return HealthResponse(status="healthy", version=__version__)
