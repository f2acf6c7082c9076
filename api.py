"""
numcn — FastAPI Server
======================

HTTP API for converting between Chinese numerals and numbers.

Endpoints:
    POST /decode            Chinese numeral text → number
    POST /encode            number → canonical Chinese numeral text
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from numcn import __version__
from numcn.converter import format_number, parse_numeral
from numcn.decoder import MAX_TEXT_LENGTH
from numcn.exceptions import NumeralError
from numcn.models import Conversion, NumberKind
from numcn.settings import configure_logging

# ─── Load .env (NUMCN_LOG_LEVEL) if available ───────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass

configure_logging()


# ─── Application Lifespan ───────────────────────────────────────────

_ready = False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warm the conversion tables with one round trip on startup."""
    global _ready  # noqa: PLW0603
    parse_numeral("一万零一十四")
    _ready = True
    yield
    _ready = False


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="numcn API",
    description=(
        "Interconversion between Chinese numerals and numbers. "
        "Standard and financial digits, 万/亿/兆/京 grouping, "
        "decimal points and sub-units down to 幺 (1e-24)."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class DecodeRequest(BaseModel):
    """Request body for the /decode endpoint."""

    text: str = Field(
        ...,
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Chinese numeral text, e.g. 负十七亿零五十三万七千零一十六.",
        json_schema_extra={"example": "一百零二亿五千零一万一千零三十八"},
    )
    kind: NumberKind = NumberKind.INTEGER


class EncodeRequest(BaseModel):
    """Request body for the /encode endpoint."""

    value: Union[int, float] = Field(
        ...,
        description="The number to write out.",
        json_schema_extra={"example": -1700537016},
    )
    kind: Optional[NumberKind] = Field(
        default=None,
        description="Grammar to use; inferred from the JSON number type when omitted.",
    )


class ConversionOut(Conversion):
    """API-facing conversion (inherits all fields from Conversion)."""

    model_config = {"json_schema_extra": {"example": {
        "kind": "INTEGER",
        "text": "柒仟壹佰肆拾",
        "value": 7140,
        "canonical": "七千一百四十",
        "is_canonical": False,
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _ensure_ready() -> None:
    if not _ready:
        raise HTTPException(status_code=503, detail="Service not initialised")


def _numeral_error(exc: NumeralError) -> HTTPException:
    """Map a conversion failure to a 422 with its machine-readable code."""
    return HTTPException(
        status_code=422,
        detail={"code": exc.code, "message": str(exc), "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/decode",
    summary="Decode Chinese numeral text",
    tags=["Conversion"],
    responses={
        422: {"description": "Unrecognized character, malformed text, or out of range"},
        503: {"description": "Service not yet initialised"},
    },
)
def decode(request: DecodeRequest) -> ConversionOut:
    """Decode numeral text into a number.

    Returns:
    - **value**: the decoded number
    - **canonical**: how this service would write the same number
    - **is_canonical**: `true` if the input already was the canonical form
    """
    _ensure_ready()
    try:
        conversion = parse_numeral(request.text, request.kind)
    except NumeralError as e:
        raise _numeral_error(e) from e
    return ConversionOut.model_validate(conversion, from_attributes=True)


@app.post(
    "/encode",
    summary="Encode a number as Chinese numeral text",
    tags=["Conversion"],
    responses={
        422: {"description": "Value out of range or not representable"},
        503: {"description": "Service not yet initialised"},
    },
)
def encode(request: EncodeRequest) -> ConversionOut:
    """Write a number out in canonical Chinese numerals."""
    _ensure_ready()
    try:
        conversion = format_number(request.value, request.kind)
    except NumeralError as e:
        raise _numeral_error(e) from e
    except TypeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return ConversionOut.model_validate(conversion, from_attributes=True)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    _ensure_ready()
    return HealthResponse(status="healthy", version=__version__)
