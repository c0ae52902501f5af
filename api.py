"""
Numeral Speller — FastAPI Server
================================

HTTP surface for spelling numbers in words.

Endpoints:
    POST /convert           Spell one number in a language and register
    GET  /languages         Loaded locale profiles
    GET  /currencies        Currency codes known to the registry
    GET  /health            Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from numeral_speller import __version__
from numeral_speller.currency import currency_codes
from numeral_speller.exceptions import NumeralError, UnsupportedLanguage
from numeral_speller.models import ConversionRequest, ConversionResult
from numeral_speller.pipeline import NumeralSpeller

load_dotenv()


# ─── Application Lifespan (pre-warm speller) ────────────────────────

_speller: NumeralSpeller | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the locale profiles once on startup."""
    global _speller  # noqa: PLW0603
    _speller = NumeralSpeller()
    yield
    _speller = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Numeral Speller API",
    description=(
        "Spell arbitrary-precision numbers as words: cardinals, ordinals, "
        "abbreviated ordinals, calendar years and currency amounts."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Response Schemas ───────────────────────────────────────────────


class LanguageOut(BaseModel):
    code: str
    name: str
    max_digits: int


class HealthResponse(BaseModel):
    status: str
    version: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_speller() -> NumeralSpeller:
    if _speller is None:
        raise HTTPException(status_code=503, detail="Speller not initialised")
    return _speller


def _error_detail(exc: NumeralError) -> dict:
    return {"code": exc.code, "message": str(exc), "details": exc.details}


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Spell a number in words",
    tags=["Conversion"],
    responses={
        404: {"description": "Language not loaded"},
        422: {"description": "Number cannot be spelled in this register"},
        503: {"description": "Speller not yet initialised"},
    },
)
def convert(request: ConversionRequest) -> ConversionResult:
    """Spell `value` in the requested language and register.

    Send large or precise values as strings (`"2.8e64"`, `"12.51"`) to avoid
    JSON float rounding. Failures return the machine-readable error code,
    e.g. `NEGATIVE_ORDINAL` or `CANNOT_CONVERT`.
    """
    speller = _get_speller()
    try:
        return speller.run(request)
    except UnsupportedLanguage as exc:
        raise HTTPException(status_code=404, detail=_error_detail(exc)) from exc
    except NumeralError as exc:
        raise HTTPException(status_code=422, detail=_error_detail(exc)) from exc


@app.get("/languages", summary="List loaded languages", tags=["Reference"])
def list_languages() -> list[LanguageOut]:
    speller = _get_speller()
    return [
        LanguageOut(code=p.code, name=p.name, max_digits=p.max_groups * 3)
        for p in speller.profiles.values()
    ]


@app.get("/currencies", summary="List currency codes", tags=["Reference"])
def list_currencies() -> list[str]:
    return currency_codes()


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Speller not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    speller = _get_speller()
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages_loaded=len(speller.profiles),
    )
