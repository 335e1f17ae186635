"""
backend.main – FastAPI application entry point.

Registers the rights, generation and health routes and maps the
RightsCardError taxonomy onto JSON ``{"error": message}`` responses.

Start the server:
    uvicorn backend.main:app --reload --port 8000
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Literal

from fastapi import Depends, FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.ai.generator import CardGenerator
from backend.ai.llm_client import ChatCompletionClient
from backend.config import Settings, get_settings
from backend.logging_config import setup_logging
from rights.content_store import ContentStore, get_store, normalise_language
from rights.disclaimer import get_disclaimer
from rights.errors import RightsCardError, ServiceUnavailable, UnknownInteractionType
from rights.models import GENERAL_JURISDICTION, INTERACTION_TYPES
from rights.resolver import CardResolver

logger = logging.getLogger(__name__)

AI_NOT_CONFIGURED = (
    "AI service not configured. Set OPENROUTER_API_KEY or OPENAI_API_KEY."
)


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(
        "%s %s starting (AI %s)",
        settings.app_name,
        settings.app_version,
        "enabled" if settings.ai_enabled else "disabled",
    )
    yield


app = FastAPI(
    title="RightsCard API",
    version=get_settings().app_version,
    description=(
        "State-specific know-your-rights cards for police interactions, "
        "with AI-generated summaries and shareable text."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------

@app.exception_handler(RightsCardError)
async def rights_card_error_handler(request: Request, exc: RightsCardError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for err in exc.errors():
        where = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "query"))
        problems.append(f"{where}: {err.get('msg')}" if where else str(err.get("msg")))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request: " + "; ".join(problems)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def get_content_store() -> ContentStore:
    return get_store()


def get_resolver(store: ContentStore = Depends(get_content_store)) -> CardResolver:
    return CardResolver(store)


def get_generator(
    settings: Settings = Depends(get_settings),
    store: ContentStore = Depends(get_content_store),
) -> CardGenerator:
    """Built per request so the API key is re-read every time."""
    return CardGenerator(ChatCompletionClient.from_settings(settings), store)


def _require_interaction_type(interaction_type: str) -> str:
    if interaction_type not in INTERACTION_TYPES:
        raise UnknownInteractionType(interaction_type)
    return interaction_type


def _require_ai(generator: CardGenerator) -> None:
    if not generator.available:
        raise ServiceUnavailable(AI_NOT_CONFIGURED)


# ---------------------------------------------------------------------------
# Pydantic request / response models
# ---------------------------------------------------------------------------

class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RightsRequest(_CamelModel):
    interaction_type: str            = Field(min_length=1)
    jurisdiction:     str            = Field(
        default=GENERAL_JURISDICTION,
        min_length=2,
        max_length=50,
        validation_alias=AliasChoices("jurisdiction", "state"),
    )
    context:          str | None     = Field(default=None, max_length=2000)
    language:         Literal["en", "es"] = "en"


class CustomCardRequest(_CamelModel):
    interaction_type: str            = Field(min_length=1)
    jurisdiction:     str            = Field(
        default=GENERAL_JURISDICTION,
        min_length=2,
        max_length=50,
        validation_alias=AliasChoices("jurisdiction", "state"),
    )
    language:         Literal["en", "es"] = "en"


class GenerateSummaryRequest(_CamelModel):
    interaction_type: str            = Field(min_length=1)
    duration_seconds: int            = Field(
        ge=0,
        validation_alias=AliasChoices("durationSeconds", "duration", "duration_seconds"),
    )
    location:         str | None     = Field(default=None, max_length=500)
    jurisdiction:     str | None     = Field(
        default=None,
        validation_alias=AliasChoices("jurisdiction", "state"),
    )
    language:         Literal["en", "es"] = "en"


class GeneratedCardResponse(_CamelModel):
    title:          str
    summary:        str
    key_points:     list[str]
    shareable_text: str


class SummaryResponse(BaseModel):
    summary: str


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.get("/api/health")
async def health(settings: Settings = Depends(get_settings)) -> dict:
    """Liveness probe plus a per-service status summary."""
    return {
        "status":    "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version":   settings.app_version,
        "services": {
            "api":     "operational",
            "ai":      "operational" if settings.ai_enabled else "unavailable",
            "storage": "operational",
        },
        "features": {
            "recording":           "enabled",
            "aiSummary":           "enabled",
            "stateSpecificRights": "enabled",
            "multiLanguage":       "enabled",
            "sharing":             "enabled",
        },
    }


@app.get("/api/jurisdictions")
async def jurisdictions(store: ContentStore = Depends(get_content_store)) -> dict:
    return {
        "jurisdictions":    store.jurisdictions(),
        "interactionTypes": list(store.interaction_types()),
        "languages":        list(store.languages()),
    }


@app.get("/api/rights")
async def get_rights(
    jurisdiction: str | None = Query(default=None),
    state: str | None = Query(default=None, description="Legacy alias for jurisdiction"),
    interaction_type: str = Query(default="traffic_stop", alias="interactionType"),
    language: str = Query(default="en"),
    resolver: CardResolver = Depends(get_resolver),
) -> dict:
    """
    Resolve the rights card for a type, jurisdiction and language.

    Query params:
        jurisdiction      State code or "General" (``state`` also accepted)
        interactionType   traffic_stop, questioning, home_search, arrest, protest, other
        language          en or es; anything else is served in English
    """
    card = resolver.resolve(
        interaction_type,
        jurisdiction or state or GENERAL_JURISDICTION,
        normalise_language(language),
    )
    return {"card": card.to_dict(), "disclaimer": get_disclaimer(card.language)}


@app.post("/api/rights")
async def post_rights(
    payload: RightsRequest,
    resolver: CardResolver = Depends(get_resolver),
) -> dict:
    """Resolve a card carrying the caller's free-text context as metadata."""
    card = resolver.resolve(
        payload.interaction_type,
        payload.jurisdiction,
        payload.language,
        context=payload.context,
        id_suffix="custom",
    )
    return {"card": card.to_dict(), "disclaimer": get_disclaimer(card.language)}


@app.post("/api/rights/custom")
async def custom_rights(
    payload: CustomCardRequest,
    generator: CardGenerator = Depends(get_generator),
) -> dict:
    """AI-written card parsed into sections, each tagged with its source."""
    _require_interaction_type(payload.interaction_type)
    _require_ai(generator)
    custom = await generator.generate_custom_card(
        payload.interaction_type, payload.jurisdiction, payload.language
    )
    return custom.to_dict()


@app.post("/api/generate-card", response_model=GeneratedCardResponse, response_model_by_alias=True)
async def generate_card(
    payload: RightsRequest,
    generator: CardGenerator = Depends(get_generator),
) -> GeneratedCardResponse:
    _require_interaction_type(payload.interaction_type)
    _require_ai(generator)
    card = await generator.generate_card(
        payload.interaction_type,
        payload.jurisdiction,
        context=payload.context,
        language=payload.language,
    )
    return GeneratedCardResponse(
        title=card.title,
        summary=card.summary,
        key_points=card.key_points,
        shareable_text=card.shareable_text,
    )


@app.post("/api/generate-summary", response_model=SummaryResponse)
async def generate_summary(
    payload: GenerateSummaryRequest,
    generator: CardGenerator = Depends(get_generator),
) -> SummaryResponse:
    _require_interaction_type(payload.interaction_type)
    _require_ai(generator)
    summary = await generator.generate_summary(
        payload.interaction_type,
        payload.duration_seconds,
        jurisdiction=payload.jurisdiction,
        language=payload.language,
        location=payload.location,
    )
    return SummaryResponse(summary=summary)
