"""FastAPI scoring endpoints.

GET  /v1/sectors                              — sectors with resolved pillar weights
GET  /v1/sectors/{sector}/questions           — catalog questionnaire for a sector
GET  /v1/sectors/{sector}/benchmark           — sector benchmark averages
POST /v1/assessments/score                    — score answers into a ScoreReport
POST /v1/assessments/critical-check           — critical-pillar predicate
POST /v1/assessments/suggestions              — tailored improvement suggestions
POST /v1/assessments/cooldown-check           — re-assessment cooldown status

Stateless: nothing is persisted. Deterministic engine code only.
"""

import logging
from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.catalog.benchmarks import (
    BenchmarkComparison,
    SectorBenchmark,
    compare_to_benchmark,
    get_sector_benchmark,
)
from src.catalog.questions import get_questions_for_sector, list_sectors
from src.config.settings import Settings, get_settings
from src.models.common import Pillar
from src.scoring.config import ScoringOptions
from src.scoring.engine import as_question_record, score_assessment
from src.scoring.guards import (
    cooldown_from_settings,
    critical_pillars,
    is_cooldown_active,
    next_assessment_allowed_at,
)
from src.scoring.models import PillarWeights, QuestionRecord, ScoreReport
from src.scoring.weights import get_sector_pillar_weights, normalize_pillar_weights
from src.suggestions.engine import get_tailored_suggestions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["scoring"])


# ---------------------------------------------------------------------------
# Request / Response schemas
# ---------------------------------------------------------------------------


class ScoringOptionsRequest(BaseModel):
    """Per-request scoring options; unset caps use the configured defaults."""

    treat_unknown_as_zero: bool = False
    allow_partial: bool = False
    critical_cap_no: float | None = Field(default=None, ge=0.0, le=1.0)
    critical_cap_unknown: float | None = Field(default=None, ge=0.0, le=1.0)
    pillar_weights_override: dict[str, float] | None = None
    critical_threshold: float | None = Field(default=None, ge=0.0, le=1.0)


class ScoreRequest(BaseModel):
    """Request body for scoring an assessment.

    When ``questions`` is omitted the built-in catalog for ``sector`` is used.
    """

    sector: str | None = None
    questions: list[dict[str, Any]] | None = None
    answers: dict[str, Any] = Field(default_factory=dict)
    options: ScoringOptionsRequest = Field(default_factory=ScoringOptionsRequest)


class ScoreResponse(BaseModel):
    """Score report plus the derived alert and benchmark views."""

    report: ScoreReport
    critical: bool
    critical_pillars: list[Pillar]
    benchmark: BenchmarkComparison | None = None


class CriticalCheckRequest(BaseModel):
    """Pillar scores on the 0-1 scale; missing pillars never trigger."""

    pillars: dict[str, float | None] = Field(default_factory=dict)
    threshold: float | None = Field(default=None, ge=0.0, le=1.0)


class CriticalCheckResponse(BaseModel):
    critical: bool
    pillars: list[Pillar]
    threshold: float


class SuggestionsRequest(BaseModel):
    sector: str
    answers: dict[str, Any] = Field(default_factory=dict)
    questions: list[dict[str, Any]] | None = None
    limit: int = Field(default=10, ge=1, le=50)


class SuggestionItem(BaseModel):
    id: str
    text: str
    tags: list[str]
    score: float


class SectorSummary(BaseModel):
    sector: str
    pillar_weights: PillarWeights
    question_count: int


class CooldownCheckRequest(BaseModel):
    """Creation time of the latest assessment, if any (naive means UTC)."""

    last_created_at: datetime | None = None


class CooldownCheckResponse(BaseModel):
    active: bool
    next_allowed_at: datetime | None
    cooldown_days: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_questions(
    sector: str | None,
    questions: list[dict[str, Any]] | None,
) -> list[QuestionRecord] | list[dict[str, Any]]:
    if questions is not None:
        return questions
    catalog = get_questions_for_sector(sector)
    if not catalog:
        raise HTTPException(
            status_code=404,
            detail=f"No question catalog for sector '{sector}'",
        )
    return catalog


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/sectors", response_model=list[SectorSummary])
async def get_sectors() -> list[SectorSummary]:
    """List catalog sectors with their normalized pillar weights."""
    return [
        SectorSummary(
            sector=sector,
            pillar_weights=normalize_pillar_weights(get_sector_pillar_weights(sector)),
            question_count=len(get_questions_for_sector(sector)),
        )
        for sector in list_sectors()
    ]


@router.get("/sectors/{sector:path}/questions", response_model=list[QuestionRecord])
async def get_sector_questions(sector: str) -> list[QuestionRecord]:
    """Return the normalized questionnaire for a sector."""
    questions = get_questions_for_sector(sector)
    if not questions:
        raise HTTPException(status_code=404, detail=f"Unknown sector '{sector}'")
    return questions


@router.get("/sectors/{sector:path}/benchmark", response_model=SectorBenchmark)
async def get_benchmark(sector: str) -> SectorBenchmark:
    """Return a sector's benchmark averages."""
    benchmark = get_sector_benchmark(sector)
    if benchmark is None:
        raise HTTPException(
            status_code=404, detail=f"No benchmark for sector '{sector}'"
        )
    return benchmark


@router.post("/assessments/score", response_model=ScoreResponse)
async def score(
    body: ScoreRequest,
    settings: Settings = Depends(get_settings),
) -> ScoreResponse:
    """Score an assessment and attach the critical alert and benchmark views."""
    questions = _resolve_questions(body.sector, body.questions)
    opts = body.options
    options = ScoringOptions.from_settings(
        settings,
        sector=body.sector,
        treat_unknown_as_zero=opts.treat_unknown_as_zero,
        allow_partial=opts.allow_partial,
        critical_cap_no=opts.critical_cap_no,
        critical_cap_unknown=opts.critical_cap_unknown,
        pillar_weights_override=opts.pillar_weights_override,
    )

    report = score_assessment(questions, body.answers, options)

    threshold = (
        opts.critical_threshold
        if opts.critical_threshold is not None
        else settings.CRITICAL_ALERT_THRESHOLD
    )
    fractions = {p.value: v for p, v in report.pillars.as_fractions().items()}
    flagged = critical_pillars(fractions, threshold)
    if flagged:
        logger.info(
            "Critical pillar(s) %s for sector=%s (overall=%d)",
            ",".join(flagged),
            body.sector,
            report.overall,
        )

    return ScoreResponse(
        report=report,
        critical=bool(flagged),
        critical_pillars=flagged,
        benchmark=compare_to_benchmark(report, body.sector),
    )


@router.post("/assessments/critical-check", response_model=CriticalCheckResponse)
async def critical_check(
    body: CriticalCheckRequest,
    settings: Settings = Depends(get_settings),
) -> CriticalCheckResponse:
    """Evaluate the critical-pillar predicate on 0-1 pillar scores."""
    threshold = (
        body.threshold
        if body.threshold is not None
        else settings.CRITICAL_ALERT_THRESHOLD
    )
    flagged = critical_pillars(body.pillars, threshold)
    return CriticalCheckResponse(
        critical=bool(flagged),
        pillars=flagged,
        threshold=threshold,
    )


@router.post("/assessments/suggestions", response_model=list[SuggestionItem])
async def suggestions(body: SuggestionsRequest) -> list[SuggestionItem]:
    """Rank improvement suggestions by the assessment's deficits."""
    raw_questions = _resolve_questions(body.sector, body.questions)
    questions = [
        record
        for record in map(as_question_record, raw_questions)
        if record is not None
    ]
    ranked = get_tailored_suggestions(body.sector, questions, body.answers, body.limit)
    return [
        SuggestionItem(
            id=r.suggestion.id,
            text=r.suggestion.text,
            tags=r.suggestion.tags,
            score=r.score,
        )
        for r in ranked
    ]


@router.post("/assessments/cooldown-check", response_model=CooldownCheckResponse)
async def cooldown_check(
    body: CooldownCheckRequest,
    settings: Settings = Depends(get_settings),
) -> CooldownCheckResponse:
    """Report whether a new assessment is still blocked by the cooldown."""
    cooldown = cooldown_from_settings(settings)
    return CooldownCheckResponse(
        active=is_cooldown_active(body.last_created_at, cooldown=cooldown),
        next_allowed_at=next_assessment_allowed_at(body.last_created_at, cooldown),
        cooldown_days=settings.ASSESSMENT_COOLDOWN_DAYS,
    )
