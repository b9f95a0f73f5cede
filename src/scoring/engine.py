"""Scoring engine -- converts questionnaire answers into an ESG ScoreReport.

Scoring model:
  - Each answer normalizes to [0, 1] or is left out (unanswered).
  - Per pillar, the score is the question-weighted average of answered
    questions; a pillar with nothing answered scores 0.
  - Critical questions cap their pillar: a critical "No" caps at
    ``critical_cap_no``; otherwise a critical unanswered question caps at
    ``critical_cap_unknown``. The "No" cap always takes precedence.
  - Pillar scores are combined with normalized sector pillar weights into
    the overall score, which maps to a rating band.

Deterministic -- no I/O. Malformed input degrades, it never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from src.models.common import Pillar, round_half_up
from src.scoring.answers import convert_answer
from src.scoring.config import DEFAULT_RATING_BANDS, RatingBand, ScoringOptions
from src.scoring.models import (
    PillarDetail,
    PillarScores,
    QuestionRecord,
    Rating,
    ScoreDetails,
    ScoreReport,
)
from src.scoring.weights import resolve_pillar_weights

logger = logging.getLogger(__name__)


@dataclass
class _PillarBucket:
    """Running totals for one pillar while iterating questions."""

    weighted_sum: float = 0.0
    weight_sum: float = 0.0
    n: int = 0
    critical_no: list[str] = field(default_factory=list)
    critical_unknown: list[str] = field(default_factory=list)


def numeric_to_rating(
    score: float,
    bands: tuple[RatingBand, ...] = DEFAULT_RATING_BANDS,
) -> Rating:
    """Map a 0-100 score to its rating band (lower bound inclusive)."""
    for band in bands:
        if score >= band.min_score:
            return band.rating
    return Rating.CCC


def as_question_record(question: Any) -> QuestionRecord | None:
    """Validate a raw question, or None when it cannot be scored."""
    if isinstance(question, QuestionRecord):
        return question
    if isinstance(question, Mapping):
        try:
            return QuestionRecord.model_validate(dict(question))
        except ValidationError:
            logger.debug("Skipping unreadable question %r", question)
            return None
    logger.debug("Skipping non-mapping question %r", question)
    return None


def _cap_pillar(
    bucket: _PillarBucket,
    options: ScoringOptions,
) -> tuple[float, bool, str | None]:
    """Return (cap, capped, reason) for a pillar."""
    if bucket.critical_no:
        return (
            min(1.0, options.critical_cap_no),
            True,
            f'Critical "No" on {len(bucket.critical_no)} item(s)',
        )
    if bucket.critical_unknown:
        cap = min(1.0, options.critical_cap_unknown)
        if cap < 1.0:
            return (
                cap,
                True,
                f"Critical unanswered on {len(bucket.critical_unknown)} item(s)",
            )
    return 1.0, False, None


def score_assessment(
    questions: Iterable[QuestionRecord | Mapping[str, Any]] | None,
    answers: Mapping[str, Any] | None,
    options: ScoringOptions | None = None,
) -> ScoreReport:
    """Score an assessment.

    Args:
        questions: Question records (or plain mappings) from the catalog.
            Order does not affect the result.
        answers: Raw answers keyed by question id. Keys without a matching
            question are ignored.
        options: Scoring options; defaults to ``ScoringOptions()``.

    Returns:
        An immutable ScoreReport.
    """
    options = options or ScoringOptions()
    if not isinstance(answers, Mapping):
        answers = {}

    buckets = {p: _PillarBucket() for p in Pillar}
    unanswered: list[str] = []

    for question in questions or []:
        record = as_question_record(question)
        if record is None:
            continue

        bucket = buckets[record.pillar]
        value = convert_answer(
            answers.get(record.id),
            allow_partial=options.allow_partial,
            treat_unknown_as_zero=options.treat_unknown_as_zero,
        )

        if value is None:
            if record.critical:
                bucket.critical_unknown.append(record.id)
            unanswered.append(record.id)
            continue

        bucket.weighted_sum += value * record.weight
        bucket.weight_sum += record.weight
        bucket.n += 1

        if record.critical and value == 0:
            bucket.critical_no.append(record.id)

    pillar_scores: dict[Pillar, int] = {}
    pillar_details: dict[Pillar, PillarDetail] = {}

    for pillar, bucket in buckets.items():
        base = bucket.weighted_sum / bucket.weight_sum if bucket.weight_sum > 0 else 0.0
        cap, capped, reason = _cap_pillar(bucket, options)
        if capped:
            logger.debug("Pillar %s capped at %.2f: %s", pillar, cap, reason)

        score = int(round_half_up(100 * min(base, cap)))
        pillar_scores[pillar] = score
        pillar_details[pillar] = PillarDetail(
            score=score,
            capped=capped,
            cap_reason=reason,
            n=bucket.n,
            w_sum=round_half_up(bucket.weight_sum, 2),
        )

    weights = resolve_pillar_weights(options)
    overall_fraction = sum(
        pillar_scores[p] / 100 * weights.get(p) for p in Pillar
    )
    overall = int(round_half_up(overall_fraction * 100))
    rating = numeric_to_rating(overall, options.rating_bands)

    logger.debug(
        "Scored assessment: sector=%s questions=%d unanswered=%d overall=%d rating=%s",
        options.sector,
        sum(b.n for b in buckets.values()) + len(unanswered),
        len(unanswered),
        overall,
        rating,
    )

    return ScoreReport(
        overall=overall,
        rating=rating,
        pillars=PillarScores(**{p.value: s for p, s in pillar_scores.items()}),
        details=ScoreDetails(
            pillar=pillar_details,
            sector_pillar_weights=weights,
            unanswered=unanswered,
            critical_hits={p: list(b.critical_no) for p, b in buckets.items()},
            critical_unknowns={p: list(b.critical_unknown) for p, b in buckets.items()},
        ),
    )
