"""Tailored suggestions -- rank the pool by the assessment's weak spots.

1. Build a deficit profile: every question answered "No", "Unknown",
   "NA" or maturity 0 adds weight (2 if critical, else 1) to each of its
   tags and to its pillar.
2. Score each sector-applicable suggestion by the deficit weight of its
   tags, plus half the deficit of every pillar its tags belong to.
3. Sort by score (desc) then id; fall back to pool order when nothing
   matched.

Deterministic -- no randomness.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.catalog.questions import PILLAR_FALLBACK_TAGS
from src.models.common import Pillar
from src.scoring.answers import parse_answer
from src.scoring.models import NumericAnswer, QuestionRecord, normalize_tags
from src.suggestions.pool import Suggestion, filter_suggestions

logger = logging.getLogger(__name__)

DEFICIT_ANSWERS = frozenset({"No", "Unknown", "NA"})

CRITICAL_DEFICIT_WEIGHT = 2
PILLAR_BOOST = 0.5
FOUNDATIONS_TAG = "foundations"
FOUNDATIONS_SCORE = 0.25

# Practice-area tag -> pillar it strengthens.
TAG_PILLARS: dict[str, Pillar] = {
    "energy": Pillar.E,
    "energy-efficiency": Pillar.E,
    "lighting": Pillar.E,
    "metering": Pillar.E,
    "scope2": Pillar.E,
    "water": Pillar.E,
    "waste": Pillar.E,
    "circularity": Pillar.E,
    "logistics": Pillar.E,
    "people": Pillar.S,
    "health-safety": Pillar.S,
    "training": Pillar.S,
    "human-rights": Pillar.S,
    "governance": Pillar.G,
    "policy": Pillar.G,
    "ethics": Pillar.G,
    "procurement": Pillar.G,
    "transparency": Pillar.G,
    "foundations": Pillar.G,
}


@dataclass
class DeficitProfile:
    """Where an assessment is weak, by tag and by pillar."""

    tag_scores: Counter[str] = field(default_factory=Counter)
    pillar_scores: dict[Pillar, int] = field(
        default_factory=lambda: {p: 0 for p in Pillar}
    )
    total: int = 0


@dataclass(frozen=True)
class RankedSuggestion:
    suggestion: Suggestion
    score: float


def is_deficit(raw: Any) -> bool:
    """True when an answer counts against its practice area."""
    if isinstance(raw, str):
        return raw in DEFICIT_ANSWERS
    answer = parse_answer(raw)
    return isinstance(answer, NumericAnswer) and answer.score <= 0


def build_deficit_profile(
    questions: Iterable[QuestionRecord],
    answers: Mapping[str, Any] | None,
) -> DeficitProfile:
    """Accumulate deficit weight per tag and per pillar."""
    answers = answers or {}
    profile = DeficitProfile()

    for question in questions:
        if not is_deficit(answers.get(question.id)):
            continue
        weight = CRITICAL_DEFICIT_WEIGHT if question.critical else 1
        profile.total += weight

        tags = question.tags or [PILLAR_FALLBACK_TAGS[question.pillar]]
        for tag in tags:
            profile.tag_scores[tag] += weight
        profile.pillar_scores[question.pillar] += weight

    return profile


def score_suggestion(suggestion: Suggestion, profile: DeficitProfile) -> float:
    """Relevance of a suggestion to a deficit profile."""
    tags = normalize_tags(suggestion.tags)
    score = float(sum(profile.tag_scores.get(t, 0) for t in tags))

    pillars = {TAG_PILLARS[t] for t in tags if t in TAG_PILLARS}
    for pillar in pillars:
        score += profile.pillar_scores[pillar] * PILLAR_BOOST

    # Keep governance foundations visible when nothing else stands out.
    if score == 0 and FOUNDATIONS_TAG in tags:
        score = FOUNDATIONS_SCORE
    return score


def get_tailored_suggestions(
    sector: str | None,
    questions: Iterable[QuestionRecord],
    answers: Mapping[str, Any] | None,
    limit: int = 10,
) -> list[RankedSuggestion]:
    """Return up to ``limit`` suggestions ranked for this assessment."""
    pool = filter_suggestions(sector)
    profile = build_deficit_profile(questions, answers)

    scored = [RankedSuggestion(s, score_suggestion(s, profile)) for s in pool]
    scored.sort(key=lambda r: (-r.score, r.suggestion.id))

    if not any(r.score > 0 for r in scored):
        logger.debug("No deficit matched for sector=%s; using pool order", sector)
        return [RankedSuggestion(s, 0.0) for s in pool[:limit]]
    return scored[:limit]
