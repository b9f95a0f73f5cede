"""Scoring module enums, answer shapes, and Pydantic models.

Defines the question records consumed from the catalog, the tagged
union of answer shapes accepted from the questionnaire, and the
immutable ScoreReport produced by the engine.

Deterministic -- no I/O.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import Any

from pydantic import Field, field_validator, model_validator

from src.models.common import CATEGORY_PILLARS, EcoTrackBase, Pillar


# ---------------------------------------------------------------------------
# Enums (all StrEnum)
# ---------------------------------------------------------------------------


class Rating(StrEnum):
    """Qualitative rating bands from AAA (best) to CCC (worst)."""

    AAA = "AAA"
    AA = "AA"
    A = "A"
    BBB = "BBB"
    BB = "BB"
    B = "B"
    CCC = "CCC"


class LegacyAnswer(StrEnum):
    """String answers from the legacy yes/no questionnaire."""

    YES = "Yes"
    NO = "No"
    PARTIAL = "Partial"
    UNKNOWN = "Unknown"


class MaturityLevel(IntEnum):
    """The 0-4 maturity scale used for numeric answers."""

    NOT_IN_PLACE = 0
    INFORMAL = 1
    PARTIALLY_STRUCTURED = 2
    IMPLEMENTED = 3
    ADVANCED = 4


MATURITY_LABELS: dict[MaturityLevel, str] = {
    MaturityLevel.NOT_IN_PLACE: "Not in place",
    MaturityLevel.INFORMAL: "Informal / ad hoc",
    MaturityLevel.PARTIALLY_STRUCTURED: "Partially structured",
    MaturityLevel.IMPLEMENTED: "Implemented & documented",
    MaturityLevel.ADVANCED: "Advanced / best practice",
}

MAX_MATURITY = float(MaturityLevel.ADVANCED)


# ---------------------------------------------------------------------------
# Answer shapes (frozen dataclasses)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NumericAnswer:
    """Maturity answer on the 0-4 scale. Out-of-range scores are clamped later."""

    score: float
    label: str | None = None


@dataclass(frozen=True)
class Unanswered:
    """No usable answer.

    ``blank`` is True for absent, ``None`` and empty-string answers; only
    those (plus "Unknown") convert to zero under ``treat_unknown_as_zero``.
    """

    blank: bool = True


Answer = NumericAnswer | LegacyAnswer | Unanswered


# ---------------------------------------------------------------------------
# Question records
# ---------------------------------------------------------------------------


def safe_weight(value: Any) -> float:
    """Return a positive finite question weight, defaulting to 1."""
    if isinstance(value, bool):
        value = int(value)
    try:
        weight = float(value)
    except (TypeError, ValueError, OverflowError):
        return 1.0
    if not math.isfinite(weight) or weight <= 0:
        return 1.0
    return weight


def normalize_tags(tags: Any) -> list[str]:
    """Lowercase, strip and de-duplicate tags, keeping first-seen order."""
    if tags is None:
        return []
    if isinstance(tags, str):
        tags = [tags]
    elif not isinstance(tags, Iterable):
        return []
    out: list[str] = []
    for tag in tags:
        if tag is None:
            continue
        clean = str(tag).lower().strip()
        if clean and clean not in out:
            out.append(clean)
    return out


def coerce_pillar(value: Any) -> Pillar:
    """Resolve a pillar token (any case) to a Pillar, defaulting to E."""
    if isinstance(value, Pillar):
        return value
    if isinstance(value, str):
        token = value.strip().upper()
        if token in Pillar.__members__:
            return Pillar(token)
    return Pillar.E


def pillar_from_category(category: Any) -> Pillar:
    """Map a legacy category label (Environmental/Social/Governance) to a pillar."""
    if isinstance(category, str):
        return CATEGORY_PILLARS.get(category, Pillar.E)
    return Pillar.E


class QuestionRecord(EcoTrackBase, frozen=True):
    """A single catalog question as seen by the scoring engine.

    Construction is permissive: a legacy ``category`` is mapped to a
    pillar, invalid weights fall back to 1 and tags are normalized.
    """

    id: str
    pillar: Pillar = Pillar.E
    text: str | None = None
    tags: list[str] = Field(default_factory=list)
    critical: bool = False
    weight: float = 1.0

    @model_validator(mode="before")
    @classmethod
    def _resolve_legacy_category(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and not data.get("pillar"):
            data = {**data, "pillar": pillar_from_category(data.get("category"))}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("pillar", mode="before")
    @classmethod
    def _coerce_pillar(cls, value: Any) -> Pillar:
        return coerce_pillar(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value: Any) -> list[str]:
        return normalize_tags(value)

    @field_validator("critical", mode="before")
    @classmethod
    def _coerce_critical(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("weight", mode="before")
    @classmethod
    def _coerce_weight(cls, value: Any) -> float:
        return safe_weight(value)


# ---------------------------------------------------------------------------
# Weights and report models
# ---------------------------------------------------------------------------


class PillarWeights(EcoTrackBase, frozen=True):
    """Relative emphasis of each pillar for a sector."""

    E: float = Field(ge=0.0)
    S: float = Field(ge=0.0)
    G: float = Field(ge=0.0)

    def get(self, pillar: Pillar) -> float:
        return getattr(self, pillar.value)

    @property
    def total(self) -> float:
        return self.E + self.S + self.G


class PillarScores(EcoTrackBase, frozen=True):
    """Integer 0-100 score per pillar."""

    E: int = Field(ge=0, le=100)
    S: int = Field(ge=0, le=100)
    G: int = Field(ge=0, le=100)

    def get(self, pillar: Pillar) -> int:
        return getattr(self, pillar.value)

    def as_fractions(self) -> dict[Pillar, float]:
        """Scores on the 0-1 scale, as expected by the critical-pillar check."""
        return {p: self.get(p) / 100 for p in Pillar}


class PillarDetail(EcoTrackBase, frozen=True):
    """Per-pillar diagnostics: sample count, weight sum, and capping."""

    score: int = Field(ge=0, le=100)
    capped: bool = False
    cap_reason: str | None = None
    n: int = Field(default=0, ge=0)
    w_sum: float = Field(default=0.0, ge=0.0)


class ScoreDetails(EcoTrackBase, frozen=True):
    """Diagnostic payload attached to every ScoreReport."""

    pillar: dict[Pillar, PillarDetail]
    sector_pillar_weights: PillarWeights
    unanswered: list[str] = Field(default_factory=list)
    critical_hits: dict[Pillar, list[str]] = Field(default_factory=dict)
    critical_unknowns: dict[Pillar, list[str]] = Field(default_factory=dict)


class ScoreReport(EcoTrackBase, frozen=True):
    """Immutable result of scoring one assessment.

    A pure derived value: recomputed from (questions, answers, options)
    whenever the inputs change.
    """

    overall: int = Field(ge=0, le=100)
    rating: Rating
    pillars: PillarScores
    details: ScoreDetails
