"""Scoring configuration.

Provides the options accepted by the scoring engine together with the
fixed lookup tables it relies on: the ordered sector -> pillar weight
rules and the rating bands. The tables are defaults only; both can be
overridden per call through ScoringOptions.

Deterministic -- no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import Field, field_validator

from src.config.settings import Settings
from src.models.common import EcoTrackBase
from src.scoring.models import PillarWeights, Rating


# ---------------------------------------------------------------------------
# Table rows (frozen dataclasses)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SectorWeightRule:
    """A sector family: keywords matched by substring against the sector name."""

    family: str
    keywords: tuple[str, ...]
    weights: PillarWeights

    def matches(self, sector: str) -> bool:
        lowered = sector.lower()
        return any(keyword in lowered for keyword in self.keywords)


@dataclass(frozen=True)
class RatingBand:
    """Lower-inclusive threshold for a rating."""

    min_score: float
    rating: Rating


# First match wins, so order matters.
DEFAULT_SECTOR_WEIGHT_RULES: tuple[SectorWeightRule, ...] = (
    SectorWeightRule(
        family="heavy_industry",
        keywords=("manufacturing", "construction", "chemicals", "mining"),
        weights=PillarWeights(E=0.50, S=0.30, G=0.20),
    ),
    SectorWeightRule(
        family="consumer_goods",
        keywords=("textile", "fashion", "apparel", "furniture"),
        weights=PillarWeights(E=0.45, S=0.35, G=0.20),
    ),
    SectorWeightRule(
        family="agrifood",
        keywords=("agriculture", "food", "beverage"),
        weights=PillarWeights(E=0.50, S=0.35, G=0.15),
    ),
    SectorWeightRule(
        family="transport",
        keywords=("transport", "transportation", "logistics"),
        weights=PillarWeights(E=0.50, S=0.30, G=0.20),
    ),
    SectorWeightRule(
        family="technology",
        keywords=("tech", "technology", "software", "it"),
        weights=PillarWeights(E=0.25, S=0.35, G=0.40),
    ),
    SectorWeightRule(
        family="financial",
        keywords=("finance", "bank", "insurance", "asset"),
        weights=PillarWeights(E=0.20, S=0.30, G=0.50),
    ),
)

DEFAULT_FALLBACK_WEIGHTS = PillarWeights(E=0.34, S=0.33, G=0.33)

# Evaluated top-down; anything below the last band is CCC.
DEFAULT_RATING_BANDS: tuple[RatingBand, ...] = (
    RatingBand(85, Rating.AAA),
    RatingBand(75, Rating.AA),
    RatingBand(65, Rating.A),
    RatingBand(55, Rating.BBB),
    RatingBand(45, Rating.BB),
    RatingBand(35, Rating.B),
)

DEFAULT_CRITICAL_CAP_NO = 0.40
DEFAULT_CRITICAL_CAP_UNKNOWN = 0.60


class ScoringOptions(EcoTrackBase, frozen=True):
    """Options for a single scoring call.

    Every field has a documented default, so ``ScoringOptions()`` scores
    exactly like the questionnaire does out of the box.
    """

    sector: str | None = None
    treat_unknown_as_zero: bool = False
    allow_partial: bool = False
    critical_cap_no: float = Field(default=DEFAULT_CRITICAL_CAP_NO, ge=0.0, le=1.0)
    critical_cap_unknown: float = Field(
        default=DEFAULT_CRITICAL_CAP_UNKNOWN, ge=0.0, le=1.0
    )
    pillar_weights_override: dict[str, Any] | None = None

    sector_weight_rules: tuple[SectorWeightRule, ...] = DEFAULT_SECTOR_WEIGHT_RULES
    fallback_pillar_weights: PillarWeights = DEFAULT_FALLBACK_WEIGHTS
    rating_bands: tuple[RatingBand, ...] = DEFAULT_RATING_BANDS

    @field_validator("pillar_weights_override", mode="before")
    @classmethod
    def _unwrap_pillar_weights(cls, value: Any) -> Any:
        if isinstance(value, PillarWeights):
            return value.model_dump()
        return value

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> ScoringOptions:
        """Build options seeded with the deployment's configured caps."""
        values: dict[str, Any] = {
            "critical_cap_no": settings.CRITICAL_CAP_NO,
            "critical_cap_unknown": settings.CRITICAL_CAP_UNKNOWN,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
