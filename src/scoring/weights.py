"""Sector pillar weights: table lookup and normalization.

Resolution order: explicit override, then the first sector rule whose
keywords appear in the lower-cased sector name, then the fallback
weights. Whatever comes out is normalized so E + S + G == 1.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from src.models.common import Pillar
from src.scoring.config import (
    DEFAULT_FALLBACK_WEIGHTS,
    DEFAULT_SECTOR_WEIGHT_RULES,
    ScoringOptions,
    SectorWeightRule,
)
from src.scoring.models import PillarWeights

logger = logging.getLogger(__name__)

EQUAL_WEIGHTS = PillarWeights(E=1 / 3, S=1 / 3, G=1 / 3)


def match_sector_rule(
    sector: str | None,
    rules: tuple[SectorWeightRule, ...] = DEFAULT_SECTOR_WEIGHT_RULES,
) -> SectorWeightRule | None:
    """Return the first rule matching ``sector``, or None."""
    if not sector:
        return None
    for rule in rules:
        if rule.matches(sector):
            return rule
    return None


def get_sector_pillar_weights(
    sector: str | None,
    rules: tuple[SectorWeightRule, ...] = DEFAULT_SECTOR_WEIGHT_RULES,
    fallback: PillarWeights = DEFAULT_FALLBACK_WEIGHTS,
) -> PillarWeights:
    """Look up the (un-normalized) default pillar weights for a sector."""
    rule = match_sector_rule(sector, rules)
    if rule is None:
        return fallback
    return rule.weights


def _component(weights: Mapping[str, Any], pillar: Pillar) -> float:
    """Read one weight; missing or non-numeric counts as 1, negatives as 0."""
    value = weights.get(pillar.value)
    if value is None or isinstance(value, bool):
        return 1.0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 1.0
    if not math.isfinite(number):
        return 1.0
    return max(number, 0.0)


def normalize_pillar_weights(
    weights: PillarWeights | Mapping[str, Any] | None,
) -> PillarWeights:
    """Scale weights to sum to 1; a zero total falls back to equal thirds."""
    if isinstance(weights, PillarWeights):
        weights = weights.model_dump()
    weights = weights or {}

    e, s, g = (_component(weights, p) for p in Pillar)
    total = e + s + g
    if total <= 0:
        return EQUAL_WEIGHTS
    return PillarWeights(E=e / total, S=s / total, G=g / total)


def resolve_pillar_weights(options: ScoringOptions) -> PillarWeights:
    """Pick override or sector weights for a scoring call and normalize them."""
    if options.pillar_weights_override is not None:
        logger.debug("Using pillar weight override %s", options.pillar_weights_override)
        raw: PillarWeights | Mapping[str, Any] = options.pillar_weights_override
    else:
        raw = get_sector_pillar_weights(
            options.sector,
            options.sector_weight_rules,
            options.fallback_pillar_weights,
        )
    return normalize_pillar_weights(raw)
