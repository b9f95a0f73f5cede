"""Assessment guards: critical-pillar alerting and re-assessment cooldown."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from typing import Any

from src.config.settings import Settings
from src.models.common import Pillar, utc_now
from src.scoring.models import ScoreReport

DEFAULT_CRITICAL_THRESHOLD = 0.20

DEFAULT_COOLDOWN = timedelta(days=180)


def _pillar_value(pillar_scores: Mapping[str, Any], pillar: Pillar) -> float:
    # Missing values never trigger.
    value = pillar_scores.get(pillar.value)
    if value is None or isinstance(value, bool):
        return 1.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 1.0
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    return 1.0 if math.isnan(number) else number


def critical_pillars(
    pillar_scores: Mapping[str, Any] | None,
    threshold: float = DEFAULT_CRITICAL_THRESHOLD,
) -> list[Pillar]:
    """Pillars whose 0-1 score is at or below ``threshold``, in E, S, G order."""
    scores = pillar_scores or {}
    return [p for p in Pillar if _pillar_value(scores, p) <= threshold]


def has_critical_pillar(
    pillar_scores: Mapping[str, Any] | None,
    threshold: float = DEFAULT_CRITICAL_THRESHOLD,
) -> bool:
    """True iff any of E, S, G (on the 0-1 scale) is <= ``threshold``."""
    return bool(critical_pillars(pillar_scores, threshold))


def report_has_critical_pillar(
    report: ScoreReport,
    threshold: float = DEFAULT_CRITICAL_THRESHOLD,
) -> bool:
    """Apply the critical-pillar check to a report's 0-100 pillar scores."""
    fractions = {p.value: v for p, v in report.pillars.as_fractions().items()}
    return has_critical_pillar(fractions, threshold)


def cooldown_from_settings(settings: Settings) -> timedelta:
    """The deployment's configured re-assessment cooldown."""
    return timedelta(days=settings.ASSESSMENT_COOLDOWN_DAYS)


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def next_assessment_allowed_at(
    created_at: datetime | None,
    cooldown: timedelta | None = None,
) -> datetime | None:
    """When a new assessment may start; None if there is no previous one."""
    if created_at is None:
        return None
    if cooldown is None:
        cooldown = DEFAULT_COOLDOWN
    return _as_utc(created_at) + cooldown


def is_cooldown_active(
    created_at: datetime | None,
    *,
    now: datetime | None = None,
    cooldown: timedelta | None = None,
) -> bool:
    """True while the latest assessment is younger than ``cooldown``.

    Naive datetimes are taken to be UTC.
    """
    allowed_at = next_assessment_allowed_at(created_at, cooldown)
    if allowed_at is None:
        return False
    return _as_utc(now or utc_now()) < allowed_at
