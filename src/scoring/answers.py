"""Answer parsing and normalization.

Questionnaire answers arrive either as maturity objects
(``{"score": 0..4, "label": ...}``) or as legacy strings ("Yes", "No",
"Partial", "Unknown"). ``parse_answer`` turns any raw value into the
``Answer`` union without raising; ``normalize_answer`` maps an Answer to
a value in [0, 1], or None when it must be left out of scoring.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from src.scoring.models import (
    MAX_MATURITY,
    Answer,
    LegacyAnswer,
    NumericAnswer,
    Unanswered,
)

_LEGACY_VALUES: dict[LegacyAnswer, float] = {
    LegacyAnswer.YES: 1.0,
    LegacyAnswer.NO: 0.0,
}

PARTIAL_VALUE = 0.5


def parse_answer(raw: Any) -> Answer:
    """Classify a raw answer value into the Answer union."""
    if isinstance(raw, (NumericAnswer, LegacyAnswer, Unanswered)):
        return raw

    if raw is None or raw == "":
        return Unanswered(blank=True)

    if isinstance(raw, str):
        try:
            return LegacyAnswer(raw)
        except ValueError:
            return Unanswered(blank=False)

    if isinstance(raw, Mapping):
        score = raw.get("score")
        # bool is an int subclass but never a maturity score.
        if isinstance(score, (int, float)) and not isinstance(score, bool):
            try:
                value = float(score)
            except OverflowError:
                # Integers beyond float range clamp like infinities.
                value = math.inf if score > 0 else -math.inf
            if math.isnan(value):
                return Unanswered(blank=False)
            label = raw.get("label")
            return NumericAnswer(
                score=value,
                label=label if isinstance(label, str) else None,
            )

    return Unanswered(blank=False)


def normalize_answer(
    answer: Answer,
    *,
    allow_partial: bool = False,
    treat_unknown_as_zero: bool = False,
) -> float | None:
    """Convert an Answer to [0, 1], or None when it is excluded from scoring."""
    if isinstance(answer, NumericAnswer):
        clamped = min(max(answer.score, 0.0), MAX_MATURITY)
        return clamped / MAX_MATURITY

    if isinstance(answer, LegacyAnswer):
        if answer in _LEGACY_VALUES:
            return _LEGACY_VALUES[answer]
        if answer is LegacyAnswer.PARTIAL:
            return PARTIAL_VALUE if allow_partial else None
        # LegacyAnswer.UNKNOWN
        return 0.0 if treat_unknown_as_zero else None

    if treat_unknown_as_zero and answer.blank:
        return 0.0
    return None


def convert_answer(
    raw: Any,
    *,
    allow_partial: bool = False,
    treat_unknown_as_zero: bool = False,
) -> float | None:
    """Parse and normalize a raw answer in one step."""
    return normalize_answer(
        parse_answer(raw),
        allow_partial=allow_partial,
        treat_unknown_as_zero=treat_unknown_as_zero,
    )
