"""Shared types, enums, and base models used across EcoTrack domain models."""

import math
from datetime import datetime, timezone
from enum import StrEnum

from pydantic import BaseModel


def utc_now() -> datetime:
    """Return the current UTC timestamp (timezone-aware)."""
    return datetime.now(tz=timezone.utc)


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with ties going up (12.5 -> 13), unlike Python's banker's round()."""
    factor = 10**ndigits
    return math.floor(value * factor + 0.5) / factor


# --- Shared enums ---


class Pillar(StrEnum):
    """The three ESG pillars."""

    E = "E"
    S = "S"
    G = "G"


# Legacy questionnaire category labels -> pillar code.
CATEGORY_PILLARS: dict[str, Pillar] = {
    "Environmental": Pillar.E,
    "Social": Pillar.S,
    "Governance": Pillar.G,
}


# --- Base model ---


class EcoTrackBase(BaseModel):
    """Base model with common configuration for all EcoTrack Pydantic models."""

    model_config = {
        "populate_by_name": True,
        "protected_namespaces": (),
    }
