"""Question catalog: sector questionnaires as normalized QuestionRecords.

Ids are ``"{dataset_key}-{n}"`` with ``n`` the 1-based position inside the
sector dataset, so answers stored against them stay valid as long as
questions are only appended.

Tags come from the dataset when present, otherwise they are inferred
from the question text. Weights are explicit when given, otherwise
inferred on a 1 (low) / 2 (medium) / 3 (high) scale from the pillar,
the tags and the critical flag.
"""

from __future__ import annotations

import math
import re

from src.catalog.datasets import DATASETS, SECTOR_ALIASES, CatalogEntry
from src.models.common import Pillar
from src.scoring.models import QuestionRecord, normalize_tags, pillar_from_category

# Ordered keyword rules used when a question carries no explicit tags.
_KEYWORD_TAGS: tuple[tuple[re.Pattern[str], tuple[str, ...]], ...] = (
    (re.compile(r"renewable|ppa|green tariff", re.I), ("energy", "scope2")),
    (re.compile(r"energy\s*(efficien|saving)|\bled\b|lighting", re.I), ("energy-efficiency", "lighting")),
    (re.compile(r"sub-?meter|metering|submeter", re.I), ("metering", "energy")),
    (re.compile(r"\b(kpi|track|tracking|measure|monitor|target|goal|report|disclos)", re.I), ("metrics", "transparency")),
    (re.compile(r"water|wastewater", re.I), ("water",)),
    (re.compile(r"waste|recycl|circular", re.I), ("waste", "circularity")),
    (re.compile(r"logistics|transport|delivery|route", re.I), ("logistics",)),
    (re.compile(r"hazardous|chemical", re.I), ("chemicals",)),
    (re.compile(r"supply\s*chain|supplier", re.I), ("procurement", "human-rights")),
    (re.compile(r"health|safety", re.I), ("health-safety", "training")),
    (re.compile(r"diversity|inclusion|wage|fair", re.I), ("people",)),
    (re.compile(r"training|train\b", re.I), ("training",)),
    (re.compile(r"community|communities", re.I), ("people",)),
    (re.compile(r"code of ethics|ethics|anti-?corruption|bribery", re.I), ("ethics", "policy")),
    (re.compile(r"\bpolicy|policies\b", re.I), ("policy", "governance")),
    (re.compile(r"board|governance|oversight", re.I), ("governance", "foundations")),
    (re.compile(r"biodivers", re.I), ("biodiversity",)),
    (re.compile(r"portfolio|investment|finance\b", re.I), ("governance", "transparency")),
)

# Tag used when nothing in the text matches.
PILLAR_FALLBACK_TAGS: dict[Pillar, str] = {
    Pillar.E: "energy",
    Pillar.S: "people",
    Pillar.G: "governance",
}

# Per pillar: (tags, weight) checked in order; first hit wins.
_WEIGHT_RULES: dict[Pillar, tuple[tuple[frozenset[str], float], ...]] = {
    Pillar.E: (
        (frozenset({"metrics", "scope2", "energy", "energy-efficiency"}), 3.0),
        (frozenset({"water", "waste", "circularity", "chemicals", "biodiversity"}), 2.0),
    ),
    Pillar.S: (
        (frozenset({"health-safety", "human-rights"}), 3.0),
        (frozenset({"people", "training"}), 2.0),
    ),
    Pillar.G: (
        (frozenset({"ethics", "policy", "governance", "foundations"}), 3.0),
        (frozenset({"transparency", "procurement", "metrics"}), 2.0),
    ),
}

CRITICAL_WEIGHT = 3.0


def infer_tags(text: str, pillar: Pillar) -> list[str]:
    """Derive tags from question wording, with a per-pillar fallback."""
    tags: list[str] = []
    for pattern, rule_tags in _KEYWORD_TAGS:
        if pattern.search(text):
            tags.extend(t for t in rule_tags if t not in tags)
    if not tags:
        tags.append(PILLAR_FALLBACK_TAGS[pillar])
    return tags


def infer_weight(pillar: Pillar, tags: list[str], critical: bool) -> float:
    """Estimate a question's relative weight within its pillar."""
    if critical:
        return CRITICAL_WEIGHT
    tag_set = set(tags)
    for rule_tags, weight in _WEIGHT_RULES.get(pillar, ()):
        if tag_set & rule_tags:
            return weight
    return 1.0


def dataset_key(sector: str | None) -> str | None:
    """Resolve a public sector label (or dataset key) to its dataset key."""
    if not sector:
        return None
    key = SECTOR_ALIASES.get(sector, sector)
    return key if key in DATASETS else None


def list_sectors() -> list[str]:
    """Public sector labels that have a built-in questionnaire."""
    reverse = {key: label for label, key in SECTOR_ALIASES.items()}
    return [reverse.get(key, key) for key in DATASETS]


def _to_record(key: str, position: int, entry: CatalogEntry) -> QuestionRecord:
    pillar = pillar_from_category(entry.category)
    tags = normalize_tags(entry.tags) or normalize_tags(infer_tags(entry.text, pillar))
    if entry.weight is not None and math.isfinite(entry.weight):
        weight = entry.weight
    else:
        weight = infer_weight(pillar, tags, entry.critical)
    return QuestionRecord(
        id=f"{key}-{position}",
        text=entry.text,
        pillar=pillar,
        tags=tags,
        critical=entry.critical,
        weight=weight,
    )


def get_questions_for_sector(sector: str | None) -> list[QuestionRecord]:
    """Return the normalized questionnaire for a sector (empty if unknown)."""
    key = dataset_key(sector)
    if key is None:
        return []
    return [
        _to_record(key, position, entry)
        for position, entry in enumerate(DATASETS[key], start=1)
    ]
