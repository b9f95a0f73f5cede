"""Built-in pool of improvement suggestions.

Each suggestion lists the sectors it applies to ("All" for every
sector) and practice-area tags matched against questionnaire deficits.
"""

from __future__ import annotations

from pydantic import Field

from src.models.common import EcoTrackBase

ALL_SECTORS = "All"


class Suggestion(EcoTrackBase, frozen=True):
    """An actionable improvement recommendation."""

    id: str
    text: str
    sectors: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    def applies_to(self, sector: str) -> bool:
        return ALL_SECTORS in self.sectors or sector in self.sectors


SUGGESTIONS: tuple[Suggestion, ...] = (
    Suggestion(
        id="E-ppas-001",
        text="Switch to renewable electricity (PPA or green tariff) with a 12–24 month roadmap.",
        sectors=["Manufacturing", "Textile/Fashion", "Tech", "Furniture"],
        tags=["energy", "scope2", "quick-win"],
    ),
    Suggestion(
        id="E-led-002",
        text="Complete LED retrofit and add smart occupancy sensors in warehouses and offices.",
        sectors=["Manufacturing", "Construction", "Furniture", "Transportation"],
        tags=["energy-efficiency", "OPEX↓"],
    ),
    Suggestion(
        id="E-meter-003",
        text="Install sub-metering and monthly energy KPI dashboard (kWh/unit, kWh/m²).",
        sectors=["Manufacturing", "Textile/Fashion", "Agriculture/Food"],
        tags=["metrics", "energy"],
    ),
    Suggestion(
        id="S-wellbeing-101",
        text="Adopt an Employee Wellbeing program (flex hours, EAP, burnout prevention).",
        sectors=["Manufacturing", "Tech", "Finance", "Textile/Fashion", "Furniture"],
        tags=["people", "policy"],
    ),
    Suggestion(
        id="S-supply-102",
        text="Create a Supplier Code of Conduct and do risk-tiering (Tier1/Tier2) with annual checks.",
        sectors=["Textile/Fashion", "Manufacturing", "Agriculture/Food"],
        tags=["supply-chain", "human-rights"],
    ),
    Suggestion(
        id="G-policy-201",
        text="Approve a Sustainability Policy at board level and assign ESG ownership (RACI).",
        sectors=[ALL_SECTORS],
        tags=["governance", "foundations"],
    ),
    Suggestion(
        id="G-report-202",
        text="Publish an annual ESG summary on your website with 5–8 core KPIs.",
        sectors=[ALL_SECTORS],
        tags=["transparency", "communication"],
    ),
    Suggestion(
        id="E-water-004",
        text="Run a water-use audit and set reduction targets per process step.",
        sectors=["Manufacturing", "Agriculture/Food", "Textile/Fashion"],
        tags=["water", "metrics"],
    ),
    Suggestion(
        id="E-waste-005",
        text="Introduce waste segregation KPIs and a take-back contract for key materials.",
        sectors=["Manufacturing", "Furniture", "Construction"],
        tags=["waste", "circularity"],
    ),
    Suggestion(
        id="S-training-103",
        text="Train 100% staff on ethics & anti-corruption; track completion quarterly.",
        sectors=[ALL_SECTORS],
        tags=["training", "ethics"],
    ),
    Suggestion(
        id="G-supplier-203",
        text="Add ESG clauses in purchase contracts and include right-to-audit.",
        sectors=["Manufacturing", "Textile/Fashion", "Agriculture/Food"],
        tags=["governance", "procurement"],
    ),
    Suggestion(
        id="E-logistics-006",
        text="Optimize logistics: modal shift where feasible and load-factor KPI by route.",
        sectors=["Transportation", "Manufacturing", "Furniture"],
        tags=["scope3", "logistics"],
    ),
)


def filter_suggestions(sector: str | None) -> list[Suggestion]:
    """Suggestions applicable to ``sector``; the whole pool when no sector."""
    if not sector:
        return list(SUGGESTIONS)
    return [s for s in SUGGESTIONS if s.applies_to(sector)]
