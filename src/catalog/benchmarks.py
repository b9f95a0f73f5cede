"""Sector benchmarks and report-vs-sector comparison.

Sector averages on the 0-100 maturity scale, aggregated from public ESG
ratings coverage (MSCI, Sustainalytics, CDP, GRI) and typical EU SME
baselines.
"""

from __future__ import annotations

from pydantic import Field

from src.models.common import EcoTrackBase, Pillar, round_half_up
from src.scoring.models import PillarScores, ScoreReport


class SectorBenchmark(EcoTrackBase, frozen=True):
    """Average scores for a sector."""

    sector: str
    overall: int = Field(ge=0, le=100)
    pillars: PillarScores


class BenchmarkComparison(EcoTrackBase, frozen=True):
    """How a ScoreReport sits against its sector's averages."""

    benchmark: SectorBenchmark
    pillar_deltas: dict[Pillar, int]
    overall_delta: int
    weighted_sector_overall: float
    above_average: bool


def _bench(sector: str, overall: int, e: int, s: int, g: int) -> SectorBenchmark:
    return SectorBenchmark(sector=sector, overall=overall, pillars=PillarScores(E=e, S=s, G=g))


SECTOR_BENCHMARKS: dict[str, SectorBenchmark] = {
    b.sector: b
    for b in (
        _bench("Manufacturing", 51, 55, 46, 52),
        _bench("Agriculture/Food", 54, 60, 49, 43),
        _bench("Textile/Fashion", 48, 50, 45, 47),
        _bench("Tech", 63, 54, 66, 70),
        _bench("Finance", 66, 49, 62, 78),
        _bench("Construction", 52, 58, 45, 48),
        _bench("Furniture", 50, 56, 44, 47),
        _bench("Transportation", 47, 48, 45, 50),
    )
}


def get_sector_benchmark(sector: str | None) -> SectorBenchmark | None:
    """Look up a sector's benchmark by its exact label."""
    if not sector:
        return None
    return SECTOR_BENCHMARKS.get(sector)


def compare_to_benchmark(
    report: ScoreReport,
    sector: str | None,
) -> BenchmarkComparison | None:
    """Compare a report against its sector benchmark, or None if unknown.

    ``weighted_sector_overall`` re-weights the sector's pillar averages
    with the report's own sector pillar weights (1 decimal), so the two
    overall figures are computed the same way.
    """
    benchmark = get_sector_benchmark(sector)
    if benchmark is None:
        return None

    weights = report.details.sector_pillar_weights
    total = weights.total or 1.0
    weighted = sum(benchmark.pillars.get(p) * weights.get(p) for p in Pillar) / total

    return BenchmarkComparison(
        benchmark=benchmark,
        pillar_deltas={
            p: report.pillars.get(p) - benchmark.pillars.get(p) for p in Pillar
        },
        overall_delta=report.overall - benchmark.overall,
        weighted_sector_overall=round_half_up(weighted, 1),
        above_average=report.overall >= benchmark.overall,
    )
