"""Tests for score_assessment and numeric_to_rating.

Covers: pillar weighted averages, unanswered exclusion, critical caps
and their precedence, sector weighting, rating bands, permissive input
handling, and the report invariants (range, determinism, monotonicity).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.models.common import Pillar
from src.scoring.config import RatingBand, ScoringOptions
from src.scoring.engine import numeric_to_rating, score_assessment
from src.scoring.models import QuestionRecord, Rating, ScoreReport


# ===================================================================
# Reference scenarios
# ===================================================================


class TestReferenceScenarios:
    """Worked examples for the engine's documented behavior."""

    def test_single_question_unknown_sector(self, make_question) -> None:
        report = score_assessment([make_question("q1")], {"q1": {"score": 4}})
        assert report.pillars.E == 100
        assert report.pillars.S == 0
        assert report.pillars.G == 0
        assert report.overall == 34
        assert report.rating == Rating.CCC

    def test_critical_no_in_finance(self, make_question) -> None:
        questions = [make_question("q1", pillar="G", critical=True)]
        report = score_assessment(
            questions, {"q1": {"score": 0}}, ScoringOptions(sector="finance")
        )
        assert report.pillars.G == 0
        assert report.overall == 0
        assert report.rating == Rating.CCC
        assert report.details.critical_hits[Pillar.G] == ["q1"]
        assert report.details.pillar[Pillar.G].capped is True

    def test_unanswered_critical(self, make_question) -> None:
        questions = [make_question("q1", pillar="G", critical=True)]
        report = score_assessment(questions, {}, ScoringOptions(sector="finance"))
        assert report.pillars.G == 0
        assert report.details.unanswered == ["q1"]
        assert report.details.critical_unknowns[Pillar.G] == ["q1"]
        assert report.details.critical_hits[Pillar.G] == []

    def test_partial_answer_mode(self, make_question) -> None:
        report = score_assessment(
            [make_question("q1")],
            {"q1": "Partial"},
            ScoringOptions(allow_partial=True),
        )
        assert report.pillars.E == 50


# ===================================================================
# Pillar aggregation
# ===================================================================


class TestPillarAggregation:
    """Weighted averages per pillar."""

    def test_question_weights_apply(self, make_question) -> None:
        questions = [make_question("q1", weight=3), make_question("q2", weight=1)]
        report = score_assessment(questions, {"q1": "Yes", "q2": "No"})
        assert report.pillars.E == 75

    def test_numeric_scale_normalized(self, make_question) -> None:
        report = score_assessment([make_question("q1")], {"q1": {"score": 3}})
        assert report.pillars.E == 75

    def test_rounds_half_up(self, make_question) -> None:
        # base 0.125 -> 12.5 -> 13 (Python's round() would give 12)
        questions = [make_question("q1"), make_question("q2")]
        report = score_assessment(
            questions, {"q1": {"score": 1}, "q2": {"score": 0}}
        )
        assert report.pillars.E == 13

    def test_empty_pillar_scores_zero(self, make_question) -> None:
        report = score_assessment([make_question("q1")], {"q1": "Yes"})
        assert report.pillars.S == 0
        assert report.pillars.G == 0
        assert report.details.pillar[Pillar.S].n == 0
        assert report.details.pillar[Pillar.S].w_sum == 0.0

    def test_unanswered_excluded_from_denominator(self, make_question) -> None:
        base = score_assessment([make_question("q1")], {"q1": {"score": 2}})
        extended = score_assessment(
            [make_question("q1"), make_question("q2", weight=5)],
            {"q1": {"score": 2}},
        )
        assert extended.pillars.E == base.pillars.E
        assert extended.details.unanswered == ["q2"]

    def test_treat_unknown_as_zero(self, make_question) -> None:
        questions = [make_question("q1"), make_question("q2")]
        report = score_assessment(
            questions,
            {"q1": "Yes"},
            ScoringOptions(treat_unknown_as_zero=True),
        )
        assert report.pillars.E == 50
        assert report.details.unanswered == []

    def test_extra_answer_keys_ignored(self, make_question) -> None:
        report = score_assessment(
            [make_question("q1")], {"q1": "Yes", "ghost": "No"}
        )
        assert report.pillars.E == 100
        assert report.details.unanswered == []

    def test_details_record_counts_and_weight_sum(self, make_question) -> None:
        questions = [
            make_question("q1", weight=1.234),
            make_question("q2", weight=1),
            make_question("q3"),
        ]
        report = score_assessment(questions, {"q1": "Yes", "q2": "No"})
        detail = report.details.pillar[Pillar.E]
        assert detail.n == 2
        assert detail.w_sum == 2.23
        assert detail.score == report.pillars.E

    def test_question_order_does_not_change_scores(self, make_question) -> None:
        questions = [
            make_question("q1", pillar="E", weight=2),
            make_question("q2", pillar="S"),
            make_question("q3", pillar="G", critical=True),
            make_question("q4", pillar="E"),
        ]
        answers = {"q1": {"score": 3}, "q2": "Yes", "q3": {"score": 1}, "q4": "No"}
        forward = score_assessment(questions, answers)
        backward = score_assessment(list(reversed(questions)), answers)
        assert forward.pillars == backward.pillars
        assert forward.overall == backward.overall


# ===================================================================
# Critical caps
# ===================================================================


class TestCriticalCaps:
    """Critical "No" and critical-unanswered ceilings."""

    def test_critical_no_caps_at_40(self, make_question) -> None:
        questions = [
            make_question("q1", critical=True),
            make_question("q2", weight=10),
        ]
        report = score_assessment(questions, {"q1": "No", "q2": "Yes"})
        assert report.pillars.E == 40
        detail = report.details.pillar[Pillar.E]
        assert detail.capped is True
        assert detail.cap_reason == 'Critical "No" on 1 item(s)'

    def test_critical_unknown_caps_at_60(self, make_question) -> None:
        questions = [make_question("q1", critical=True), make_question("q2")]
        report = score_assessment(questions, {"q2": "Yes"})
        assert report.pillars.E == 60
        assert report.details.pillar[Pillar.E].cap_reason == (
            "Critical unanswered on 1 item(s)"
        )

    def test_no_cap_beats_unknown_cap(self, make_question) -> None:
        questions = [
            make_question("q1", pillar="S", critical=True),
            make_question("q2", pillar="S", critical=True),
            make_question("q3", pillar="S", weight=10),
        ]
        options = ScoringOptions()
        report = score_assessment(questions, {"q1": "No", "q3": "Yes"}, options)
        assert report.pillars.S <= round(100 * options.critical_cap_no)
        assert report.pillars.S == 40
        assert report.details.critical_hits[Pillar.S] == ["q1"]
        assert report.details.critical_unknowns[Pillar.S] == ["q2"]

    def test_cap_does_not_raise_low_scores(self, make_question) -> None:
        questions = [make_question("q1", critical=True), make_question("q2")]
        report = score_assessment(questions, {"q1": {"score": 0}, "q2": {"score": 1}})
        # base 0.125 is below the 0.40 ceiling
        assert report.pillars.E == 13
        assert report.details.pillar[Pillar.E].capped is True

    def test_unknown_cap_of_one_is_not_capped(self, make_question) -> None:
        questions = [make_question("q1", critical=True), make_question("q2")]
        report = score_assessment(
            questions, {"q2": "Yes"}, ScoringOptions(critical_cap_unknown=1.0)
        )
        assert report.pillars.E == 100
        assert report.details.pillar[Pillar.E].capped is False
        assert report.details.pillar[Pillar.E].cap_reason is None

    def test_custom_caps(self, make_question) -> None:
        questions = [make_question("q1", critical=True), make_question("q2")]
        report = score_assessment(
            questions, {"q1": "No", "q2": "Yes"}, ScoringOptions(critical_cap_no=0.25)
        )
        # base 0.5 capped at 0.25
        assert report.pillars.E == 25

    def test_caps_only_affect_their_pillar(self, make_question) -> None:
        questions = [
            make_question("q1", pillar="E", critical=True),
            make_question("q2", pillar="S"),
        ]
        report = score_assessment(questions, {"q1": "No", "q2": "Yes"})
        assert report.pillars.S == 100
        assert report.details.pillar[Pillar.S].capped is False

    def test_non_critical_no_is_not_a_hit(self, make_question) -> None:
        report = score_assessment([make_question("q1")], {"q1": "No"})
        assert report.details.critical_hits[Pillar.E] == []
        assert report.details.pillar[Pillar.E].capped is False


# ===================================================================
# Overall score and sector weights
# ===================================================================


class TestOverallScore:
    """Sector-weighted overall score."""

    def test_manufacturing_weights(self, make_question) -> None:
        questions = [
            make_question("e1", pillar="E"),
            make_question("s1", pillar="S"),
            make_question("g1", pillar="G"),
        ]
        answers = {"e1": "Yes", "s1": {"score": 2}, "g1": "No"}
        report = score_assessment(
            questions, answers, ScoringOptions(sector="Manufacturing")
        )
        # 100*0.50 + 50*0.30 + 0*0.20
        assert report.overall == 65
        assert report.rating == Rating.A
        assert report.details.sector_pillar_weights.E == pytest.approx(0.50)

    def test_override_beats_sector(self, make_question) -> None:
        questions = [make_question("e1", pillar="E"), make_question("g1", pillar="G")]
        report = score_assessment(
            questions,
            {"e1": "No", "g1": "Yes"},
            ScoringOptions(
                sector="Manufacturing",
                pillar_weights_override={"E": 0, "S": 0, "G": 2},
            ),
        )
        assert report.overall == 100
        assert report.rating == Rating.AAA
        assert report.details.sector_pillar_weights.G == pytest.approx(1.0)

    def test_resolved_weights_sum_to_one(self, make_question) -> None:
        for sector in ["Tech", "finance", "Agriculture/Food", "Tourism", None]:
            report = score_assessment(
                [make_question("q1")], {}, ScoringOptions(sector=sector)
            )
            assert report.details.sector_pillar_weights.total == pytest.approx(1.0)

    def test_all_best_practice_scores_100(self, make_question) -> None:
        questions = [make_question(f"q{p}", pillar=p) for p in "ESG"]
        answers = {f"q{p}": {"score": 4} for p in "ESG"}
        report = score_assessment(questions, answers, ScoringOptions(sector="Tech"))
        assert report.overall == 100
        assert report.rating == Rating.AAA


# ===================================================================
# Rating bands
# ===================================================================


class TestNumericToRating:
    """Band lookup: lower bound inclusive, evaluated top-down."""

    @pytest.mark.parametrize(
        ("score", "rating"),
        [
            (100, Rating.AAA),
            (85, Rating.AAA),
            (84, Rating.AA),
            (75, Rating.AA),
            (74, Rating.A),
            (65, Rating.A),
            (64, Rating.BBB),
            (55, Rating.BBB),
            (54, Rating.BB),
            (45, Rating.BB),
            (44, Rating.B),
            (35, Rating.B),
            (34, Rating.CCC),
            (0, Rating.CCC),
        ],
    )
    def test_band_boundaries(self, score: int, rating: Rating) -> None:
        assert numeric_to_rating(score) == rating

    def test_custom_bands(self, make_question) -> None:
        bands = (RatingBand(30, Rating.AAA),)
        options = ScoringOptions(sector="Tech", rating_bands=bands)
        report = score_assessment(
            [make_question("q1", pillar="G")], {"q1": "Yes"}, options
        )
        assert report.overall == 40
        assert report.rating == Rating.AAA


# ===================================================================
# Permissive input
# ===================================================================


class TestPermissiveInput:
    """Malformed questions and answers degrade instead of raising."""

    def test_plain_mappings_accepted(self) -> None:
        questions = [{"id": "q1", "pillar": "S", "weight": 2, "critical": False}]
        report = score_assessment(questions, {"q1": "Yes"})
        assert report.pillars.S == 100

    def test_legacy_category_resolves_pillar(self) -> None:
        report = score_assessment(
            [{"id": "q1", "category": "Governance"}], {"q1": "Yes"}
        )
        assert report.pillars.G == 100

    def test_unknown_pillar_defaults_to_e(self) -> None:
        report = score_assessment([{"id": "q1", "pillar": "X"}], {"q1": "Yes"})
        assert report.pillars.E == 100

    def test_lowercase_pillar(self) -> None:
        report = score_assessment([{"id": "q1", "pillar": "g"}], {"q1": "Yes"})
        assert report.pillars.G == 100

    @pytest.mark.parametrize("weight", [None, 0, -5, "abc", float("inf"), float("nan")])
    def test_invalid_weights_default_to_one(self, weight) -> None:
        questions = [
            {"id": "q1", "weight": weight},
            {"id": "q2", "weight": 1},
        ]
        report = score_assessment(questions, {"q1": "Yes", "q2": "No"})
        assert report.pillars.E == 50

    def test_weight_beyond_float_range_defaults_to_one(self) -> None:
        questions = [{"id": "q1", "weight": 10**400}, {"id": "q2", "weight": 1}]
        report = score_assessment(questions, {"q1": "Yes", "q2": "No"})
        assert report.pillars.E == 50

    @pytest.mark.parametrize("tags", [5, True, 2.5, object()])
    def test_non_iterable_tags_ignored(self, tags) -> None:
        report = score_assessment([{"id": "q1", "tags": tags}], {"q1": "Yes"})
        assert report.pillars.E == 100

    @pytest.mark.parametrize("text", [7, 3.5, ["Do you?"]])
    def test_non_string_text_still_scored(self, text) -> None:
        questions = [{"id": "q1", "text": text}, {"id": "q2"}]
        report = score_assessment(questions, {"q1": "No", "q2": "Yes"})
        assert report.pillars.E == 50
        assert report.details.pillar[Pillar.E].n == 2

    def test_huge_scores_clamped(self, make_question) -> None:
        questions = [make_question("hi", pillar="E"), make_question("lo", pillar="S")]
        report = score_assessment(
            questions, {"hi": {"score": 10**400}, "lo": {"score": -(10**400)}}
        )
        assert report.pillars.E == 100
        assert report.pillars.S == 0

    def test_huge_override_component(self, make_question) -> None:
        options = ScoringOptions(pillar_weights_override={"E": 10**400, "S": 1, "G": 1})
        report = score_assessment([make_question("e1")], {"e1": "Yes"}, options)
        # the overflowing component counts as 1, giving equal thirds
        assert report.overall == 33

    def test_out_of_range_scores_clamped(self, make_question) -> None:
        questions = [make_question("hi", pillar="E"), make_question("lo", pillar="S")]
        report = score_assessment(
            questions, {"hi": {"score": 9}, "lo": {"score": -3}}
        )
        assert report.pillars.E == 100
        assert report.pillars.S == 0

    def test_junk_questions_skipped(self) -> None:
        report = score_assessment([None, "q1", 42, {"id": "q2"}], {"q2": "Yes"})
        assert report.pillars.E == 100

    def test_none_inputs(self) -> None:
        report = score_assessment(None, None)
        assert report.overall == 0
        assert report.rating == Rating.CCC
        assert report.details.unanswered == []

    def test_non_mapping_answers(self, make_question) -> None:
        report = score_assessment([make_question("q1")], ["Yes"])  # type: ignore[arg-type]
        assert report.details.unanswered == ["q1"]


# ===================================================================
# Report invariants
# ===================================================================


class TestReportInvariants:
    """Determinism, range, idempotence, monotonicity, immutability."""

    @pytest.fixture
    def questions(self, make_question) -> list[QuestionRecord]:
        return [
            make_question("e1", pillar="E", weight=3, critical=True),
            make_question("e2", pillar="E"),
            make_question("s1", pillar="S", weight=2),
            make_question("s2", pillar="S", critical=True),
            make_question("g1", pillar="G"),
        ]

    def test_deterministic(self, questions) -> None:
        answers = {"e1": {"score": 3}, "e2": "No", "s1": "Partial", "g1": "Yes"}
        options = ScoringOptions(sector="Textile", allow_partial=True)
        first = score_assessment(questions, answers, options)
        second = score_assessment(questions, dict(answers), options)
        assert first == second
        assert first.model_dump() == second.model_dump()

    @pytest.mark.parametrize("level", [0, 1, 2, 3, 4, "Yes", "No", "Unknown", None])
    def test_scores_in_range(self, questions, level) -> None:
        raw = {"score": level} if isinstance(level, int) else level
        answers = {q.id: raw for q in questions}
        report = score_assessment(questions, answers, ScoringOptions(sector="Tech"))
        for pillar in Pillar:
            value = report.pillars.get(pillar)
            assert isinstance(value, int)
            assert 0 <= value <= 100
        assert isinstance(report.overall, int)
        assert 0 <= report.overall <= 100

    def test_monotonic_in_single_answer(self, make_question) -> None:
        questions = [
            make_question("q1", pillar="S", weight=2),
            make_question("q2", pillar="S"),
            make_question("q3", pillar="E"),
        ]
        previous = None
        for level in range(5):
            answers = {"q1": {"score": level}, "q2": {"score": 2}, "q3": "Yes"}
            report = score_assessment(questions, answers, ScoringOptions(sector="Tech"))
            if previous is not None:
                assert report.pillars.S >= previous.pillars.S
                assert report.overall >= previous.overall
            previous = report

    def test_report_is_frozen(self, questions) -> None:
        report = score_assessment(questions, {})
        with pytest.raises(ValidationError):
            report.overall = 99  # type: ignore[misc]

    def test_json_round_trip_is_lossless(self, questions) -> None:
        answers = {"e1": "No", "s1": {"score": 2}}
        report = score_assessment(questions, answers, ScoringOptions(sector="bank"))
        restored = ScoreReport.model_validate(report.model_dump(mode="json"))
        assert restored == report
        assert restored.details.unanswered == ["e2", "s2", "g1"]
        assert restored.details.critical_hits[Pillar.E] == ["e1"]
        assert restored.details.critical_unknowns[Pillar.S] == ["s2"]
