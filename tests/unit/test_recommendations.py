"""
Unit tests for improvement recommendations.
"""

from dataclasses import replace

import pytest

from services.bbbee_scoring.engine.calculator import ScoreCalculator, ScoreResult
from services.bbbee_scoring.engine.recommendations import recommend
from services.bbbee_scoring.engine.records import FinancialInputs
from services.bbbee_scoring.engine.scorecards import get_scorecard
from services.bbbee_scoring.engine.summaries import CategorySummaries


@pytest.fixture
def empty_result() -> ScoreResult:
    """A Generic result with no data in any category."""
    return ScoreCalculator().compute(CategorySummaries(), FinancialInputs(), get_scorecard("Generic"))


class TestRecommend:
    """Tests for recommendation generation."""

    def test_all_categories_short(self, empty_result: ScoreResult) -> None:
        """Test one suggestion per scored category, in scorecard order."""
        recommendations = recommend(empty_result)

        assert recommendations == [
            "Increase black ownership to meet the sector target of 25%.",
            "Enhance black representation in management to meet the sector target of 50%.",
            "Invest more in skills development to meet the sector target of 6% of leviable amount.",
            "Improve Enterprise and Supplier Development by engaging more with black-owned "
            "suppliers (target: 10% of procurement spend) and increasing contributions to "
            "enterprise development (target: 1% of NPAT).",
            "Contribute more to socio-economic development to meet the sector target of 1% of NPAT.",
        ]

    def test_no_suggestions_at_full_marks(self, empty_result: ScoreResult) -> None:
        """Test that categories at full weight produce nothing."""
        scorecard = empty_result.scorecard
        full = replace(
            empty_result,
            ownership_score=scorecard.ownership.weight,
            management_control_score=scorecard.management_control.weight,
            skills_development_score=scorecard.skills_development.weight,
            esd_score=scorecard.esd.weight,
            socio_economic_development_score=scorecard.socio_economic_development.weight,
        )

        assert recommend(full) == []

    def test_yes_bonus_never_recommended(self, empty_result: ScoreResult) -> None:
        """Test that a missing YES bonus adds no suggestion."""
        assert not any("YES" in r for r in recommend(empty_result))

    def test_fractional_targets_round_half_up(self) -> None:
        """Test Tourism's 1.5% targets render as 2%."""
        result = ScoreCalculator().compute(
            CategorySummaries(), FinancialInputs(), get_scorecard("Tourism")
        )

        recommendations = recommend(result)

        assert "(target: 15% of procurement spend)" in recommendations[3]
        assert "(target: 2% of NPAT)" in recommendations[3]
        assert recommendations[4].endswith("target of 2% of NPAT.")
