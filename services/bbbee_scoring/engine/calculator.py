"""
Score Calculator
================

Turns category summaries, company financials and a sector scorecard into
weighted category scores, a total score and a B-BBEE level.

Every category score is `weight * achieved / required`, clamped to
`[0, weight]`. A required amount of zero or less scores 0, as does a
category without summary data.

Version: 0.1.0
"""

from dataclasses import dataclass

from services.bbbee_scoring.engine.records import FinancialInputs
from services.bbbee_scoring.engine.scorecards import SectorScorecard
from services.bbbee_scoring.engine.summaries import CategorySummaries
from shared.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class LevelThreshold:
    """Minimum total score for a B-BBEE level and its procurement recognition."""

    minimum_score: float
    level: str
    recognition: int


# Highest first; the first threshold the total reaches wins
LEVEL_THRESHOLDS: tuple[LevelThreshold, ...] = (
    LevelThreshold(100, "Level 1", 135),
    LevelThreshold(95, "Level 2", 125),
    LevelThreshold(90, "Level 3", 110),
    LevelThreshold(80, "Level 4", 100),
    LevelThreshold(75, "Level 5", 80),
    LevelThreshold(70, "Level 6", 60),
    LevelThreshold(55, "Level 7", 50),
    LevelThreshold(40, "Level 8", 10),
)

NON_COMPLIANT = LevelThreshold(0, "Non-compliant", 0)

# Bonus points awarded per YES participant
YES_POINTS_PER_PARTICIPANT = 1


def determine_level(total_score: float) -> LevelThreshold:
    """Map a total score onto the level table."""
    for threshold in LEVEL_THRESHOLDS:
        if total_score >= threshold.minimum_score:
            return threshold
    return NON_COMPLIANT


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one scoring run."""

    sector: str
    ownership_score: float
    management_control_score: float
    skills_development_score: float
    supplier_development_score: float
    enterprise_development_score: float
    esd_score: float
    socio_economic_development_score: float
    yes_bonus_points: float
    total_score: float
    max_score: float
    level: str
    recognition_level: int
    scorecard: SectorScorecard

    @property
    def recognition_status(self) -> str:
        return f"{self.recognition_level}%"


def _ratio_score(weight: float, achieved: float, required: float) -> float:
    if required <= 0:
        return 0.0
    return min(max(weight * achieved / required, 0.0), weight)


class ScoreCalculator:
    """
    Computes weighted B-BBEE scores.

    Stateless; a single instance can be shared across requests.
    """

    def compute(
        self,
        summaries: CategorySummaries,
        financials: FinancialInputs,
        scorecard: SectorScorecard,
    ) -> ScoreResult:
        ownership = self._ownership(summaries, scorecard)
        management = self._management_control(summaries, scorecard)
        skills = self._skills_development(summaries, financials, scorecard)
        supplier = self._supplier_development(summaries, financials, scorecard)
        enterprise = self._enterprise_development(summaries, financials, scorecard)
        socio_economic = self._socio_economic_development(summaries, financials, scorecard)
        yes_bonus = self._yes_bonus(summaries, scorecard)

        esd = supplier + enterprise
        total = ownership + management + skills + esd + socio_economic + yes_bonus
        threshold = determine_level(total)

        logger.info(
            "score_computed",
            sector=scorecard.sector,
            total_score=round(total, 2),
            level=threshold.level,
        )

        return ScoreResult(
            sector=scorecard.sector,
            ownership_score=ownership,
            management_control_score=management,
            skills_development_score=skills,
            supplier_development_score=supplier,
            enterprise_development_score=enterprise,
            esd_score=esd,
            socio_economic_development_score=socio_economic,
            yes_bonus_points=yes_bonus,
            total_score=total,
            max_score=scorecard.max_score,
            level=threshold.level,
            recognition_level=threshold.recognition,
            scorecard=scorecard,
        )

    # =========================================================================
    # Category Scores
    # =========================================================================

    @staticmethod
    def _ownership(summaries: CategorySummaries, scorecard: SectorScorecard) -> float:
        if summaries.ownership is None:
            return 0.0
        target = scorecard.ownership
        return _ratio_score(
            target.weight,
            summaries.ownership.black_ownership_percentage / 100,
            target.target,
        )

    @staticmethod
    def _management_control(summaries: CategorySummaries, scorecard: SectorScorecard) -> float:
        management = summaries.management_control
        if management is None:
            return 0.0
        # Average of black voting rights and black economic interest
        representation = (management.black_voting_rights + management.black_economic_interest) / 2
        target = scorecard.management_control
        return _ratio_score(target.weight, representation / 100, target.target)

    @staticmethod
    def _skills_development(
        summaries: CategorySummaries,
        financials: FinancialInputs,
        scorecard: SectorScorecard,
    ) -> float:
        if summaries.skills_development is None:
            return 0.0
        target = scorecard.skills_development
        return _ratio_score(
            target.weight,
            summaries.skills_development.total_direct_expenditure,
            financials.total_leviable_amount * target.target,
        )

    @staticmethod
    def _supplier_development(
        summaries: CategorySummaries,
        financials: FinancialInputs,
        scorecard: SectorScorecard,
    ) -> float:
        suppliers = summaries.supplier_development
        if suppliers is None:
            return 0.0
        # Black-owned spend is imputed from the share of black-owned suppliers
        black_owned_spend = suppliers.total_expenditure * (
            suppliers.black_owned_suppliers / (suppliers.total_suppliers or 1)
        )
        return _ratio_score(
            scorecard.esd.supplier_weight,
            black_owned_spend,
            financials.total_measured_procurement_spend * scorecard.esd.target_supplier,
        )

    @staticmethod
    def _enterprise_development(
        summaries: CategorySummaries,
        financials: FinancialInputs,
        scorecard: SectorScorecard,
    ) -> float:
        if summaries.enterprise_development is None:
            return 0.0
        return _ratio_score(
            scorecard.esd.enterprise_weight,
            summaries.enterprise_development.total_contribution_amount,
            financials.npat * scorecard.esd.target_enterprise,
        )

    @staticmethod
    def _socio_economic_development(
        summaries: CategorySummaries,
        financials: FinancialInputs,
        scorecard: SectorScorecard,
    ) -> float:
        if summaries.socio_economic_development is None:
            return 0.0
        target = scorecard.socio_economic_development
        return _ratio_score(
            target.weight,
            summaries.socio_economic_development.total_contribution_amount,
            financials.npat * target.target,
        )

    @staticmethod
    def _yes_bonus(summaries: CategorySummaries, scorecard: SectorScorecard) -> float:
        if summaries.yes_initiative is None:
            return 0.0
        points = summaries.yes_initiative.total_participants * YES_POINTS_PER_PARTICIPANT
        return float(min(points, scorecard.yes_bonus_weight))
