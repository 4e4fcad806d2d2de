"""
Scoring Models
==============

Request and response models for score calculation and the scorecard
registry view.

Version: 0.1.0
"""

from dataclasses import asdict

from pydantic import BaseModel, Field

from services.bbbee_scoring.engine.calculator import ScoreResult
from services.bbbee_scoring.engine.records import Category, FinancialInputs
from services.bbbee_scoring.engine.scorecards import SectorScorecard
from services.bbbee_scoring.models.submissions import (
    CategorySubmission,
    EmploymentSubmission,
    EnterpriseSubmission,
    ManagementSubmission,
    OwnershipSubmission,
    SkillsSubmission,
    SocioEconomicSubmission,
    SupplierSubmission,
    YesSubmission,
)


class ComputeRequest(BaseModel):
    """
    Stateless scoring request.

    Categories left out are treated as having no data and score 0. Unknown
    or missing sectors use the Generic scorecard.
    """

    sector: str | None = None
    financials: FinancialInputs = Field(default_factory=FinancialInputs)

    ownership: OwnershipSubmission | None = None
    management_control: ManagementSubmission | None = None
    employment_equity: EmploymentSubmission | None = None
    skills_development: SkillsSubmission | None = None
    supplier_development: SupplierSubmission | None = None
    enterprise_development: EnterpriseSubmission | None = None
    socio_economic_development: SocioEconomicSubmission | None = None
    yes_initiative: YesSubmission | None = None

    def submissions(self) -> dict[Category, CategorySubmission]:
        """Submitted categories keyed by category."""
        result: dict[Category, CategorySubmission] = {}
        for category in Category:
            submission = getattr(self, category.value)
            if submission is not None:
                result[category] = submission
        return result


class CalculateRequest(BaseModel):
    """Score the current user's latest stored submissions."""

    sector: str | None = Field(
        default=None,
        description="Overrides the sector stored on the profile",
    )
    financials: FinancialInputs = Field(default_factory=FinancialInputs)


class ScorecardView(BaseModel):
    """A sector scorecard with its derived totals."""

    sector: str
    ownership: dict[str, float]
    management_control: dict[str, float]
    skills_development: dict[str, float]
    esd: dict[str, float]
    socio_economic_development: dict[str, float]
    yes_bonus_weight: float
    total_weight: float
    weight_sum: float
    weights_consistent: bool
    max_score: float

    @classmethod
    def from_scorecard(cls, scorecard: SectorScorecard) -> "ScorecardView":
        return cls(
            **asdict(scorecard),
            weight_sum=scorecard.weight_sum,
            weights_consistent=scorecard.weights_consistent,
            max_score=scorecard.max_score,
        )


class CategoryScores(BaseModel):
    """Points earned per scorecard element."""

    ownership: float
    management_control: float
    skills_development: float
    supplier_development: float
    enterprise_development: float
    esd: float
    socio_economic_development: float


class ScoreResponse(BaseModel):
    """Scoring outcome with improvement suggestions."""

    sector: str
    scores: CategoryScores
    yes_bonus_points: float
    total_score: float
    max_score: float
    level: str
    recognition_status: str
    recognition_level: int
    scorecard: ScorecardView
    recommendations: list[str] = Field(default_factory=list)
    categories_scored: list[Category] = Field(default_factory=list)

    @classmethod
    def from_result(
        cls,
        result: ScoreResult,
        recommendations: list[str],
        categories_scored: list[Category],
    ) -> "ScoreResponse":
        return cls(
            sector=result.sector,
            scores=CategoryScores(
                ownership=result.ownership_score,
                management_control=result.management_control_score,
                skills_development=result.skills_development_score,
                supplier_development=result.supplier_development_score,
                enterprise_development=result.enterprise_development_score,
                esd=result.esd_score,
                socio_economic_development=result.socio_economic_development_score,
            ),
            yes_bonus_points=result.yes_bonus_points,
            total_score=result.total_score,
            max_score=result.max_score,
            level=result.level,
            recognition_status=result.recognition_status,
            recognition_level=result.recognition_level,
            scorecard=ScorecardView.from_scorecard(result.scorecard),
            recommendations=recommendations,
            categories_scored=categories_scored,
        )
