"""
Assessment Service
==================

Connects category submissions to the scoring engine: aggregates each
submitted category, scores it against the sector scorecard and attaches
recommendations.

Version: 0.1.0
"""

from collections.abc import Mapping

from services.bbbee_scoring.engine.calculator import ScoreCalculator
from services.bbbee_scoring.engine.recommendations import recommend
from services.bbbee_scoring.engine.records import Category, FinancialInputs
from services.bbbee_scoring.engine.scorecards import get_scorecard
from services.bbbee_scoring.engine.summaries import CategorySummaries
from services.bbbee_scoring.models.scoring import ScoreResponse
from services.bbbee_scoring.models.submissions import CATEGORY_DEFINITIONS, CategorySubmission
from services.bbbee_scoring.services.documents import CategoryStore
from shared.logging import get_logger


logger = get_logger(__name__)


class AssessmentService:
    """
    Scores category submissions.

    Handles:
    - Stateless scoring of submitted records
    - Scoring a user's latest stored submissions
    """

    def __init__(self, calculator: ScoreCalculator | None = None) -> None:
        self.calculator = calculator or ScoreCalculator()

    def score(
        self,
        submissions: Mapping[Category, CategorySubmission],
        financials: FinancialInputs,
        sector: str | None,
    ) -> ScoreResponse:
        """
        Score a set of category submissions.

        Raises:
            ScoringError: a submission cannot be aggregated
        """
        summaries = CategorySummaries(
            **{
                category.value: submission.summarize()
                for category, submission in submissions.items()
            }
        )
        scorecard = get_scorecard(sector)
        result = self.calculator.compute(summaries, financials, scorecard)

        categories_scored = [category for category in Category if category in submissions]
        return ScoreResponse.from_result(result, recommend(result), categories_scored)

    async def score_stored(
        self,
        store: CategoryStore,
        user_id: str,
        financials: FinancialInputs,
        sector: str | None,
    ) -> ScoreResponse:
        """Score the latest stored submission of every category for a user."""
        submissions: dict[Category, CategorySubmission] = {}

        for definition in CATEGORY_DEFINITIONS:
            document = await store.latest_for_user(definition, user_id)
            if document is None:
                continue
            submissions[definition.category] = definition.submission_model.model_validate(
                document["submission"]
            )

        missing = [category.value for category in Category if category not in submissions]
        if missing:
            logger.info("assessment_categories_missing", user_id=user_id, missing=missing)

        return self.score(submissions, financials, sector)
