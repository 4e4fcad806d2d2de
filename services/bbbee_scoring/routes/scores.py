"""
Score Routes
============

B-BBEE score calculation.

- /compute scores records sent in the request body and stores nothing.
- /calculate scores the current user's latest stored submissions.

Version: 0.1.0
"""

from fastapi import APIRouter, Depends, HTTPException, status

from services.bbbee_scoring.models.scoring import CalculateRequest, ComputeRequest, ScoreResponse
from services.bbbee_scoring.services.accounts import AccountStore, get_account_store
from services.bbbee_scoring.services.assessment import AssessmentService
from services.bbbee_scoring.services.documents import CategoryStore, get_category_store
from shared.auth import User, get_current_user
from shared.config import settings
from shared.logging import get_logger


logger = get_logger(__name__)

router = APIRouter()

assessment_service = AssessmentService()


@router.post("/compute", response_model=ScoreResponse)
async def compute_score(request: ComputeRequest) -> ScoreResponse:
    """
    Score the submitted category records.

    Omitted categories score 0. An unknown or missing sector is scored
    against the Generic scorecard.
    """
    return assessment_service.score(request.submissions(), request.financials, request.sector)


@router.post("/calculate", response_model=ScoreResponse)
async def calculate_score(
    request: CalculateRequest,
    user: User = Depends(get_current_user),
    accounts: AccountStore = Depends(get_account_store),
    store: CategoryStore = Depends(get_category_store),
) -> ScoreResponse:
    """
    Score the current user's latest submission in every category.

    The sector comes from the request, then the profile, then the configured
    default.
    """
    account = await accounts.get_by_id(user.id)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    if request.sector:
        sector, source = request.sector, "request"
    elif account.get("sector"):
        sector, source = account["sector"], "profile"
    else:
        sector, source = settings.scoring.default_sector, "default"

    logger.info("score_sector_resolved", user_id=user.id, sector=sector, source=source)

    return await assessment_service.score_stored(store, user.id, request.financials, sector)
