"""
Category Routes
===============

Submission endpoints for each B-BBEE category, one sub-router per slug:

    POST /api/v1/categories/{slug}   store records, summary computed server-side
    GET  /api/v1/categories/{slug}   list the current user's submissions

Version: 0.1.0
"""

from fastapi import APIRouter, Depends, HTTPException, status

from services.bbbee_scoring.models.submissions import (
    CATEGORY_DEFINITIONS,
    CategoryDefinition,
    SubmissionDocument,
)
from services.bbbee_scoring.services.accounts import AccountStore, get_account_store
from services.bbbee_scoring.services.documents import (
    CategoryStore,
    get_category_store,
    to_submission_document,
)
from shared.auth import User, get_current_user
from shared.logging import get_logger


logger = get_logger(__name__)


def build_category_router(definition: CategoryDefinition) -> APIRouter:
    """Create the submit/list routes for one category."""
    category_router = APIRouter()
    submission_model = definition.submission_model

    @category_router.post(
        "",
        response_model=SubmissionDocument,
        status_code=status.HTTP_201_CREATED,
        name=f"submit_{definition.category.value}",
        summary=f"Submit {definition.title}",
    )
    async def submit(
        submission: submission_model,  # type: ignore[valid-type]
        user: User = Depends(get_current_user),
        accounts: AccountStore = Depends(get_account_store),
        store: CategoryStore = Depends(get_category_store),
    ) -> SubmissionDocument:
        if await accounts.get_by_id(user.id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found",
            )

        document = await store.create(definition, user.id, submission)
        return SubmissionDocument(**to_submission_document(document))

    @category_router.get(
        "",
        response_model=list[SubmissionDocument],
        name=f"list_{definition.category.value}",
        summary=f"List {definition.title} submissions",
    )
    async def list_submissions(
        user: User = Depends(get_current_user),
        store: CategoryStore = Depends(get_category_store),
    ) -> list[SubmissionDocument]:
        documents = await store.list_for_user(definition, user.id)
        if not documents:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No {definition.title.lower()} data found for this user",
            )

        logger.debug(
            "category_submissions_listed",
            category=definition.category.value,
            count=len(documents),
        )
        return [SubmissionDocument(**to_submission_document(d)) for d in documents]

    return category_router


router = APIRouter()

for _definition in CATEGORY_DEFINITIONS:
    router.include_router(
        build_category_router(_definition),
        prefix=f"/{_definition.slug}",
    )
