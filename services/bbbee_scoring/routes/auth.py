"""
Auth Routes
===========

Account signup, password login and token refresh.

Version: 0.1.0
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from services.bbbee_scoring.models.account import (
    LoginRequest,
    RefreshRequest,
    SignupRequest,
    SignupResponse,
)
from services.bbbee_scoring.services.accounts import (
    AccountStore,
    DuplicateAccountError,
    get_account_store,
)
from shared.auth import TokenPair, create_token_pair, decode_token
from shared.logging import get_logger


logger = get_logger(__name__)

router = APIRouter()


def _claims(account: dict[str, Any]) -> dict[str, Any]:
    return {
        "sub": account["_id"],
        "email": account["email"],
        "business_name": account.get("business_name"),
    }


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    request: SignupRequest,
    accounts: AccountStore = Depends(get_account_store),
) -> SignupResponse:
    """
    Create a business account.

    The financial year end must be given as DD/MMM/YYYY (e.g. 31/Mar/2025).
    """
    try:
        account = await accounts.create(request)
    except DuplicateAccountError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from None

    return SignupResponse(
        user_id=account["_id"],
        email=account["email"],
        business_name=account["business_name"],
    )


@router.post("/login", response_model=TokenPair)
async def login(
    request: LoginRequest,
    accounts: AccountStore = Depends(get_account_store),
) -> TokenPair:
    """Exchange email and password for an access/refresh token pair."""
    account = await accounts.verify(request.email, request.password)
    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    logger.info("login_succeeded", user_id=account["_id"])
    return create_token_pair(_claims(account))


@router.post("/refresh", response_model=TokenPair)
async def refresh(
    request: RefreshRequest,
    accounts: AccountStore = Depends(get_account_store),
) -> TokenPair:
    """Issue a new token pair from a valid refresh token."""
    token_data = decode_token(request.refresh_token, verify_type="refresh")
    account = await accounts.get_by_id(token_data.sub) if token_data else None

    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return create_token_pair(_claims(account))
