"""
Profile Routes
==============

Business profile of the authenticated account.

Version: 0.1.0
"""

from fastapi import APIRouter, Depends, HTTPException, status

from services.bbbee_scoring.models.account import Profile, ProfileUpdate
from services.bbbee_scoring.services.accounts import AccountStore, get_account_store, to_profile
from shared.auth import User, get_current_user


router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found",
    )


@router.get("", response_model=Profile)
async def get_profile(
    user: User = Depends(get_current_user),
    accounts: AccountStore = Depends(get_account_store),
) -> Profile:
    """Get the current user's business profile."""
    account = await accounts.get_by_id(user.id)
    if account is None:
        raise _not_found()
    return to_profile(account)


@router.patch("", response_model=Profile)
async def update_profile(
    update: ProfileUpdate,
    user: User = Depends(get_current_user),
    accounts: AccountStore = Depends(get_account_store),
) -> Profile:
    """Update business name and sector. Both are required."""
    account = await accounts.update_profile(user.id, update.business_name, update.sector.value)
    if account is None:
        raise _not_found()
    return to_profile(account)
