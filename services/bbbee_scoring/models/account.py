"""
Account Models
==============

Request and response models for signup, login and the business profile.

Version: 0.1.0
"""

import re
from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from services.bbbee_scoring.engine.scorecards import Sector


FINANCIAL_YEAR_END_FORMAT = "%d/%b/%Y"

_FINANCIAL_YEAR_END_PATTERN = re.compile(r"^\d{2}/[A-Za-z]{3}/\d{4}$")


def parse_financial_year_end(value: str) -> date:
    """
    Parse a DD/MMM/YYYY date such as 31/Mar/2025.

    The month abbreviation is case-insensitive.

    Raises:
        ValueError: wrong shape or not a real calendar date
    """
    if not _FINANCIAL_YEAR_END_PATTERN.match(value):
        raise ValueError(
            "Invalid financial year end format. Please use DD/MMM/YYYY (e.g., 31/Mar/2025)"
        )

    day, month, year = value.split("/")
    try:
        parsed = datetime.strptime(f"{day}/{month.title()}/{year}", FINANCIAL_YEAR_END_FORMAT)
    except ValueError:
        raise ValueError("Invalid date value for Financial Year End") from None

    if parsed.year < 1900:
        raise ValueError("Invalid date value for Financial Year End")

    return parsed.date()


class SignupRequest(BaseModel):
    """Request model for creating a business account."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    business_name: str = Field(..., min_length=1, max_length=255)
    financial_year_end: date = Field(..., description="DD/MMM/YYYY, e.g. 31/Mar/2025")
    address: str = Field(default="", max_length=500)
    contact_number: str = Field(default="", max_length=50)
    sector: Sector | None = None

    @field_validator("financial_year_end", mode="before")
    @classmethod
    def validate_financial_year_end(cls, v: object) -> object:
        """Accept only the DD/MMM/YYYY text form."""
        if isinstance(v, str):
            return parse_financial_year_end(v.strip())
        raise ValueError("Financial year end must be a DD/MMM/YYYY string")


class LoginRequest(BaseModel):
    """Request model for password login."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    """Request model for exchanging a refresh token."""

    refresh_token: str


class SignupResponse(BaseModel):
    """Response returned after a successful signup."""

    user_id: str
    email: str
    business_name: str
    message: str = "Account created"


class ProfileUpdate(BaseModel):
    """Request model for updating the business profile."""

    business_name: str = Field(..., min_length=1, max_length=255)
    sector: Sector


class Profile(BaseModel):
    """Business profile of the current user."""

    id: str
    email: str
    business_name: str
    financial_year_end: date | None = None
    address: str = ""
    contact_number: str = ""
    sector: Sector | None = None
    created_at: datetime | None = None
