"""
B-BBEE Scoring API Models
=========================

Pydantic request/response models for the B-BBEE Scoring Service.

Modules:
- account: signup, login and business profile
- submissions: per-category record submissions and the category registry
- scoring: score calculation and scorecard views

Version: 0.1.0
"""

from services.bbbee_scoring.models.account import (
    LoginRequest,
    Profile,
    ProfileUpdate,
    RefreshRequest,
    SignupRequest,
    SignupResponse,
    parse_financial_year_end,
)
from services.bbbee_scoring.models.scoring import (
    CalculateRequest,
    CategoryScores,
    ComputeRequest,
    ScorecardView,
    ScoreResponse,
)
from services.bbbee_scoring.models.submissions import (
    CATEGORIES_BY_SLUG,
    CATEGORY_DEFINITIONS,
    CategoryDefinition,
    CategorySubmission,
    SubmissionDocument,
)


__all__ = [
    # Account
    "SignupRequest",
    "SignupResponse",
    "LoginRequest",
    "RefreshRequest",
    "ProfileUpdate",
    "Profile",
    "parse_financial_year_end",
    # Submissions
    "CategorySubmission",
    "CategoryDefinition",
    "CATEGORY_DEFINITIONS",
    "CATEGORIES_BY_SLUG",
    "SubmissionDocument",
    # Scoring
    "ComputeRequest",
    "CalculateRequest",
    "ScorecardView",
    "CategoryScores",
    "ScoreResponse",
]
