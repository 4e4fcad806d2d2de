"""
B-BBEE Scoring Services
=======================

Business logic and persistence for the B-BBEE Scoring Service.

Services:
- AccountStore: business accounts and profiles
- CategoryStore: category submissions
- AssessmentService: scoring of submitted or stored categories

Version: 0.1.0
"""

from services.bbbee_scoring.services.accounts import (
    AccountStore,
    DuplicateAccountError,
    get_account_store,
    to_profile,
)
from services.bbbee_scoring.services.assessment import AssessmentService
from services.bbbee_scoring.services.documents import (
    CategoryStore,
    get_category_store,
    to_submission_document,
)


__all__ = [
    # Accounts
    "AccountStore",
    "DuplicateAccountError",
    "get_account_store",
    "to_profile",
    # Documents
    "CategoryStore",
    "get_category_store",
    "to_submission_document",
    # Assessment
    "AssessmentService",
]
