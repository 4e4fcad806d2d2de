"""
B-BBEE Scoring Routes
=====================

API route handlers for the B-BBEE Scoring Service.
"""

from services.bbbee_scoring.routes import auth, categories, profile, scorecards, scores


__all__ = ["auth", "categories", "profile", "scorecards", "scores"]
