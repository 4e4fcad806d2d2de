"""
Scorecard Routes
================

Read-only view of the sector scorecard registry.

Version: 0.1.0
"""

from fastapi import APIRouter

from services.bbbee_scoring.engine.scorecards import SCORECARDS, get_scorecard
from services.bbbee_scoring.models.scoring import ScorecardView


router = APIRouter()


@router.get("", response_model=list[ScorecardView])
async def list_scorecards() -> list[ScorecardView]:
    """List every sector scorecard."""
    return [ScorecardView.from_scorecard(scorecard) for scorecard in SCORECARDS.values()]


@router.get("/{sector}", response_model=ScorecardView)
async def get_sector_scorecard(sector: str) -> ScorecardView:
    """Get one sector's scorecard; unknown sectors return the Generic scorecard."""
    return ScorecardView.from_scorecard(get_scorecard(sector))
