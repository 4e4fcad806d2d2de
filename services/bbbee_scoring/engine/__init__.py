"""
B-BBEE Scoring Engine
=====================

Pure, synchronous scoring pipeline:

    category records -> aggregator -> summaries
    summaries + financials + scorecard -> calculator -> ScoreResult
    ScoreResult -> recommendations

Nothing in this package performs I/O; it is safe to call from any thread or
event loop.

Version: 0.1.0
"""

from services.bbbee_scoring.engine.aggregator import (
    aggregate_employment,
    aggregate_enterprise,
    aggregate_management,
    aggregate_ownership,
    aggregate_skills,
    aggregate_socio_economic,
    aggregate_suppliers,
    aggregate_yes,
    resolve_occupational_level,
)
from services.bbbee_scoring.engine.calculator import (
    LEVEL_THRESHOLDS,
    LevelThreshold,
    ScoreCalculator,
    ScoreResult,
    determine_level,
)
from services.bbbee_scoring.engine.exceptions import (
    ScoringError,
    UnrecognizedOccupationalLevelError,
)
from services.bbbee_scoring.engine.recommendations import recommend
from services.bbbee_scoring.engine.records import (
    Category,
    Employee,
    EnterpriseBeneficiary,
    FinancialInputs,
    ImportRecord,
    Manager,
    OccupationalLevel,
    OwnershipEntity,
    OwnershipParticipant,
    SocioEconomicBeneficiary,
    Supplier,
    TrainingEntry,
    YesParticipant,
)
from services.bbbee_scoring.engine.scorecards import (
    DEFAULT_SECTOR,
    SCORECARDS,
    Sector,
    SectorScorecard,
    audit_scorecards,
    get_scorecard,
)
from services.bbbee_scoring.engine.summaries import CategorySummaries, CategorySummary


__all__ = [
    # Records
    "Category",
    "OccupationalLevel",
    "OwnershipParticipant",
    "OwnershipEntity",
    "Manager",
    "Employee",
    "TrainingEntry",
    "Supplier",
    "ImportRecord",
    "EnterpriseBeneficiary",
    "SocioEconomicBeneficiary",
    "YesParticipant",
    "FinancialInputs",
    # Aggregation
    "CategorySummaries",
    "CategorySummary",
    "aggregate_ownership",
    "aggregate_management",
    "aggregate_employment",
    "aggregate_skills",
    "aggregate_suppliers",
    "aggregate_enterprise",
    "aggregate_socio_economic",
    "aggregate_yes",
    "resolve_occupational_level",
    # Scorecards
    "Sector",
    "SectorScorecard",
    "SCORECARDS",
    "DEFAULT_SECTOR",
    "get_scorecard",
    "audit_scorecards",
    # Scoring
    "ScoreCalculator",
    "ScoreResult",
    "LevelThreshold",
    "LEVEL_THRESHOLDS",
    "determine_level",
    "recommend",
    # Errors
    "ScoringError",
    "UnrecognizedOccupationalLevelError",
]
