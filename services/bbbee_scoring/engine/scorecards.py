"""
Sector Scorecard Registry
=========================

Immutable table of sector-specific category weights and targets.

Targets are fractions (0.25 = 25%). Each scorecard's `total_weight` is the
nominal maximum excluding the YES bonus. The totals differ between sectors
(99, 100, 98, 101) and are reproduced as published; `audit_scorecards`
reports them so the product owner can confirm the intended weights.

Version: 0.1.0
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

from shared.logging import get_logger


logger = get_logger(__name__)


class Sector(str, Enum):
    """Sectors with a published scorecard."""

    GENERIC = "Generic"
    TOURISM = "Tourism"
    CONSTRUCTION = "Construction"
    ICT = "ICT"


@dataclass(frozen=True)
class CategoryTarget:
    """Weight (points) and target (fraction) for one category."""

    weight: float
    target: float


@dataclass(frozen=True)
class EsdTarget:
    """
    Combined Enterprise and Supplier Development element.

    The weight is split equally between the supplier and enterprise
    sub-scores.
    """

    weight: float
    target_supplier: float
    target_enterprise: float

    @property
    def supplier_weight(self) -> float:
        return self.weight / 2

    @property
    def enterprise_weight(self) -> float:
        return self.weight / 2


@dataclass(frozen=True)
class SectorScorecard:
    """Weights and targets for one sector."""

    sector: str
    ownership: CategoryTarget
    management_control: CategoryTarget
    skills_development: CategoryTarget
    esd: EsdTarget
    socio_economic_development: CategoryTarget
    yes_bonus_weight: float
    total_weight: float

    @property
    def weight_sum(self) -> float:
        """Sum of the category weights, excluding the YES bonus."""
        return (
            self.ownership.weight
            + self.management_control.weight
            + self.skills_development.weight
            + self.esd.weight
            + self.socio_economic_development.weight
        )

    @property
    def weights_consistent(self) -> bool:
        """Whether the nominal total agrees with the category weights."""
        return self.weight_sum == self.total_weight

    @property
    def max_score(self) -> float:
        return self.total_weight + self.yes_bonus_weight


SCORECARDS: MappingProxyType[str, SectorScorecard] = MappingProxyType(
    {
        Sector.GENERIC.value: SectorScorecard(
            sector=Sector.GENERIC.value,
            ownership=CategoryTarget(weight=25, target=0.25),
            management_control=CategoryTarget(weight=19, target=0.5),
            skills_development=CategoryTarget(weight=20, target=0.06),
            esd=EsdTarget(weight=30, target_supplier=0.1, target_enterprise=0.01),
            socio_economic_development=CategoryTarget(weight=5, target=0.01),
            yes_bonus_weight=5,
            total_weight=99,
        ),
        Sector.TOURISM.value: SectorScorecard(
            sector=Sector.TOURISM.value,
            ownership=CategoryTarget(weight=27, target=0.3),
            management_control=CategoryTarget(weight=15, target=0.6),
            skills_development=CategoryTarget(weight=20, target=0.08),
            esd=EsdTarget(weight=30, target_supplier=0.15, target_enterprise=0.015),
            socio_economic_development=CategoryTarget(weight=8, target=0.015),
            yes_bonus_weight=5,
            total_weight=100,
        ),
        Sector.CONSTRUCTION.value: SectorScorecard(
            sector=Sector.CONSTRUCTION.value,
            ownership=CategoryTarget(weight=25, target=0.32),
            management_control=CategoryTarget(weight=17, target=0.5),
            skills_development=CategoryTarget(weight=21, target=0.06),
            esd=EsdTarget(weight=30, target_supplier=0.12, target_enterprise=0.01),
            socio_economic_development=CategoryTarget(weight=5, target=0.01),
            yes_bonus_weight=5,
            total_weight=98,
        ),
        Sector.ICT.value: SectorScorecard(
            sector=Sector.ICT.value,
            ownership=CategoryTarget(weight=25, target=0.3),
            management_control=CategoryTarget(weight=19, target=0.5),
            skills_development=CategoryTarget(weight=22, target=0.07),
            esd=EsdTarget(weight=30, target_supplier=0.1, target_enterprise=0.01),
            socio_economic_development=CategoryTarget(weight=5, target=0.01),
            yes_bonus_weight=5,
            total_weight=101,
        ),
    }
)

DEFAULT_SECTOR = Sector.GENERIC


def get_scorecard(sector: str | None) -> SectorScorecard:
    """
    Look up a sector's scorecard.

    Empty or unknown sector names fall back to the Generic scorecard.
    """
    scorecard = SCORECARDS.get(sector or "")
    if scorecard is None:
        logger.debug("scorecard_fallback", requested=sector, sector=DEFAULT_SECTOR.value)
        return SCORECARDS[DEFAULT_SECTOR.value]
    return scorecard


def audit_scorecards() -> list[dict[str, Any]]:
    """
    Report each scorecard's nominal total against its category weights.

    Logs the per-sector totals and a warning for any scorecard whose total
    disagrees with its own weights.
    """
    report = []
    for scorecard in SCORECARDS.values():
        entry = {
            "sector": scorecard.sector,
            "total_weight": scorecard.total_weight,
            "weight_sum": scorecard.weight_sum,
            "yes_bonus_weight": scorecard.yes_bonus_weight,
            "consistent": scorecard.weights_consistent,
        }
        if not scorecard.weights_consistent:
            logger.warning("scorecard_weight_mismatch", **entry)
        report.append(entry)

    totals = {entry["sector"]: entry["total_weight"] for entry in report}
    if len(set(totals.values())) > 1:
        logger.info("scorecard_totals_vary_by_sector", totals=totals)

    return report
