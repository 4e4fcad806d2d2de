"""
Category Submission Models
==========================

Request bodies for each B-BBEE category and the registry that maps URL slugs
to submission models and MongoDB collections.

A submission only carries records. Its summary is always recomputed on the
server from the full record list.

Version: 0.1.0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from services.bbbee_scoring.engine.aggregator import (
    aggregate_employment,
    aggregate_enterprise,
    aggregate_management,
    aggregate_ownership,
    aggregate_skills,
    aggregate_socio_economic,
    aggregate_suppliers,
    aggregate_yes,
)
from services.bbbee_scoring.engine.records import (
    Category,
    Employee,
    EnterpriseBeneficiary,
    ImportRecord,
    Manager,
    OwnershipEntity,
    OwnershipParticipant,
    SocioEconomicBeneficiary,
    Supplier,
    TrainingEntry,
    YesParticipant,
)
from services.bbbee_scoring.engine.summaries import (
    CategorySummary,
    EmploymentSummary,
    EnterpriseSummary,
    ManagementSummary,
    OwnershipSummary,
    SkillsSummary,
    SocioEconomicSummary,
    SupplierSummary,
    YesSummary,
)


class CategorySubmission(BaseModel, ABC):
    """Base for category submissions."""

    model_config = ConfigDict(extra="ignore")

    @abstractmethod
    def summarize(self) -> CategorySummary:
        """Aggregate the submitted records into the category summary."""


class OwnershipSubmission(CategorySubmission):
    participants: list[OwnershipParticipant] = Field(default_factory=list)
    entities: list[OwnershipEntity] = Field(default_factory=list)

    def summarize(self) -> OwnershipSummary:
        return aggregate_ownership(self.participants, self.entities)


class ManagementSubmission(CategorySubmission):
    managers: list[Manager] = Field(default_factory=list)

    def summarize(self) -> ManagementSummary:
        return aggregate_management(self.managers)


class EmploymentSubmission(CategorySubmission):
    employees: list[Employee] = Field(default_factory=list)

    def summarize(self) -> EmploymentSummary:
        return aggregate_employment(self.employees)


class SkillsSubmission(CategorySubmission):
    trainings: list[TrainingEntry] = Field(default_factory=list)

    def summarize(self) -> SkillsSummary:
        return aggregate_skills(self.trainings)


class SupplierSubmission(CategorySubmission):
    suppliers: list[Supplier] = Field(default_factory=list)
    imports: list[ImportRecord] = Field(default_factory=list)

    def summarize(self) -> SupplierSummary:
        return aggregate_suppliers(self.suppliers, self.imports)


class EnterpriseSubmission(CategorySubmission):
    beneficiaries: list[EnterpriseBeneficiary] = Field(default_factory=list)

    def summarize(self) -> EnterpriseSummary:
        return aggregate_enterprise(self.beneficiaries)


class SocioEconomicSubmission(CategorySubmission):
    beneficiaries: list[SocioEconomicBeneficiary] = Field(default_factory=list)

    def summarize(self) -> SocioEconomicSummary:
        return aggregate_socio_economic(self.beneficiaries)


class YesSubmission(CategorySubmission):
    participants: list[YesParticipant] = Field(default_factory=list)

    def summarize(self) -> YesSummary:
        return aggregate_yes(self.participants)


@dataclass(frozen=True)
class CategoryDefinition:
    """How one category is exposed over HTTP and stored in MongoDB."""

    category: Category
    slug: str
    collection: str
    title: str
    submission_model: type[CategorySubmission]


CATEGORY_DEFINITIONS: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(
        Category.OWNERSHIP, "ownership-details", "ownership_details",
        "Ownership Details", OwnershipSubmission,
    ),
    CategoryDefinition(
        Category.MANAGEMENT_CONTROL, "management-control", "management_control",
        "Management Control", ManagementSubmission,
    ),
    CategoryDefinition(
        Category.EMPLOYMENT_EQUITY, "employment-equity", "employment_equity",
        "Employment Equity", EmploymentSubmission,
    ),
    CategoryDefinition(
        Category.SKILLS_DEVELOPMENT, "skills-development", "skills_development",
        "Skills Development", SkillsSubmission,
    ),
    CategoryDefinition(
        Category.SUPPLIER_DEVELOPMENT, "supplier-development", "supplier_development",
        "Supplier Development", SupplierSubmission,
    ),
    CategoryDefinition(
        Category.ENTERPRISE_DEVELOPMENT, "enterprise-development", "enterprise_development",
        "Enterprise Development", EnterpriseSubmission,
    ),
    CategoryDefinition(
        Category.SOCIO_ECONOMIC_DEVELOPMENT, "socio-economic-development",
        "socio_economic_development", "Socio-Economic Development", SocioEconomicSubmission,
    ),
    CategoryDefinition(
        Category.YES_INITIATIVE, "yes4youth-initiative", "yes4youth_initiative",
        "YES 4 Youth Initiative", YesSubmission,
    ),
)

CATEGORIES_BY_SLUG: MappingProxyType[str, CategoryDefinition] = MappingProxyType(
    {definition.slug: definition for definition in CATEGORY_DEFINITIONS}
)


class SubmissionDocument(BaseModel):
    """A stored category submission as returned by the API."""

    id: str
    user_id: str
    category: Category
    submission: dict[str, Any]
    summary: dict[str, Any]
    created_at: datetime | None = None
    updated_at: datetime | None = None
