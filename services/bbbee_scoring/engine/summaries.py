"""
Category Summaries
==================

Aggregate totals derived from a full list of category records. Summaries are
immutable and always rebuilt from scratch by the aggregator.

Version: 0.1.0
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class OwnershipSummary:
    """Ownership totals. Percentages are percentage points (0-100)."""

    total_participants: int = 0
    black_participants: int = 0
    black_female_participants: int = 0
    foreign_participants: int = 0
    new_entrants: int = 0
    total_entities: int = 0

    black_voting_rights: float = 0.0
    black_female_voting_rights: float = 0.0
    black_economic_interest: float = 0.0
    black_female_economic_interest: float = 0.0
    black_youth_economic_interest: float = 0.0
    black_disabled_economic_interest: float = 0.0
    black_unemployed_economic_interest: float = 0.0
    black_rural_economic_interest: float = 0.0
    black_military_veteran_economic_interest: float = 0.0
    black_outstanding_debt: float = 0.0

    # Flow-through contributions reported by intermediate entities
    entity_black_voting_rights: float = 0.0
    entity_black_economic_interest: float = 0.0
    entity_black_women_economic_interest: float = 0.0

    black_ownership_percentage: float = 0.0
    black_female_ownership_percentage: float = 0.0


@dataclass(frozen=True)
class ManagementSummary:
    """Management control totals."""

    total_managers: int = 0
    black_managers: int = 0
    black_female_managers: int = 0
    disabled_managers: int = 0
    executive_directors: int = 0
    independent_non_executives: int = 0

    total_voting_rights: float = 0.0
    black_voting_rights: float = 0.0
    black_female_voting_rights: float = 0.0
    disabled_voting_rights: float = 0.0
    black_economic_interest: float = 0.0


@dataclass(frozen=True)
class LevelBreakdown:
    """Employee counts within one occupational level."""

    total: int = 0
    black: int = 0
    black_female: int = 0
    disabled: int = 0


@dataclass(frozen=True)
class EmploymentSummary:
    """Employment equity totals with a per-level breakdown."""

    total_employees: int = 0
    black_employees: int = 0
    black_female_employees: int = 0
    disabled_employees: int = 0
    foreign_employees: int = 0
    total_monthly_payroll: float = 0.0
    by_occupational_level: dict[str, LevelBreakdown] = field(default_factory=dict)


@dataclass(frozen=True)
class SkillsSummary:
    """Skills development spend and learner totals."""

    total_trainings: int = 0
    total_direct_expenditure: float = 0.0
    total_additional_expenditure: float = 0.0
    total_cost_to_company_salary: float = 0.0
    total_training_hours: float = 0.0
    total_participants: float = 0.0
    unemployed_learners: int = 0
    absorbed_internal_trainers: int = 0
    black_learners: int = 0
    black_female_learners: int = 0
    disabled_learners: int = 0


@dataclass(frozen=True)
class ImportSummary:
    """Imported procurement excluded from local spend."""

    total_imports: int = 0
    total_import_expenditure: float = 0.0


@dataclass(frozen=True)
class SupplierSummary:
    """Local supplier procurement totals."""

    total_suppliers: int = 0
    black_owned_suppliers: int = 0
    black_women_owned_suppliers: int = 0
    total_expenditure: float = 0.0
    black_owned_expenditure: float = 0.0
    imports: ImportSummary = field(default_factory=ImportSummary)


@dataclass(frozen=True)
class EnterpriseSummary:
    """Enterprise development contribution totals."""

    total_beneficiaries: int = 0
    total_contribution_amount: float = 0.0
    supplier_development_beneficiaries: int = 0
    black_owned_beneficiaries: int = 0
    black_women_owned_beneficiaries: int = 0


@dataclass(frozen=True)
class SocioEconomicSummary:
    """Socio-economic development contribution totals."""

    total_beneficiaries: int = 0
    total_contribution_amount: float = 0.0
    average_black_participation: float = 0.0


@dataclass(frozen=True)
class YesSummary:
    """YES 4 Youth participation totals."""

    total_participants: int = 0
    black_youth_participants: int = 0
    total_stipend_paid: float = 0.0
    current_yes_employees: int = 0
    completed_yes_absorbed: int = 0


CategorySummary = (
    OwnershipSummary
    | ManagementSummary
    | EmploymentSummary
    | SkillsSummary
    | SupplierSummary
    | EnterpriseSummary
    | SocioEconomicSummary
    | YesSummary
)


@dataclass(frozen=True)
class CategorySummaries:
    """
    Summaries handed to the score calculator.

    A category left as None has no submitted data and scores 0.
    """

    ownership: OwnershipSummary | None = None
    management_control: ManagementSummary | None = None
    employment_equity: EmploymentSummary | None = None
    skills_development: SkillsSummary | None = None
    supplier_development: SupplierSummary | None = None
    enterprise_development: EnterpriseSummary | None = None
    socio_economic_development: SocioEconomicSummary | None = None
    yes_initiative: YesSummary | None = None
