"""
Category Records
================

Flat per-entity records submitted for each B-BBEE category, plus the
company-level financial figures used as scoring denominators.

Every field is coerced on construction (see `coercion`), so a record built
from arbitrary form data is always valid. Records are immutable.

Version: 0.1.0
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from services.bbbee_scoring.engine.coercion import Amount, Flag, Money, Text


class Category(str, Enum):
    """B-BBEE data categories, in scorecard declaration order."""

    OWNERSHIP = "ownership"
    MANAGEMENT_CONTROL = "management_control"
    EMPLOYMENT_EQUITY = "employment_equity"
    SKILLS_DEVELOPMENT = "skills_development"
    SUPPLIER_DEVELOPMENT = "supplier_development"
    ENTERPRISE_DEVELOPMENT = "enterprise_development"
    SOCIO_ECONOMIC_DEVELOPMENT = "socio_economic_development"
    YES_INITIATIVE = "yes_initiative"


class OccupationalLevel(str, Enum):
    """Occupational levels used by the employment equity breakdown."""

    EXECUTIVE_MANAGEMENT = "Executive Management"
    OTHER_EXECUTIVE_MANAGEMENT = "Other Executive Management"
    SENIOR_MANAGEMENT = "Senior Management"
    MIDDLE_MANAGEMENT = "Middle Management"
    JUNIOR_MANAGEMENT = "Junior Management"
    SEMI_SKILLED_AND_UNSKILLED = "Other, Semi-Skilled & Unskilled"


class CategoryRecord(BaseModel):
    """Base for all category records."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# =============================================================================
# Ownership
# =============================================================================


class OwnershipParticipant(CategoryRecord):
    """Direct shareholder in the measured entity."""

    name: Text = ""
    id_number: Text = ""
    race: Text = ""
    gender: Text = ""
    is_foreign: Flag = False
    is_new_entrant: Flag = False
    designated_groups: Flag = False
    is_youth: Flag = False
    is_disabled: Flag = False
    is_unemployed: Flag = False
    is_living_in_rural_areas: Flag = False
    is_military_veteran: Flag = False
    economic_interest: Amount = 0.0
    voting_rights: Amount = 0.0
    outstanding_debt: Amount = 0.0


class OwnershipEntity(CategoryRecord):
    """Intermediate ownership entity with flow-through percentages."""

    tier: Text = ""
    entity_name: Text = ""
    ownership_in_next_tier: Amount = 0.0
    modified_flow_through_applied: Flag = False
    total_black_voting_rights: Amount = 0.0
    black_women_voting_rights: Amount = 0.0
    total_black_economic_interest: Amount = 0.0
    black_women_economic_interest: Amount = 0.0
    new_entrants: Amount = 0.0
    designated_groups: Amount = 0.0
    youth: Amount = 0.0
    disabled: Amount = 0.0
    unemployed: Amount = 0.0
    living_in_rural_areas: Amount = 0.0
    military_veteran: Amount = 0.0
    esop_bbos: Amount = 0.0
    co_ops: Amount = 0.0
    outstanding_debt_by_black_participants: Amount = 0.0


# =============================================================================
# Management Control
# =============================================================================


class Manager(CategoryRecord):
    """Board member or executive."""

    name: Text = ""
    site_location: Text = ""
    id_number: Text = ""
    position: Text = ""
    job_title: Text = ""
    race: Text = ""
    gender: Text = ""
    is_disabled: Flag = False
    voting_rights: Amount = 0.0
    economic_interest: Amount = 0.0
    is_executive_director: Flag = False
    is_independent_non_executive: Flag = False


# =============================================================================
# Employment Equity
# =============================================================================


class Employee(CategoryRecord):
    """Employee on the payroll of the measured entity."""

    name: Text = ""
    site_location: Text = ""
    id_number: Text = ""
    job_title: Text = ""
    race: Text = ""
    gender: Text = ""
    is_disabled: Flag = False
    description_of_disability: Text = ""
    is_foreign: Flag = False
    # Kept as free text; the aggregator resolves it against OccupationalLevel
    occupational_level: Text = ""
    gross_monthly_salary: Amount = 0.0


# =============================================================================
# Skills Development
# =============================================================================


class TrainingEntry(CategoryRecord):
    """A training intervention for one learner."""

    start_date: Text = ""
    end_date: Text = ""
    training_course: Text = ""
    trainer_provider: Text = ""
    category: Text = ""
    learner_name: Text = ""
    site_location: Text = ""
    id_number: Text = ""
    race: Text = ""
    gender: Text = ""
    is_disabled: Flag = False
    core_critical_skills: Text = ""
    total_direct_expenditure: Amount = 0.0
    additional_expenditure: Amount = 0.0
    cost_to_company_salary: Amount = 0.0
    training_duration_hours: Amount = 0.0
    number_of_participants: Amount = 0.0
    is_unemployed_learner: Flag = False
    is_absorbed_internal_trainer: Flag = False


# =============================================================================
# Supplier Development
# =============================================================================


class Supplier(CategoryRecord):
    """Local supplier included in measured procurement."""

    supplier_name: Text = ""
    site_location: Text = ""
    bee_status_level: Text = ""
    is_black_owned: Flag = False
    is_black_women_owned: Flag = False
    expenditure: Amount = 0.0


class ImportRecord(CategoryRecord):
    """Imported goods or services excluded from local procurement."""

    supplier_name: Text = ""
    country: Text = ""
    description: Text = ""
    expenditure: Amount = 0.0


# =============================================================================
# Enterprise & Socio-Economic Development
# =============================================================================


class EnterpriseBeneficiary(CategoryRecord):
    """Recipient of an enterprise (or supplier) development contribution."""

    beneficiary_name: Text = ""
    site_location: Text = ""
    is_supplier_development_beneficiary: Flag = False
    black_ownership_percentage: Amount = 0.0
    black_women_ownership_percentage: Amount = 0.0
    bee_status_level: Text = ""
    contribution_type: Text = ""
    contribution_description: Text = ""
    date_of_contribution: Text = ""
    payment_date: Text = ""
    contribution_amount: Amount = 0.0


class SocioEconomicBeneficiary(CategoryRecord):
    """Recipient of a socio-economic development contribution."""

    beneficiary_name: Text = ""
    site_location: Text = ""
    black_participation_percentage: Amount = 0.0
    contribution_type: Text = ""
    contribution_description: Text = ""
    date_of_contribution: Text = ""
    contribution_amount: Amount = 0.0


# =============================================================================
# YES 4 Youth
# =============================================================================


class YesParticipant(CategoryRecord):
    """Youth placed through the YES 4 Youth initiative."""

    name: Text = ""
    site_location: Text = ""
    id_number: Text = ""
    job_title: Text = ""
    race: Text = ""
    gender: Text = ""
    occupational_level: Text = ""
    host_employer_year: Text = ""
    monthly_stipend: Amount = 0.0
    start_date: Text = ""
    end_date: Text = ""
    is_current_yes_employee: Flag = False
    is_completed_yes_absorbed: Flag = False


# =============================================================================
# Financials
# =============================================================================


class FinancialInputs(CategoryRecord):
    """Company financial figures for the measurement period (Rand)."""

    turnover: Money = 0.0
    npbt: Money = 0.0
    npat: Money = 0.0
    salaries: Money = 0.0
    wages: Money = 0.0
    directors_emoluments: Money = 0.0
    annual_payroll: Money = 0.0
    expenses: Money = 0.0
    cost_of_sales: Money = 0.0
    depreciation: Money = 0.0
    sdl_payments: Money = 0.0
    total_leviable_amount: Money = 0.0
    total_measured_procurement_spend: Money = 0.0
