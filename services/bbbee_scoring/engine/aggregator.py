"""
Category Aggregator
===================

Reduces per-entity category records into category summaries.

Every function is pure: it walks the full, immutable record sequence and
builds a fresh summary, so re-running on the same input always yields an
equal summary and callers never patch a summary in place.

Demographic matching is an exact case-insensitive comparison against the
literals "black" and "female".

Version: 0.1.0
"""

from collections.abc import Sequence

from services.bbbee_scoring.engine.coercion import is_black, is_female
from services.bbbee_scoring.engine.exceptions import UnrecognizedOccupationalLevelError
from services.bbbee_scoring.engine.records import (
    Employee,
    EnterpriseBeneficiary,
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
from services.bbbee_scoring.engine.summaries import (
    EmploymentSummary,
    EnterpriseSummary,
    ImportSummary,
    LevelBreakdown,
    ManagementSummary,
    OwnershipSummary,
    SkillsSummary,
    SocioEconomicSummary,
    SupplierSummary,
    YesSummary,
)


# B-BBEE thresholds for classifying a beneficiary as black (women) owned
BLACK_OWNED_THRESHOLD = 51.0
BLACK_WOMEN_OWNED_THRESHOLD = 30.0

_LEVELS_BY_LABEL = {level.value: level for level in OccupationalLevel}


def resolve_occupational_level(label: str, record_index: int | None = None) -> OccupationalLevel:
    """
    Map a submitted occupational level label onto the closed enum.

    Raises:
        UnrecognizedOccupationalLevelError: label is not one of the six levels
    """
    try:
        return _LEVELS_BY_LABEL[label]
    except KeyError:
        raise UnrecognizedOccupationalLevelError(label, record_index) from None


def aggregate_ownership(
    participants: Sequence[OwnershipParticipant],
    entities: Sequence[OwnershipEntity] = (),
) -> OwnershipSummary:
    """
    Summarize direct participants and intermediate entities.

    Black ownership is the economic interest held directly by black
    participants plus the flow-through black economic interest reported by
    each entity.
    """
    black = black_female = foreign = new_entrants = 0
    black_vr = black_female_vr = 0.0
    black_ei = black_female_ei = 0.0
    youth_ei = disabled_ei = unemployed_ei = rural_ei = veteran_ei = 0.0
    black_debt = 0.0

    for participant in participants:
        if participant.is_foreign:
            foreign += 1
        if participant.is_new_entrant:
            new_entrants += 1

        if not is_black(participant.race):
            continue

        black += 1
        black_vr += participant.voting_rights
        black_ei += participant.economic_interest
        black_debt += participant.outstanding_debt

        if is_female(participant.gender):
            black_female += 1
            black_female_vr += participant.voting_rights
            black_female_ei += participant.economic_interest

        if participant.is_youth:
            youth_ei += participant.economic_interest
        if participant.is_disabled:
            disabled_ei += participant.economic_interest
        if participant.is_unemployed:
            unemployed_ei += participant.economic_interest
        if participant.is_living_in_rural_areas:
            rural_ei += participant.economic_interest
        if participant.is_military_veteran:
            veteran_ei += participant.economic_interest

    entity_vr = sum(entity.total_black_voting_rights for entity in entities)
    entity_ei = sum(entity.total_black_economic_interest for entity in entities)
    entity_women_ei = sum(entity.black_women_economic_interest for entity in entities)

    return OwnershipSummary(
        total_participants=len(participants),
        black_participants=black,
        black_female_participants=black_female,
        foreign_participants=foreign,
        new_entrants=new_entrants,
        total_entities=len(entities),
        black_voting_rights=black_vr,
        black_female_voting_rights=black_female_vr,
        black_economic_interest=black_ei,
        black_female_economic_interest=black_female_ei,
        black_youth_economic_interest=youth_ei,
        black_disabled_economic_interest=disabled_ei,
        black_unemployed_economic_interest=unemployed_ei,
        black_rural_economic_interest=rural_ei,
        black_military_veteran_economic_interest=veteran_ei,
        black_outstanding_debt=black_debt,
        entity_black_voting_rights=float(entity_vr),
        entity_black_economic_interest=float(entity_ei),
        entity_black_women_economic_interest=float(entity_women_ei),
        black_ownership_percentage=black_ei + entity_ei,
        black_female_ownership_percentage=black_female_ei + entity_women_ei,
    )


def aggregate_management(managers: Sequence[Manager]) -> ManagementSummary:
    """Summarize board and executive composition."""
    black = black_female = disabled = executives = independents = 0
    total_vr = black_vr = black_female_vr = disabled_vr = black_ei = 0.0

    for manager in managers:
        total_vr += manager.voting_rights

        if manager.is_executive_director:
            executives += 1
        if manager.is_independent_non_executive:
            independents += 1

        if is_black(manager.race):
            black += 1
            black_vr += manager.voting_rights
            black_ei += manager.economic_interest
            if is_female(manager.gender):
                black_female += 1
                black_female_vr += manager.voting_rights

        if manager.is_disabled:
            disabled += 1
            disabled_vr += manager.voting_rights

    return ManagementSummary(
        total_managers=len(managers),
        black_managers=black,
        black_female_managers=black_female,
        disabled_managers=disabled,
        executive_directors=executives,
        independent_non_executives=independents,
        total_voting_rights=total_vr,
        black_voting_rights=black_vr,
        black_female_voting_rights=black_female_vr,
        disabled_voting_rights=disabled_vr,
        black_economic_interest=black_ei,
    )


def aggregate_employment(employees: Sequence[Employee]) -> EmploymentSummary:
    """
    Summarize employment equity, broken down by occupational level.

    Raises:
        UnrecognizedOccupationalLevelError: an employee's level is not one of
            the six OccupationalLevel labels
    """
    counts = {
        level: {"total": 0, "black": 0, "black_female": 0, "disabled": 0}
        for level in OccupationalLevel
    }
    black = black_female = disabled = foreign = 0
    payroll = 0.0

    for index, employee in enumerate(employees):
        level = counts[resolve_occupational_level(employee.occupational_level, index)]
        level["total"] += 1
        payroll += employee.gross_monthly_salary

        if is_black(employee.race):
            black += 1
            level["black"] += 1
            if is_female(employee.gender):
                black_female += 1
                level["black_female"] += 1

        if employee.is_disabled:
            disabled += 1
            level["disabled"] += 1

        if employee.is_foreign:
            foreign += 1

    return EmploymentSummary(
        total_employees=len(employees),
        black_employees=black,
        black_female_employees=black_female,
        disabled_employees=disabled,
        foreign_employees=foreign,
        total_monthly_payroll=payroll,
        by_occupational_level={
            level.value: LevelBreakdown(**level_counts) for level, level_counts in counts.items()
        },
    )


def aggregate_skills(trainings: Sequence[TrainingEntry]) -> SkillsSummary:
    """Summarize skills development spend and learners."""
    direct = additional = ctc = hours = participants = 0.0
    unemployed = absorbed = black = black_female = disabled = 0

    for training in trainings:
        direct += training.total_direct_expenditure
        additional += training.additional_expenditure
        ctc += training.cost_to_company_salary
        hours += training.training_duration_hours
        participants += training.number_of_participants

        if training.is_unemployed_learner:
            unemployed += 1
        if training.is_absorbed_internal_trainer:
            absorbed += 1
        if training.is_disabled:
            disabled += 1
        if is_black(training.race):
            black += 1
            if is_female(training.gender):
                black_female += 1

    return SkillsSummary(
        total_trainings=len(trainings),
        total_direct_expenditure=direct,
        total_additional_expenditure=additional,
        total_cost_to_company_salary=ctc,
        total_training_hours=hours,
        total_participants=participants,
        unemployed_learners=unemployed,
        absorbed_internal_trainers=absorbed,
        black_learners=black,
        black_female_learners=black_female,
        disabled_learners=disabled,
    )


def aggregate_suppliers(
    suppliers: Sequence[Supplier],
    imports: Sequence[ImportRecord] = (),
) -> SupplierSummary:
    """Summarize local supplier spend and imports."""
    black_owned = black_women_owned = 0
    total_spend = black_owned_spend = 0.0

    for supplier in suppliers:
        total_spend += supplier.expenditure
        if supplier.is_black_owned:
            black_owned += 1
            black_owned_spend += supplier.expenditure
        if supplier.is_black_women_owned:
            black_women_owned += 1

    return SupplierSummary(
        total_suppliers=len(suppliers),
        black_owned_suppliers=black_owned,
        black_women_owned_suppliers=black_women_owned,
        total_expenditure=total_spend,
        black_owned_expenditure=black_owned_spend,
        imports=ImportSummary(
            total_imports=len(imports),
            total_import_expenditure=float(sum(record.expenditure for record in imports)),
        ),
    )


def aggregate_enterprise(beneficiaries: Sequence[EnterpriseBeneficiary]) -> EnterpriseSummary:
    """Summarize enterprise development contributions."""
    contributions = 0.0
    supplier_dev = black_owned = black_women_owned = 0

    for beneficiary in beneficiaries:
        contributions += beneficiary.contribution_amount
        if beneficiary.is_supplier_development_beneficiary:
            supplier_dev += 1
        if beneficiary.black_ownership_percentage >= BLACK_OWNED_THRESHOLD:
            black_owned += 1
        if beneficiary.black_women_ownership_percentage >= BLACK_WOMEN_OWNED_THRESHOLD:
            black_women_owned += 1

    return EnterpriseSummary(
        total_beneficiaries=len(beneficiaries),
        total_contribution_amount=contributions,
        supplier_development_beneficiaries=supplier_dev,
        black_owned_beneficiaries=black_owned,
        black_women_owned_beneficiaries=black_women_owned,
    )


def aggregate_socio_economic(
    beneficiaries: Sequence[SocioEconomicBeneficiary],
) -> SocioEconomicSummary:
    """Summarize socio-economic development contributions."""
    contributions = sum(b.contribution_amount for b in beneficiaries)
    participation = sum(b.black_participation_percentage for b in beneficiaries)

    return SocioEconomicSummary(
        total_beneficiaries=len(beneficiaries),
        total_contribution_amount=float(contributions),
        average_black_participation=participation / len(beneficiaries) if beneficiaries else 0.0,
    )


def aggregate_yes(participants: Sequence[YesParticipant]) -> YesSummary:
    """Summarize YES 4 Youth placements."""
    black_youth = current = absorbed = 0
    stipends = 0.0

    for participant in participants:
        stipends += participant.monthly_stipend
        if is_black(participant.race):
            black_youth += 1
        if participant.is_current_yes_employee:
            current += 1
        if participant.is_completed_yes_absorbed:
            absorbed += 1

    return YesSummary(
        total_participants=len(participants),
        black_youth_participants=black_youth,
        total_stipend_paid=stipends,
        current_yes_employees=current,
        completed_yes_absorbed=absorbed,
    )
