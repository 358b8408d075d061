# SPDX-License-Identifier: Apache-2.0

"""
Pre-donation screening domain logic.

This module contains pure functions that turn a pet's physical profile and the
owner's questionnaire answers into disqualifying factors, an overall screening
status and the date the pet should be screened again.
"""

import calendar
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from models.base import ensure_utc
from models.enums import (
    Species, EligibilityStatus, DisqualifyingFactorType, FactorSeverity
)
from models.screening import (
    SpeciesCriteria, PetProfile, QuestionnaireResponse,
    DogAnswers, CatAnswers, HorseAnswers,
    DisqualifyingFactor, ScreeningOutcome
)


SPECIES_CRITERIA: Dict[Species, SpeciesCriteria] = {
    Species.DOG: SpeciesCriteria(
        species=Species.DOG,
        display_name="Dog",
        min_age_years=1,
        max_age_years=8,
        min_weight_lbs=55,
        donation_interval_weeks=8,
        typical_volume_ml=450
    ),
    Species.CAT: SpeciesCriteria(
        species=Species.CAT,
        display_name="Cat",
        min_age_years=1,
        max_age_years=8,
        min_weight_lbs=10,
        donation_interval_weeks=8,
        typical_volume_ml=50
    ),
    Species.HORSE: SpeciesCriteria(
        species=Species.HORSE,
        display_name="Horse",
        min_age_years=2,
        max_age_years=20,
        min_weight_lbs=800,
        donation_interval_weeks=8,
        typical_volume_ml=6000
    ),
}

ELIGIBLE_REVIEW_MONTHS = 12
DEFAULT_REVIEW_MONTHS = 3

GUIDANCE_MESSAGES = {
    EligibilityStatus.ELIGIBLE: (
        "Great news! Your pet is eligible to donate blood. You can now proceed "
        "to sign the consent form and book an appointment."
    ),
    EligibilityStatus.PENDING: (
        "Your pet's eligibility requires veterinary review. Our team will "
        "contact you within 2-3 business days to discuss next steps."
    ),
    EligibilityStatus.INELIGIBLE: (
        "Unfortunately, your pet does not meet the eligibility criteria for "
        "blood donation at this time. Thank you for your interest in the program."
    ),
    EligibilityStatus.RE_VERIFICATION_REQUIRED: (
        "Your pet needs a veterinary re-check before the next donation. "
        "Please retake the questionnaire once the re-check is complete."
    ),
}


def add_months(value: datetime, months: int) -> datetime:
    """Add calendar months, clamping the day to the end of the target month."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def get_species_criteria(species: Species) -> SpeciesCriteria:
    """Physical requirements for a species."""
    return SPECIES_CRITERIA[Species(species)]


def meets_age_requirement(age_years: float, species: Species) -> bool:
    criteria = get_species_criteria(species)
    return criteria.min_age_years <= age_years <= criteria.max_age_years


def meets_weight_requirement(weight_lbs: float, species: Species) -> bool:
    return weight_lbs >= get_species_criteria(species).min_weight_lbs


def _factor(
    factor_type: DisqualifyingFactorType,
    description: str,
    severity: FactorSeverity,
    review_date: Optional[datetime] = None,
    requires_review: bool = False
) -> DisqualifyingFactor:
    return DisqualifyingFactor(
        type=factor_type,
        description=description,
        severity=severity,
        review_date=review_date,
        requires_review=requires_review
    )


def _check_physical(profile: PetProfile, now: datetime) -> List[DisqualifyingFactor]:
    """Age and weight checks shared by every species."""
    criteria = get_species_criteria(profile.species)
    factors = []

    if not meets_age_requirement(profile.age_years, profile.species):
        too_young = profile.age_years < criteria.min_age_years
        factors.append(_factor(
            DisqualifyingFactorType.AGE,
            f"{criteria.display_name} must be between "
            f"{criteria.min_age_years:g}-{criteria.max_age_years:g} years old "
            f"(current age: {profile.age_years:g})",
            FactorSeverity.TEMPORARY if too_young else FactorSeverity.PERMANENT,
            review_date=add_months(now, 6) if too_young else None
        ))

    if not meets_weight_requirement(profile.weight_lbs, profile.species):
        factors.append(_factor(
            DisqualifyingFactorType.WEIGHT,
            f"{criteria.display_name} must weigh at least {criteria.min_weight_lbs:g} lbs "
            f"(current weight: {profile.weight_lbs:g} lbs)",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 3)
        ))

    return factors


def _check_common(response: QuestionnaireResponse, now: datetime) -> List[DisqualifyingFactor]:
    factors = []

    if not response.good_physical_health:
        factors.append(_factor(
            DisqualifyingFactorType.HEALTH,
            "Pet is not in good physical health",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 3)
        ))

    if not response.no_chronic_conditions:
        factors.append(_factor(
            DisqualifyingFactorType.HEALTH,
            "Pet has chronic medical conditions",
            FactorSeverity.PERMANENT
        ))

    if not response.no_recent_illness:
        factors.append(_factor(
            DisqualifyingFactorType.HEALTH,
            "Pet has been ill within the past 30 days",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 1)
        ))

    if not response.friendly_temperament or not response.comfortable_with_restraint:
        factors.append(_factor(
            DisqualifyingFactorType.TEMPERAMENT,
            "Pet may not be comfortable with donation procedures",
            FactorSeverity.PERMANENT
        ))

    if not response.current_on_vaccinations:
        factors.append(_factor(
            DisqualifyingFactorType.VACCINATION,
            "Pet is not current on vaccinations",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 1)
        ))

    if not response.only_routine_medications:
        factors.append(_factor(
            DisqualifyingFactorType.MEDICATION,
            "Pet is on non-routine medications",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 3)
        ))

    if not response.never_received_transfusion:
        factors.append(_factor(
            DisqualifyingFactorType.TRANSFUSION_HISTORY,
            "Pet has previously received a blood transfusion",
            FactorSeverity.PERMANENT
        ))

    return factors


def _check_dog(answers: DogAnswers, now: datetime) -> List[DisqualifyingFactor]:
    factors = []

    if not answers.not_pregnant_or_nursing:
        factors.append(_factor(
            DisqualifyingFactorType.PREGNANCY,
            "Dog is currently pregnant or nursing",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 6)
        ))

    if not answers.heartworm_test_negative:
        factors.append(_factor(
            DisqualifyingFactorType.DISEASE,
            "Dog has tested positive for heartworm",
            FactorSeverity.PERMANENT
        ))

    if not answers.tick_borne_disease_negative:
        factors.append(_factor(
            DisqualifyingFactorType.DISEASE,
            "Dog has tested positive for tick-borne disease",
            FactorSeverity.PERMANENT
        ))

    if answers.diet_type == "RAW":
        factors.append(_factor(
            DisqualifyingFactorType.LIFESTYLE,
            "Raw food diet requires veterinary review",
            FactorSeverity.TEMPORARY,
            requires_review=True
        ))

    return factors


def _check_cat(answers: CatAnswers, now: datetime) -> List[DisqualifyingFactor]:
    factors = []

    if not answers.spayed_neutered:
        factors.append(_factor(
            DisqualifyingFactorType.OTHER,
            "Cat must be spayed or neutered",
            FactorSeverity.TEMPORARY,
            review_date=add_months(now, 2)
        ))

    if not answers.indoor_only:
        factors.append(_factor(
            DisqualifyingFactorType.LIFESTYLE,
            "Cat must be indoor-only",
            FactorSeverity.PERMANENT
        ))

    if not answers.felv_fiv_test_negative:
        factors.append(_factor(
            DisqualifyingFactorType.DISEASE,
            "Cat has tested positive for FeLV/FIV",
            FactorSeverity.PERMANENT
        ))

    if answers.handling_sensitivity == "HIGH":
        factors.append(_factor(
            DisqualifyingFactorType.TEMPERAMENT,
            "Cat has high handling sensitivity",
            FactorSeverity.PERMANENT
        ))

    return factors


def _check_horse(answers: HorseAnswers, now: datetime) -> List[DisqualifyingFactor]:
    factors = []

    if not answers.coggins_test_negative:
        factors.append(_factor(
            DisqualifyingFactorType.DISEASE,
            "Horse has tested positive for Coggins/EIA",
            FactorSeverity.PERMANENT
        ))

    if not answers.eia_test_negative:
        factors.append(_factor(
            DisqualifyingFactorType.DISEASE,
            "Horse has tested positive for Equine Infectious Anemia",
            FactorSeverity.PERMANENT
        ))

    if not answers.transport_available:
        factors.append(_factor(
            DisqualifyingFactorType.OTHER,
            "Transport to facility not available",
            FactorSeverity.TEMPORARY
        ))

    if answers.performance_medications:
        factors.append(_factor(
            DisqualifyingFactorType.MEDICATION,
            "Horse is on performance medications requiring review",
            FactorSeverity.TEMPORARY,
            requires_review=True
        ))

    return factors


def calculate_disqualifying_factors(
    profile: PetProfile,
    response: QuestionnaireResponse,
    now: datetime
) -> List[DisqualifyingFactor]:
    """
    Collect every screening finding for a pet.

    Args:
        profile: Pet's physical profile
        response: Owner questionnaire answers
        now: Screening timestamp used to schedule review dates

    Returns:
        List of disqualifying factors, empty when the pet passes
    """
    if response.species != profile.species:
        raise ValueError(
            f"Questionnaire for {response.species.value} submitted for a {profile.species.value}"
        )

    now = ensure_utc(now)
    factors = _check_common(response, now)
    factors.extend(_check_physical(profile, now))

    if profile.species == Species.DOG:
        factors.extend(_check_dog(response.dog or DogAnswers(), now))
    elif profile.species == Species.CAT:
        factors.extend(_check_cat(response.cat or CatAnswers(), now))
    elif profile.species == Species.HORSE:
        factors.extend(_check_horse(response.horse or HorseAnswers(), now))

    return factors


def determine_screening_status(factors: List[DisqualifyingFactor]) -> EligibilityStatus:
    """
    Determine overall screening status from the collected factors.

    Any permanent factor makes the pet ineligible. Otherwise a factor needing
    veterinary review makes the result pending, and remaining temporary
    factors make it temporarily ineligible.
    """
    if not factors:
        return EligibilityStatus.ELIGIBLE

    if any(f.severity == FactorSeverity.PERMANENT for f in factors):
        return EligibilityStatus.INELIGIBLE

    if any(f.requires_review or f.type == DisqualifyingFactorType.LIFESTYLE for f in factors):
        return EligibilityStatus.PENDING

    return EligibilityStatus.TEMPORARY_INELIGIBLE


def calculate_next_review_date(
    status: EligibilityStatus,
    factors: List[DisqualifyingFactor],
    now: datetime
) -> Optional[datetime]:
    """
    Calculate when the pet should be screened again.

    Args:
        status: Overall screening status
        factors: Factors behind the status
        now: Screening timestamp

    Returns:
        Next review date, or None for permanently ineligible pets
    """
    now = ensure_utc(now)

    if status == EligibilityStatus.ELIGIBLE:
        # Annual re-verification
        return add_months(now, ELIGIBLE_REVIEW_MONTHS)

    if status == EligibilityStatus.INELIGIBLE:
        return None

    review_dates = [f.review_date for f in factors if f.review_date is not None]
    if review_dates:
        return min(review_dates)

    return add_months(now, DEFAULT_REVIEW_MONTHS)


def needs_review_soon(
    next_review_date: Optional[datetime],
    now: datetime,
    within_days: int = 30
) -> bool:
    """Whether a screening review falls due within the given number of days."""
    if next_review_date is None:
        return False
    return ensure_utc(next_review_date) - ensure_utc(now) <= timedelta(days=within_days)


def guidance_message(status: EligibilityStatus, has_temporary_factors: bool = False) -> str:
    """Owner-facing guidance for a screening status."""
    if status == EligibilityStatus.TEMPORARY_INELIGIBLE:
        if has_temporary_factors:
            return (
                "Your pet is temporarily ineligible. Please address the issues "
                "listed below and retake the questionnaire when ready."
            )
        return "Your pet is temporarily ineligible. Please check back after the review date."

    return GUIDANCE_MESSAGES.get(
        EligibilityStatus(status),
        "Please complete the eligibility questionnaire to determine if your pet can donate blood."
    )


def screen_pet(
    profile: PetProfile,
    response: QuestionnaireResponse,
    now: datetime
) -> ScreeningOutcome:
    """
    Screen a pet and bundle the status, factors and next review date.

    Args:
        profile: Pet's physical profile
        response: Owner questionnaire answers
        now: Screening timestamp

    Returns:
        ScreeningOutcome for the pet
    """
    factors = calculate_disqualifying_factors(profile, response, now)
    status = determine_screening_status(factors)
    has_temporary = any(f.severity == FactorSeverity.TEMPORARY for f in factors)

    return ScreeningOutcome(
        pet_id=profile.pet_id,
        status=status,
        factors=factors,
        next_review_date=calculate_next_review_date(status, factors, now),
        guidance=guidance_message(status, has_temporary)
    )
