# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the donor eligibility rule engine.
"""

import pytest
from datetime import datetime, timedelta, timezone

from domain.eligibility import evaluate, interval_weeks_for, next_eligible_date, days_until_eligible
from errors import InvalidConfiguration
from models.entities import DonorRecord, EligibilityResult
from models.enums import Species, EligibilityStatus


def utc(year, month, day, hour=0):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)


class TestEvaluatePrecedence:
    """Test strict rule precedence in evaluate."""

    @pytest.mark.parametrize("species", list(Species))
    def test_never_donated_is_eligible(self, species, intervals):
        """Test donors without a donation history are eligible for every species."""
        donor = DonorRecord(pet_id="PET-1", species=species)

        result = evaluate(donor, utc(2024, 3, 1), intervals)

        assert result.status == EligibilityStatus.ELIGIBLE
        assert result.next_eligible_date is None

    def test_re_verification_overrides_hold_and_interval(self, intervals):
        """Test re-verification wins over an active hold and an unelapsed interval."""
        donor = DonorRecord(
            pet_id="PET-1",
            species=Species.DOG,
            last_donation_date=utc(2024, 2, 1),
            temporary_hold_until=utc(2024, 6, 1),
            re_verification_required=True
        )

        result = evaluate(donor, utc(2024, 2, 10), intervals)

        assert result.status == EligibilityStatus.RE_VERIFICATION_REQUIRED
        assert result.next_eligible_date is None

    def test_re_verification_overrides_eligible_donor(self, intervals):
        """Test re-verification applies even when the donor never donated."""
        donor = DonorRecord(pet_id="PET-1", species=Species.CAT, re_verification_required=True)

        result = evaluate(donor, utc(2024, 2, 10), intervals)

        assert result.status == EligibilityStatus.RE_VERIFICATION_REQUIRED

    def test_future_hold_wins_over_elapsed_interval(self, intervals):
        """Test a future hold yields temporaryIneligible with the exact hold date."""
        hold = utc(2024, 9, 15, 12)
        donor = DonorRecord(
            pet_id="PET-1",
            species=Species.DOG,
            last_donation_date=utc(2023, 1, 1),
            temporary_hold_until=hold
        )

        result = evaluate(donor, utc(2024, 5, 1), intervals)

        assert result.status == EligibilityStatus.TEMPORARY_INELIGIBLE
        assert result.next_eligible_date == hold

    def test_hold_for_never_donated_donor(self, intervals):
        """Test a hold applies to donors without a donation history."""
        hold = utc(2024, 4, 1)
        donor = DonorRecord(pet_id="PET-1", species=Species.HORSE, temporary_hold_until=hold)

        result = evaluate(donor, utc(2024, 3, 1), intervals)

        assert result.status == EligibilityStatus.TEMPORARY_INELIGIBLE
        assert result.next_eligible_date == hold

    def test_expired_hold_is_ignored(self, intervals):
        """Test a hold in the past falls through to interval rules."""
        donor = DonorRecord(
            pet_id="PET-1",
            species=Species.DOG,
            temporary_hold_until=utc(2024, 1, 1)
        )

        result = evaluate(donor, utc(2024, 3, 1), intervals)

        assert result.status == EligibilityStatus.ELIGIBLE

    def test_hold_ending_exactly_now_is_ignored(self, intervals):
        """Test a hold is only active while strictly in the future."""
        now = utc(2024, 3, 1)
        donor = DonorRecord(pet_id="PET-1", species=Species.DOG, temporary_hold_until=now)

        result = evaluate(donor, now, intervals)

        assert result.status == EligibilityStatus.ELIGIBLE


class TestEvaluateInterval:
    """Test donation interval boundaries."""

    def test_dog_eligible_after_eight_weeks(self, dog_donor, intervals):
        """Test dog donated 2024-01-01 is eligible on 2024-02-26."""
        result = evaluate(dog_donor, utc(2024, 2, 26), intervals)

        assert result.status == EligibilityStatus.ELIGIBLE

    def test_dog_ineligible_before_eight_weeks(self, dog_donor, intervals):
        """Test dog donated 2024-01-01 is ineligible on 2024-02-20."""
        result = evaluate(dog_donor, utc(2024, 2, 20), intervals)

        assert result.status == EligibilityStatus.INELIGIBLE
        assert result.next_eligible_date == utc(2024, 2, 26)

    @pytest.mark.parametrize("species,weeks", [
        (Species.DOG, 8),
        (Species.CAT, 6),
        (Species.HORSE, 12),
    ])
    def test_exact_boundary_is_eligible(self, species, weeks):
        """Test now == last donation + interval counts as eligible."""
        last = utc(2024, 1, 10, 9)
        donor = DonorRecord(pet_id="PET-1", species=species, last_donation_date=last)
        intervals = {Species.DOG: 8, Species.CAT: 6, Species.HORSE: 12}

        result = evaluate(donor, last + timedelta(weeks=weeks), intervals)

        assert result.status == EligibilityStatus.ELIGIBLE

    @pytest.mark.parametrize("species,weeks", [
        (Species.DOG, 8),
        (Species.CAT, 6),
        (Species.HORSE, 12),
    ])
    def test_one_day_before_boundary_is_ineligible(self, species, weeks):
        """Test the day before the boundary is ineligible with the boundary date."""
        last = utc(2024, 1, 10, 9)
        donor = DonorRecord(pet_id="PET-1", species=species, last_donation_date=last)
        intervals = {Species.DOG: 8, Species.CAT: 6, Species.HORSE: 12}

        result = evaluate(donor, last + timedelta(weeks=weeks) - timedelta(days=1), intervals)

        assert result.status == EligibilityStatus.INELIGIBLE
        assert result.next_eligible_date == last + timedelta(weeks=weeks)

    def test_naive_now_is_treated_as_utc(self, dog_donor, intervals):
        """Test naive timestamps compare against aware donor dates."""
        result = evaluate(dog_donor, datetime(2024, 2, 26), intervals)

        assert result.status == EligibilityStatus.ELIGIBLE

    def test_evaluate_does_not_mutate_donor(self, dog_donor, intervals):
        """Test evaluation leaves the donor snapshot unchanged."""
        before = dog_donor.model_dump()

        evaluate(dog_donor, utc(2024, 2, 20), intervals)
        evaluate(dog_donor, utc(2024, 2, 20), intervals)

        assert dog_donor.model_dump() == before


class TestEvaluateConfiguration:
    """Test configuration errors."""

    def test_unknown_species_interval_raises(self):
        """Test a species missing from the interval table is a configuration error."""
        donor = DonorRecord(pet_id="PET-1", species=Species.HORSE)

        with pytest.raises(InvalidConfiguration) as exc_info:
            evaluate(donor, utc(2024, 3, 1), {Species.DOG: 8, Species.CAT: 8})

        assert "HORSE" in str(exc_info.value)
        assert exc_info.value.error_type == "invalid-configuration"
        assert exc_info.value.setting == "donation_intervals"

    def test_missing_interval_raises_even_with_re_verification(self):
        """Test configuration errors are never masked by earlier rules."""
        donor = DonorRecord(pet_id="PET-1", species=Species.CAT, re_verification_required=True)

        with pytest.raises(InvalidConfiguration):
            evaluate(donor, utc(2024, 3, 1), {Species.DOG: 8})

    @pytest.mark.parametrize("weeks", [0, -2, 1.5, True, "8"])
    def test_invalid_interval_value_raises(self, weeks):
        """Test non-positive or non-integer intervals are rejected."""
        with pytest.raises(InvalidConfiguration):
            interval_weeks_for(Species.DOG, {Species.DOG: weeks})

    def test_interval_lookup_accepts_string_keys(self):
        """Test interval tables keyed by species name still resolve."""
        assert interval_weeks_for(Species.DOG, {"DOG": 10}) == 10


class TestEligibilityHelpers:
    """Test eligibility helper functions."""

    def test_next_eligible_date(self):
        """Test next eligible date adds whole weeks."""
        assert next_eligible_date(utc(2024, 1, 1), 8) == utc(2024, 2, 26)

    def test_days_until_eligible_rounds_up(self):
        """Test partial days round up."""
        result = EligibilityResult(
            status=EligibilityStatus.INELIGIBLE,
            next_eligible_date=utc(2024, 2, 26)
        )

        assert days_until_eligible(result, utc(2024, 2, 20)) == 6
        assert days_until_eligible(result, utc(2024, 2, 20, 12)) == 6

    def test_days_until_eligible_for_eligible_donor(self):
        """Test eligible donors have zero days remaining."""
        result = EligibilityResult(status=EligibilityStatus.ELIGIBLE)

        assert days_until_eligible(result, utc(2024, 2, 20)) == 0

    def test_days_until_eligible_unknown(self):
        """Test re-verification has no known date."""
        result = EligibilityResult(status=EligibilityStatus.RE_VERIFICATION_REQUIRED)

        assert days_until_eligible(result, utc(2024, 2, 20)) is None
