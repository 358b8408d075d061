# SPDX-License-Identifier: Apache-2.0

"""
Donor eligibility rule engine.

This module contains pure functions deciding whether a donor pet may schedule
a donation now, later, or not until a hold or re-verification is cleared.
"""

from datetime import datetime, timedelta
from typing import Mapping, Optional

from errors import InvalidConfiguration
from models.base import ensure_utc
from models.entities import DonorRecord, EligibilityResult
from models.enums import Species, EligibilityStatus


def interval_weeks_for(species: Species, intervals: Mapping[Species, int]) -> int:
    """
    Look up the donation interval for a species.
    
    Args:
        species: Donor species
        intervals: Minimum whole weeks between donations per species
        
    Returns:
        Interval in whole weeks
        
    Raises:
        InvalidConfiguration: If the species has no interval or it is not a positive integer
    """
    name = getattr(species, "value", species)
    if species not in intervals:
        raise InvalidConfiguration(
            f"No donation interval configured for species {name}",
            setting="donation_intervals"
        )
    
    weeks = intervals[species]
    # bool is an int subclass; True must not read as a one-week interval
    if isinstance(weeks, bool) or not isinstance(weeks, int) or weeks <= 0:
        raise InvalidConfiguration(
            f"Donation interval for species {name} must be a positive number of weeks, got {weeks!r}",
            setting="donation_intervals"
        )
    
    return weeks


def next_eligible_date(last_donation_date: datetime, interval_weeks: int) -> datetime:
    """Earliest date a donor may donate again after a completed donation."""
    return ensure_utc(last_donation_date) + timedelta(weeks=interval_weeks)


def evaluate(
    donor: DonorRecord,
    now: datetime,
    intervals: Mapping[Species, int]
) -> EligibilityResult:
    """
    Evaluate donor eligibility at a point in time.
    
    Rules are applied in strict precedence order and the first match wins:
    re-verification, active temporary hold, never donated, donation interval.
    
    Args:
        donor: Read-only donor snapshot
        now: Evaluation timestamp
        intervals: Minimum whole weeks between donations per species
        
    Returns:
        EligibilityResult with status and optional next eligible date
        
    Raises:
        InvalidConfiguration: If the donor's species has no usable interval
    """
    # Fail on bad configuration regardless of which rule would match
    weeks = interval_weeks_for(donor.species, intervals)
    now = ensure_utc(now)
    
    if donor.re_verification_required:
        return EligibilityResult(status=EligibilityStatus.RE_VERIFICATION_REQUIRED)
    
    if donor.temporary_hold_until is not None and donor.temporary_hold_until > now:
        return EligibilityResult(
            status=EligibilityStatus.TEMPORARY_INELIGIBLE,
            next_eligible_date=donor.temporary_hold_until
        )
    
    if donor.last_donation_date is None:
        return EligibilityResult(status=EligibilityStatus.ELIGIBLE)
    
    next_date = next_eligible_date(donor.last_donation_date, weeks)
    
    # Inclusive boundary: the exact next eligible instant counts as eligible
    if now >= next_date:
        return EligibilityResult(status=EligibilityStatus.ELIGIBLE)
    
    return EligibilityResult(
        status=EligibilityStatus.INELIGIBLE,
        next_eligible_date=next_date
    )


def days_until_eligible(result: EligibilityResult, now: datetime) -> Optional[int]:
    """
    Whole days remaining until the donor becomes eligible.
    
    Returns 0 for eligible donors and None when no date is known
    (re-verification or a pending review).
    """
    if result.status == EligibilityStatus.ELIGIBLE:
        return 0
    
    if result.next_eligible_date is None:
        return None
    
    remaining = result.next_eligible_date - ensure_utc(now)
    # Partial days round up so the owner is never told to come back too early
    days = remaining.days + (1 if remaining.seconds or remaining.microseconds else 0)
    return max(days, 0)
