# SPDX-License-Identifier: Apache-2.0

"""
Donation history domain logic.

Pure functions over a pet's donation visits: which visit starts the
donation interval, summary statistics and donation milestones.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from domain.eligibility import interval_weeks_for, next_eligible_date
from models.base import ensure_utc
from models.donations import DonationRecord
from models.entities import DonorRecord
from models.enums import DonationStatus, Species


# Rough estimate of blood volume that helps one patient
ML_PER_LIFE_IMPACTED = 450

DONATION_MILESTONES = (1, 5, 10, 25, 50, 100)
MILESTONE_STEP_AFTER_LAST = 50


@dataclass
class DonationStats:
    """Summary of a set of donation visits."""
    total_donations: int
    total_volume_collected_ml: float
    lives_impacted: int
    last_donation_date: Optional[datetime] = None
    donations_by_year: Dict[str, int] = field(default_factory=dict)
    donations_by_status: Dict[DonationStatus, int] = field(default_factory=dict)


@dataclass
class Milestone:
    """A donation count reached on a given visit."""
    milestone: int
    achieved_date: datetime


@dataclass
class MilestoneProgress:
    """Milestones reached so far and the next one to reach."""
    achieved: List[Milestone]
    next_milestone: int
    remaining: int


def donation_history(
    records: Iterable[DonationRecord],
    pet_id: Optional[str] = None,
    status: Optional[DonationStatus] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None
) -> List[DonationRecord]:
    """
    Filter donation visits, newest first.

    Args:
        records: Donation visits, in any order
        pet_id: Only visits for this pet
        status: Only visits with this outcome
        start: Only visits on or after this time
        end: Only visits on or before this time

    Returns:
        Matching visits sorted by visit date, newest first
    """
    start = ensure_utc(start)
    end = ensure_utc(end)

    matches = [
        record for record in records
        if (pet_id is None or record.pet_id == pet_id)
        and (status is None or record.status == status)
        and (start is None or record.donation_date >= start)
        and (end is None or record.donation_date <= end)
    ]
    return sorted(matches, key=lambda record: record.donation_date, reverse=True)


def last_accepted_donation(records: Iterable[DonationRecord], pet_id: str) -> Optional[DonationRecord]:
    """Most recent visit for the pet where blood was collected."""
    accepted = donation_history(records, pet_id=pet_id, status=DonationStatus.ACCEPTED)
    return accepted[0] if accepted else None


def donor_with_history(donor: DonorRecord, records: Iterable[DonationRecord]) -> DonorRecord:
    """
    Return the donor snapshot with its last donation date taken from the visits.

    Only accepted visits count; a declined visit never restarts the interval.
    A recorded date later than every accepted visit is kept.
    """
    last = last_accepted_donation(records, donor.pet_id)
    if last is None:
        return donor

    if donor.last_donation_date is not None and donor.last_donation_date >= last.donation_date:
        return donor

    return donor.model_copy(update={"last_donation_date": last.donation_date})


def next_donation_date(
    records: Iterable[DonationRecord],
    pet_id: str,
    species: Species,
    intervals: Mapping[Species, int]
) -> Optional[datetime]:
    """
    Earliest date the pet may donate again according to its visits.

    Returns None when the pet has no accepted visit and may donate now.

    Raises:
        InvalidConfiguration: If the species has no usable interval
    """
    weeks = interval_weeks_for(species, intervals)
    last = last_accepted_donation(records, pet_id)
    if last is None:
        return None

    return next_eligible_date(last.donation_date, weeks)


def donation_stats(records: Iterable[DonationRecord]) -> DonationStats:
    """
    Summarize donation visits.

    Every visit counts toward the totals; volume comes from whatever was
    collected, so declined visits add nothing to it.
    """
    history = donation_history(records)

    by_status = {status: 0 for status in DonationStatus}
    by_year: Dict[str, int] = {}
    total_volume = 0

    for record in history:
        by_status[record.status] += 1
        year = str(record.donation_date.year)
        by_year[year] = by_year.get(year, 0) + 1
        total_volume += record.volume_collected_ml

    return DonationStats(
        total_donations=len(history),
        total_volume_collected_ml=total_volume,
        lives_impacted=int(total_volume // ML_PER_LIFE_IMPACTED),
        last_donation_date=history[0].donation_date if history else None,
        donations_by_year=by_year,
        donations_by_status=by_status
    )


def donation_milestones(records: Iterable[DonationRecord]) -> MilestoneProgress:
    """
    Milestones reached by a set of donation visits.

    A milestone is achieved on the visit that brings the count to it. Past
    the last fixed milestone, targets continue every 50 visits.
    """
    chronological = list(reversed(donation_history(records)))
    total = len(chronological)

    achieved = [
        Milestone(milestone=m, achieved_date=chronological[m - 1].donation_date)
        for m in DONATION_MILESTONES
        if total >= m
    ]

    upcoming = [m for m in DONATION_MILESTONES if m > total]
    if upcoming:
        next_milestone = upcoming[0]
    else:
        next_milestone = DONATION_MILESTONES[-1] + MILESTONE_STEP_AFTER_LAST
        while next_milestone <= total:
            next_milestone += MILESTONE_STEP_AFTER_LAST

    return MilestoneProgress(
        achieved=achieved,
        next_milestone=next_milestone,
        remaining=next_milestone - total
    )
