# SPDX-License-Identifier: Apache-2.0

"""
Consent validity domain logic.

This module contains pure functions deciding whether a signed consent form can
still be used for scheduling, when it needs renewal, and how consent records
move through their lifecycle without being mutated in place.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, List, Optional, Tuple

from errors import InvalidConfiguration
from models.base import ensure_utc
from models.entities import ConsentAcknowledgements, ConsentRecord
from models.enums import ConsentStatus, ConsentRecordStatus


REQUIRED_ACKNOWLEDGEMENTS = (
    'owner_certification',
    'authorizes_blood_collection',
    'authorizes_sedation',
    'authorizes_pre_exam',
    'authorizes_blood_screening',
    'understands_risks',
    'risks_explained',
    'commits_to_program',
    'understands_frequency_limits',
    'agrees_to_notify_health_changes',
    'acknowledges_cancellation_policy',
)


@dataclass
class ValidationResult:
    """Result of consent form validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None
    
    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []


@dataclass
class RenewalCheck:
    """Result of a consent renewal check."""
    needs_renewal: bool
    status: ConsentStatus
    days_until_expiration: Optional[int] = None
    expires_at: Optional[datetime] = None


def _require_validity_period(validity_period_days: int) -> None:
    if isinstance(validity_period_days, bool) or not isinstance(validity_period_days, int) or validity_period_days <= 0:
        raise InvalidConfiguration(
            f"Consent validity period must be a positive number of days, got {validity_period_days!r}",
            setting="consent_validity_days"
        )


def _require_version(required_version: str) -> None:
    if not required_version or not required_version.strip():
        raise InvalidConfiguration(
            "Required consent form version cannot be empty",
            setting="consent_form_version"
        )


def consent_expires_at(consent: ConsentRecord, validity_period_days: int) -> datetime:
    """Last instant at which the consent is still valid."""
    _require_validity_period(validity_period_days)
    return consent.signed_at + timedelta(days=validity_period_days)


def check(
    consent: Optional[ConsentRecord],
    now: datetime,
    required_version: str,
    validity_period_days: int
) -> ConsentStatus:
    """
    Decide whether a consent record can currently be used for scheduling.
    
    Args:
        consent: Active consent record, or None when the donor has none
        now: Evaluation timestamp
        required_version: Consent form version currently required
        validity_period_days: Days a signature remains valid
        
    Returns:
        ConsentStatus for the record
        
    Raises:
        InvalidConfiguration: If the validity period is not positive or the version is empty
    """
    _require_validity_period(validity_period_days)
    _require_version(required_version)
    
    if consent is None:
        return ConsentStatus.MISSING
    
    # A form with different legal content is never valid, however fresh
    if consent.form_version != required_version:
        return ConsentStatus.OUTDATED_VERSION
    
    # Inclusive boundary: valid through signed_at + validity period
    if ensure_utc(now) > consent_expires_at(consent, validity_period_days):
        return ConsentStatus.EXPIRED
    
    return ConsentStatus.VALID


def days_until_expiration(
    consent: ConsentRecord,
    now: datetime,
    validity_period_days: int
) -> int:
    """Whole days left before the consent expires; negative once expired."""
    remaining = consent_expires_at(consent, validity_period_days) - ensure_utc(now)
    return remaining.days


def check_renewal(
    consent: Optional[ConsentRecord],
    now: datetime,
    required_version: str,
    validity_period_days: int,
    renewal_window_days: int
) -> RenewalCheck:
    """
    Check whether the owner should be asked to re-sign.
    
    Missing, outdated and expired consents always need renewal. A valid consent
    needs renewal once it is within the renewal window of its expiry.
    
    Args:
        consent: Active consent record, or None
        now: Evaluation timestamp
        required_version: Consent form version currently required
        validity_period_days: Days a signature remains valid
        renewal_window_days: Days before expiry at which renewal is requested
        
    Returns:
        RenewalCheck describing the renewal state
    """
    if isinstance(renewal_window_days, bool) or not isinstance(renewal_window_days, int) or renewal_window_days < 0:
        raise InvalidConfiguration(
            f"Renewal window must be zero or more days, got {renewal_window_days!r}",
            setting="renewal_window_days"
        )
    
    status = check(consent, now, required_version, validity_period_days)
    if consent is None:
        return RenewalCheck(needs_renewal=True, status=status)
    
    days_left = days_until_expiration(consent, now, validity_period_days)
    needs_renewal = status != ConsentStatus.VALID or days_left <= renewal_window_days
    
    return RenewalCheck(
        needs_renewal=needs_renewal,
        status=status,
        days_until_expiration=days_left,
        expires_at=consent_expires_at(consent, validity_period_days)
    )


def validate_consent_acknowledgements(acknowledgements: ConsentAcknowledgements) -> ValidationResult:
    """
    Validate that every required acknowledgement on the form was accepted.
    
    Args:
        acknowledgements: Answers captured on the consent form
        
    Returns:
        ValidationResult with validation status and errors
    """
    errors = []
    warnings = []
    
    for field in REQUIRED_ACKNOWLEDGEMENTS:
        if not getattr(acknowledgements, field):
            errors.append(f"Required consent field missing: {field}")
    
    if acknowledgements.authorized_agent and not acknowledgements.additional_notes:
        warnings.append("Signed by an authorized agent without notes identifying the owner")
    
    return ValidationResult(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings
    )


def select_active_consent(
    history: Iterable[ConsentRecord],
    pet_id: str
) -> Optional[ConsentRecord]:
    """
    Pick the pet's active consent from its consent history.
    
    Args:
        history: Consent records, in any order
        pet_id: Pet to select for
        
    Returns:
        Most recently signed active record, or None
    """
    candidates = [
        record for record in history
        if record.pet_id == pet_id and record.is_active()
    ]
    if not candidates:
        return None
    
    return max(candidates, key=lambda record: record.signed_at)


def consent_history(history: Iterable[ConsentRecord], pet_id: str) -> List[ConsentRecord]:
    """All consent records for a pet, newest signature first."""
    return sorted(
        (record for record in history if record.pet_id == pet_id),
        key=lambda record: record.signed_at,
        reverse=True
    )


def supersede_consent(
    previous: ConsentRecord,
    replacement: ConsentRecord
) -> Tuple[ConsentRecord, ConsentRecord]:
    """
    Replace a pet's active consent with a newly signed one.
    
    Args:
        previous: Currently active consent
        replacement: Newly signed consent for the same pet
        
    Returns:
        Tuple of (retired copy of previous, replacement)
    """
    if previous.pet_id != replacement.pet_id:
        raise ValueError("Replacement consent belongs to a different pet")
    
    if previous.consent_id == replacement.consent_id:
        raise ValueError("A consent record cannot supersede itself")
    
    retired = previous
    if previous.status != ConsentRecordStatus.REVOKED:
        retired = previous.model_copy(update={"status": ConsentRecordStatus.EXPIRED})
    
    return retired, replacement


def mark_pending_renewal(consent: ConsentRecord) -> ConsentRecord:
    """Copy of an active consent flagged as awaiting renewal."""
    if consent.status != ConsentRecordStatus.ACTIVE:
        return consent
    return consent.model_copy(update={"status": ConsentRecordStatus.PENDING_RENEWAL})


def revoke_consent(consent: ConsentRecord, reason: Optional[str] = None) -> ConsentRecord:
    """
    Revoke a consent record.
    
    Args:
        consent: Consent to revoke
        reason: Optional reason recorded on the copy
        
    Returns:
        Revoked copy of the consent
    """
    update = {"status": ConsentRecordStatus.REVOKED}
    if reason and reason.strip():
        update["revocation_reason"] = reason.strip()[:500]
    return consent.model_copy(update=update)
