# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Donor Status Service

Runs the eligibility engine and the consent checker against one policy
snapshot and combines their results for the status badge.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Optional, Tuple
from opentelemetry import trace

from domain import consent as consent_rules
from domain import donations as donation_rules
from domain import eligibility as eligibility_rules
from domain.presentation import can_schedule, present
from errors import InvalidConfiguration, ValidationException
from models.base import ensure_utc, utc_now
from models.donations import DonationRecord
from models.entities import (
    ConsentAcknowledgements, ConsentRecord, DonorRecord, EligibilityResult
)
from models.enums import ConsentStatus
from models.policy import DonationPolicy
from models.responses import DonorStatusSummary
from services.badges import BadgeFormatter, create_badge_formatter

tracer = trace.get_tracer(__name__)
logger = logging.getLogger(__name__)


class DonorStatusService:
    """Service combining eligibility and consent decisions for donors."""

    def __init__(self, policy: DonationPolicy, badge_formatter: Optional[BadgeFormatter] = None):
        self.policy = policy
        self.badge_formatter = badge_formatter or create_badge_formatter()

    def evaluate_eligibility(self, donor: DonorRecord, now: Optional[datetime] = None) -> EligibilityResult:
        """Run the eligibility engine for one donor."""
        now = ensure_utc(now) if now is not None else utc_now()

        with tracer.start_as_current_span("donor_status.evaluate_eligibility") as span:
            span.set_attributes({
                "donor.pet_id": donor.pet_id,
                "donor.species": donor.species.value
            })

            try:
                result = eligibility_rules.evaluate(donor, now, self.policy.donation_intervals)
            except InvalidConfiguration as e:
                span.record_exception(e)
                logger.error(
                    "Eligibility evaluation failed: invalid configuration",
                    extra={
                        "error_type": e.error_type,
                        "setting": e.setting,
                        "pet_id": donor.pet_id,
                        "species": donor.species.value
                    }
                )
                raise

            span.set_attribute("eligibility.status", result.status.value)
            logger.debug(
                "Eligibility evaluated",
                extra={
                    "pet_id": donor.pet_id,
                    "status": result.status.value,
                    "next_eligible_date": result.next_eligible_date.isoformat() if result.next_eligible_date else None
                }
            )

            return result

    def check_consent(self, consent: Optional[ConsentRecord], now: Optional[datetime] = None) -> ConsentStatus:
        """Run the consent checker against the policy's required version."""
        now = ensure_utc(now) if now is not None else utc_now()

        with tracer.start_as_current_span("donor_status.check_consent") as span:
            span.set_attribute("consent.present", consent is not None)

            try:
                status = consent_rules.check(
                    consent,
                    now,
                    self.policy.consent_form_version,
                    self.policy.consent_validity_days
                )
            except InvalidConfiguration as e:
                span.record_exception(e)
                logger.error(
                    "Consent check failed: invalid configuration",
                    extra={
                        "error_type": e.error_type,
                        "setting": e.setting
                    }
                )
                raise

            span.set_attribute("consent.status", status.value)
            return status

    def check_renewal(self, consent: Optional[ConsentRecord], now: Optional[datetime] = None) -> consent_rules.RenewalCheck:
        """Check whether the owner should be asked to re-sign."""
        now = ensure_utc(now) if now is not None else utc_now()

        with tracer.start_as_current_span("donor_status.check_renewal") as span:
            renewal = consent_rules.check_renewal(
                consent,
                now,
                self.policy.consent_form_version,
                self.policy.consent_validity_days,
                self.policy.renewal_window_days
            )

            span.set_attributes({
                "consent.status": renewal.status.value,
                "consent.needs_renewal": renewal.needs_renewal
            })

            if renewal.needs_renewal:
                logger.info(
                    "Consent renewal required",
                    extra={
                        "consent_id": consent.consent_id if consent else None,
                        "status": renewal.status.value,
                        "days_until_expiration": renewal.days_until_expiration
                    }
                )

            return renewal

    def status_for(
        self,
        donor: DonorRecord,
        consent: Optional[ConsentRecord],
        now: Optional[datetime] = None
    ) -> DonorStatusSummary:
        """
        Build the combined status summary for a donor.

        Args:
            donor: Donor snapshot
            consent: Donor's active consent, or None
            now: Evaluation timestamp, defaults to the current time

        Returns:
            DonorStatusSummary with label and badge data

        Raises:
            InvalidConfiguration: If the policy cannot support the evaluation
        """
        now = ensure_utc(now) if now is not None else utc_now()

        with tracer.start_as_current_span("donor_status.status_for") as span:
            if consent is not None and consent.pet_id != donor.pet_id:
                raise ValueError("Consent record belongs to a different pet")

            eligibility = self.evaluate_eligibility(donor, now)
            consent_status = self.check_consent(consent, now)
            label = present(eligibility.status, consent_status)

            span.set_attributes({
                "donor.pet_id": donor.pet_id,
                "status.label": label.value
            })

            return DonorStatusSummary(
                pet_id=donor.pet_id,
                eligibility=eligibility,
                consent_status=consent_status,
                label=label,
                badge=self.badge_formatter.format(label),
                can_schedule=can_schedule(eligibility.status, consent_status),
                consent_expires_at=(
                    consent_rules.consent_expires_at(consent, self.policy.consent_validity_days)
                    if consent is not None else None
                ),
                evaluated_at=now
            )

    def status_from_history(
        self,
        donor: DonorRecord,
        history: Iterable[ConsentRecord],
        now: Optional[datetime] = None
    ) -> DonorStatusSummary:
        """Build the status summary using the active consent from a consent history."""
        active = consent_rules.select_active_consent(history, donor.pet_id)
        return self.status_for(donor, active, now)

    def status_with_donations(
        self,
        donor: DonorRecord,
        donations: Iterable[DonationRecord],
        consent: Optional[ConsentRecord],
        now: Optional[datetime] = None
    ) -> DonorStatusSummary:
        """
        Build the status summary with the last donation taken from donation visits.

        Declined visits do not restart the donation interval.
        """
        donations = list(donations)
        with tracer.start_as_current_span("donor_status.status_with_donations") as span:
            donor = donation_rules.donor_with_history(donor, donations)
            span.set_attributes({
                "donor.pet_id": donor.pet_id,
                "donations.count": len(donations)
            })

            return self.status_for(donor, consent, now)

    def accept_consent(
        self,
        pet_id: str,
        acknowledgements: ConsentAcknowledgements,
        signature_artifact_ref: str,
        history: Iterable[ConsentRecord] = (),
        owner_id: Optional[str] = None,
        signed_at: Optional[datetime] = None
    ) -> Tuple[ConsentRecord, List[ConsentRecord]]:
        """
        Accept a newly signed consent form at the policy's current version.

        Every previously active consent for the pet is retired by replacement,
        never mutated.

        Args:
            pet_id: Pet the consent is for
            acknowledgements: Answers captured on the form
            signature_artifact_ref: Opaque reference from the signature capture
            history: Existing consent records
            owner_id: Signing owner
            signed_at: Signature time, defaults to the current time

        Returns:
            Tuple of (new consent, updated history)

        Raises:
            ValidationException: If a required acknowledgement is missing
        """
        with tracer.start_as_current_span("donor_status.accept_consent") as span:
            span.set_attribute("consent.pet_id", pet_id)

            validation = consent_rules.validate_consent_acknowledgements(acknowledgements)
            if not validation.is_valid:
                logger.warning(
                    "Consent form rejected",
                    extra={
                        "pet_id": pet_id,
                        "validation_errors": validation.errors
                    }
                )
                raise ValidationException("Consent form is incomplete", validation.errors)

            if not signature_artifact_ref or not signature_artifact_ref.strip():
                raise ValidationException(
                    "Consent form is not signed",
                    ["Signature is required"]
                )

            history = list(history)
            new_consent = ConsentRecord(
                pet_id=pet_id,
                owner_id=owner_id,
                form_version=self.policy.consent_form_version,
                signed_at=signed_at or utc_now(),
                signature_artifact_ref=signature_artifact_ref,
                acknowledgements=acknowledgements
            )

            # Every active record for the pet is retired so only the new one stays active
            superseded = []
            updated = []
            for record in history:
                if record.pet_id == pet_id and record.is_active():
                    retired, _ = consent_rules.supersede_consent(record, new_consent)
                    superseded.append(record.consent_id)
                    updated.append(retired)
                else:
                    updated.append(record)
            updated.append(new_consent)

            logger.info(
                "Consent accepted",
                extra={
                    "pet_id": pet_id,
                    "consent_id": new_consent.consent_id,
                    "form_version": new_consent.form_version,
                    "superseded_consent_ids": superseded,
                    "warnings": validation.warnings
                }
            )

            return new_consent, updated
