# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Core donor and consent models for the pet blood-donor program.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from .base import ValueObject, ensure_utc, generate_record_id
from .enums import Species, EligibilityStatus, ConsentRecordStatus


class DonorRecord(ValueObject):
    """Donation history and administrative flags for a registered pet."""
    
    pet_id: str = Field(..., min_length=1, description="Pet identifier")
    species: Species = Field(..., description="Donor species")
    last_donation_date: Optional[datetime] = Field(None, description="Most recent completed donation")
    temporary_hold_until: Optional[datetime] = Field(None, description="Administrative hold expiry")
    re_verification_required: bool = Field(default=False, description="Medical re-check pending")
    
    @field_validator('last_donation_date', 'temporary_hold_until')
    @classmethod
    def normalize_timestamps(cls, v):
        """Store timestamps as aware UTC datetimes."""
        return ensure_utc(v)


class ConsentAcknowledgements(ValueObject):
    """Owner answers captured on the consent form."""
    
    # Owner certification
    owner_certification: bool = False
    authorized_agent: bool = False
    
    # Authorization for procedures
    authorizes_blood_collection: bool = False
    authorizes_sedation: bool = False
    authorizes_pre_exam: bool = False
    authorizes_blood_screening: bool = False
    
    # Risk acknowledgment
    understands_risks: bool = False
    risks_explained: bool = False
    
    # Program commitment
    commits_to_program: bool = False
    understands_frequency_limits: bool = False
    agrees_to_notify_health_changes: bool = False
    acknowledges_cancellation_policy: bool = False
    
    allows_publicity: bool = False
    additional_notes: Optional[str] = Field(None, max_length=2000)


class ConsentRecord(ValueObject):
    """A signed consent form. Superseding consent replaces, never mutates, a record."""
    
    consent_id: str = Field(default_factory=lambda: generate_record_id("CNS"), description="Consent identifier")
    pet_id: str = Field(..., min_length=1, description="Pet identifier")
    owner_id: Optional[str] = Field(None, description="Signing owner identifier")
    form_version: str = Field(..., min_length=1, description="Consent form version signed")
    signed_at: datetime = Field(..., description="Signature capture timestamp")
    signature_artifact_ref: str = Field(..., description="Opaque reference to the signature image")
    status: ConsentRecordStatus = Field(default=ConsentRecordStatus.ACTIVE, description="Lifecycle status")
    acknowledgements: Optional[ConsentAcknowledgements] = Field(None, description="Form answers")
    revocation_reason: Optional[str] = Field(None, max_length=500, description="Reason given on revocation")
    
    @field_validator('signed_at')
    @classmethod
    def normalize_signed_at(cls, v):
        """Store the signature time as an aware UTC datetime."""
        return ensure_utc(v)
    
    @field_validator('form_version')
    @classmethod
    def validate_form_version(cls, v):
        """Reject blank form versions; the version is kept exactly as signed."""
        if not v.strip():
            raise ValueError('Form version cannot be empty')
        return v
    
    def is_active(self) -> bool:
        """Check if this record can be the pet's active consent."""
        return self.status in (ConsentRecordStatus.ACTIVE, ConsentRecordStatus.PENDING_RENEWAL)


class EligibilityResult(ValueObject):
    """Outcome of the eligibility rule engine."""
    
    status: EligibilityStatus = Field(..., description="Eligibility status")
    next_eligible_date: Optional[datetime] = Field(None, description="Earliest date the donor may donate")
