# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the pet blood-donor program.
"""

from enum import Enum


class Species(str, Enum):
    """Species accepted by the donor program."""
    DOG = "DOG"
    CAT = "CAT"
    HORSE = "HORSE"


class EligibilityStatus(str, Enum):
    """Donor eligibility outcome."""
    ELIGIBLE = "eligible"
    PENDING = "pending"
    INELIGIBLE = "ineligible"
    TEMPORARY_INELIGIBLE = "temporaryIneligible"
    RE_VERIFICATION_REQUIRED = "reVerificationRequired"


class ConsentStatus(str, Enum):
    """Validity of the active consent form for scheduling."""
    VALID = "valid"
    EXPIRED = "expired"
    OUTDATED_VERSION = "outdatedVersion"
    MISSING = "missing"


class ConsentRecordStatus(str, Enum):
    """Lifecycle status stored on a consent record."""
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"
    PENDING_RENEWAL = "PENDING_RENEWAL"


class DisplayLabel(str, Enum):
    """Combined eligibility and consent label shown to the owner."""
    ELIGIBLE = "eligible"
    PENDING = "pending"
    INELIGIBLE = "ineligible"
    TEMPORARY_INELIGIBLE = "temporaryIneligible"
    RE_VERIFICATION_REQUIRED = "reVerificationRequired"
    CONSENT_REQUIRED = "consentRequired"
    CONSENT_RENEWAL_REQUIRED = "consentRenewalRequired"


class BadgeVariant(str, Enum):
    """Badge variants understood by the status badge renderer."""
    ELIGIBLE = "eligible"
    PENDING = "pending"
    INELIGIBLE = "ineligible"
    TEMPORARY_INELIGIBLE = "temporaryIneligible"
    RE_VERIFICATION_REQUIRED = "reVerificationRequired"


class DisqualifyingFactorType(str, Enum):
    """Categories of screening findings."""
    AGE = "AGE"
    WEIGHT = "WEIGHT"
    HEALTH = "HEALTH"
    MEDICATION = "MEDICATION"
    TRANSFUSION_HISTORY = "TRANSFUSION_HISTORY"
    DISEASE = "DISEASE"
    PREGNANCY = "PREGNANCY"
    TEMPERAMENT = "TEMPERAMENT"
    LIFESTYLE = "LIFESTYLE"
    VACCINATION = "VACCINATION"
    OTHER = "OTHER"


class FactorSeverity(str, Enum):
    """Whether a screening finding can be resolved over time."""
    PERMANENT = "PERMANENT"
    TEMPORARY = "TEMPORARY"


class DonationStatus(str, Enum):
    """Outcome of a donation visit."""
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
