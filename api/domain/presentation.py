# SPDX-License-Identifier: Apache-2.0

"""
Status presentation mapping.

Combines the eligibility and consent axes into the single label shown on the
donor's status badge. Consent blocks scheduling independently of eligibility,
so only a valid consent lets the eligibility label through.
"""

from typing import Dict, Tuple

from models.enums import EligibilityStatus, ConsentStatus, DisplayLabel


E = EligibilityStatus
C = ConsentStatus
L = DisplayLabel

DECISION_TABLE: Dict[Tuple[EligibilityStatus, ConsentStatus], DisplayLabel] = {
    (E.ELIGIBLE, C.VALID): L.ELIGIBLE,
    (E.ELIGIBLE, C.MISSING): L.CONSENT_REQUIRED,
    (E.ELIGIBLE, C.EXPIRED): L.CONSENT_RENEWAL_REQUIRED,
    (E.ELIGIBLE, C.OUTDATED_VERSION): L.CONSENT_RENEWAL_REQUIRED,
    
    (E.PENDING, C.VALID): L.PENDING,
    (E.PENDING, C.MISSING): L.CONSENT_REQUIRED,
    (E.PENDING, C.EXPIRED): L.CONSENT_RENEWAL_REQUIRED,
    (E.PENDING, C.OUTDATED_VERSION): L.CONSENT_RENEWAL_REQUIRED,
    
    (E.INELIGIBLE, C.VALID): L.INELIGIBLE,
    (E.INELIGIBLE, C.MISSING): L.CONSENT_REQUIRED,
    (E.INELIGIBLE, C.EXPIRED): L.CONSENT_RENEWAL_REQUIRED,
    (E.INELIGIBLE, C.OUTDATED_VERSION): L.CONSENT_RENEWAL_REQUIRED,
    
    (E.TEMPORARY_INELIGIBLE, C.VALID): L.TEMPORARY_INELIGIBLE,
    (E.TEMPORARY_INELIGIBLE, C.MISSING): L.CONSENT_REQUIRED,
    (E.TEMPORARY_INELIGIBLE, C.EXPIRED): L.CONSENT_RENEWAL_REQUIRED,
    (E.TEMPORARY_INELIGIBLE, C.OUTDATED_VERSION): L.CONSENT_RENEWAL_REQUIRED,
    
    (E.RE_VERIFICATION_REQUIRED, C.VALID): L.RE_VERIFICATION_REQUIRED,
    (E.RE_VERIFICATION_REQUIRED, C.MISSING): L.CONSENT_REQUIRED,
    (E.RE_VERIFICATION_REQUIRED, C.EXPIRED): L.CONSENT_RENEWAL_REQUIRED,
    (E.RE_VERIFICATION_REQUIRED, C.OUTDATED_VERSION): L.CONSENT_RENEWAL_REQUIRED,
}


def present(eligibility: EligibilityStatus, consent: ConsentStatus) -> DisplayLabel:
    """
    Map an eligibility status and consent status to a display label.
    
    Args:
        eligibility: Eligibility engine status
        consent: Consent checker status
        
    Returns:
        DisplayLabel from the decision table
    """
    return DECISION_TABLE[(EligibilityStatus(eligibility), ConsentStatus(consent))]


def can_schedule(eligibility: EligibilityStatus, consent: ConsentStatus) -> bool:
    """Whether an appointment may be booked now."""
    return present(eligibility, consent) == DisplayLabel.ELIGIBLE
