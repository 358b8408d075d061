# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Donation policy snapshot shared by the eligibility and consent checks.
"""

from typing import Dict
from pydantic import Field, StrictInt
from .base import ValueObject
from .enums import Species

DEFAULT_DONATION_INTERVALS: Dict[Species, int] = {
    Species.DOG: 8,
    Species.CAT: 8,
    Species.HORSE: 8,
}
DEFAULT_CONSENT_FORM_VERSION = "1.0"
DEFAULT_CONSENT_VALIDITY_DAYS = 365
DEFAULT_RENEWAL_WINDOW_DAYS = 30


class DonationPolicy(ValueObject):
    """
    Configuration values read by one evaluation.
    
    Callers build one policy and reuse it for the whole evaluation so that
    concurrent evaluations never observe a change half way through.
    Numeric values must be real integers; booleans and numeric strings are
    rejected. Range checks live in the domain functions, which raise
    InvalidConfiguration rather than a pydantic error.
    """
    
    donation_intervals: Dict[Species, StrictInt] = Field(
        default_factory=lambda: dict(DEFAULT_DONATION_INTERVALS),
        description="Minimum whole weeks between donations per species"
    )
    consent_form_version: str = Field(default=DEFAULT_CONSENT_FORM_VERSION, description="Required consent form version")
    consent_validity_days: StrictInt = Field(default=DEFAULT_CONSENT_VALIDITY_DAYS, description="Days a signature stays valid")
    renewal_window_days: StrictInt = Field(default=DEFAULT_RENEWAL_WINDOW_DAYS, description="Days before expiry to prompt renewal")
    
    @classmethod
    def default(cls) -> "DonationPolicy":
        """Policy with the program's built-in values."""
        return cls()
