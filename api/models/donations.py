# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Donation history models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field, field_validator
from .base import ValueObject, ensure_utc, generate_record_id
from .enums import DonationStatus


class DonationRecord(ValueObject):
    """One donation visit for a pet."""
    
    donation_id: str = Field(default_factory=lambda: generate_record_id("DON"), description="Donation identifier")
    pet_id: str = Field(..., min_length=1, description="Donor pet identifier")
    donation_date: datetime = Field(..., description="Visit date")
    status: DonationStatus = Field(..., description="Whether blood was collected")
    volume_collected_ml: float = Field(default=0, ge=0, description="Blood volume collected in ml")
    facility_id: Optional[str] = Field(None, description="Collecting facility")
    
    @field_validator('donation_date')
    @classmethod
    def normalize_donation_date(cls, v):
        """Store the visit date as an aware UTC datetime."""
        return ensure_utc(v)
    
    def is_accepted(self) -> bool:
        """Check if blood was collected on this visit."""
        return self.status == DonationStatus.ACCEPTED
