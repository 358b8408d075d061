# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Outbound models consumed by presentation collaborators.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .entities import EligibilityResult
from .enums import BadgeVariant, ConsentStatus, DisplayLabel


class BadgeStyle(BaseModel):
    """Background and text colour pair for a badge variant."""
    
    model_config = ConfigDict(frozen=True)
    
    background: str = Field(..., pattern=r'^#[0-9A-Fa-f]{6}$', description="Background colour")
    text: str = Field(..., pattern=r'^#[0-9A-Fa-f]{6}$', description="Text colour")


class StatusBadge(BaseModel):
    """Everything a status badge renderer needs for one label."""
    
    model_config = ConfigDict(frozen=True)
    
    label: DisplayLabel = Field(..., description="Combined display label")
    variant: BadgeVariant = Field(..., description="Badge variant")
    text: str = Field(..., description="Human-readable badge text")
    style: BadgeStyle = Field(..., description="Colour pair")


class DonorStatusSummary(BaseModel):
    """Combined eligibility and consent view for one donor."""
    
    model_config = ConfigDict(frozen=True)
    
    pet_id: str = Field(..., description="Pet identifier")
    eligibility: EligibilityResult = Field(..., description="Eligibility engine result")
    consent_status: ConsentStatus = Field(..., description="Consent checker result")
    label: DisplayLabel = Field(..., description="Combined display label")
    badge: StatusBadge = Field(..., description="Badge rendering data")
    can_schedule: bool = Field(..., description="Whether an appointment may be booked now")
    consent_expires_at: Optional[datetime] = Field(None, description="Expiry of the active consent")
    evaluated_at: datetime = Field(..., description="Evaluation timestamp")
