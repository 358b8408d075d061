# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic value objects for the pet blood-donor program.
"""

# Base models
from .base import ValueObject, ensure_utc, utc_now

# Enumerations
from .enums import (
    Species,
    EligibilityStatus,
    ConsentStatus,
    ConsentRecordStatus,
    DisplayLabel,
    BadgeVariant,
    DisqualifyingFactorType,
    FactorSeverity,
    DonationStatus
)

# Core entities
from .entities import (
    DonorRecord,
    ConsentAcknowledgements,
    ConsentRecord,
    EligibilityResult
)

# Donation history
from .donations import DonationRecord

# Policy
from .policy import DonationPolicy, DEFAULT_DONATION_INTERVALS

# Screening
from .screening import (
    SpeciesCriteria,
    PetProfile,
    DogAnswers,
    CatAnswers,
    HorseAnswers,
    QuestionnaireResponse,
    DisqualifyingFactor,
    ScreeningOutcome
)

# Response models
from .responses import BadgeStyle, StatusBadge, DonorStatusSummary

__all__ = [
    # Base models
    "ValueObject",
    "ensure_utc",
    "utc_now",
    
    # Enumerations
    "Species",
    "EligibilityStatus",
    "ConsentStatus",
    "ConsentRecordStatus",
    "DisplayLabel",
    "BadgeVariant",
    "DisqualifyingFactorType",
    "FactorSeverity",
    "DonationStatus",
    
    # Core entities
    "DonorRecord",
    "ConsentAcknowledgements",
    "ConsentRecord",
    "EligibilityResult",
    
    # Donation history
    "DonationRecord",
    
    # Policy
    "DonationPolicy",
    "DEFAULT_DONATION_INTERVALS",
    
    # Screening
    "SpeciesCriteria",
    "PetProfile",
    "DogAnswers",
    "CatAnswers",
    "HorseAnswers",
    "QuestionnaireResponse",
    "DisqualifyingFactor",
    "ScreeningOutcome",
    
    # Response models
    "BadgeStyle",
    "StatusBadge",
    "DonorStatusSummary"
]
