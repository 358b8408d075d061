# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Screening questionnaire models used by the pre-donation health screen.
"""

from datetime import datetime
from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from .base import ValueObject, ensure_utc
from .enums import Species, EligibilityStatus, DisqualifyingFactorType, FactorSeverity


class SpeciesCriteria(ValueObject):
    """Physical requirements and donation facts for one species."""
    
    species: Species
    display_name: str
    min_age_years: float = Field(..., ge=0)
    max_age_years: float = Field(..., gt=0)
    min_weight_lbs: float = Field(..., gt=0)
    donation_interval_weeks: int = Field(..., gt=0)
    typical_volume_ml: int = Field(..., gt=0)


class PetProfile(ValueObject):
    """Physical facts about the pet at screening time."""
    
    pet_id: str = Field(..., min_length=1)
    species: Species
    age_years: float = Field(..., ge=0, description="Age in years")
    weight_lbs: float = Field(..., gt=0, description="Current weight in pounds")


class DogAnswers(ValueObject):
    """Dog-specific screening answers."""
    
    not_pregnant_or_nursing: bool = True
    heartworm_test_negative: bool = True
    tick_borne_disease_negative: bool = True
    diet_type: str = Field(default="COMMERCIAL", pattern=r'^(COMMERCIAL|RAW|HOME_COOKED|MIXED)$')


class CatAnswers(ValueObject):
    """Cat-specific screening answers."""
    
    spayed_neutered: bool = True
    indoor_only: bool = True
    felv_fiv_test_negative: bool = True
    handling_sensitivity: str = Field(default="LOW", pattern=r'^(LOW|MODERATE|HIGH)$')


class HorseAnswers(ValueObject):
    """Horse-specific screening answers."""
    
    coggins_test_negative: bool = True
    eia_test_negative: bool = True
    transport_available: bool = True
    performance_medications: List[str] = Field(default_factory=list)


class QuestionnaireResponse(ValueObject):
    """Owner answers to the screening questionnaire."""
    
    species: Species
    good_physical_health: bool = True
    no_chronic_conditions: bool = True
    no_recent_illness: bool = True
    friendly_temperament: bool = True
    comfortable_with_restraint: bool = True
    current_on_vaccinations: bool = True
    only_routine_medications: bool = True
    medications: List[str] = Field(default_factory=list)
    never_received_transfusion: bool = True
    recent_travel_history: str = ""
    dog: Optional[DogAnswers] = None
    cat: Optional[CatAnswers] = None
    horse: Optional[HorseAnswers] = None
    
    @model_validator(mode='after')
    def validate_species_answers(self):
        """Only the section matching the species may be filled in."""
        sections = {Species.DOG: self.dog, Species.CAT: self.cat, Species.HORSE: self.horse}
        for species, answers in sections.items():
            if answers is not None and species != self.species:
                raise ValueError(f'{species.value} answers supplied for a {self.species.value} questionnaire')
        return self


class DisqualifyingFactor(ValueObject):
    """A single screening finding that blocks donation."""
    
    type: DisqualifyingFactorType
    description: str
    severity: FactorSeverity
    review_date: Optional[datetime] = None
    requires_review: bool = Field(default=False, description="Needs veterinary review before a decision")
    
    @field_validator('review_date')
    @classmethod
    def normalize_review_date(cls, v):
        """Store the review date as an aware UTC datetime."""
        return ensure_utc(v)


class ScreeningOutcome(ValueObject):
    """Result of screening a pet against its species criteria."""
    
    pet_id: str
    status: EligibilityStatus
    factors: List[DisqualifyingFactor] = Field(default_factory=list)
    next_review_date: Optional[datetime] = None
    guidance: str = ""
    
    @property
    def has_temporary_factors(self) -> bool:
        return any(f.severity == FactorSeverity.TEMPORARY for f in self.factors)
