# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from datetime import datetime, timezone

from models.entities import DonorRecord, ConsentRecord, ConsentAcknowledgements
from models.enums import Species
from models.policy import DonationPolicy, DEFAULT_DONATION_INTERVALS
from services.app_state import ManualClock

# Set test environment
os.environ['ENVIRONMENT'] = 'test'
os.environ['OTEL_ENABLED'] = 'false'


def utc(year, month, day, hour=0, minute=0, second=0):
    """Aware UTC datetime shorthand for tests."""
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def intervals():
    """Default donation intervals in weeks."""
    return dict(DEFAULT_DONATION_INTERVALS)


@pytest.fixture
def policy():
    """Default donation policy."""
    return DonationPolicy.default()


@pytest.fixture
def sample_donor_data():
    """Sample donor data for testing."""
    return {
        "pet_id": "PET-rex",
        "species": "DOG",
        "last_donation_date": utc(2024, 1, 1),
        "temporary_hold_until": None,
        "re_verification_required": False
    }


@pytest.fixture
def dog_donor(sample_donor_data):
    """Dog that last donated on 2024-01-01."""
    return DonorRecord(**sample_donor_data)


@pytest.fixture
def full_acknowledgements():
    """Consent form with every acknowledgement accepted."""
    return ConsentAcknowledgements(
        owner_certification=True,
        authorizes_blood_collection=True,
        authorizes_sedation=True,
        authorizes_pre_exam=True,
        authorizes_blood_screening=True,
        understands_risks=True,
        risks_explained=True,
        commits_to_program=True,
        understands_frequency_limits=True,
        agrees_to_notify_health_changes=True,
        acknowledges_cancellation_policy=True
    )


@pytest.fixture
def sample_consent_data():
    """Sample consent data for testing."""
    return {
        "consent_id": "CNS-rex-1",
        "pet_id": "PET-rex",
        "owner_id": "OWN-1",
        "form_version": "1.0",
        "signed_at": utc(2024, 1, 1),
        "signature_artifact_ref": "signatures/rex-2024-01-01.png"
    }


@pytest.fixture
def dog_consent(sample_consent_data):
    """Consent signed on 2024-01-01 at version 1.0."""
    return ConsentRecord(**sample_consent_data)


@pytest.fixture
def clock():
    """Manually advanced clock."""
    return ManualClock()
