# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for application wiring.
"""

import pytest
from datetime import datetime, timezone

from app import create_app
from errors import InvalidConfiguration
from models.entities import DonorRecord
from models.enums import DisplayLabel, Species
from observability import config as observability_config


class TestCreateApp:
    """Test application service wiring."""

    def test_create_app_with_defaults(self, clock):
        """Test the app wires a working donor status service."""
        donor_app = create_app({"ENVIRONMENT": "test", "OTEL_ENABLED": "false"}, clock=clock)
        donor = DonorRecord(pet_id="PET-1", species=Species.CAT)

        summary = donor_app.donor_status.status_for(donor, None, datetime(2024, 1, 1, tzinfo=timezone.utc))

        assert summary.label == DisplayLabel.CONSENT_REQUIRED
        assert donor_app.app_state.clock is clock

    def test_create_app_without_observability(self, clock):
        """Test observability setup can be skipped."""
        donor_app = create_app({"CONSENT_FORM_VERSION": "3.0"}, clock=clock, enable_observability=False)

        assert donor_app.donor_status.policy.consent_form_version == "3.0"

    def test_invalid_environment_raises(self):
        """Test configuration errors surface from app creation."""
        with pytest.raises(InvalidConfiguration):
            create_app({"CONSENT_VALIDITY_DAYS": "0"}, enable_observability=False)

    def test_observability_reads_injected_environment(self, clock, monkeypatch):
        """Test tracing settings come from the mapping passed to create_app."""
        installed = []
        monkeypatch.setenv("OTEL_ENABLED", "true")
        monkeypatch.setattr(observability_config.trace, "set_tracer_provider", installed.append)

        create_app({"ENVIRONMENT": "test", "OTEL_ENABLED": "false"}, clock=clock)

        assert installed == []
