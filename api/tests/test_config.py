# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for donation policy configuration loading.
"""

import pytest

from config import load_policy
from errors import InvalidConfiguration
from models.enums import Species
from models.policy import DonationPolicy


class TestLoadPolicy:
    """Test policy loading from environment mappings."""

    def test_defaults(self):
        """Test an empty environment yields the built-in policy."""
        policy = load_policy({})

        assert policy == DonationPolicy.default()
        assert policy.donation_intervals == {Species.DOG: 8, Species.CAT: 8, Species.HORSE: 8}
        assert policy.consent_form_version == "1.0"
        assert policy.consent_validity_days == 365
        assert policy.renewal_window_days == 30

    def test_overrides(self):
        """Test environment values override defaults."""
        policy = load_policy({
            "DONATION_INTERVAL_HORSE_WEEKS": "12",
            "CONSENT_FORM_VERSION": " 2.1 ",
            "CONSENT_VALIDITY_DAYS": "180",
            "CONSENT_RENEWAL_WINDOW_DAYS": "0"
        })

        assert policy.donation_intervals[Species.HORSE] == 12
        assert policy.donation_intervals[Species.DOG] == 8
        assert policy.consent_form_version == "2.1"
        assert policy.consent_validity_days == 180
        assert policy.renewal_window_days == 0

    def test_blank_value_uses_default(self):
        """Test blank variables fall back to defaults."""
        assert load_policy({"CONSENT_VALIDITY_DAYS": "  "}).consent_validity_days == 365

    @pytest.mark.parametrize("name,value", [
        ("DONATION_INTERVAL_DOG_WEEKS", "0"),
        ("DONATION_INTERVAL_CAT_WEEKS", "eight"),
        ("CONSENT_VALIDITY_DAYS", "-5"),
        ("CONSENT_RENEWAL_WINDOW_DAYS", "-1"),
    ])
    def test_invalid_values_raise(self, name, value):
        """Test invalid variables raise a configuration error naming them."""
        with pytest.raises(InvalidConfiguration) as exc_info:
            load_policy({name: value})

        assert exc_info.value.setting == name
        assert name in str(exc_info.value)

    def test_empty_form_version_raises(self):
        """Test the consent form version cannot be blank."""
        with pytest.raises(InvalidConfiguration):
            load_policy({"CONSENT_FORM_VERSION": "   "})
