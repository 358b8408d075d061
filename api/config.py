# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Donation policy configuration.

Reads the donation policy from environment variables. Defaults match the
program's published rules: 8 weeks between donations for every species and a
one-year consent form validity.
"""

import os
import logging
from typing import Mapping, Optional

from errors import InvalidConfiguration
from models.enums import Species
from models.policy import (
    DonationPolicy,
    DEFAULT_DONATION_INTERVALS,
    DEFAULT_CONSENT_FORM_VERSION,
    DEFAULT_CONSENT_VALIDITY_DAYS,
    DEFAULT_RENEWAL_WINDOW_DAYS
)

logger = logging.getLogger(__name__)

INTERVAL_VARIABLES = {
    Species.DOG: 'DONATION_INTERVAL_DOG_WEEKS',
    Species.CAT: 'DONATION_INTERVAL_CAT_WEEKS',
    Species.HORSE: 'DONATION_INTERVAL_HORSE_WEEKS',
}


def _read_int(environ: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == '':
        return default

    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}", setting=name)

    if value < minimum:
        raise InvalidConfiguration(f"{name} must be at least {minimum}, got {value}", setting=name)

    return value


def load_policy(environ: Optional[Mapping[str, str]] = None) -> DonationPolicy:
    """
    Build a donation policy snapshot from environment variables.

    Args:
        environ: Variable mapping to read, defaults to os.environ

    Returns:
        DonationPolicy with every value validated

    Raises:
        InvalidConfiguration: If a variable is not a usable value
    """
    if environ is None:
        environ = os.environ

    intervals = {
        species: _read_int(environ, variable, DEFAULT_DONATION_INTERVALS[species], minimum=1)
        for species, variable in INTERVAL_VARIABLES.items()
    }

    form_version = environ.get('CONSENT_FORM_VERSION', DEFAULT_CONSENT_FORM_VERSION).strip()
    if not form_version:
        raise InvalidConfiguration("CONSENT_FORM_VERSION cannot be empty", setting='CONSENT_FORM_VERSION')

    policy = DonationPolicy(
        donation_intervals=intervals,
        consent_form_version=form_version,
        consent_validity_days=_read_int(
            environ, 'CONSENT_VALIDITY_DAYS', DEFAULT_CONSENT_VALIDITY_DAYS, minimum=1
        ),
        renewal_window_days=_read_int(
            environ, 'CONSENT_RENEWAL_WINDOW_DAYS', DEFAULT_RENEWAL_WINDOW_DAYS, minimum=0
        )
    )

    logger.info(
        "Donation policy loaded",
        extra={
            "environment": environ.get('ENVIRONMENT', 'development'),
            "consent_form_version": policy.consent_form_version,
            "consent_validity_days": policy.consent_validity_days,
            "renewal_window_days": policy.renewal_window_days,
            "donation_intervals": {s.value: w for s, w in policy.donation_intervals.items()}
        }
    )

    return policy
