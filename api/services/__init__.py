# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - Orchestration, formatting and application state.
"""

from .app_state import AppState, AppStateStore, ManualClock, MonotonicClock
from .badges import BadgeFormatter, create_badge_formatter
from .donor_status import DonorStatusService

__all__ = [
    "AppState",
    "AppStateStore",
    "ManualClock",
    "MonotonicClock",
    "BadgeFormatter",
    "create_badge_formatter",
    "DonorStatusService"
]
