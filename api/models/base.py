# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base value-object models with common configuration and timestamp handling.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional
from pydantic import BaseModel, ConfigDict


def generate_record_id(prefix: str) -> str:
    """Generate a new prefixed record identifier."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return an aware UTC datetime, treating naive values as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class ValueObject(BaseModel):
    """Immutable snapshot passed by value into the decision functions."""
    
    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Snapshots are never mutated in place
        frozen=True,
        # Reject unknown fields so typos in callers surface early
        extra='forbid'
    )
