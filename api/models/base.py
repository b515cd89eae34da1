# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Base model shared by all domain records.
"""

from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


def to_date(value: Any) -> Optional[date]:
    """Normalise a datetime (or date) to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


class DomainModel(BaseModel):
    """Base record with common configuration for all domain objects."""

    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Validate assignment
        validate_assignment=True
    )
