# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Core entity models for the Crisis Check-in platform.
"""

from datetime import date
from typing import Optional
from pydantic import Field, field_validator, model_validator
from .base import DomainModel, to_date


def dates_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """
    Check whether two inclusive date ranges share at least one day.

    Args:
        start_a: First day of range A
        end_a: Last day of range A
        start_b: First day of range B
        end_b: Last day of range B

    Returns:
        True unless one range lies entirely before the other
    """
    return start_a <= end_b and end_a >= start_b


class Disaster(DomainModel):
    """Disaster entity volunteers can be committed to."""

    id: Optional[int] = Field(None, description="Disaster identifier, assigned by the data store")
    name: Optional[str] = Field(None, max_length=200, description="Disaster name")
    is_active: bool = Field(default=False, description="Whether the disaster is accepting volunteers")


class Commitment(DomainModel):
    """A volunteer's assignment to a disaster over an inclusive date range."""

    person_id: int = Field(..., description="Volunteer identifier")
    disaster_id: int = Field(..., description="Disaster identifier")
    start_date: date = Field(..., description="First day of the commitment")
    end_date: date = Field(..., description="Last day of the commitment")

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def validate_dates(cls, v):
        """Truncate datetimes to their calendar date."""
        return to_date(v)

    @model_validator(mode='after')
    def validate_date_range(self):
        """Validate that the range is not reversed."""
        if self.start_date > self.end_date:
            raise ValueError('Commitment start date must not be after its end date')
        return self

    def overlaps(self, start_date: date, end_date: date) -> bool:
        """Check whether this commitment shares at least one day with the range."""
        return dates_overlap(self.start_date, self.end_date, start_date, end_date)
