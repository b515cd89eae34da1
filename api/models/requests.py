# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Request models for API endpoints.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class DisasterPath(BaseModel):
    """Path parameters addressing a single disaster."""

    disaster_id: int = Field(..., description="Disaster identifier")


class VolunteerPath(BaseModel):
    """Path parameters addressing a single volunteer."""

    person_id: int = Field(..., description="Volunteer identifier")


class CreateDisasterRequest(BaseModel):
    """Request model for registering a disaster."""

    # Emptiness is checked by the disaster service
    name: Optional[str] = Field(None, max_length=200, description="Disaster name")
    is_active: bool = Field(default=True, description="Whether the disaster accepts volunteers")


class AssignVolunteerRequest(BaseModel):
    """Request model for committing a volunteer to a disaster."""

    person_id: int = Field(..., description="Volunteer identifier")
    start_date: date = Field(..., description="First day of the commitment")
    end_date: date = Field(..., description="Last day of the commitment")
