# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic schemas and data models for the Crisis Check-in platform.
"""

# Base models
from .base import DomainModel, to_date

# Core entities
from .entities import Disaster, Commitment

# Request models
from .requests import (
    DisasterPath,
    VolunteerPath,
    CreateDisasterRequest,
    AssignVolunteerRequest
)

# Response models
from .responses import (
    HalLink,
    DisasterResponse,
    CommitmentResponse,
    ErrorResponse
)

__all__ = [
    # Base
    "DomainModel",
    "to_date",

    # Entities
    "Disaster",
    "Commitment",

    # Requests
    "DisasterPath",
    "VolunteerPath",
    "CreateDisasterRequest",
    "AssignVolunteerRequest",

    # Responses
    "HalLink",
    "DisasterResponse",
    "CommitmentResponse",
    "ErrorResponse",
]
