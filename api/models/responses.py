# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Response models for API endpoints with HAL support.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field
from datetime import date


class HalLink(BaseModel):
    """HAL link representation."""

    href: str = Field(..., description="Link URL")
    method: Optional[str] = Field(None, description="HTTP method")
    type: Optional[str] = Field(None, description="Content type")
    title: Optional[str] = Field(None, description="Link title")
    templated: Optional[bool] = Field(None, description="Whether URL is templated")


class DisasterResponse(BaseModel):
    """Disaster response model."""

    id: int = Field(..., description="Disaster ID")
    name: str = Field(..., description="Disaster name")
    is_active: bool = Field(..., description="Whether the disaster accepts volunteers")
    links: Dict[str, HalLink] = Field(default_factory=dict, alias="_links", description="HAL links")


class CommitmentResponse(BaseModel):
    """Commitment response model."""

    person_id: int = Field(..., description="Volunteer ID")
    disaster_id: int = Field(..., description="Disaster ID")
    start_date: date = Field(..., description="First day of the commitment")
    end_date: date = Field(..., description="Last day of the commitment")
    links: Dict[str, HalLink] = Field(default_factory=dict, alias="_links", description="HAL links")


class ErrorResponse(BaseModel):
    """RFC 7807 Problem Details error response."""

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Error detail message")
    instance: str = Field(..., description="Request instance URI")
    errors: Optional[List[Dict[str, Any]]] = Field(None, description="Validation errors")
    links: Dict[str, HalLink] = Field(default_factory=dict, alias="_links", description="HAL links")
