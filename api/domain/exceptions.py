# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Application exceptions raised by the domain and data layers.

Each exception carries the HTTP status code and problem type the error
handler middleware renders it with.
"""

from datetime import date
from typing import Optional

from models.entities import Commitment


class CustomException(Exception):
    """Base class for custom application exceptions."""

    def __init__(self, message: str, status_code: int = 500, error_type: str = "application-error"):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type


class ValidationException(CustomException, ValueError):
    """Exception for validation errors."""

    def __init__(self, message: str, validation_errors: list = None):
        super().__init__(message, 400, "validation-error")
        self.validation_errors = validation_errors or []


class MissingArgumentException(ValidationException):
    """A required argument was None or empty."""

    def __init__(self, argument_name: str, message: Optional[str] = None):
        super().__init__(
            message or f"Argument '{argument_name}' is required",
            [{"field": argument_name, "message": "must not be empty"}]
        )
        self.argument_name = argument_name


class InvalidDateRangeException(ValidationException):
    """A date range starts after it ends."""

    def __init__(self, start_date: date, end_date: date):
        super().__init__(
            f"Start date {start_date.isoformat()} is after end date {end_date.isoformat()}",
            [{"field": "start_date", "message": "must not be after end_date"}]
        )
        self.start_date = start_date
        self.end_date = end_date


class NotFoundException(CustomException):
    """Exception for resource not found errors."""

    def __init__(self, message: str):
        super().__init__(message, 404, "resource-not-found")


class ConflictException(CustomException):
    """Exception for resource conflict errors."""

    def __init__(self, message: str):
        super().__init__(message, 409, "resource-conflict")


class OverlappingCommitmentException(ConflictException):
    """The volunteer already holds a commitment sharing at least one day."""

    def __init__(self, person_id: int, conflicting: Commitment):
        super().__init__(
            f"Volunteer {person_id} is already committed to disaster {conflicting.disaster_id} "
            f"from {conflicting.start_date.isoformat()} to {conflicting.end_date.isoformat()}"
        )
        self.person_id = person_id
        self.conflicting = conflicting


class ServiceUnavailableException(CustomException):
    """Exception for service unavailable errors."""

    def __init__(self, message: str):
        super().__init__(message, 503, "service-unavailable")
