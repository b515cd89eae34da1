# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Pydantic models.
"""

import pytest
from datetime import date, datetime
from pydantic import ValidationError

from models.entities import Disaster, Commitment
from models.requests import CreateDisasterRequest, AssignVolunteerRequest
from models.responses import DisasterResponse


class TestDisasterModel:
    """Test Disaster model validation."""

    def test_defaults(self):
        """Test a bare disaster has no id and is inactive."""
        disaster = Disaster()

        assert disaster.id is None
        assert disaster.name is None
        assert disaster.is_active is False

    def test_name_too_long(self):
        """Test names are limited in length."""
        with pytest.raises(ValidationError):
            Disaster(name="x" * 201)

    def test_assignment_is_validated(self):
        """Test assigned values are validated."""
        disaster = Disaster(name="Flood")

        with pytest.raises(ValidationError):
            disaster.id = "not-a-number"


class TestCommitmentModel:
    """Test Commitment model validation."""

    def test_valid_commitment(self):
        """Test valid commitment creation."""
        commitment = Commitment(
            person_id=1,
            disaster_id=2,
            start_date=date(2013, 6, 10),
            end_date=date(2013, 6, 15)
        )

        assert commitment.person_id == 1
        assert commitment.disaster_id == 2

    def test_single_day_commitment(self):
        """Test start and end may fall on the same day."""
        commitment = Commitment(
            person_id=1,
            disaster_id=2,
            start_date=date(2013, 6, 10),
            end_date=date(2013, 6, 10)
        )

        assert commitment.start_date == commitment.end_date

    def test_reversed_range(self):
        """Test a reversed range is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            Commitment(
                person_id=1,
                disaster_id=2,
                start_date=date(2013, 6, 15),
                end_date=date(2013, 6, 10)
            )

        assert "start date must not be after" in str(exc_info.value)

    def test_datetimes_truncated(self):
        """Test datetimes are stored as their calendar date."""
        commitment = Commitment(
            person_id=1,
            disaster_id=2,
            start_date=datetime(2013, 6, 10, 23, 59),
            end_date=datetime(2013, 6, 10, 0, 1)
        )

        assert commitment.start_date == date(2013, 6, 10)
        assert commitment.end_date == date(2013, 6, 10)

    def test_overlaps(self):
        """Test inclusive overlap checks."""
        commitment = Commitment(
            person_id=1,
            disaster_id=2,
            start_date=date(2013, 6, 10),
            end_date=date(2013, 6, 15)
        )

        assert commitment.overlaps(date(2013, 6, 15), date(2013, 6, 20))
        assert commitment.overlaps(date(2013, 6, 1), date(2013, 6, 10))
        assert commitment.overlaps(date(2013, 6, 11), date(2013, 6, 12))
        assert not commitment.overlaps(date(2013, 6, 16), date(2013, 6, 20))
        assert not commitment.overlaps(date(2013, 6, 1), date(2013, 6, 9))


class TestRequestModels:
    """Test request model validation."""

    def test_create_disaster_defaults_to_active(self):
        """Test newly registered disasters accept volunteers by default."""
        request = CreateDisasterRequest(name="Flood")

        assert request.is_active is True

    def test_create_disaster_allows_missing_name(self):
        """Test an empty name reaches the service to be rejected there."""
        request = CreateDisasterRequest()

        assert request.name is None

    def test_assign_volunteer_parses_iso_dates(self):
        """Test ISO date strings are parsed."""
        request = AssignVolunteerRequest(person_id=3, start_date="2013-06-10", end_date="2013-06-15")

        assert request.start_date == date(2013, 6, 10)
        assert request.end_date == date(2013, 6, 15)

    def test_assign_volunteer_requires_person(self):
        """Test the volunteer is required."""
        with pytest.raises(ValidationError):
            AssignVolunteerRequest(start_date="2013-06-10", end_date="2013-06-15")


class TestResponseModels:
    """Test response model aliases."""

    def test_links_alias(self):
        """Test HAL links are read from the _links key."""
        response = DisasterResponse.model_validate({
            "id": 1,
            "name": "Flood",
            "is_active": True,
            "_links": {"self": {"href": "http://localhost:5000/api/disasters/1"}}
        })

        assert response.links["self"].href == "http://localhost:5000/api/disasters/1"
