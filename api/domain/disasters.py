# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Disaster domain logic: registration, listing and volunteer assignment.

The service validates every request completely before it touches the data
store, so a rejected request never leaves a partial write behind.
"""

import logging
from datetime import date
from typing import List, Optional

from models.base import to_date
from models.entities import Commitment, Disaster
from domain.exceptions import (
    MissingArgumentException,
    InvalidDateRangeException,
    OverlappingCommitmentException
)

logger = logging.getLogger(__name__)


def find_overlapping_commitment(
    commitments: List[Commitment],
    start_date: date,
    end_date: date
) -> Optional[Commitment]:
    """Return the first commitment overlapping the range, if any."""
    for commitment in commitments:
        if commitment.overlaps(start_date, end_date):
            return commitment
    return None


class DisasterService:
    """Manages disasters and the commitments volunteers make to them."""

    def __init__(self, data_service):
        if data_service is None:
            raise MissingArgumentException("data_service")
        self.data_service = data_service

    def assign_to_volunteer(
        self,
        disaster_id: int,
        person_id: int,
        start_date: date,
        end_date: date
    ) -> Commitment:
        """
        Commit a volunteer to a disaster for an inclusive date range.

        Overlap is checked only against the same volunteer's commitments;
        two volunteers may cover the same days on the same disaster.

        Args:
            disaster_id: Disaster the volunteer is assigned to
            person_id: Volunteer being assigned
            start_date: First day of the commitment
            end_date: Last day of the commitment

        Returns:
            The commitment handed to the data store

        Raises:
            MissingArgumentException: A date is missing
            InvalidDateRangeException: start_date is after end_date
            OverlappingCommitmentException: The volunteer is already committed on one of the days
        """
        if start_date is None:
            raise MissingArgumentException("start_date")
        if end_date is None:
            raise MissingArgumentException("end_date")

        start_date = to_date(start_date)
        end_date = to_date(end_date)

        if start_date > end_date:
            raise InvalidDateRangeException(start_date, end_date)

        existing = list(self.data_service.commitments_for_person(person_id))
        conflicting = find_overlapping_commitment(existing, start_date, end_date)
        if conflicting is not None:
            logger.info(
                "Rejected overlapping commitment",
                extra={
                    "person_id": person_id,
                    "disaster_id": disaster_id,
                    "conflicting_disaster_id": conflicting.disaster_id
                }
            )
            raise OverlappingCommitmentException(person_id, conflicting)

        commitment = Commitment(
            disaster_id=disaster_id,
            person_id=person_id,
            start_date=start_date,
            end_date=end_date
        )
        self.data_service.add_commitment(commitment)

        logger.info(
            "Volunteer assigned to disaster",
            extra={
                "person_id": person_id,
                "disaster_id": disaster_id,
                "start_date": start_date.isoformat(),
                "end_date": end_date.isoformat()
            }
        )
        return commitment

    def create(self, disaster: Disaster) -> Disaster:
        """
        Register a new disaster.

        The record is passed to the data store unmodified; the returned copy
        carries the identifier the store assigned.
        """
        if disaster is None:
            raise MissingArgumentException("disaster")
        if not disaster.name or not disaster.name.strip():
            raise MissingArgumentException("name", "Disaster name is required")

        created = self.data_service.add_disaster(disaster)
        logger.info("Disaster created", extra={"disaster_id": created.id, "disaster_name": created.name})
        return created

    def get_list(self) -> List[Disaster]:
        """All known disasters, in data store order."""
        return list(self.data_service.disasters)

    def get_active_list(self) -> List[Disaster]:
        """Disasters currently accepting volunteers."""
        return [disaster for disaster in self.get_list() if disaster.is_active]

    def get(self, disaster_id: int) -> Optional[Disaster]:
        """Disaster with the given id, or None when there is none."""
        return self.data_service.find_disaster(disaster_id)

    def get_commitments_for_volunteer(self, person_id: int) -> List[Commitment]:
        return list(self.data_service.commitments_for_person(person_id))

    def get_commitments_for_disaster(self, disaster_id: int) -> List[Commitment]:
        return list(self.data_service.commitments_for_disaster(disaster_id))
