# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Data access interface consumed by the disaster service.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from models.entities import Commitment, Disaster


class DataService(ABC):
    """Base class for all data store implementations.

    Implementations expose every disaster and commitment they hold and
    append new records. The query helpers scan the full collections by
    default; stores that can filter server-side should override them.
    """

    backend_name = "abstract"

    @property
    @abstractmethod
    def disasters(self) -> Iterable[Disaster]:
        """All known disasters."""

    @property
    @abstractmethod
    def commitments(self) -> Iterable[Commitment]:
        """All known commitments."""

    @abstractmethod
    def add_disaster(self, disaster: Disaster) -> Disaster:
        """Persist a new disaster.

        Args:
            disaster: Disaster to store; an id is assigned when it has none

        Returns:
            Disaster: The stored record
        """

    @abstractmethod
    def add_commitment(self, commitment: Commitment) -> Commitment:
        """Persist a new commitment."""

    def find_disaster(self, disaster_id: int) -> Optional[Disaster]:
        for disaster in self.disasters:
            if disaster.id == disaster_id:
                return disaster
        return None

    def commitments_for_person(self, person_id: int) -> Iterable[Commitment]:
        return [c for c in self.commitments if c.person_id == person_id]

    def commitments_for_disaster(self, disaster_id: int) -> Iterable[Commitment]:
        return [c for c in self.commitments if c.disaster_id == disaster_id]

    def health_check(self) -> dict:
        """Report whether the store can serve requests."""
        return {"status": "healthy", "backend": self.backend_name}
