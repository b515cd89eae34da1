# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
In-memory data store for tests and local development.
"""

import logging
from typing import Iterable, List, Optional

from models.entities import Commitment, Disaster
from services.data_service import DataService
from domain.exceptions import ConflictException

logger = logging.getLogger(__name__)


class InMemoryDataService(DataService):
    """List-backed data store.

    Records are copied on the way in and on the way out, so changes to a
    caller's object never leak into the store.
    """

    backend_name = "memory"

    def __init__(
        self,
        disasters: Optional[Iterable[Disaster]] = None,
        commitments: Optional[Iterable[Commitment]] = None
    ):
        self._disasters: List[Disaster] = [d.model_copy() for d in disasters or []]
        self._commitments: List[Commitment] = [c.model_copy() for c in commitments or []]
        logger.debug(
            f"In-memory data store initialized with {len(self._disasters)} disasters "
            f"and {len(self._commitments)} commitments"
        )

    @property
    def disasters(self) -> List[Disaster]:
        return [d.model_copy() for d in self._disasters]

    @property
    def commitments(self) -> List[Commitment]:
        return [c.model_copy() for c in self._commitments]

    def _next_disaster_id(self) -> int:
        ids = [d.id for d in self._disasters if d.id is not None]
        return max(ids) + 1 if ids else 1

    def add_disaster(self, disaster: Disaster) -> Disaster:
        stored = disaster.model_copy()
        if stored.id is None:
            stored.id = self._next_disaster_id()
        elif any(d.id == stored.id for d in self._disasters):
            raise ConflictException(f"Disaster {stored.id} already exists")
        self._disasters.append(stored)
        logger.debug(f"Stored disaster {stored.id}")
        return stored.model_copy()

    def add_commitment(self, commitment: Commitment) -> Commitment:
        stored = commitment.model_copy()
        self._commitments.append(stored)
        logger.debug(f"Stored commitment for person {stored.person_id} on disaster {stored.disaster_id}")
        return stored.model_copy()

    def clear(self) -> None:
        """Drop every stored record."""
        self._disasters.clear()
        self._commitments.clear()
