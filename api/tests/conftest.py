# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from datetime import date

# Set test environment
os.environ['ENVIRONMENT'] = 'test'
os.environ['DATA_BACKEND'] = 'memory'
os.environ['OTEL_ENABLED'] = 'false'
os.environ['BASE_URL'] = 'http://localhost:5000'

from models.entities import Disaster, Commitment
from services.memory_data import InMemoryDataService
from domain.disasters import DisasterService


@pytest.fixture
def active_disaster():
    """Active disaster accepting volunteers."""
    return Disaster(id=1, name="Test Disaster", is_active=True)


@pytest.fixture
def inactive_disaster():
    """Disaster no longer accepting volunteers."""
    return Disaster(id=2, name="Test Disaster 2", is_active=False)


@pytest.fixture
def existing_commitment():
    """Commitment of volunteer 0 to disaster 2 from 2013-06-10 to 2013-06-15."""
    return Commitment(
        person_id=0,
        disaster_id=2,
        start_date=date(2013, 6, 10),
        end_date=date(2013, 6, 15)
    )


@pytest.fixture
def data_service():
    """Empty in-memory data store."""
    return InMemoryDataService()


@pytest.fixture
def disaster_service(data_service):
    """Disaster service over the in-memory store."""
    return DisasterService(data_service)


@pytest.fixture
def app(data_service):
    """Application bound to a fresh in-memory store."""
    from app import create_app

    application = create_app(data_service=data_service, config_overrides={'TESTING': True})
    yield application
    data_service.clear()


@pytest.fixture
def client(app):
    """Create test client."""
    with app.test_client() as client:
        yield client
