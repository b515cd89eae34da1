# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
MongoDB service layer with connection pooling and the MongoDB-backed data store.
"""

import os
import logging
from datetime import date, datetime, time
from typing import List, Dict, Optional, Any
from pymongo import MongoClient, ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import (
    ConnectionFailure,
    ServerSelectionTimeoutError,
    DuplicateKeyError
)
from opentelemetry import trace

from models.base import to_date
from models.entities import Commitment, Disaster
from services.data_service import DataService
from domain.exceptions import ConflictException

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

DISASTERS = "disasters"
COMMITMENTS = "commitments"
COUNTERS = "counters"


class MongoDBService:
    """MongoDB connection manager with connection pooling."""

    def __init__(self, connection_string: str = None, database_name: str = None):
        """Initialize MongoDB service with connection pooling."""
        self.connection_string = connection_string or os.getenv(
            'MONGODB_URI',
            'mongodb://localhost:27017/crisischeckin_dev'
        )
        self.database_name = database_name or os.getenv('MONGODB_DATABASE', 'crisischeckin_dev')
        self._client: Optional[MongoClient] = None
        self._database: Optional[Database] = None

        # Connection pool settings
        self.max_pool_size = int(os.getenv('MONGODB_MAX_POOL_SIZE', '10'))
        self.min_pool_size = int(os.getenv('MONGODB_MIN_POOL_SIZE', '1'))
        self.max_idle_time_ms = int(os.getenv('MONGODB_MAX_IDLE_TIME_MS', '30000'))
        self.server_selection_timeout_ms = int(os.getenv('MONGODB_SERVER_SELECTION_TIMEOUT_MS', '5000'))

        logger.info(f"MongoDB service initialized for database: {self.database_name}")

    @property
    def client(self) -> MongoClient:
        """Get MongoDB client with connection pooling."""
        if self._client is None:
            try:
                self._client = MongoClient(
                    self.connection_string,
                    maxPoolSize=self.max_pool_size,
                    minPoolSize=self.min_pool_size,
                    maxIdleTimeMS=self.max_idle_time_ms,
                    serverSelectionTimeoutMS=self.server_selection_timeout_ms,
                    retryWrites=True,
                    retryReads=True
                )
                # Test connection
                self._client.admin.command('ping')
                logger.info("MongoDB connection established successfully")
            except (ConnectionFailure, ServerSelectionTimeoutError) as e:
                logger.error(f"Failed to connect to MongoDB: {e}")
                self._client = None
                raise

        return self._client

    @property
    def database(self) -> Database:
        """Get MongoDB database."""
        if self._database is None:
            self._database = self.client[self.database_name]
        return self._database

    def get_collection(self, collection_name: str) -> Collection:
        """Get MongoDB collection."""
        return self.database[collection_name]

    def close_connection(self) -> None:
        """Close MongoDB connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")

    def health_check(self) -> Dict[str, Any]:
        """Check MongoDB connection health."""
        try:
            result = self.client.admin.command('ping')
            server_info = self.client.server_info()

            return {
                'status': 'healthy',
                'ping': result.get('ok') == 1,
                'version': server_info.get('version'),
                'database': self.database_name,
                'connection_pool_size': self.max_pool_size
            }
        except Exception as e:
            logger.error(f"MongoDB health check failed: {e}")
            return {
                'status': 'unhealthy',
                'error': str(e),
                'database': self.database_name
            }

    def next_sequence(self, name: str) -> int:
        """Atomically increment and return a named counter."""
        counter = self.get_collection(COUNTERS).find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return counter["seq"]

    # Index Management

    def create_indexes(self) -> None:
        """Create the indexes the data store queries rely on."""
        try:
            logger.info("Creating MongoDB indexes...")

            disasters = self.get_collection(DISASTERS)
            disasters.create_index("id", unique=True)
            disasters.create_index("isActive")

            commitments = self.get_collection(COMMITMENTS)
            commitments.create_index([("personId", ASCENDING), ("startDate", ASCENDING)])
            commitments.create_index("disasterId")

            logger.info("MongoDB indexes created successfully")

        except Exception as e:
            logger.error(f"Failed to create MongoDB indexes: {e}")
            raise


def _to_datetime(value: date) -> datetime:
    # BSON has no date-only type
    return datetime.combine(value, time.min)


def disaster_to_document(disaster: Disaster) -> Dict[str, Any]:
    """Convert a disaster to its stored document shape."""
    return {
        "id": disaster.id,
        "name": disaster.name,
        "isActive": disaster.is_active
    }


def disaster_from_document(document: Dict[str, Any]) -> Disaster:
    """Build a disaster from a stored document."""
    return Disaster(
        id=document["id"],
        name=document.get("name"),
        is_active=document.get("isActive", False)
    )


def commitment_to_document(commitment: Commitment) -> Dict[str, Any]:
    """Convert a commitment to its stored document shape."""
    return {
        "personId": commitment.person_id,
        "disasterId": commitment.disaster_id,
        "startDate": _to_datetime(commitment.start_date),
        "endDate": _to_datetime(commitment.end_date)
    }


def commitment_from_document(document: Dict[str, Any]) -> Commitment:
    """Build a commitment from a stored document."""
    return Commitment(
        person_id=document["personId"],
        disaster_id=document["disasterId"],
        start_date=to_date(document["startDate"]),
        end_date=to_date(document["endDate"])
    )


class MongoDataService(DataService):
    """Data store backed by MongoDB collections."""

    backend_name = "mongodb"

    def __init__(self, mongodb_service: MongoDBService):
        self.mongodb_service = mongodb_service

    def _find(self, collection: str, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        with tracer.start_as_current_span(f"db.{collection}.find") as span:
            try:
                documents = list(self.mongodb_service.get_collection(collection).find(query, {"_id": 0}))
            except Exception as e:
                logger.error(f"Failed to find documents in {collection}: {e}")
                raise
            span.set_attributes({
                "db.collection": collection,
                "db.operation": "find",
                "db.returned_count": len(documents)
            })
            logger.debug(f"Found {len(documents)} documents in {collection}")
            return documents

    def _find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        with tracer.start_as_current_span(f"db.{collection}.find_one") as span:
            span.set_attributes({"db.collection": collection, "db.operation": "find_one"})
            try:
                document = self.mongodb_service.get_collection(collection).find_one(query, {"_id": 0})
            except Exception as e:
                logger.error(f"Failed to find document in {collection}: {e}")
                raise
            span.set_attribute("db.found", document is not None)
            return document

    def _insert(self, collection: str, document: Dict[str, Any]) -> None:
        with tracer.start_as_current_span(f"db.{collection}.insert_one") as span:
            span.set_attributes({"db.collection": collection, "db.operation": "insert_one"})
            try:
                self.mongodb_service.get_collection(collection).insert_one(document)
            except DuplicateKeyError as e:
                logger.error(f"Duplicate key error in {collection}: {e}")
                raise ConflictException("Document with this identifier already exists")
            except Exception as e:
                logger.error(f"Failed to create document in {collection}: {e}")
                raise

    @property
    def disasters(self) -> List[Disaster]:
        return [disaster_from_document(doc) for doc in self._find(DISASTERS, {})]

    @property
    def commitments(self) -> List[Commitment]:
        return [commitment_from_document(doc) for doc in self._find(COMMITMENTS, {})]

    def find_disaster(self, disaster_id: int) -> Optional[Disaster]:
        document = self._find_one(DISASTERS, {"id": disaster_id})
        if document is None:
            logger.debug(f"Disaster {disaster_id} not found")
            return None
        return disaster_from_document(document)

    def commitments_for_person(self, person_id: int) -> List[Commitment]:
        return [commitment_from_document(doc) for doc in self._find(COMMITMENTS, {"personId": person_id})]

    def commitments_for_disaster(self, disaster_id: int) -> List[Commitment]:
        return [commitment_from_document(doc) for doc in self._find(COMMITMENTS, {"disasterId": disaster_id})]

    def add_disaster(self, disaster: Disaster) -> Disaster:
        stored = disaster.model_copy()
        if stored.id is None:
            stored.id = self.mongodb_service.next_sequence(DISASTERS)
        self._insert(DISASTERS, disaster_to_document(stored))
        logger.info(f"Created disaster {stored.id}")
        return stored

    def add_commitment(self, commitment: Commitment) -> Commitment:
        self._insert(COMMITMENTS, commitment_to_document(commitment))
        logger.info(f"Created commitment for person {commitment.person_id} on disaster {commitment.disaster_id}")
        return commitment

    def health_check(self) -> Dict[str, Any]:
        return {**self.mongodb_service.health_check(), "backend": self.backend_name}


# Singleton instance for application use
_mongodb_service: Optional[MongoDBService] = None


def get_mongodb_service() -> MongoDBService:
    """Get singleton MongoDB service instance."""
    global _mongodb_service
    if _mongodb_service is None:
        _mongodb_service = MongoDBService()
    return _mongodb_service


def close_mongodb_connection() -> None:
    """Close MongoDB connection (for cleanup)."""
    global _mongodb_service
    if _mongodb_service:
        _mongodb_service.close_connection()
