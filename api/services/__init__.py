# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - Data stores, response formatting and health checks.
"""

from .data_service import DataService
from .memory_data import InMemoryDataService
from .mongodb import MongoDBService, MongoDataService, get_mongodb_service, close_mongodb_connection

__all__ = [
    "DataService",
    "InMemoryDataService",
    "MongoDBService",
    "MongoDataService",
    "get_mongodb_service",
    "close_mongodb_connection"
]
