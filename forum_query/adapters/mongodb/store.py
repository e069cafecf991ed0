"""
MongoDB document store.

Runs find and aggregation queries through pymongo's asyncio client.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

from pymongo import ASCENDING, AsyncMongoClient, DESCENDING
from pymongo.asynchronous.database import AsyncDatabase

logger = logging.getLogger(__name__)


class MongoDocumentStore:
    """
    Document store backed by a MongoDB database.

    Implements the IDocumentStore interface for MongoDB.
    """

    def __init__(self, database: AsyncDatabase):
        """
        Initialize MongoDB document store.

        Args:
            database: pymongo async database handle
        """
        self.database = database

    async def find(
        self,
        collection: str,
        filter: Dict[str, Any],
        sort: Optional[Dict[str, int]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Run a find query against a collection.

        Args:
            collection: Collection name
            filter: Query filter document
            sort: Ordered mapping of field to direction (1 or -1)
            skip: Number of documents to skip
            limit: Maximum number of documents to return (0 means no limit)

        Returns:
            Matching documents in sort order
        """
        cursor = self.database[collection].find(filter)
        if sort:
            cursor = cursor.sort(
                [(field, ASCENDING if direction > 0 else DESCENDING) for field, direction in sort.items()]
            )
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return await cursor.to_list()

    async def find_one(
        self, collection: str, filter: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Return the first document in `collection` matching `filter`."""
        return await self.database[collection].find_one(filter)

    async def aggregate(
        self, collection: str, pipeline: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Execute an aggregation pipeline.

        Args:
            collection: Collection name
            pipeline: Aggregation stages

        Returns:
            Output documents of the pipeline
        """
        cursor = await self.database[collection].aggregate(pipeline)
        return await cursor.to_list()


@asynccontextmanager
async def open_mongo_store(mongo_uri: str, database_name: str) -> AsyncIterator[MongoDocumentStore]:
    """
    Open a MongoDB connection for the duration of one request.

    The client is closed on every exit path, including errors raised by the
    code using the store.

    Args:
        mongo_uri: MongoDB connection URI
        database_name: Name of the database

    Yields:
        MongoDocumentStore bound to `database_name`
    """
    client: AsyncMongoClient = AsyncMongoClient(mongo_uri)
    logger.debug("Opened MongoDB client for database %s", database_name)
    try:
        yield MongoDocumentStore(client[database_name])
    finally:
        await client.close()
        logger.debug("Closed MongoDB client for database %s", database_name)
