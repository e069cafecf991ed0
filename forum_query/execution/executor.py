"""
Query execution coordinator.

Runs translated listing queries through a document store.
"""

import logging
from typing import Any, Dict, List

from forum_query.core.errors import DocumentNotFoundError
from forum_query.core.interfaces import IDocumentStore
from forum_query.core.models import QuerySpec

logger = logging.getLogger(__name__)


class QueryExecutor:
    """
    Coordinates query execution.

    Wraps a document store and applies a QuerySpec to it. Store errors
    propagate to the caller unchanged.
    """

    def __init__(self, store: IDocumentStore):
        """
        Initialize query executor.

        Args:
            store: Document store implementation
        """
        self.store = store

    async def fetch_page(self, collection: str, spec: QuerySpec) -> List[Dict[str, Any]]:
        """
        Fetch one page of documents.

        Args:
            collection: Collection name
            spec: Filter, sort and pagination to apply

        Returns:
            Documents of the requested page
        """
        documents = await self.store.find(
            collection,
            spec.filter,
            sort=spec.sort,
            skip=spec.skip,
            limit=spec.limit,
        )
        logger.debug("Fetched %d documents from %s", len(documents), collection)
        return documents

    async def fetch_by_id(self, collection: str, document_id: Any) -> Dict[str, Any]:
        """
        Fetch a single document by `_id`.

        Args:
            collection: Collection name
            document_id: Value of the document's `_id`

        Returns:
            The document

        Raises:
            DocumentNotFoundError: If no document has this `_id`
        """
        document = await self.store.find_one(collection, {"_id": document_id})
        if document is None:
            raise DocumentNotFoundError(collection, str(document_id))
        return document
