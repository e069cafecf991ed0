"""
MongoDB count enrichment.

Attaches per-document counts from a related collection, e.g. the number of
answers of every question on a listing page.
"""

import logging
from typing import Any, Dict, List, Optional

from forum_query.core.interfaces import IDocumentStore

logger = logging.getLogger(__name__)


class MongoCountEnricher:
    """
    Joins grouped counts from a secondary collection onto documents.

    Implements the ICountEnricher interface for MongoDB.
    """

    def __init__(self, store: IDocumentStore):
        """
        Initialize count enricher.

        Args:
            store: Document store the secondary collection is read from
        """
        self.store = store

    async def enrich(
        self,
        documents: List[Dict[str, Any]],
        collection: str,
        foreign_key: str,
        count_field: str = "count",
        group_field: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Add `count_field` to every document.

        Only the identifiers of the given documents are looked up, so the
        aggregation is scoped to the current page.

        Args:
            documents: Primary documents, each with an `_id`
            collection: Secondary collection holding the references
            foreign_key: Field in the secondary collection referencing `_id`
            count_field: Name of the count field added to each document
            group_field: Field to group on, defaults to `foreign_key`

        Returns:
            New documents in the original order; documents without matches
            get a count of 0
        """
        if not documents:
            return []

        pipeline = self.build_pipeline(
            ids=[doc["_id"] for doc in documents],
            foreign_key=foreign_key,
            group_field=group_field or foreign_key,
        )
        counts = await self.store.aggregate(collection, pipeline)
        logger.debug(
            "Counted %s.%s for %d documents (%d groups)",
            collection,
            foreign_key,
            len(documents),
            len(counts),
        )

        counts_map = {entry["_id"]: entry["count"] for entry in counts}
        return [
            {**doc, count_field: counts_map.get(doc["_id"], 0)}
            for doc in documents
        ]

    @staticmethod
    def build_pipeline(
        ids: List[Any], foreign_key: str, group_field: str
    ) -> List[Dict[str, Any]]:
        """Build the $match/$group pipeline counting references per id."""
        return [
            {"$match": {foreign_key: {"$in": ids}}},
            {"$group": {"_id": f"${group_field}", "count": {"$sum": 1}}},
        ]
