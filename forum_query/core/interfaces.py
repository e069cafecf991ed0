"""
Abstract interfaces for the forum query layer.

These protocols define the contracts the orchestrator depends on, so a
document store or translator can be swapped (or faked in tests) without
touching the listing logic.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union

from forum_query.core.models import QuerySpec

QueryParams = Mapping[str, Union[str, Sequence[str]]]


class IDocumentStore(Protocol):
    """
    Asynchronous access to a document database.

    Implementations are request scoped: one instance is handed to the
    orchestrator for the lifetime of a single inbound request.
    """

    async def find(
        self,
        collection: str,
        filter: Dict[str, Any],
        sort: Optional[Dict[str, int]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> List[Dict[str, Any]]:
        """
        Run a find query.

        Args:
            collection: Collection name
            filter: Query filter document
            sort: Ordered mapping of field to direction (1 or -1)
            skip: Number of documents to skip
            limit: Maximum number of documents to return (0 means no limit)

        Returns:
            Matching documents in sort order
        """
        ...

    async def find_one(
        self, collection: str, filter: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Return the first document matching `filter`, or None."""
        ...

    async def aggregate(
        self, collection: str, pipeline: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """
        Run an aggregation pipeline.

        Args:
            collection: Collection name
            pipeline: Aggregation stages

        Returns:
            Output documents of the last stage
        """
        ...


class IQueryTranslator(Protocol):
    """
    Translate request query parameters to a query specification.
    """

    def translate(self, params: QueryParams) -> QuerySpec:
        """
        Convert query-string parameters to a QuerySpec.

        Args:
            params: Mapping of query-string keys to a value or list of values

        Returns:
            Filter, sort and pagination for a find query
        """
        ...


class ICountEnricher(Protocol):
    """
    Attach per-document counts from a related collection.
    """

    async def enrich(
        self,
        documents: List[Dict[str, Any]],
        collection: str,
        foreign_key: str,
        count_field: str = "count",
        group_field: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return copies of `documents` with an integer `count_field` added.

        Args:
            documents: Primary documents, each with an `_id`
            collection: Secondary collection holding the references
            foreign_key: Field in the secondary collection referencing `_id`
            count_field: Name of the count field added to each document
            group_field: Field to group on, defaults to `foreign_key`

        Returns:
            Documents in their original order
        """
        ...
