"""
Query translation coordinator.

Delegates translation to database-specific translators.
"""

import logging
from typing import Optional

from forum_query.core.errors import QueryValidationError
from forum_query.core.interfaces import IQueryTranslator, QueryParams
from forum_query.core.models import QuerySpec

logger = logging.getLogger(__name__)


class QueryTranslator:
    """
    Coordinates translation of listing query parameters.

    This class wraps a database-specific query translator and enforces
    the pagination limits shared by every backend.
    """

    def __init__(self, translator: IQueryTranslator, max_limit: Optional[int] = None):
        """
        Initialize query translator.

        Args:
            translator: Database-specific query translator implementation
            max_limit: Largest page size a client may request (None for no cap)
        """
        self.translator = translator
        self.max_limit = max_limit

    def translate(self, params: QueryParams) -> QuerySpec:
        """
        Translate query parameters to a query specification.

        Args:
            params: Mapping of query-string keys to a value or list of values

        Returns:
            QuerySpec for a find query

        Raises:
            QueryValidationError: If the parameters cannot be translated
        """
        spec = self.translator.translate(params)

        if self.max_limit is not None and spec.limit > self.max_limit:
            raise QueryValidationError(
                f"limit must not exceed {self.max_limit}, got {spec.limit}", key="limit"
            )

        logger.debug(
            "Translated listing query: filter=%s sort=%s skip=%d limit=%d",
            spec.filter,
            spec.sort,
            spec.skip,
            spec.limit,
        )
        return spec
