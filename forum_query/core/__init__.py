"""Core interfaces, models and errors for the forum query layer."""

from forum_query.core.errors import (
    ForumQueryError,
    QueryValidationError,
    InvalidIdentifierError,
    DocumentNotFoundError,
)
from forum_query.core.interfaces import (
    IDocumentStore,
    IQueryTranslator,
    ICountEnricher,
    QueryParams,
)
from forum_query.core.models import (
    SortKey,
    SkipKey,
    LimitKey,
    FilterKey,
    ParsedKey,
    QuerySpec,
    ForumSettings,
)

__all__ = [
    "ForumQueryError",
    "QueryValidationError",
    "InvalidIdentifierError",
    "DocumentNotFoundError",
    "IDocumentStore",
    "IQueryTranslator",
    "ICountEnricher",
    "QueryParams",
    "SortKey",
    "SkipKey",
    "LimitKey",
    "FilterKey",
    "ParsedKey",
    "QuerySpec",
    "ForumSettings",
]
