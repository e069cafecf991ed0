"""
Query-string key parsing.

Keys follow the `action_field[_operator]` convention used by the listing
endpoint, e.g. `sort_createdAt`, `filter_title`, `filter_score_gte`.
"""

from typing import Optional

from forum_query.core.errors import QueryValidationError
from forum_query.core.models import FilterKey, LimitKey, ParsedKey, SkipKey, SortKey

# Comparison operators take a single numeric operand
NUMERIC_OPERATORS = frozenset({"gt", "gte", "lt", "lte", "eq", "ne"})
# List operators take an underscore-delimited list of values
LIST_OPERATORS = frozenset({"in", "nin", "all"})

SUPPORTED_OPERATORS = NUMERIC_OPERATORS | LIST_OPERATORS


def parse_query_key(key: str) -> Optional[ParsedKey]:
    """
    Parse a query-string key into its action, field and operator.

    The key is split on `_` into at most three parts. Unknown actions and
    keys missing a required field yield None so the caller can skip them.

    Args:
        key: Raw query-string key

    Returns:
        A SortKey, SkipKey, LimitKey or FilterKey, or None if the key is not
        part of the query language

    Raises:
        QueryValidationError: If the field targets an operator (`$...`) or
            the operator is not supported
    """
    parts = key.split("_", 2)
    action = parts[0]
    field = parts[1] if len(parts) > 1 else ""
    operator = parts[2] if len(parts) > 2 else ""

    if action == "skip":
        return SkipKey()
    if action == "limit":
        return LimitKey()
    if action not in ("sort", "filter"):
        return None

    if not field:
        return None
    if field.startswith("$"):
        raise QueryValidationError(f"Invalid field name in query key: {key}", key=key)

    if action == "sort":
        return SortKey(field=field)

    if operator and operator not in SUPPORTED_OPERATORS:
        raise QueryValidationError(
            f"Unsupported filter operator '{operator}' in query key: {key}", key=key
        )
    return FilterKey(field=field, operator=operator or None)


__all__ = [
    "NUMERIC_OPERATORS",
    "LIST_OPERATORS",
    "SUPPORTED_OPERATORS",
    "parse_query_key",
]
