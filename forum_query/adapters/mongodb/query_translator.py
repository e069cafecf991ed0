"""
MongoDB query translator.

Converts listing query-string parameters to a MongoDB find() specification.
"""

import math
import re
from typing import Any, Dict, List, Optional, Sequence, Union

from forum_query.core.errors import QueryValidationError
from forum_query.core.interfaces import QueryParams
from forum_query.core.models import FilterKey, LimitKey, QuerySpec, SkipKey, SortKey
from forum_query.query.key_parser import LIST_OPERATORS, parse_query_key

DEFAULT_LIMIT = 20
TIEBREAKER_FIELD = "_id"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_BOOLEAN_LITERALS = {"true": True, "false": False}


class MongoQueryTranslator:
    """
    Translates listing query parameters to a MongoDB QuerySpec.

    Implements the IQueryTranslator interface for MongoDB.
    """

    def __init__(self, default_limit: int = DEFAULT_LIMIT):
        """
        Initialize MongoDB query translator.

        Args:
            default_limit: Page size used when no `limit` key is given
        """
        self.default_limit = default_limit

    def translate(self, params: QueryParams) -> QuerySpec:
        """
        Convert query-string parameters to a MongoDB QuerySpec.

        Args:
            params: Mapping of query-string keys to a value or list of values

        Returns:
            QuerySpec with filter, sort, skip and limit

        Raises:
            QueryValidationError: If a value cannot be coerced or an
                operator is not supported
        """
        filter_spec: Dict[str, Any] = {}
        sort_spec: Dict[str, int] = {}
        skip = 0
        limit = self.default_limit

        for key, raw_value in params.items():
            parsed = parse_query_key(key)
            if parsed is None:
                continue

            values = _as_list(raw_value)
            if not values:
                continue

            if isinstance(parsed, SortKey):
                sort_spec[parsed.field] = _to_direction(key, values[-1])
            elif isinstance(parsed, SkipKey):
                skip = _to_int(key, values[-1], minimum=0)
            elif isinstance(parsed, LimitKey):
                limit = _to_int(key, values[-1], minimum=1)
            elif isinstance(parsed, FilterKey):
                self._add_filter(filter_spec, parsed, values, key)

        # _id goes last so documents with equal sort keys keep a total order
        if sort_spec and TIEBREAKER_FIELD not in sort_spec:
            sort_spec[TIEBREAKER_FIELD] = 1

        return QuerySpec(filter=filter_spec, sort=sort_spec, skip=skip, limit=limit)

    def _add_filter(
        self,
        filter_spec: Dict[str, Any],
        parsed: FilterKey,
        values: List[str],
        key: str,
    ) -> None:
        """Add or merge a single filter key into the filter document."""
        field = parsed.field

        if parsed.operator is None:
            filter_spec[field] = self._plain_predicate(values)
            return

        mongo_operator = f"${parsed.operator}"
        if parsed.operator in LIST_OPERATORS:
            operand: Any = [item for value in values for item in value.split("_") if item]
        else:
            operand = _to_number(key, values[-1])

        existing = filter_spec.get(field)
        if not isinstance(existing, dict):
            existing = {}
            filter_spec[field] = existing
        existing[mongo_operator] = operand

    @staticmethod
    def _plain_predicate(values: List[str]) -> Any:
        """Build the predicate for a `filter_<field>` key without an operator."""
        if len(values) > 1:
            return {"$in": values}

        value = values[0]
        # The value must be exactly true/false (any case); a prefix such as
        # "trueno" is not coerced, unlike a /^true|^false/i test
        boolean = _BOOLEAN_LITERALS.get(value.strip().lower())
        if boolean is not None:
            return boolean
        return {"$regex": re.escape(value), "$options": "i"}


def _as_list(raw_value: Union[str, Sequence[str], None]) -> List[str]:
    if raw_value is None:
        return []
    if isinstance(raw_value, str):
        return [raw_value]
    return [str(v) for v in raw_value]


def _to_number(key: str, value: str) -> Union[int, float]:
    """
    Coerce a query value to int or float.

    Integer text is parsed exactly; integral floats such as `1e3` become
    ints. NaN, infinity and ints outside the signed 64-bit range BSON can
    encode are rejected.
    """
    text = value.strip()
    try:
        number: Union[int, float] = int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            raise QueryValidationError(f"Expected a number for '{key}', got '{value}'", key=key)
        if math.isnan(number) or math.isinf(number):
            raise QueryValidationError(f"Expected a finite number for '{key}', got '{value}'", key=key)
        if number.is_integer():
            number = int(number)

    if isinstance(number, int) and not INT64_MIN <= number <= INT64_MAX:
        raise QueryValidationError(f"Number for '{key}' is out of range: '{value}'", key=key)
    return number


def _to_int(key: str, value: str, minimum: Optional[int] = None) -> int:
    number = _to_number(key, value)
    if not isinstance(number, int):
        raise QueryValidationError(f"Expected an integer for '{key}', got '{value}'", key=key)
    if minimum is not None and number < minimum:
        raise QueryValidationError(f"'{key}' must be at least {minimum}, got {number}", key=key)
    return number


def _to_direction(key: str, value: str) -> int:
    direction = _to_int(key, value)
    if direction not in (1, -1):
        raise QueryValidationError(f"Sort direction for '{key}' must be 1 or -1, got {direction}", key=key)
    return direction
