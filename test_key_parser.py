"""Tests for query-string key parsing."""

import pytest

from forum_query.core.errors import QueryValidationError
from forum_query.core.models import FilterKey, LimitKey, SkipKey, SortKey
from forum_query.query.key_parser import parse_query_key


def test_sort_key_carries_field():
    assert parse_query_key("sort_createdAt") == SortKey(field="createdAt")


def test_skip_and_limit_ignore_suffix():
    assert parse_query_key("skip") == SkipKey()
    assert parse_query_key("skip_page") == SkipKey()
    assert parse_query_key("limit") == LimitKey()
    assert parse_query_key("limit_anything_else") == LimitKey()


def test_filter_key_without_operator():
    parsed = parse_query_key("filter_title")
    assert parsed == FilterKey(field="title", operator=None)


def test_filter_key_with_operator():
    parsed = parse_query_key("filter_score_gte")
    assert isinstance(parsed, FilterKey)
    assert parsed.field == "score"
    assert parsed.operator == "gte"


@pytest.mark.parametrize("key", ["page", "search_title", "sort", "filter", "sort_", "filter_"])
def test_unknown_or_incomplete_keys_are_ignored(key):
    assert parse_query_key(key) is None


def test_unsupported_operator_is_rejected():
    with pytest.raises(QueryValidationError) as exc_info:
        parse_query_key("filter_title_where")
    assert exc_info.value.key == "filter_title_where"


def test_operator_keeps_trailing_underscores():
    # Split into at most three parts: "gte_x" is not an operator
    with pytest.raises(QueryValidationError):
        parse_query_key("filter_score_gte_x")


def test_dollar_field_is_rejected():
    with pytest.raises(QueryValidationError):
        parse_query_key("filter_$where")
