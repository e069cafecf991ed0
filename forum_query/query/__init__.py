"""Query-string parsing and translation components."""

from forum_query.query.key_parser import parse_query_key
from forum_query.query.translator import QueryTranslator
from forum_query.query.identifiers import validate_identifier

__all__ = ["parse_query_key", "QueryTranslator", "validate_identifier"]
