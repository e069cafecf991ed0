"""
Forum Query - listing queries for a discussion forum.

Translates `filter_*`/`sort_*`/`skip`/`limit` query strings into document
store queries and enriches result pages with related-document counts.
"""

from forum_query.orchestrator import ListingOrchestrator

__all__ = ["ListingOrchestrator"]
