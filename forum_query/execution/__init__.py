"""Query execution and result formatting."""

from forum_query.execution.executor import QueryExecutor
from forum_query.execution.result_formatter import ResultFormatter

__all__ = ["QueryExecutor", "ResultFormatter"]
