"""
Error types raised by the forum query layer.

The API boundary maps these to HTTP responses; nothing below it converts
them into result dictionaries.
"""


class ForumQueryError(Exception):
    """Base class for all forum query errors."""


class QueryValidationError(ForumQueryError, ValueError):
    """
    A query-string key or value could not be turned into a query.

    Raised for non-numeric comparison values, unsupported operators and
    out-of-range pagination values.
    """

    def __init__(self, message: str, key: str = ""):
        super().__init__(message)
        self.key = key


class InvalidIdentifierError(QueryValidationError):
    """A document identifier is not a valid UUID."""


class DocumentNotFoundError(ForumQueryError):
    """A primary document looked up by identifier does not exist."""

    def __init__(self, collection: str, document_id: str):
        super().__init__(f"Document not found in '{collection}' for ID: {document_id}")
        self.collection = collection
        self.document_id = document_id
