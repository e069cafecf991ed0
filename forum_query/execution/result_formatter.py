"""
Result formatting utilities.

Makes documents read from the store safe to return as JSON.
"""

from typing import Any, Dict, List

from bson import ObjectId


class ResultFormatter:
    """
    Formats store documents for API responses.
    """

    @staticmethod
    def format_document(document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Format a single document.

        ObjectId values (top level and nested) are rendered as strings;
        everything else is left for the JSON encoder.

        Args:
            document: Raw document from the store

        Returns:
            Formatted copy of the document
        """
        return {key: ResultFormatter._format_value(value) for key, value in document.items()}

    @staticmethod
    def format_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Format a list of documents, keeping their order."""
        return [ResultFormatter.format_document(doc) for doc in documents]

    @staticmethod
    def _format_value(value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        if isinstance(value, dict):
            return ResultFormatter.format_document(value)
        if isinstance(value, list):
            return [ResultFormatter._format_value(item) for item in value]
        return value
