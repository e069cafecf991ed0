"""Document identifier validation."""

import uuid

from forum_query.core.errors import InvalidIdentifierError


def validate_identifier(value: str, label: str = "ID") -> str:
    """
    Check that `value` is a UUID string before it reaches the database.

    Documents are keyed by UUID strings, so anything else can never match.

    Args:
        value: Identifier taken from the request path
        label: Name used in the error message, e.g. "question ID"

    Returns:
        The identifier, unchanged

    Raises:
        InvalidIdentifierError: If the value is not a UUID
    """
    try:
        uuid.UUID(str(value))
    except ValueError:
        raise InvalidIdentifierError(f"Invalid {label} format: {value}", key=label)
    return value
