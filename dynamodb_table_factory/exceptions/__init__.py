# Base exception class
from .base import DynamoDBTableFactoryError

# Table declaration errors
from .definition_errors import (
    TableDefinitionError,
    MissingTableMarkerError,
    OrphanedIndexSortKeyError,
    UnsupportedAttributeTypeError,
    InvalidKeySchemaError,
    DuplicateIndexError,
)

# Store-facing errors (provisioner)
from .domain_exceptions import (
    ValidationError,
    NotFoundError,
    ConflictError,
    ConnectionError,
    RetryableError,
)

__all__ = [
    # Base exception
    "DynamoDBTableFactoryError",

    # Definition errors
    "DuplicateIndexError",
    "InvalidKeySchemaError",
    "MissingTableMarkerError",
    "OrphanedIndexSortKeyError",
    "TableDefinitionError",
    "UnsupportedAttributeTypeError",

    # Store errors (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",
]
