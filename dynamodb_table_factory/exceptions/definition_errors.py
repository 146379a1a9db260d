"""
Table Definition Errors

Raised while turning a model's markers into a table definition. All of them
are definition-time failures: the model declaration is wrong and retrying
will never help. Each error names the offending type, field or index so the
declaration can be fixed.
"""

from typing import Optional

from .base import DynamoDBTableFactoryError


class TableDefinitionError(DynamoDBTableFactoryError):
    """Base class for errors in a model's table declaration."""


class MissingTableMarkerError(TableDefinitionError):
    """Raised when a type has no table marker (no ``Meta`` class)."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        message = f"Type '{type_name}' must declare a Meta class to be mapped to a DynamoDB table"
        super().__init__(message, context={'type_name': type_name})


class OrphanedIndexSortKeyError(TableDefinitionError):
    """Raised when a GSI sort key names an index that has no partition key."""

    def __init__(self, index_name: str, field_name: Optional[str] = None):
        self.index_name = index_name
        self.field_name = field_name
        message = f"The global secondary index '{index_name}' lacks a partition key"
        context = {'index_name': index_name}
        if field_name:
            context['field_name'] = field_name
        super().__init__(message, context=context)


class UnsupportedAttributeTypeError(TableDefinitionError):
    """Raised when an attribute's value type has no DynamoDB scalar type.

    Only N, S and B can be declared in a CreateTable request. Leave the field
    unmarked if it is not a key attribute.
    """

    def __init__(self, field_name: str, type_name: str):
        self.field_name = field_name
        self.type_name = type_name
        message = (
            f"Cannot convert {type_name} on field '{field_name}' to a DynamoDB scalar type. "
            f"Only numbers, strings and bytes can be declared as attributes"
        )
        super().__init__(message, context={'field_name': field_name, 'type_name': type_name})


class InvalidKeySchemaError(TableDefinitionError):
    """Raised when the primary key markers do not form a valid key schema."""

    def __init__(self, type_name: str, reason: str):
        self.type_name = type_name
        self.reason = reason
        super().__init__(f"Invalid key schema on '{type_name}': {reason}", context={'type_name': type_name})


class DuplicateIndexError(TableDefinitionError):
    """Raised when a global secondary index gets the same key role twice."""

    def __init__(self, index_name: str, field_name: str, key_role: str):
        self.index_name = index_name
        self.field_name = field_name
        self.key_role = key_role
        message = f"The global secondary index '{index_name}' already has a {key_role} key"
        super().__init__(message, context={'index_name': index_name, 'field_name': field_name})
