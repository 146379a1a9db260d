"""
Schema Extractor

Reads the markers on a type and groups them into key roles:

- primary partition key and optional sort key
- global secondary indexes (partition key, optional sort key)
- local secondary indexes (sort key only)
- persisted scalar attributes

Global indexes are resolved in two passes. Every partition key marker is
registered first, keyed by index name; sort key markers are then attached to
the registered index of the same name. A sort key with no registered index is
a definition error.

Index and attribute errors take precedence over primary key cardinality
errors: a type with an orphaned index sort key and no partition key fails
with OrphanedIndexSortKeyError.

Extraction is all-or-nothing and keeps no state between calls: the same input
always yields an equal TableDefinition.
"""

import logging
from typing import Any, Dict, List, Union, get_args, get_origin, Annotated

from ..exceptions import (
    DuplicateIndexError,
    InvalidKeySchemaError,
    MissingTableMarkerError,
    OrphanedIndexSortKeyError,
    UnsupportedAttributeTypeError,
)
from ..models.descriptors import TypeDescriptor, describe_model
from ..models.markers import (
    Attribute,
    GlobalIndexPartitionKey,
    GlobalIndexSortKey,
    LocalIndexSortKey,
    PartitionKey,
    SortKey,
)
from ..models.table_definition import (
    BINARY_TYPES,
    NUMERIC_TYPES,
    TEXT_TYPES,
    AttributeDefinition,
    GlobalSecondaryIndex,
    KeySchemaElement,
    KeyType,
    LocalSecondaryIndex,
    ScalarAttributeType,
    TableDefinition,
)

logger = logging.getLogger(__name__)


def _type_name(value_type: Any) -> str:
    return getattr(value_type, '__name__', None) or repr(value_type)


def _unwrap_optional(value_type: Any) -> Any:
    """Strip ``Annotated`` and ``Optional`` wrappers from a value type."""
    if get_origin(value_type) is Annotated:
        value_type = get_args(value_type)[0]

    args = get_args(value_type)
    if args and type(None) in args:
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) == 1:
            return _unwrap_optional(non_none[0])
    return value_type


def resolve_scalar_type(field_name: str, value_type: Any) -> ScalarAttributeType:
    """Map a field's value type to its DynamoDB scalar type.

    Numbers (int, float, Decimal) are N, strings are S and byte sequences are
    B. bool is rejected even though it subclasses int.

    Args:
        field_name: Name of the field, for error reporting
        value_type: Declared value type of the field

    Returns:
        The scalar attribute type

    Raises:
        UnsupportedAttributeTypeError: For any other value type
    """
    resolved = _unwrap_optional(value_type)

    if isinstance(resolved, type) and not issubclass(resolved, bool):
        if issubclass(resolved, NUMERIC_TYPES):
            return ScalarAttributeType.NUMBER
        if issubclass(resolved, TEXT_TYPES):
            return ScalarAttributeType.STRING
        if issubclass(resolved, BINARY_TYPES):
            return ScalarAttributeType.BINARY

    raise UnsupportedAttributeTypeError(field_name, _type_name(resolved))


def _extract_primary_key(descriptor: TypeDescriptor) -> List[KeySchemaElement]:
    partition_keys = [
        KeySchemaElement(attribute_name=marker.resolve_name(field.name), key_type=KeyType.HASH)
        for field in descriptor.fields
        for marker in field.markers_of(PartitionKey)
    ]
    sort_keys = [
        KeySchemaElement(attribute_name=marker.resolve_name(field.name), key_type=KeyType.RANGE)
        for field in descriptor.fields
        for marker in field.markers_of(SortKey)
    ]

    if not partition_keys:
        raise InvalidKeySchemaError(descriptor.type_name, "no field is marked as the partition key")
    if len(partition_keys) > 1:
        names = [element.attribute_name for element in partition_keys]
        raise InvalidKeySchemaError(descriptor.type_name, f"more than one partition key: {names}")
    if len(sort_keys) > 1:
        names = [element.attribute_name for element in sort_keys]
        raise InvalidKeySchemaError(descriptor.type_name, f"more than one sort key: {names}")

    return partition_keys + sort_keys


def _extract_global_indexes(descriptor: TypeDescriptor) -> List[GlobalSecondaryIndex]:
    key_schemas: Dict[str, List[KeySchemaElement]] = {}

    # Pass one: every partition key registers its index
    for field in descriptor.fields:
        for marker in field.markers_of(GlobalIndexPartitionKey):
            index_name = marker.resolve_name(field.name)
            if index_name in key_schemas:
                raise DuplicateIndexError(index_name, field.name, "partition")
            key_schemas[index_name] = [KeySchemaElement(attribute_name=field.name, key_type=KeyType.HASH)]
            logger.debug(f"Registered global index '{index_name}' on {descriptor.type_name}.{field.name}")

    # Pass two: sort keys attach to a registered index
    for field in descriptor.fields:
        for marker in field.markers_of(GlobalIndexSortKey):
            index_name = marker.resolve_name(field.name)
            if index_name not in key_schemas:
                raise OrphanedIndexSortKeyError(index_name, field.name)
            if len(key_schemas[index_name]) > 1:
                raise DuplicateIndexError(index_name, field.name, "sort")
            key_schemas[index_name].append(KeySchemaElement(attribute_name=field.name, key_type=KeyType.RANGE))

    return [
        GlobalSecondaryIndex(index_name=index_name, key_schema=key_schema)
        for index_name, key_schema in key_schemas.items()
    ]


def _extract_local_indexes(descriptor: TypeDescriptor) -> List[LocalSecondaryIndex]:
    local_indexes: Dict[str, LocalSecondaryIndex] = {}

    for field in descriptor.fields:
        for marker in field.markers_of(LocalIndexSortKey):
            index_name = marker.resolve_name(field.name)
            if index_name in local_indexes:
                # Last declaration wins
                logger.warning(
                    f"Local index '{index_name}' on {descriptor.type_name} redeclared by field "
                    f"'{field.name}'; replacing sort key '{local_indexes[index_name].sort_key}'"
                )
            local_indexes[index_name] = LocalSecondaryIndex(
                index_name=index_name,
                key_schema=[KeySchemaElement(attribute_name=field.name, key_type=KeyType.RANGE)],
            )

    return list(local_indexes.values())


def _extract_attributes(descriptor: TypeDescriptor) -> List[AttributeDefinition]:
    return [
        AttributeDefinition(
            attribute_name=marker.resolve_name(field.name),
            attribute_type=resolve_scalar_type(field.name, field.value_type),
        )
        for field in descriptor.fields
        for marker in field.markers_of(Attribute)
    ]


def extract_table_definition(source: Union[TypeDescriptor, type]) -> TableDefinition:
    """Extract a TableDefinition from a type's markers.

    Args:
        source: A TypeDescriptor, or a pydantic model / dataclass to describe

    Returns:
        The table definition

    Raises:
        MissingTableMarkerError: If the type declares no table marker
        DuplicateIndexError: If a global index gets two partition keys or two sort keys
        OrphanedIndexSortKeyError: If a global index sort key has no partition key
        UnsupportedAttributeTypeError: If an attribute has no scalar type
        InvalidKeySchemaError: If there is not exactly one partition key, or more than one sort key

    Example:
        >>> definition = extract_table_definition(Order)
        >>> definition.key_schema[0].attribute_name
        'CustomerId'
    """
    descriptor = source if isinstance(source, TypeDescriptor) else describe_model(source)

    if descriptor.table_marker is None:
        raise MissingTableMarkerError(descriptor.type_name)

    table_name = descriptor.table_marker.resolve_name(descriptor.type_name)

    global_indexes = _extract_global_indexes(descriptor)
    local_indexes = _extract_local_indexes(descriptor)
    attributes = _extract_attributes(descriptor)
    key_schema = _extract_primary_key(descriptor)

    definition = TableDefinition(
        table_name=table_name,
        key_schema=key_schema,
        global_secondary_indexes=global_indexes,
        local_secondary_indexes=local_indexes,
        attribute_definitions=attributes,
    )

    logger.debug(
        f"Extracted table '{table_name}' from {descriptor.type_name}: "
        f"{len(definition.attribute_definitions)} attributes, "
        f"{len(definition.global_secondary_indexes)} global and "
        f"{len(definition.local_secondary_indexes)} local indexes"
    )
    return definition
