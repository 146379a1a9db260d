# Field and table markers
from .markers import (
    FieldMarker,
    PartitionKey,
    SortKey,
    GlobalIndexPartitionKey,
    GlobalIndexSortKey,
    LocalIndexSortKey,
    Attribute,
    TableMarker,
    TableMeta,
)

# Explicit type descriptors
from .descriptors import (
    FieldDescriptor,
    TypeDescriptor,
    describe_model,
)

# Extraction results
from .table_definition import (
    KeyType,
    ScalarAttributeType,
    BillingMode,
    ProjectionType,
    KeySchemaElement,
    AttributeDefinition,
    GlobalSecondaryIndex,
    LocalSecondaryIndex,
    TableDefinition,
)

# CreateTable request
from .requests import (
    CreateTableRequest,
    ProvisionedThroughput,
)

__all__ = [
    # Markers
    "FieldMarker",
    "PartitionKey",
    "SortKey",
    "GlobalIndexPartitionKey",
    "GlobalIndexSortKey",
    "LocalIndexSortKey",
    "Attribute",
    "TableMarker",
    "TableMeta",

    # Descriptors
    "FieldDescriptor",
    "TypeDescriptor",
    "describe_model",

    # Enums
    "KeyType",
    "ScalarAttributeType",
    "BillingMode",
    "ProjectionType",

    # Table definition
    "KeySchemaElement",
    "AttributeDefinition",
    "GlobalSecondaryIndex",
    "LocalSecondaryIndex",
    "TableDefinition",

    # Requests
    "CreateTableRequest",
    "ProvisionedThroughput",
]
