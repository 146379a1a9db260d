"""
DynamoDB Table Factory

Generates DynamoDB CreateTable requests from declarative field markers on
pydantic models (or dataclasses), and optionally creates the tables with boto3.
"""

from .config import DynamoDBConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    DuplicateIndexError,
    DynamoDBTableFactoryError,
    InvalidKeySchemaError,
    MissingTableMarkerError,
    NotFoundError,
    OrphanedIndexSortKeyError,
    RetryableError,
    TableDefinitionError,
    UnsupportedAttributeTypeError,
    ValidationError,
)
from .models import (
    # Markers
    Attribute,
    GlobalIndexPartitionKey,
    GlobalIndexSortKey,
    LocalIndexSortKey,
    PartitionKey,
    SortKey,
    TableMarker,
    TableMeta,
    # Descriptors
    FieldDescriptor,
    TypeDescriptor,
    describe_model,
    # Results
    TableDefinition,
    CreateTableRequest,
    BillingMode,
    ProjectionType,
)
from .core import (
    extract_table_definition,
    build_create_table_request,
    generate_create_table_request,
    TableProvisioner,
    create_table_provisioner,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "DynamoDBConfig",

    # Exceptions
    "DynamoDBTableFactoryError",
    "TableDefinitionError",
    "MissingTableMarkerError",
    "OrphanedIndexSortKeyError",
    "UnsupportedAttributeTypeError",
    "InvalidKeySchemaError",
    "DuplicateIndexError",
    "ConflictError",
    "ConnectionError",
    "NotFoundError",
    "RetryableError",
    "ValidationError",

    # Markers
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

    # Results
    "TableDefinition",
    "CreateTableRequest",
    "BillingMode",
    "ProjectionType",

    # Operations
    "extract_table_definition",
    "build_create_table_request",
    "generate_create_table_request",
    "TableProvisioner",
    "create_table_provisioner",
]
