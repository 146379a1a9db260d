"""
Core components for turning models into DynamoDB tables.

- Schema extraction: markers → TableDefinition
- Request building: TableDefinition → CreateTableRequest
- Provisioning: CreateTableRequest → DynamoDB table (boto3)
"""

from .schema_extractor import extract_table_definition, resolve_scalar_type
from .request_builder import build_create_table_request, generate_create_table_request
from .table_provisioner import TableProvisioner, create_table_provisioner, map_dynamodb_error

__all__ = [
    "extract_table_definition",
    "resolve_scalar_type",
    "build_create_table_request",
    "generate_create_table_request",
    "TableProvisioner",
    "create_table_provisioner",
    "map_dynamodb_error",
]
