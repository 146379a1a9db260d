"""
CreateTable Request Builder

Assembles a TableDefinition into a CreateTableRequest. Pure assembly with no
I/O: the primary key schema keeps partition-then-sort order, indexes keep
their discovery order.

Without a configuration the request mirrors the definition exactly. With a
DynamoDBConfig the table name gets the configured prefix/environment and the
billing mode, provisioned throughput and index projection are filled in.
"""

import logging
from typing import Optional, Union

from ..config import DynamoDBConfig
from ..models.descriptors import TypeDescriptor
from ..models.requests import CreateTableRequest, ProvisionedThroughput
from ..models.table_definition import BillingMode, TableDefinition
from .schema_extractor import extract_table_definition

logger = logging.getLogger(__name__)


def build_create_table_request(
    definition: TableDefinition,
    config: Optional[DynamoDBConfig] = None
) -> CreateTableRequest:
    """Build a CreateTableRequest from a table definition.

    Args:
        definition: Extracted table definition
        config: Optional configuration for naming and billing

    Returns:
        CreateTableRequest ready for ``to_boto3_kwargs()``
    """
    request_fields = {
        'table_name': definition.table_name,
        'key_schema': list(definition.key_schema),
        'attribute_definitions': list(definition.attribute_definitions),
        'global_secondary_indexes': list(definition.global_secondary_indexes),
        'local_secondary_indexes': list(definition.local_secondary_indexes),
    }

    if config is not None:
        billing_mode = BillingMode(config.billing_mode)
        request_fields['table_name'] = config.get_table_name(definition.table_name)
        request_fields['billing_mode'] = billing_mode
        request_fields['projection_type'] = config.index_projection_type
        if billing_mode == BillingMode.PROVISIONED:
            request_fields['provisioned_throughput'] = ProvisionedThroughput(
                read_capacity_units=config.read_capacity_units,
                write_capacity_units=config.write_capacity_units,
            )

    request = CreateTableRequest(**request_fields)
    logger.debug(f"Built CreateTable request for '{request.table_name}'")
    return request


def generate_create_table_request(
    source: Union[TypeDescriptor, type],
    config: Optional[DynamoDBConfig] = None
) -> CreateTableRequest:
    """Extract a model's table definition and build its CreateTable request.

    Args:
        source: Pydantic model, dataclass or TypeDescriptor
        config: Optional configuration for naming and billing

    Returns:
        CreateTableRequest for the model's table

    Example:
        >>> request = generate_create_table_request(Order)
        >>> client.create_table(**request.to_boto3_kwargs())
    """
    return build_create_table_request(extract_table_definition(source), config)
