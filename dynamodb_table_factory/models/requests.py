"""
CreateTable Request Model

The hand-off value passed to boto3. ``to_boto3_kwargs`` renders it as the
keyword arguments of ``client.create_table``; ``to_summary`` renders the
provider-neutral shape (name, primary key schema, attribute definitions,
secondary and local indexes).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .table_definition import (
    AttributeDefinition,
    BillingMode,
    GlobalSecondaryIndex,
    KeySchemaElement,
    LocalSecondaryIndex,
    ProjectionType,
)


class ProvisionedThroughput(BaseModel):
    """Read/write capacity for PROVISIONED tables and global indexes."""

    read_capacity_units: int = Field(..., ge=1)
    write_capacity_units: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)

    def to_boto3(self) -> Dict[str, int]:
        return {
            'ReadCapacityUnits': self.read_capacity_units,
            'WriteCapacityUnits': self.write_capacity_units,
        }


class CreateTableRequest(BaseModel):
    """A complete DynamoDB CreateTable request."""

    table_name: str = Field(..., description="Physical table name")
    key_schema: List[KeySchemaElement] = Field(..., description="Partition key first, optional sort key second")
    attribute_definitions: List[AttributeDefinition] = Field(default_factory=list)
    global_secondary_indexes: List[GlobalSecondaryIndex] = Field(default_factory=list)
    local_secondary_indexes: List[LocalSecondaryIndex] = Field(default_factory=list)

    # Set by the request builder when a configuration is supplied
    billing_mode: Optional[BillingMode] = Field(None, description="PAY_PER_REQUEST or PROVISIONED")
    provisioned_throughput: Optional[ProvisionedThroughput] = Field(None, description="Capacity for PROVISIONED mode")
    projection_type: ProjectionType = Field(ProjectionType.ALL, description="Projection for every secondary index")

    model_config = ConfigDict(frozen=True)

    def _projection(self) -> Dict[str, str]:
        return {'ProjectionType': ProjectionType(self.projection_type).value}

    def to_boto3_kwargs(self) -> Dict[str, Any]:
        """
        Render the request as ``create_table`` keyword arguments.

        Empty index lists and unset billing fields are left out since
        DynamoDB rejects empty ``GlobalSecondaryIndexes`` and
        ``LocalSecondaryIndexes`` lists.

        Example:
            client.create_table(**request.to_boto3_kwargs())
        """
        kwargs: Dict[str, Any] = {
            'TableName': self.table_name,
            'KeySchema': [element.to_boto3() for element in self.key_schema],
            'AttributeDefinitions': [attribute.to_boto3() for attribute in self.attribute_definitions],
        }

        if self.global_secondary_indexes:
            global_indexes = []
            for gsi in self.global_secondary_indexes:
                entry = {
                    'IndexName': gsi.index_name,
                    'KeySchema': [element.to_boto3() for element in gsi.key_schema],
                    'Projection': self._projection(),
                }
                if self.provisioned_throughput is not None:
                    entry['ProvisionedThroughput'] = self.provisioned_throughput.to_boto3()
                global_indexes.append(entry)
            kwargs['GlobalSecondaryIndexes'] = global_indexes

        if self.local_secondary_indexes:
            # LSIs share the table's partition key
            partition_element = self.key_schema[0].to_boto3()
            kwargs['LocalSecondaryIndexes'] = [
                {
                    'IndexName': lsi.index_name,
                    'KeySchema': [partition_element] + [element.to_boto3() for element in lsi.key_schema],
                    'Projection': self._projection(),
                }
                for lsi in self.local_secondary_indexes
            ]

        if self.billing_mode is not None:
            kwargs['BillingMode'] = BillingMode(self.billing_mode).value
        if self.provisioned_throughput is not None:
            kwargs['ProvisionedThroughput'] = self.provisioned_throughput.to_boto3()

        return kwargs

    def to_summary(self) -> Dict[str, Any]:
        """Render the provider-neutral shape of the request."""
        roles = {'HASH': 'partition', 'RANGE': 'sort'}
        kinds = {'N': 'numeric', 'S': 'string', 'B': 'binary'}
        return {
            'name': self.table_name,
            'primaryKeySchema': [
                {'fieldName': e.attribute_name, 'role': roles[e.key_type.value]} for e in self.key_schema
            ],
            'attributeDefinitions': [
                {'name': a.attribute_name, 'scalarType': kinds[a.attribute_type.value]}
                for a in self.attribute_definitions
            ],
            'secondaryIndexes': [
                {
                    'name': gsi.index_name,
                    'keySchema': [
                        {'fieldName': e.attribute_name, 'role': roles[e.key_type.value]} for e in gsi.key_schema
                    ],
                }
                for gsi in self.global_secondary_indexes
            ],
            'localIndexes': [
                {'name': lsi.index_name, 'sortKeyField': lsi.sort_key} for lsi in self.local_secondary_indexes
            ],
        }
