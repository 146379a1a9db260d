"""
Table Definition Models

The provider-neutral result of schema extraction: table name, primary key
schema, scalar attribute definitions and secondary indexes. All models are
frozen; a definition is built once per extraction and never mutated.

Organized by:
1. DynamoDB enumerations
2. Key and attribute elements
3. Index definitions
4. Table definition
"""

from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# DynamoDB Enumerations
# =============================================================================

class KeyType(str, Enum):
    """Role of an attribute in a key schema."""
    HASH = "HASH"
    RANGE = "RANGE"


class ScalarAttributeType(str, Enum):
    """The only attribute types a CreateTable request can declare."""
    NUMBER = "N"
    STRING = "S"
    BINARY = "B"


class BillingMode(str, Enum):
    """Billing modes accepted by CreateTable."""
    PAY_PER_REQUEST = "PAY_PER_REQUEST"
    PROVISIONED = "PROVISIONED"


class ProjectionType(str, Enum):
    """Attribute projections for secondary indexes."""
    ALL = "ALL"
    KEYS_ONLY = "KEYS_ONLY"


# Python value types and the scalar type they are stored as.
# bool is checked before int since it subclasses int.
NUMERIC_TYPES = (int, float, Decimal)
TEXT_TYPES = (str,)
BINARY_TYPES = (bytes, bytearray)


# =============================================================================
# Key and Attribute Elements
# =============================================================================

class KeySchemaElement(BaseModel):
    """One attribute of a key schema."""

    attribute_name: str = Field(..., description="Name of the key attribute")
    key_type: KeyType = Field(..., description="HASH for partition keys, RANGE for sort keys")

    model_config = ConfigDict(frozen=True)

    def to_boto3(self) -> dict:
        return {'AttributeName': self.attribute_name, 'KeyType': self.key_type.value}


class AttributeDefinition(BaseModel):
    """A persisted scalar attribute."""

    attribute_name: str = Field(..., description="Name of the attribute")
    attribute_type: ScalarAttributeType = Field(..., description="N, S or B")

    model_config = ConfigDict(frozen=True)

    def to_boto3(self) -> dict:
        return {'AttributeName': self.attribute_name, 'AttributeType': self.attribute_type.value}


# =============================================================================
# Index Definitions
# =============================================================================

class GlobalSecondaryIndex(BaseModel):
    """A global secondary index: its own partition key and optional sort key."""

    index_name: str = Field(..., description="Name of the index")
    key_schema: List[KeySchemaElement] = Field(..., description="Partition key, then optional sort key")

    model_config = ConfigDict(frozen=True)

    @property
    def partition_key(self) -> str:
        return self.key_schema[0].attribute_name

    @property
    def sort_key(self) -> Optional[str]:
        return self.key_schema[1].attribute_name if len(self.key_schema) > 1 else None


class LocalSecondaryIndex(BaseModel):
    """
    A local secondary index.

    Only the sort key is recorded here; the partition key is always the
    table's own and is filled in when the request is rendered.
    """

    index_name: str = Field(..., description="Name of the index")
    key_schema: List[KeySchemaElement] = Field(..., description="The index sort key")

    model_config = ConfigDict(frozen=True)

    @property
    def sort_key(self) -> str:
        return self.key_schema[0].attribute_name


# =============================================================================
# Table Definition
# =============================================================================

class TableDefinition(BaseModel):
    """Everything a CreateTable request needs, extracted from a model."""

    table_name: str = Field(..., description="Resolved table name")
    key_schema: List[KeySchemaElement] = Field(..., description="Partition key first, optional sort key second")
    attribute_definitions: List[AttributeDefinition] = Field(default_factory=list)
    global_secondary_indexes: List[GlobalSecondaryIndex] = Field(default_factory=list)
    local_secondary_indexes: List[LocalSecondaryIndex] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def partition_key(self) -> str:
        return self.key_schema[0].attribute_name

    @property
    def sort_key(self) -> Optional[str]:
        return self.key_schema[1].attribute_name if len(self.key_schema) > 1 else None

    def get_index_names(self) -> List[str]:
        """Names of all secondary indexes, global first."""
        return [gsi.index_name for gsi in self.global_secondary_indexes] + [
            lsi.index_name for lsi in self.local_secondary_indexes
        ]
