"""
Field and Table Markers

Markers declare the role a model field plays in a DynamoDB table. They are
attached through ``typing.Annotated`` metadata, so a field can carry several
of them at once::

    class Order(BaseModel):
        customer_id: Annotated[str, PartitionKey(), Attribute()]
        order_id: Annotated[str, SortKey(), Attribute()]
        status: Annotated[str, GlobalIndexPartitionKey("ByStatus"), Attribute()]
        total: Annotated[Decimal, Attribute()]

        class Meta(TableMeta):
            table_name = "Orders"

Pydantic keeps unknown ``Annotated`` metadata on ``FieldInfo.metadata``
untouched, which is where the schema extractor reads them back.

Every marker takes an optional name. For key and attribute markers it is the
attribute name; for index markers it is the index name. Absent a name, the
field's own name is used.
"""

from typing import Optional


class FieldMarker:
    """Base class for all field-level markers."""

    def __init__(self, name: Optional[str] = None):
        self.name = name

    def resolve_name(self, field_name: str) -> str:
        """Return the explicit name, falling back to the field name."""
        return self.name or field_name

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __repr__(self) -> str:
        if self.name is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.name!r})"


# =============================================================================
# Primary Key Markers
# =============================================================================

class PartitionKey(FieldMarker):
    """Primary partition (HASH) key of the table."""

    def __init__(self, attribute_name: Optional[str] = None):
        super().__init__(attribute_name)


class SortKey(FieldMarker):
    """Primary sort (RANGE) key of the table."""

    def __init__(self, attribute_name: Optional[str] = None):
        super().__init__(attribute_name)


# =============================================================================
# Secondary Index Markers
# =============================================================================

class GlobalIndexPartitionKey(FieldMarker):
    """Partition key of a global secondary index."""

    def __init__(self, index_name: Optional[str] = None):
        super().__init__(index_name)


class GlobalIndexSortKey(FieldMarker):
    """Sort key of a global secondary index.

    The index must also have a ``GlobalIndexPartitionKey`` under the same name.
    """

    def __init__(self, index_name: Optional[str] = None):
        super().__init__(index_name)


class LocalIndexSortKey(FieldMarker):
    """Sort key of a local secondary index (shares the table's partition key)."""

    def __init__(self, index_name: Optional[str] = None):
        super().__init__(index_name)


# =============================================================================
# Attribute Marker
# =============================================================================

class Attribute(FieldMarker):
    """A persisted scalar attribute declared in AttributeDefinitions."""

    def __init__(self, attribute_name: Optional[str] = None):
        super().__init__(attribute_name)


# =============================================================================
# Table Marker
# =============================================================================

class TableMarker:
    """Type-level marker naming the table a model is stored in."""

    def __init__(self, table_name: Optional[str] = None):
        self.table_name = table_name

    def resolve_name(self, type_name: str) -> str:
        return self.table_name or type_name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TableMarker) and self.table_name == other.table_name

    def __hash__(self) -> int:
        return hash(('TableMarker', self.table_name))

    def __repr__(self) -> str:
        return f"TableMarker({self.table_name!r})"


class TableMeta:
    """Base class for a model's ``Meta`` class.

    Declaring ``Meta`` is what marks a model as a table. ``table_name`` is
    optional and defaults to the model class name.
    """
    table_name: Optional[str] = None
