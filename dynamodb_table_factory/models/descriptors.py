"""
Type Descriptors

An explicit description of a model's fields and the markers attached to them.
The schema extractor works on these, never on classes directly, so a caller
can describe a table without declaring a model at all::

    TypeDescriptor(
        type_name="Orders",
        table_marker=TableMarker(),
        fields=[
            FieldDescriptor(name="CustomerId", value_type=str, markers=[PartitionKey(), Attribute()]),
            FieldDescriptor(name="OrderId", value_type=str, markers=[SortKey(), Attribute()]),
        ],
    )

``describe_model`` builds one from a pydantic model or a dataclass whose
fields use ``Annotated`` markers.
"""

import dataclasses
import logging
from typing import Annotated, Any, List, Optional, Type, get_args, get_origin, get_type_hints

from pydantic import BaseModel, ConfigDict, Field

from .markers import FieldMarker, TableMarker

logger = logging.getLogger(__name__)


class FieldDescriptor(BaseModel):
    """A single field: its name, declared value type and markers."""

    name: str = Field(..., description="Field name as declared on the type")
    value_type: Any = Field(..., description="Declared value type of the field")
    markers: List[FieldMarker] = Field(default_factory=list, description="Markers attached to the field")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def markers_of(self, marker_type: Type[FieldMarker]) -> List[FieldMarker]:
        """Return the markers that are instances of ``marker_type``, in declaration order."""
        return [marker for marker in self.markers if isinstance(marker, marker_type)]


class TypeDescriptor(BaseModel):
    """A whole type: its name, optional table marker and fields."""

    type_name: str = Field(..., description="Declared name of the type")
    table_marker: Optional[TableMarker] = Field(None, description="Table marker; None if the type is not a table")
    fields: List[FieldDescriptor] = Field(default_factory=list, description="Fields in declaration order")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def _split_annotated(annotation: Any) -> tuple:
    """Split ``Annotated[T, m1, m2]`` into ``(T, [m1, m2])``."""
    if get_origin(annotation) is Annotated:
        value_type, *metadata = get_args(annotation)
        return value_type, metadata
    return annotation, []


def _table_marker_for(model_class: type) -> Optional[TableMarker]:
    meta = getattr(model_class, 'Meta', None)
    if meta is None:
        return None
    return TableMarker(getattr(meta, 'table_name', None))


def describe_model(model_class: type) -> TypeDescriptor:
    """Describe a pydantic model or dataclass as a TypeDescriptor.

    Args:
        model_class: Pydantic BaseModel subclass or dataclass type

    Returns:
        TypeDescriptor with one FieldDescriptor per declared field

    Raises:
        TypeError: If model_class is neither a pydantic model nor a dataclass
    """
    fields = []

    if isinstance(model_class, type) and issubclass(model_class, BaseModel):
        for name, field_info in model_class.model_fields.items():
            markers = [m for m in field_info.metadata if isinstance(m, FieldMarker)]
            fields.append(FieldDescriptor(name=name, value_type=field_info.annotation, markers=markers))

    elif isinstance(model_class, type) and dataclasses.is_dataclass(model_class):
        hints = get_type_hints(model_class, include_extras=True)
        for dataclass_field in dataclasses.fields(model_class):
            value_type, metadata = _split_annotated(hints[dataclass_field.name])
            markers = [m for m in metadata if isinstance(m, FieldMarker)]
            fields.append(FieldDescriptor(name=dataclass_field.name, value_type=value_type, markers=markers))

    else:
        raise TypeError(f"Cannot describe {model_class!r}: expected a pydantic model or a dataclass")

    descriptor = TypeDescriptor(
        type_name=model_class.__name__,
        table_marker=_table_marker_for(model_class),
        fields=fields,
    )
    logger.debug(f"Described {model_class.__name__} with {len(fields)} fields")
    return descriptor
