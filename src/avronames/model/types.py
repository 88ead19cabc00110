# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type descriptions for the Avro schema data model."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

ARRAY_TYPE_NAME = "array"
MAP_TYPE_NAME = "map"
UNION_TYPE_NAME = "union"


class PrimitiveType(Enum):
    """Primitive types of the Avro format."""

    NULL = "null"
    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BYTES = "bytes"
    STRING = "string"


class PrimitiveTypeDef(BaseModel):
    """A primitive type. Its name and fullname are the primitive token."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: PrimitiveType


class RecordField(BaseModel):
    """A named, typed field of a record."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: AvroType
    doc: str | None = None


class RecordType(BaseModel):
    """A record type.

    ``name`` may be dotted, in which case it carries its own namespace.
    ``fullname`` stays empty until the type has been resolved.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["record"] = "record"
    name: str
    namespace: str = ""
    fullname: str = ""
    fields: tuple[RecordField, ...] = ()
    doc: str | None = None


class EnumType(BaseModel):
    """An enumeration type with a sequence of symbols."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["enum"] = "enum"
    name: str
    namespace: str = ""
    fullname: str = ""
    symbols: tuple[str, ...] = ()
    doc: str | None = None


class FixedType(BaseModel):
    """A fixed-size binary type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    name: str
    namespace: str = ""
    fullname: str = ""
    size: int = _Field(ge=0)


class ArrayType(BaseModel):
    """An array of ``items``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    items: AvroType


class MapType(BaseModel):
    """A map from strings to ``values``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["map"] = "map"
    values: AvroType


class UnionType(BaseModel):
    """A union of member types."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["union"] = "union"
    types: tuple[AvroType, ...] = ()


# Types that carry a user-assigned name.
NamedType = RecordType | EnumType | FixedType

# A type description — one of the primitive, named, or unnamed kinds.
# The `kind` discriminator field enables fast, unambiguous deserialization.
AvroType = Annotated[
    PrimitiveTypeDef | RecordType | EnumType | FixedType | ArrayType | MapType | UnionType,
    _Field(discriminator="kind"),
]


# Resolve forward references for models that use AvroType.
RecordField.model_rebuild()
RecordType.model_rebuild()
ArrayType.model_rebuild()
MapType.model_rebuild()
UnionType.model_rebuild()
