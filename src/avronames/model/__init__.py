# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Avro type descriptions (primitive, record, enum, fixed, array, map, union)."""

from avronames.model.types import (
    ARRAY_TYPE_NAME,
    MAP_TYPE_NAME,
    UNION_TYPE_NAME,
    ArrayType,
    AvroType,
    EnumType,
    FixedType,
    MapType,
    NamedType,
    PrimitiveType,
    PrimitiveTypeDef,
    RecordField,
    RecordType,
    UnionType,
)

__all__ = [
    # Constants
    "ARRAY_TYPE_NAME",
    "MAP_TYPE_NAME",
    "UNION_TYPE_NAME",
    # Primitive types
    "PrimitiveType",
    "PrimitiveTypeDef",
    # Named types
    "RecordField",
    "RecordType",
    "EnumType",
    "FixedType",
    "NamedType",
    # Unnamed types
    "ArrayType",
    "MapType",
    "UnionType",
    "AvroType",
]
