# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Canonical short names, namespaces, and fullnames of Avro types.

A named type (record, enum, fixed) may spell its namespace in three ways,
listed in order of precedence:

1. As part of a dotted ``name`` (``"a.b.Rec"``). The part after the last dot
   is the short name, everything before it is the namespace.
2. In its own ``namespace`` field.
3. Inherited from the enclosing type, when neither of the above is present.
"""

from __future__ import annotations

from typing import TypeGuard, assert_never

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
    PrimitiveTypeDef,
    RecordType,
    UnionType,
)

# ###############
# Public Interface
# ###############


def is_named_type(avro_type: AvroType) -> TypeGuard[NamedType]:
    """Return True if the type can have its own name defined in a schema."""
    return isinstance(avro_type, NamedType)


def get_type_name(avro_type: AvroType) -> str:
    """Return the type's name.

    For named types this is the content of the ``name`` field, which can be
    either a short name or a full name depending on how the type was
    specified. Unnamed types return their Avro type name.
    """
    if isinstance(avro_type, PrimitiveTypeDef):
        return avro_type.primitive.value
    if isinstance(avro_type, NamedType):
        return avro_type.name
    if isinstance(avro_type, ArrayType):
        return ARRAY_TYPE_NAME
    if isinstance(avro_type, MapType):
        return MAP_TYPE_NAME
    if isinstance(avro_type, UnionType):
        return UNION_TYPE_NAME
    assert_never(avro_type)


def get_type_namespace(avro_type: AvroType) -> str:
    """Return the type's namespace exactly as it is stored.

    This is an empty string when the namespace is embedded in a dotted name
    or when the type cannot have a namespace at all.
    """
    if isinstance(avro_type, NamedType):
        return avro_type.namespace
    if isinstance(avro_type, (PrimitiveTypeDef, ArrayType, MapType, UnionType)):
        return ""
    assert_never(avro_type)


def get_type_fullname(avro_type: AvroType) -> str:
    """Return the fullname stored inside the type.

    The stored value is returned as is and is only meaningful for named types
    that went through :func:`resolve_type`. Unnamed types return their Avro
    type name.
    """
    if isinstance(avro_type, NamedType):
        return avro_type.fullname
    if isinstance(avro_type, (PrimitiveTypeDef, ArrayType, MapType, UnionType)):
        return get_type_name(avro_type)
    assert_never(avro_type)


def split_fullname(fullname: str) -> tuple[str, str] | None:
    """Split a dotted name at its last dot into ``(short_name, namespace)``.

    Returns ``None`` if *fullname* contains no dot. The result is only
    meaningful for well-formed names: ``"a..b"`` splits into ``("b", "a.")``.
    """
    dot_pos = fullname.rfind(".")
    if dot_pos < 0:
        return None
    return fullname[dot_pos + 1 :], fullname[:dot_pos]


def split_type_name(type_name: str, namespace: str, enclosing_namespace: str) -> tuple[str, str]:
    """Split a type name into its canonical short name and namespace.

    Args:
        type_name: The raw name, possibly dotted.
        namespace: The namespace stored in the type, possibly empty.
        enclosing_namespace: The namespace of the type's lexical container.

    Returns:
        A ``(short_name, namespace)`` pair. A dotted *type_name* wins over
        both namespaces; otherwise *namespace* is used when non-empty, and
        *enclosing_namespace* when it is empty.
    """
    split = split_fullname(type_name)
    if split is not None:
        return split
    proper_namespace = namespace if namespace else enclosing_namespace
    return type_name, proper_namespace


def build_type_fullname(type_name: str, namespace: str, enclosing_namespace: str) -> str:
    """Construct the canonical fullname from a name and its namespaces."""
    short_name, proper_namespace = split_type_name(type_name, namespace, enclosing_namespace)
    return _make_fullname(short_name, proper_namespace)


def split_name_of_type(avro_type: AvroType, enclosing_namespace: str) -> tuple[str, str]:
    """Same as :func:`split_type_name`, using the name and namespace stored in *avro_type*."""
    return split_type_name(get_type_name(avro_type), get_type_namespace(avro_type), enclosing_namespace)


def build_fullname_of_type(avro_type: AvroType, enclosing_namespace: str) -> str:
    """Same as :func:`build_type_fullname`, using the name and namespace stored in *avro_type*."""
    return build_type_fullname(get_type_name(avro_type), get_type_namespace(avro_type), enclosing_namespace)


def resolve_type(avro_type: AvroType, enclosing_namespace: str = "") -> AvroType:
    """Return a copy of *avro_type* with the fullname of every named type populated.

    Named types nested in record fields inherit the namespace resolved for
    the record. Array items, map values and union members inherit
    *enclosing_namespace* unchanged, since those kinds have no namespace of
    their own.

    Names are not validated here; run the checks in
    :mod:`avronames.validation` on the result before relying on it.
    """
    if isinstance(avro_type, PrimitiveTypeDef):
        return avro_type
    if isinstance(avro_type, RecordType):
        short_name, namespace = split_name_of_type(avro_type, enclosing_namespace)
        fields = tuple(
            field.model_copy(update={"type": resolve_type(field.type, namespace)}) for field in avro_type.fields
        )
        return avro_type.model_copy(update={"fullname": _make_fullname(short_name, namespace), "fields": fields})
    if isinstance(avro_type, (EnumType, FixedType)):
        return avro_type.model_copy(update={"fullname": build_fullname_of_type(avro_type, enclosing_namespace)})
    if isinstance(avro_type, ArrayType):
        return avro_type.model_copy(update={"items": resolve_type(avro_type.items, enclosing_namespace)})
    if isinstance(avro_type, MapType):
        return avro_type.model_copy(update={"values": resolve_type(avro_type.values, enclosing_namespace)})
    if isinstance(avro_type, UnionType):
        members = tuple(resolve_type(member, enclosing_namespace) for member in avro_type.types)
        return avro_type.model_copy(update={"types": members})
    assert_never(avro_type)


# ################
# Implementation
# ################


def _make_fullname(short_name: str, namespace: str) -> str:
    """Join a short name and a namespace, leaving the name bare when the namespace is empty."""
    if not namespace:
        return short_name
    return f"{namespace}.{short_name}"
