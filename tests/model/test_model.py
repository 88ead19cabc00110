# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""High-level tests demonstrating how to construct Avro type descriptions."""

import pytest
from pydantic import TypeAdapter, ValidationError

from avronames.model import (
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


def test_primitive_type() -> None:
    """A primitive type wraps one of the Avro primitive tokens."""
    t = PrimitiveTypeDef(primitive=PrimitiveType.LONG)
    assert t.kind == "primitive"
    assert t.primitive.value == "long"


def test_named_types_default_to_empty_namespace_and_fullname() -> None:
    rec = RecordType(name="Order")
    assert rec.namespace == ""
    assert rec.fullname == ""
    assert rec.fields == ()


def test_record_with_fields() -> None:
    rec = RecordType(
        name="Order",
        namespace="shop",
        fields=(
            RecordField(name="id", type=PrimitiveTypeDef(primitive=PrimitiveType.STRING)),
            RecordField(name="lines", type=ArrayType(items=RecordType(name="Line")), doc="Order lines."),
        ),
    )
    assert rec.fields[1].doc == "Order lines."
    assert isinstance(rec.fields[1].type, ArrayType)


def test_container_types() -> None:
    """Array, map and union types wrap inner type descriptions."""
    string = PrimitiveTypeDef(primitive=PrimitiveType.STRING)
    assert ArrayType(items=string).items == string
    assert MapType(values=string).values == string
    assert UnionType(types=(PrimitiveTypeDef(primitive=PrimitiveType.NULL), string)).types[1] == string


def test_types_are_frozen() -> None:
    rec = RecordType(name="Order")
    with pytest.raises(ValidationError):
        rec.name = "Other"


def test_fixed_size_must_not_be_negative() -> None:
    with pytest.raises(ValidationError):
        FixedType(name="Hash", size=-1)


def test_validate_from_dict_uses_kind_discriminator() -> None:
    """Structured dicts are validated into the matching variant by ``kind``."""
    adapter = TypeAdapter(AvroType)
    t = adapter.validate_python(
        {
            "kind": "record",
            "name": "Order",
            "namespace": "shop",
            "fields": [
                {"name": "status", "type": {"kind": "enum", "name": "Status", "symbols": ["NEW", "DONE"]}},
                {"name": "tags", "type": {"kind": "map", "values": {"kind": "primitive", "primitive": "string"}}},
            ],
        }
    )
    assert isinstance(t, RecordType)
    assert isinstance(t.fields[0].type, EnumType)
    assert isinstance(t.fields[1].type, MapType)


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValidationError):
        TypeAdapter(AvroType).validate_python({"kind": "decimal", "name": "D"})


def test_types_are_hashable() -> None:
    """Frozen types can be used as set members and dict keys."""
    rec = RecordType(
        name="Order",
        fields=(RecordField(name="status", type=EnumType(name="Status", symbols=("NEW",))),),
    )
    assert hash(RecordType(name="R")) == hash(RecordType(name="R"))
    assert len({rec, rec.model_copy()}) == 1
    assert isinstance(hash(UnionType(types=(PrimitiveTypeDef(primitive=PrimitiveType.NULL), rec))), int)


def test_sequence_fields_are_stored_as_tuples() -> None:
    """Lists given at construction are stored as immutable tuples."""
    enum = EnumType(name="Suit", symbols=["SPADES", "HEARTS"])
    assert enum.symbols == ("SPADES", "HEARTS")
    with pytest.raises(AttributeError):
        enum.symbols.append("CLUBS")  # type: ignore[attr-defined]


def test_named_type_alias_covers_named_kinds_only() -> None:
    string = PrimitiveTypeDef(primitive=PrimitiveType.STRING)
    assert isinstance(RecordType(name="R"), NamedType)
    assert isinstance(EnumType(name="E"), NamedType)
    assert isinstance(FixedType(name="F", size=1), NamedType)
    assert not isinstance(string, NamedType)
    assert not isinstance(ArrayType(items=string), NamedType)
    assert not isinstance(UnionType(types=(string,)), NamedType)
