# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name checks for Avro type descriptions.

The checks for a single type are fail-fast: the first problem found is
reported and the remaining checks are skipped. Whether one bad type aborts
loading a whole schema is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass

from avronames.model.types import (
    ARRAY_TYPE_NAME,
    MAP_TYPE_NAME,
    UNION_TYPE_NAME,
    ArrayType,
    AvroType,
    EnumType,
    MapType,
    PrimitiveType,
    RecordType,
    UnionType,
)
from avronames.names.grammar import is_correct_dotted_name, is_correct_name
from avronames.names.resolver import (
    get_type_fullname,
    get_type_name,
    get_type_namespace,
    is_named_type,
    split_type_name,
)

# ###############
# Public Interface
# ###############

# Built-in type names that can never be the short name of a named type.
RESERVED_TYPE_NAMES: frozenset[str] = frozenset(p.value for p in PrimitiveType) | {
    ARRAY_TYPE_NAME,
    MAP_TYPE_NAME,
    UNION_TYPE_NAME,
}


@dataclass(frozen=True)
class InvalidName:
    """A name, namespace, or fullname that does not follow the naming grammar.

    Attributes:
        name: The offending string.
    """

    name: str

    @property
    def message(self) -> str:
        return f"Invalid name '{self.name}'."


@dataclass(frozen=True)
class ReservedNameUsed:
    """A named type whose canonical short name is a reserved type name.

    Attributes:
        name: The reserved short name.
    """

    name: str

    @property
    def message(self) -> str:
        return f"Reserved name '{self.name}' is used for a type name."


NameCheckError = InvalidName | ReservedNameUsed


class TypeVerificationError(Exception):
    """Raised by :func:`verify_type` when a type has an invalid or reserved name."""

    def __init__(self, error: NameCheckError) -> None:
        super().__init__(error.message)
        self.error = error


def check_type(avro_type: AvroType) -> NameCheckError | None:
    """Check the naming of a single type description.

    Checks performed, in order:

    1. The stored name is a correct dotted name.
    2. The stored namespace is empty or a correct dotted name.
    3. The stored fullname is a correct dotted name.
    4. The canonical short name is not one of :data:`RESERVED_TYPE_NAMES`.

    The grammar checks must pass before the short name is computed, because
    splitting assumes well-formed names. Unnamed and primitive types always
    pass.

    Args:
        avro_type: The type to check. Its fullname should have been populated
            (e.g., via :func:`avronames.names.resolve_type`).

    Returns:
        The first error found, or ``None`` if the type is valid.
    """
    if not is_named_type(avro_type):
        return None

    name = get_type_name(avro_type)
    namespace = get_type_namespace(avro_type)
    fullname = get_type_fullname(avro_type)

    if not is_correct_dotted_name(name):
        return InvalidName(name=name)
    if namespace and not is_correct_dotted_name(namespace):
        return InvalidName(name=namespace)
    if not is_correct_dotted_name(fullname):
        return InvalidName(name=fullname)

    # Only the type's own short name matters here, so the enclosing namespace is irrelevant.
    short_name, _ = split_type_name(name, namespace, "")
    if short_name in RESERVED_TYPE_NAMES:
        return ReservedNameUsed(name=short_name)
    return None


def verify_type(avro_type: AvroType) -> None:
    """Verify the naming of a type description.

    Raises:
        TypeVerificationError: If :func:`check_type` reports an error. The
            error record is available as ``exc.error``.
    """
    error = check_type(avro_type)
    if error is not None:
        raise TypeVerificationError(error)


def check_symbol_names(avro_type: AvroType) -> list[InvalidName]:
    """Return errors for record field names and enum symbols that are not correct names."""
    if isinstance(avro_type, RecordType):
        return [InvalidName(name=f.name) for f in avro_type.fields if not is_correct_name(f.name)]
    if isinstance(avro_type, EnumType):
        return [InvalidName(name=s) for s in avro_type.symbols if not is_correct_name(s)]
    return []


def check_schema(avro_type: AvroType) -> list[NameCheckError]:
    """Run :func:`check_type` on every type reachable from *avro_type*.

    Types are visited depth-first, parents before children, through record
    fields, array items, map values and union members.

    Returns:
        One error per offending type. An empty list means every type is valid.
    """
    errors: list[NameCheckError] = []

    def _visit(node: AvroType) -> None:
        error = check_type(node)
        if error is not None:
            errors.append(error)
        for child in _children(node):
            _visit(child)

    _visit(avro_type)
    return errors


# ################
# Implementation
# ################


def _children(avro_type: AvroType) -> list[AvroType]:
    """Return the types directly nested in *avro_type*."""
    if isinstance(avro_type, RecordType):
        return [f.type for f in avro_type.fields]
    if isinstance(avro_type, ArrayType):
        return [avro_type.items]
    if isinstance(avro_type, MapType):
        return [avro_type.values]
    if isinstance(avro_type, UnionType):
        return list(avro_type.types)
    return []
