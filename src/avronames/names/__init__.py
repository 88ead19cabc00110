# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name resolution and naming grammar for Avro types."""

from avronames.names.grammar import is_correct_dotted_name, is_correct_name
from avronames.names.resolver import (
    build_fullname_of_type,
    build_type_fullname,
    get_type_fullname,
    get_type_name,
    get_type_namespace,
    is_named_type,
    resolve_type,
    split_fullname,
    split_name_of_type,
    split_type_name,
)

__all__ = [
    # Accessors
    "is_named_type",
    "get_type_name",
    "get_type_namespace",
    "get_type_fullname",
    # Resolution
    "split_fullname",
    "split_type_name",
    "split_name_of_type",
    "build_type_fullname",
    "build_fullname_of_type",
    "resolve_type",
    # Grammar
    "is_correct_name",
    "is_correct_dotted_name",
]
