# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name checks for Avro types (grammar violations, reserved names)."""

from avronames.validation.checks import (
    RESERVED_TYPE_NAMES,
    InvalidName,
    NameCheckError,
    ReservedNameUsed,
    TypeVerificationError,
    check_schema,
    check_symbol_names,
    check_type,
    verify_type,
)

__all__ = [
    "RESERVED_TYPE_NAMES",
    "InvalidName",
    "NameCheckError",
    "ReservedNameUsed",
    "TypeVerificationError",
    "check_schema",
    "check_symbol_names",
    "check_type",
    "verify_type",
]
