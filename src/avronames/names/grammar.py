# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming grammar for Avro type names, namespaces, field names and enum symbols."""

from __future__ import annotations

import string

from avronames.names.resolver import split_fullname

# ###############
# Public Interface
# ###############


def is_correct_name(name: str) -> bool:
    """Check a name that must not contain dots.

    Used for record field names, enum symbols and every single component of
    a type name or namespace. The name must start with ``[A-Za-z_]`` and
    continue with ``[A-Za-z0-9_]``.
    """
    if not name:
        return False
    if name[0] not in _FIRST_SYMBOLS:
        return False
    return all(symbol in _SYMBOLS for symbol in name[1:])


def is_correct_dotted_name(name: str) -> bool:
    """Check a type name or namespace whose components are separated by dots.

    Every component must be a correct name on its own, so empty components
    (leading, trailing, or consecutive dots) are rejected.
    """
    split = split_fullname(name)
    if split is None:
        return is_correct_name(name)
    short_name, namespace = split
    return is_correct_name(short_name) and is_correct_dotted_name(namespace)


# ################
# Implementation
# ################

_FIRST_SYMBOLS = frozenset(string.ascii_letters + "_")
_SYMBOLS = _FIRST_SYMBOLS | frozenset(string.digits)
