# Copyright 2026 AvroNames Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the avronames documentation."""

project = "avronames"
author = "AvroNames Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

autodoc_member_order = "bysource"

html_theme = "alabaster"
