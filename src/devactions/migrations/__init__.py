# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Migration scaffolding."""

from .registry import MigrationNameRegistry
from .scaffold import MigrationDescriptor, describe, generate, is_valid_identifier, normalize_name
from .template import DEFAULT_TEMPLATE, MigrationTemplate

__all__ = [
    "DEFAULT_TEMPLATE",
    "MigrationDescriptor",
    "MigrationNameRegistry",
    "MigrationTemplate",
    "describe",
    "generate",
    "is_valid_identifier",
    "normalize_name",
]
