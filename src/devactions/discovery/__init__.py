# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Changed-file discovery helpers."""

from __future__ import annotations

from .git import ChangeSet, ChangeSetResolver, GitRunner, diff_command, filter_files, resolve

__all__ = [
    "ChangeSet",
    "ChangeSetResolver",
    "GitRunner",
    "diff_command",
    "filter_files",
    "resolve",
]
