# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Downstream script execution."""

from __future__ import annotations

from .changed import CHECK_CS_COMMAND, LINT_COMMAND, NO_FILES_MESSAGE, ChangedFilesOutcome, run_for_changed_files
from .scripts import PrefixedScriptRunner

__all__ = [
    "CHECK_CS_COMMAND",
    "ChangedFilesOutcome",
    "LINT_COMMAND",
    "NO_FILES_MESSAGE",
    "PrefixedScriptRunner",
    "run_for_changed_files",
]
