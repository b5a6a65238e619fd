# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers (process execution)."""

from .process import CommandOptions, run_command

__all__ = [
    "CommandOptions",
    "run_command",
]
