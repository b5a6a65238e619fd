# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol definitions for the seams devactions exposes to callers and tests."""

from .core import ConsoleManager
from .runtime import NameRegistry, ScriptOutput, ScriptRunner

__all__ = ["ConsoleManager", "NameRegistry", "ScriptOutput", "ScriptRunner"]
