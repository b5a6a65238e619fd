# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from .commands import register_commands
from .typer_ext import TyperAppConfig, create_typer

app = create_typer(config=TyperAppConfig(help_text="Developer task runner: change-scoped checks, menus, gates and migrations."))
register_commands(app)

__all__ = ["app"]
