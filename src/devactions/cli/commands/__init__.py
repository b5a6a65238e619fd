# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

import typer

from .changes import check_branch_cs, check_staged_cs, lint_branch, lint_staged, resolve_changes
from .dispatch import dispatch_choice
from .migrations import generate_migration
from .thresholds import check_cs_thresholds

COMMANDS: Final[dict[str, Callable[..., None]]] = {
    "resolve-changes": resolve_changes,
    "dispatch-choice": dispatch_choice,
    "check-cs-thresholds": check_cs_thresholds,
    "generate-migration": generate_migration,
    "lint-staged": lint_staged,
    "lint-branch": lint_branch,
    "check-staged-cs": check_staged_cs,
    "check-branch-cs": check_branch_cs,
}

__all__ = ["COMMANDS", "register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register every devactions command on ``app``.

    Args:
        app: Typer application receiving the command registrations.
    """

    for name, callback in COMMANDS.items():
        app.command(name)(callback)
