# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Scaffold a new migration file."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...errors import MigrationValidationError
from ...filesystem.paths import display_relative_path
from ...migrations.scaffold import generate
from .. import services
from ..options import DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION, CommonOptions
from ..shared import CLIError


def generate_migration(
    name: Annotated[str | None, typer.Argument(help="Migration name, e.g. 'add index to links'.")] = None,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Write a timestamped migration skeleton to the migrations directory."""

    options = CommonOptions.from_cli(root, emoji=emoji, debug=debug)
    try:
        context = services.prepare_context(options)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    logger = context.logger
    try:
        target = generate(
            name,
            migrations_dir=context.config.migrations_path,
            registry=services.build_name_registry(context),
            extension=context.config.migrations.file_extension,
        )
    except MigrationValidationError as exc:
        logger.fail(str(exc))
        logger.debug(f"reason={exc.reason!r}")
        raise typer.Exit(code=1) from exc

    logger.ok(f"Created migration {display_relative_path(target, context.config.root)}")


__all__ = ["generate_migration"]
