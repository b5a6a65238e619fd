# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Commands scoping lint and coding standards runs to changed files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config import STAGED_REFERENCE
from ...execution.changed import CHECK_CS_COMMAND, LINT_COMMAND, NO_FILES_MESSAGE, run_for_changed_files
from .. import services
from ..options import DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION, CommonOptions
from ..shared import CLIError

REFERENCE_ARGUMENT = Annotated[
    str | None,
    typer.Argument(help="Git reference to compare with (defaults to the configured branch)."),
]


def _run_for_changes(command: str, reference: str | None, options: CommonOptions) -> None:
    """Run ``command`` on the files changed against ``reference`` and exit.

    Raises:
        typer.Exit: Always raised with the downstream status, ``0`` when no
            file changed.
    """

    try:
        context = services.prepare_context(options)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    logger = context.logger
    target = reference or context.config.default_reference
    try:
        outcome = run_for_changed_files(
            command,
            target,
            extension=context.config.extension,
            resolver=services.build_resolver(context),
            runner=services.build_script_runner(context),
        )
    except FileNotFoundError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    if outcome.skipped:
        logger.echo(NO_FILES_MESSAGE)
        raise typer.Exit(code=0)
    logger.debug(f"files={len(outcome.files)} returncode={outcome.exit_code}")
    raise typer.Exit(code=outcome.exit_code)


def resolve_changes(
    reference: REFERENCE_ARGUMENT = None,
    extension: Annotated[
        str | None,
        typer.Argument(help="File suffix to keep (defaults to the configured one)."),
    ] = None,
    extension_option: Annotated[
        str | None,
        typer.Option("--extension", "-e", help="File suffix to keep; overrides the positional suffix."),
    ] = None,
    staged: Annotated[bool, typer.Option("--staged", help="Compare the index instead of a reference.")] = False,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Print the changed files that end with the extension, one per line.

    With ``--staged`` the index is compared, so a single positional value
    names the extension (``resolve-changes --staged .js``).
    """

    options = CommonOptions.from_cli(root, emoji=emoji, debug=debug)
    try:
        context = services.prepare_context(options)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    if staged and extension is None:
        reference, extension = None, reference
    target = STAGED_REFERENCE if staged else reference or context.config.default_reference
    suffix = extension_option or extension or context.config.extension
    try:
        files = services.build_resolver(context).resolve(target, suffix)
    except FileNotFoundError as exc:
        context.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    for name in files:
        context.logger.echo(name)


def lint_staged(
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Lint the staged files."""

    _run_for_changes(LINT_COMMAND, STAGED_REFERENCE, CommonOptions.from_cli(root, emoji=emoji, debug=debug))


def lint_branch(
    reference: REFERENCE_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Lint the files changed on the current branch."""

    _run_for_changes(LINT_COMMAND, reference, CommonOptions.from_cli(root, emoji=emoji, debug=debug))


def check_staged_cs(
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check the staged files against the coding standards."""

    _run_for_changes(CHECK_CS_COMMAND, STAGED_REFERENCE, CommonOptions.from_cli(root, emoji=emoji, debug=debug))


def check_branch_cs(
    reference: REFERENCE_ARGUMENT = None,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Check the files changed on the current branch against the coding standards."""

    _run_for_changes(CHECK_CS_COMMAND, reference, CommonOptions.from_cli(root, emoji=emoji, debug=debug))


__all__ = ["check_branch_cs", "check_staged_cs", "lint_branch", "lint_staged", "resolve_changes"]
