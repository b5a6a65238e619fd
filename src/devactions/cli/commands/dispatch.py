# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interactive coding standards menu."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Annotated

import typer

from ...dispatch.menu import DEFAULT_MENU, dispatch
from .. import services
from ..options import DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION, CommonOptions
from ..shared import CLIError


def dispatch_choice(
    key: Annotated[str | None, typer.Argument(help="Menu key; prompts for one when omitted.")] = None,
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Pick one of the coding standards commands and run it."""

    options = CommonOptions.from_cli(root, emoji=emoji, debug=debug)
    try:
        context = services.prepare_context(options)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    logger = context.logger
    try:
        outcome = dispatch(
            DEFAULT_MENU,
            key,
            runner=services.build_script_runner(context),
            prompt=partial(typer.prompt, prompt_suffix=" "),
            echo=logger.echo,
        )
    except FileNotFoundError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    logger.debug(f"selection={outcome.selection} command={outcome.command}")
    raise typer.Exit(code=outcome.exit_code)


__all__ = ["dispatch_choice"]
