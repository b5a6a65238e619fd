# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Coding standards menu and the dispatcher invoking the chosen script."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from types import MappingProxyType
from typing import Final

from ..config import MenuChoice
from ..interfaces.runtime import ScriptOutput, ScriptRunner

ChoiceMenu = Mapping[str, MenuChoice]
Handler = Callable[[], ScriptOutput]

PROMPT_TEXT: Final[str] = "What do you want to do?"
UNKNOWN_CHOICE_MESSAGE: Final[str] = "Unknown choice."

DEFAULT_MENU: Final[ChoiceMenu] = MappingProxyType(
    {
        "1": MenuChoice(
            label="Check staged files for coding standard warnings & errors.",
            command="check-staged-cs",
        ),
        "2": MenuChoice(
            label="Check current branch's changed files for coding standard warnings & errors.",
            command="check-branch-cs",
        ),
        "3": MenuChoice(label="Check for all coding standard errors.", command="check-cs"),
        "4": MenuChoice(label="Check for all coding standard warnings & errors.", command="check-cs-warnings"),
        "5": MenuChoice(label="Fix auto-fixable coding standards.", command="fix-cs"),
        "6": MenuChoice(label="Check for coding standards thresholds.", command="check-cs-thresholds"),
    }
)


@dataclass(frozen=True, slots=True)
class DispatchOutcome:
    """Record what a dispatch call did.

    Attributes:
        selection: Key that was looked up.
        command: Downstream command that ran, ``None`` for an unknown choice.
        output: Output of the downstream command, ``None`` when nothing ran.
    """

    selection: str
    command: str | None = None
    output: ScriptOutput | None = None

    @property
    def known(self) -> bool:
        """Return ``True`` when the selection matched a menu entry."""

        return self.command is not None

    @property
    def exit_code(self) -> int:
        """Return the downstream status; an unknown choice is not a failure."""

        return 0 if self.output is None else self.output.returncode


def render_menu(menu: ChoiceMenu) -> list[str]:
    """Return ``"<key>. <label>"`` lines in ascending key order."""

    return [f"{key}. {menu[key].label}" for key in sorted(menu)]


def build_handlers(menu: ChoiceMenu, runner: ScriptRunner) -> dict[str, Handler]:
    """Bind every menu key to a zero-argument handler running its command.

    Args:
        menu: Menu entries keyed by selection.
        runner: Runner the handlers delegate to.

    Returns:
        dict[str, Handler]: Handler per key.
    """

    return {key: partial(runner.run, choice.command) for key, choice in menu.items()}


def dispatch(
    menu: ChoiceMenu,
    selection: str | None,
    *,
    runner: ScriptRunner,
    prompt: Callable[[str], str] | None = None,
    echo: Callable[[str], None] | None = None,
) -> DispatchOutcome:
    """Run the downstream command chosen from ``menu``.

    When ``selection`` is ``None`` the menu is rendered through ``echo`` and
    the user is asked for a key via ``prompt``. At most one command runs.

    Args:
        menu: Menu entries keyed by selection.
        selection: Pre-supplied key, or ``None`` to ask interactively.
        runner: Runner executing the downstream command.
        prompt: Callable asking the user for a key.
        echo: Callable receiving menu lines and the unknown-choice notice.

    Returns:
        DispatchOutcome: What was selected and run.

    Raises:
        ValueError: If interactive selection is needed but no ``prompt`` is given.
    """

    emit = echo or (lambda _message: None)
    if selection is None:
        if prompt is None:
            raise ValueError("interactive selection requires a prompt callable")
        for line in render_menu(menu):
            emit(line)
        selection = prompt(PROMPT_TEXT)
    key = selection.strip()

    handler = build_handlers(menu, runner).get(key)
    if handler is None:
        emit(UNKNOWN_CHOICE_MESSAGE)
        return DispatchOutcome(selection=key)
    return DispatchOutcome(selection=key, command=menu[key].command, output=handler())


__all__ = [
    "ChoiceMenu",
    "DEFAULT_MENU",
    "DispatchOutcome",
    "Handler",
    "PROMPT_TEXT",
    "UNKNOWN_CHOICE_MESSAGE",
    "build_handlers",
    "dispatch",
    "render_menu",
]
