# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Option declarations shared by the devactions commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root (defaults to the current directory)."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Print the commands being executed."),
]


@dataclass(slots=True)
class CommonOptions:
    """Capture the options every command accepts."""

    root: Path
    emoji: bool
    debug: bool

    @classmethod
    def from_cli(cls, root: Path, *, emoji: bool, debug: bool) -> CommonOptions:
        """Return options with ``root`` resolved to an absolute path."""

        return cls(root=root.resolve(), emoji=emoji, debug=debug)


__all__ = ["CommonOptions", "DEBUG_OPTION", "EMOJI_OPTION", "ROOT_OPTION"]
