# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Launch named downstream scripts through the project's script runner."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from ..config import ScriptSettings
from ..core.runtime.process import CommandOptions, run_command
from ..interfaces.runtime import ScriptOutput, ScriptRunner


class PrefixedScriptRunner(ScriptRunner):
    """Run scripts as ``<prefix...> <command> [-- <args...>]`` (``composer check-cs -- a.php``)."""

    def __init__(
        self,
        settings: ScriptSettings,
        *,
        cwd: Path | None = None,
        logger: Callable[[str], None] | None = None,
    ) -> None:
        self._prefix = settings.script_prefix
        self._cwd = cwd
        self._logger = logger

    def build_command(self, command: str, args: Sequence[str] = ()) -> list[str]:
        """Return the argument vector used to launch ``command``."""

        argv = [*self._prefix, command]
        if args:
            argv.extend(["--", *args])
        return argv

    def run(self, command: str, args: Sequence[str] = (), *, capture: bool = False) -> ScriptOutput:
        """Execute ``command`` once, streaming or capturing its output.

        Args:
            command: Downstream script name.
            args: Extra arguments forwarded after ``--``.
            capture: When ``True`` stdout is captured and returned as lines;
                otherwise it streams straight to the terminal.

        Returns:
            ScriptOutput: Captured lines (empty when streamed) and return code.
        """

        argv = self.build_command(command, args)
        if self._logger is not None:
            self._logger(f"command={' '.join(argv)} capture={capture}")
        completed = run_command(
            argv,
            options=CommandOptions(cwd=self._cwd, capture_output=capture),
        )
        lines = tuple((completed.stdout or "").splitlines()) if capture else ()
        return ScriptOutput(lines=lines, returncode=completed.returncode)


__all__ = ["PrefixedScriptRunner"]
