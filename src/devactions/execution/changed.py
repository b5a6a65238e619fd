# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run a downstream script against the files changed since a git reference."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from ..discovery.git import ChangeSet, ChangeSetResolver
from ..interfaces.runtime import ScriptOutput, ScriptRunner

NO_FILES_MESSAGE: Final[str] = "No files to compare! Exiting."
LINT_COMMAND: Final[str] = "lint-files"
CHECK_CS_COMMAND: Final[str] = "check-cs"


@dataclass(frozen=True, slots=True)
class ChangedFilesOutcome:
    """Result of running a script over a change set.

    Attributes:
        files: Change set the script was (or would have been) run against.
        output: Script output, ``None`` when there was nothing to do.
    """

    files: ChangeSet
    output: ScriptOutput | None = None

    @property
    def skipped(self) -> bool:
        """Return ``True`` when the change set was empty and nothing ran."""

        return self.output is None

    @property
    def exit_code(self) -> int:
        """Return the downstream status, ``0`` for the nothing-to-do path."""

        return 0 if self.output is None else self.output.returncode


def run_for_changed_files(
    command: str,
    reference: str,
    *,
    extension: str,
    resolver: ChangeSetResolver,
    runner: ScriptRunner,
) -> ChangedFilesOutcome:
    """Resolve the change set for ``reference`` and hand it to ``command``.

    Args:
        command: Downstream script receiving the files (``lint-files``, ``check-cs``).
        reference: Git reference to diff against, or ``--staged``.
        extension: File suffix the change set is filtered on.
        resolver: Change set resolver bound to the repository.
        runner: Script runner used for the downstream invocation.

    Returns:
        ChangedFilesOutcome: Files and downstream output; ``output`` is
        ``None`` when no file matched.
    """

    files = resolver.resolve(reference, extension)
    if not files:
        return ChangedFilesOutcome(files=files)
    return ChangedFilesOutcome(files=files, output=runner.run(command, files))


__all__ = [
    "CHECK_CS_COMMAND",
    "ChangedFilesOutcome",
    "LINT_COMMAND",
    "NO_FILES_MESSAGE",
    "run_for_changed_files",
]
