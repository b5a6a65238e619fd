# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the files changed against a git reference."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Final

from ..config import STAGED_REFERENCE
from ..core.runtime.process import CommandOptions, run_command

GitRunner = Callable[[Sequence[str], Path], list[str]]
ChangeSet = tuple[str, ...]

_STAGED_ALIASES: Final[frozenset[str]] = frozenset({STAGED_REFERENCE, "--cached"})
_DIFF_BASE: Final[tuple[str, ...]] = ("git", "diff", "--name-only", "--diff-filter=d")


def filter_files(files: Iterable[str], extension: str) -> ChangeSet:
    """Return the entries of ``files`` ending exactly with ``extension``.

    The match is a case-sensitive suffix comparison, not a glob. Order is
    preserved and empty entries are dropped.

    Args:
        files: Candidate paths in diff order.
        extension: Required suffix such as ``".php"``.

    Returns:
        ChangeSet: Filtered paths.
    """

    return tuple(name for name in files if name and name.endswith(extension))


def diff_command(reference: str) -> list[str]:
    """Return the git command listing non-deleted files changed against ``reference``.

    Args:
        reference: Git reference, or ``--staged``/``--cached`` for the index.

    Returns:
        list[str]: Argument vector for the diff.
    """

    if reference in _STAGED_ALIASES:
        return [*_DIFF_BASE, "--cached"]
    return [*_DIFF_BASE, reference, "--"]


class ChangeSetResolver:
    """Collect changed files reported by ``git diff``."""

    def __init__(
        self,
        root: Path,
        *,
        runner: GitRunner | None = None,
        logger: Callable[[str], None] | None = None,
    ) -> None:
        """Create a resolver bound to a repository root.

        Args:
            root: Repository root the diff runs in.
            runner: Optional command runner used to execute git. Defaults to
                :func:`run_command` without raising on failures.
            logger: Optional debug sink receiving diagnostic messages.
        """

        self._root = root
        self._runner = runner or self._default_runner
        self._logger = logger

    def resolve(self, reference: str, extension: str) -> ChangeSet:
        """Return the files changed against ``reference`` that end with ``extension``.

        Exactly one git process is spawned; failures are not retried and
        simply produce an empty change set.

        Args:
            reference: Git reference to diff against, or ``--staged``.
            extension: Required file suffix.

        Returns:
            ChangeSet: Changed paths in diff order.
        """

        cmd = diff_command(reference)
        if self._logger is not None:
            self._logger(f"command={' '.join(cmd)} cwd={self._root}")
        lines = [raw.strip() for raw in self._runner(cmd, self._root)]
        return filter_files(lines, extension)

    def __call__(self, reference: str, extension: str) -> ChangeSet:
        return self.resolve(reference, extension)

    def _default_runner(self, cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` returning stdout lines; a failing git yields its raw output.

        Args:
            cmd: Git command to execute.
            root: Repository root directory.

        Returns:
            list[str]: Raw stdout lines produced by git.
        """

        completed = run_command(cmd, options=CommandOptions(cwd=root, capture_output=True))
        if completed.returncode != 0 and self._logger is not None:
            self._logger(f"returncode={completed.returncode} stderr={(completed.stderr or '').strip()!r}")
        return (completed.stdout or "").splitlines()


def resolve(reference: str, extension: str, *, root: Path | None = None) -> ChangeSet:
    """Resolve a change set for the repository at ``root`` (default: cwd).

    Args:
        reference: Git reference to diff against, or ``--staged``.
        extension: Required file suffix.
        root: Repository root; the current directory when omitted.

    Returns:
        ChangeSet: Changed paths in diff order.
    """

    return ChangeSetResolver(root or Path.cwd()).resolve(reference, extension)


__all__ = [
    "ChangeSet",
    "ChangeSetResolver",
    "GitRunner",
    "diff_command",
    "filter_files",
    "resolve",
]
