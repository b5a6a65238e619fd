# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Runtime boundaries: downstream script execution and identifier registries."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class ScriptOutput:
    """Captured result of a downstream script invocation.

    Attributes:
        lines: Standard output split into lines; empty when output was streamed.
        returncode: Exit status reported by the script.
    """

    lines: tuple[str, ...] = field(default_factory=tuple)
    returncode: int = 0


@runtime_checkable
class ScriptRunner(Protocol):
    """Run a named downstream script (``check-cs``, ``lint-files`` ...)."""

    def run(self, command: str, args: Sequence[str] = (), *, capture: bool = False) -> ScriptOutput:
        """Execute ``command`` with ``args`` and return its output and status."""

        raise NotImplementedError


@runtime_checkable
class NameRegistry(Protocol):
    """Answer whether a type name is already defined."""

    def __contains__(self, name: object) -> bool:
        """Return ``True`` when ``name`` is already taken."""

        raise NotImplementedError


__all__ = ["NameRegistry", "ScriptOutput", "ScriptRunner"]
