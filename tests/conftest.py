# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from devactions.interfaces.runtime import ScriptOutput


@dataclass
class FakeScriptRunner:
    """Record script invocations and answer with canned output."""

    outputs: dict[str, ScriptOutput] = field(default_factory=dict)
    calls: list[tuple[str, tuple[str, ...], bool]] = field(default_factory=list)

    def run(self, command: str, args: Sequence[str] = (), *, capture: bool = False) -> ScriptOutput:
        self.calls.append((command, tuple(args), capture))
        return self.outputs.get(command, ScriptOutput())

    @property
    def commands(self) -> list[str]:
        return [command for command, _, _ in self.calls]


@dataclass
class FakeGit:
    """Stand-in for the git runner used by the change set resolver."""

    lines: list[str] = field(default_factory=list)
    calls: list[tuple[tuple[str, ...], Path]] = field(default_factory=list)

    def __call__(self, cmd: Sequence[str], root: Path) -> list[str]:
        self.calls.append((tuple(cmd), root))
        return list(self.lines)


@pytest.fixture
def script_runner() -> FakeScriptRunner:
    """Return an empty fake script runner."""

    return FakeScriptRunner()


@pytest.fixture
def fake_git() -> Callable[[list[str]], FakeGit]:
    """Return a factory building fake git runners answering with ``lines``."""

    return lambda lines: FakeGit(lines=lines)


@pytest.fixture
def clear_thresholds(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove threshold variables inherited from the calling environment."""

    monkeypatch.delenv("YOASTCS_THRESHOLD_ERRORS", raising=False)
    monkeypatch.delenv("YOASTCS_THRESHOLD_WARNINGS", raising=False)
