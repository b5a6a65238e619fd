# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compare coding standards totals with the configured thresholds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

from ..config import DEFAULT_SUMMARY_COMMAND, ThresholdConfig
from ..errors import SummaryParseError
from ..interfaces.runtime import ScriptRunner
from .summary import AnalysisSummary, parse_summary

RUNNING_MESSAGE: Final[str] = "Running coding standards checks, this may take some time."
PARSE_FAILURE_MESSAGE: Final[str] = "Error occurred when parsing the coding standards results."
ERRORS_ABOVE_MESSAGE: Final[str] = (
    "Please fix any errors introduced in your code and run composer check-cs-warnings to verify."
)
WARNINGS_ABOVE_MESSAGE: Final[str] = (
    "Please fix any warnings introduced in your code and run check-cs-thresholds to verify."
)
PASSED_MESSAGE: Final[str] = "Coding standards checks have passed!"


@dataclass(frozen=True, slots=True)
class GateResult:
    """Outcome of one threshold gate run.

    Attributes:
        lines: Raw analysis output.
        thresholds: Thresholds the totals were compared with.
        summary: Parsed totals, ``None`` when parsing failed.
        remediation: One message per exceeded dimension.
        error: Parse failure message, ``None`` on a successful parse.
    """

    lines: tuple[str, ...]
    thresholds: ThresholdConfig
    summary: AnalysisSummary | None = None
    remediation: tuple[str, ...] = field(default_factory=tuple)
    error: str | None = None

    @property
    def parsed(self) -> bool:
        """Return ``True`` when the summary line was parsed."""

        return self.summary is not None

    @property
    def above_threshold(self) -> bool:
        """Return ``True`` when either total is strictly above its threshold."""

        return bool(self.remediation)

    @property
    def exit_code(self) -> int:
        """Return ``1`` for a parse failure or exceeded threshold, else ``0``."""

        return 1 if self.error is not None or self.above_threshold else 0

    def result_lines(self) -> list[str]:
        """Return the ``count/threshold`` report lines."""

        if self.summary is None:
            return []
        return [
            f"Coding standards errors: {self.summary.error_count}/{self.thresholds.error_threshold}.",
            f"Coding standards warnings: {self.summary.warning_count}/{self.thresholds.warning_threshold}.",
        ]


def evaluate(summary: AnalysisSummary, thresholds: ThresholdConfig) -> tuple[str, ...]:
    """Return remediation messages for each total above its threshold.

    Totals exactly at the threshold pass.
    """

    messages: list[str] = []
    if summary.error_count > thresholds.error_threshold:
        messages.append(ERRORS_ABOVE_MESSAGE)
    if summary.warning_count > thresholds.warning_threshold:
        messages.append(WARNINGS_ABOVE_MESSAGE)
    return tuple(messages)


def gate_output(lines: tuple[str, ...], thresholds: ThresholdConfig) -> GateResult:
    """Build the gate result for already captured analysis output.

    Args:
        lines: Raw analysis output lines.
        thresholds: Maximum tolerated errors and warnings.

    Returns:
        GateResult: Parsed totals and decision.
    """

    try:
        summary = parse_summary(lines)
    except SummaryParseError:
        return GateResult(lines=lines, thresholds=thresholds, error=PARSE_FAILURE_MESSAGE)
    return GateResult(
        lines=lines,
        thresholds=thresholds,
        summary=summary,
        remediation=evaluate(summary, thresholds),
    )


def run_gate(
    config: ThresholdConfig,
    *,
    runner: ScriptRunner,
    command: str = DEFAULT_SUMMARY_COMMAND,
) -> GateResult:
    """Run the summary report once and gate its totals against ``config``.

    The return code of the analysis command is ignored; only the parsed
    totals decide the outcome.

    Args:
        config: Maximum tolerated errors and warnings.
        runner: Runner executing the analysis command with captured output.
        command: Name of the analysis summary script.

    Returns:
        GateResult: Decision whose ``exit_code`` is ``0`` (pass) or ``1``.
    """

    output = runner.run(command, capture=True)
    return gate_output(output.lines, config)


__all__ = [
    "ERRORS_ABOVE_MESSAGE",
    "GateResult",
    "PARSE_FAILURE_MESSAGE",
    "PASSED_MESSAGE",
    "RUNNING_MESSAGE",
    "WARNINGS_ABOVE_MESSAGE",
    "evaluate",
    "gate_output",
    "run_gate",
]
