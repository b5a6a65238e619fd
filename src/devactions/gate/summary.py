# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse the totals line printed by the coding standards summary report."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from ..errors import SummaryParseError

SUMMARY_MARKER: Final[str] = "A TOTAL OF"
SUMMARY_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"A TOTAL OF (?P<error_count>\d+) ERRORS AND (?P<warning_count>\d+) WARNINGS WERE FOUND IN \d+ FILES"
)


@dataclass(frozen=True, slots=True)
class AnalysisSummary:
    """Error and warning totals reported by the analysis tool."""

    error_count: int
    warning_count: int


def find_summary_line(lines: Iterable[str]) -> str | None:
    """Return the first line containing the summary marker, if any."""

    return next((line for line in lines if SUMMARY_MARKER in line), None)


def parse_summary(lines: Iterable[str]) -> AnalysisSummary:
    """Extract the totals from raw analysis output.

    Only the first line carrying ``A TOTAL OF`` is considered.

    Args:
        lines: Raw output lines in the order they were printed.

    Returns:
        AnalysisSummary: Parsed error and warning counts.

    Raises:
        SummaryParseError: If no summary line exists or it does not match the
            expected sentence.
    """

    line = find_summary_line(lines)
    if line is None:
        raise SummaryParseError(f"No line containing {SUMMARY_MARKER!r} was found")
    match = SUMMARY_PATTERN.search(line)
    if match is None:
        raise SummaryParseError(f"Unrecognised summary line: {line.strip()!r}")
    return AnalysisSummary(
        error_count=int(match.group("error_count")),
        warning_count=int(match.group("warning_count")),
    )


__all__ = [
    "AnalysisSummary",
    "SUMMARY_MARKER",
    "SUMMARY_PATTERN",
    "find_summary_line",
    "parse_summary",
]
