# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Coding standards threshold gate."""

from .summary import AnalysisSummary, parse_summary
from .thresholds import GateResult, evaluate, gate_output, run_gate

__all__ = ["AnalysisSummary", "GateResult", "evaluate", "gate_output", "parse_summary", "run_gate"]
