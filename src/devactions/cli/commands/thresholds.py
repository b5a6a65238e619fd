# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CI gate failing when coding standards totals exceed their thresholds."""

from __future__ import annotations

from pathlib import Path

import typer

from ...config import ThresholdConfig
from ...gate.thresholds import PASSED_MESSAGE, RUNNING_MESSAGE, GateResult, run_gate
from .. import services
from ..options import DEBUG_OPTION, EMOJI_OPTION, ROOT_OPTION, CommonOptions
from ..shared import CLIError, CLILogger


def render_gate_result(result: GateResult, *, logger: CLILogger) -> None:
    """Print the summary and results blocks of a gate run.

    Args:
        result: Outcome of :func:`run_gate`.
        logger: Logger receiving the report.
    """

    if result.error is not None:
        logger.fail(result.error)
        return

    logger.section("CODE SNIFFER SUMMARY")
    logger.plain("\n".join(result.lines))
    logger.section("CODE SNIFFER RESULTS")
    for line in result.result_lines():
        logger.echo(line)
    for message in result.remediation:
        logger.warn(message)
    if not result.above_threshold:
        logger.echo("")
        logger.ok(PASSED_MESSAGE)


def check_cs_thresholds(
    root: ROOT_OPTION = Path("."),
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Fail when coding standards errors or warnings exceed their thresholds.

    Thresholds come from YOASTCS_THRESHOLD_ERRORS and YOASTCS_THRESHOLD_WARNINGS.
    """

    options = CommonOptions.from_cli(root, emoji=emoji, debug=debug)
    try:
        context = services.prepare_context(options)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    logger = context.logger
    thresholds = ThresholdConfig.from_environ()
    logger.debug(f"errors={thresholds.error_threshold} warnings={thresholds.warning_threshold}")
    logger.info(RUNNING_MESSAGE)
    try:
        result = run_gate(
            thresholds,
            runner=services.build_script_runner(context),
            command=context.config.scripts.summary_command,
        )
    except FileNotFoundError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    render_gate_result(result, logger=logger)
    raise typer.Exit(code=result.exit_code)


__all__ = ["check_cs_thresholds", "render_gate_result"]
