# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Factories wiring configuration to the core operations for CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import ProjectConfig, load_config
from ..discovery.git import ChangeSetResolver
from ..errors import ConfigError
from ..execution.scripts import PrefixedScriptRunner
from ..interfaces.runtime import NameRegistry, ScriptRunner
from ..migrations.registry import MigrationNameRegistry
from .options import CommonOptions
from .shared import CLIError, CLILogger, build_cli_logger


@dataclass(slots=True)
class CommandContext:
    """Configuration and logger shared by one command invocation."""

    options: CommonOptions
    config: ProjectConfig
    logger: CLILogger


def load_project_config(options: CommonOptions, *, logger: CLILogger) -> ProjectConfig:
    """Return the configuration for ``options.root``.

    Raises:
        CLIError: If the project configuration is invalid.
    """

    try:
        return load_config(options.root)
    except ConfigError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def prepare_context(options: CommonOptions) -> CommandContext:
    """Build the logger and configuration for a command.

    Raises:
        CLIError: If the project configuration is invalid.
    """

    logger = build_cli_logger(emoji=options.emoji, debug=options.debug)
    config = load_project_config(options, logger=logger)
    logger.debug(f"root={config.root} extension={config.extension}")
    return CommandContext(options=options, config=config, logger=logger)


def build_script_runner(context: CommandContext) -> ScriptRunner:
    """Return the runner launching downstream scripts for the project."""

    return PrefixedScriptRunner(context.config.scripts, cwd=context.config.root, logger=context.logger.debug)


def build_resolver(context: CommandContext) -> ChangeSetResolver:
    """Return the change set resolver bound to the project root."""

    return ChangeSetResolver(context.config.root, logger=context.logger.debug)


def build_name_registry(context: CommandContext) -> NameRegistry:
    """Return the registry of migration names already in use."""

    return MigrationNameRegistry.from_directory(
        context.config.migrations_path,
        extension=context.config.migrations.file_extension,
    )


__all__ = [
    "CommandContext",
    "build_name_registry",
    "build_resolver",
    "build_script_runner",
    "load_project_config",
    "prepare_context",
]
