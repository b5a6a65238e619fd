# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for devactions."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

ERROR_THRESHOLD_ENV: Final[str] = "YOASTCS_THRESHOLD_ERRORS"
WARNING_THRESHOLD_ENV: Final[str] = "YOASTCS_THRESHOLD_WARNINGS"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
TOOL_SECTION: Final[str] = "devactions"
STAGED_REFERENCE: Final[str] = "--staged"
DEFAULT_REFERENCE: Final[str] = "trunk"
DEFAULT_EXTENSION: Final[str] = ".php"
DEFAULT_MIGRATIONS_DIR: Final[Path] = Path("src/config/migrations")
DEFAULT_SUMMARY_COMMAND: Final[str] = "check-cs-summary"


def _coerce_threshold(raw: str | None) -> int:
    """Return ``raw`` as a non-negative integer threshold, ``0`` when unusable."""

    if raw is None:
        return 0
    text = raw.strip()
    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        return 0
    return int(digits)


class ThresholdConfig(BaseModel):
    """Maximum number of coding standards errors and warnings tolerated."""

    model_config = ConfigDict(frozen=True)

    error_threshold: int = Field(default=0, ge=0)
    warning_threshold: int = Field(default=0, ge=0)

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> ThresholdConfig:
        """Build thresholds from the process environment.

        Unset, non-numeric, and negative values all fall back to ``0``.

        Args:
            environ: Environment mapping to read; defaults to ``os.environ``.

        Returns:
            ThresholdConfig: Thresholds snapshotted at call time.
        """

        env = os.environ if environ is None else environ
        return cls(
            error_threshold=_coerce_threshold(env.get(ERROR_THRESHOLD_ENV)),
            warning_threshold=_coerce_threshold(env.get(WARNING_THRESHOLD_ENV)),
        )


class MenuChoice(BaseModel):
    """Single entry of the coding standards menu."""

    model_config = ConfigDict(frozen=True)

    label: str
    command: str = Field(min_length=1)

    @field_validator("command")
    @classmethod
    def _reject_blank_command(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("command must not be blank")
        return value


class ScriptSettings(BaseModel):
    """How downstream scripts are launched."""

    model_config = ConfigDict(frozen=True)

    script_prefix: tuple[str, ...] = ("composer",)
    summary_command: str = DEFAULT_SUMMARY_COMMAND

    @field_validator("script_prefix")
    @classmethod
    def _require_prefix(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or not value[0]:
            raise ValueError("script_prefix must name an executable")
        return value


class MigrationSettings(BaseModel):
    """Where and how migration files are scaffolded."""

    model_config = ConfigDict(frozen=True)

    migrations_dir: Path = DEFAULT_MIGRATIONS_DIR
    file_extension: str = ".php"


class ProjectConfig(BaseModel):
    """Fully resolved configuration for one devactions invocation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: Path
    extension: str = DEFAULT_EXTENSION
    default_reference: str = DEFAULT_REFERENCE
    scripts: ScriptSettings = Field(default_factory=ScriptSettings)
    migrations: MigrationSettings = Field(default_factory=MigrationSettings)

    @property
    def migrations_path(self) -> Path:
        """Return the absolute migrations directory."""

        directory = self.migrations.migrations_dir
        return directory if directory.is_absolute() else self.root / directory


_FLAT_KEYS: Final[dict[str, tuple[str, str]]] = {
    "script_prefix": ("scripts", "script_prefix"),
    "summary_command": ("scripts", "summary_command"),
    "migrations_dir": ("migrations", "migrations_dir"),
    "file_extension": ("migrations", "file_extension"),
}


def _read_tool_table(pyproject: Path) -> dict[str, Any]:
    try:
        with pyproject.open("rb") as handle:
            payload = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Unable to parse {pyproject}: {exc}") from exc
    tool = payload.get("tool", {})
    table = tool.get(TOOL_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.{TOOL_SECTION}] must be a table")
    return table


def load_config(root: Path) -> ProjectConfig:
    """Load configuration for ``root`` from its optional ``pyproject.toml``.

    Recognised keys of ``[tool.devactions]`` are ``extension``,
    ``default_reference``, ``script_prefix``, ``summary_command``,
    ``migrations_dir`` and ``file_extension`` (suffix of generated
    migrations).

    Args:
        root: Project root directory.

    Returns:
        ProjectConfig: Configuration with defaults applied.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """

    resolved_root = root.resolve()
    pyproject = resolved_root / PYPROJECT_FILENAME
    table = _read_tool_table(pyproject) if pyproject.is_file() else {}

    data: dict[str, Any] = {"root": resolved_root}
    nested: dict[str, dict[str, Any]] = {"scripts": {}, "migrations": {}}
    for key, value in table.items():
        if key in _FLAT_KEYS:
            section_name, field_name = _FLAT_KEYS[key]
            nested[section_name][field_name] = value
        else:
            data[key] = value
    data.update({name: values for name, values in nested.items() if values})

    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid [tool.{TOOL_SECTION}] configuration: {exc}") from exc


__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_MIGRATIONS_DIR",
    "DEFAULT_REFERENCE",
    "DEFAULT_SUMMARY_COMMAND",
    "ERROR_THRESHOLD_ENV",
    "MenuChoice",
    "MigrationSettings",
    "ProjectConfig",
    "STAGED_REFERENCE",
    "ScriptSettings",
    "ThresholdConfig",
    "WARNING_THRESHOLD_ENV",
    "load_config",
]
