# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from devactions.config import (
    DEFAULT_MIGRATIONS_DIR,
    ERROR_THRESHOLD_ENV,
    WARNING_THRESHOLD_ENV,
    ThresholdConfig,
    load_config,
)
from devactions.errors import ConfigError


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, 0),
        ("", 0),
        ("abc", 0),
        ("12abc", 0),
        ("-4", 0),
        ("7", 7),
        (" 15 ", 15),
        ("+3", 3),
        ("1_000", 0),
        ("٣", 0),
        ("2.5", 0),
    ],
)
def test_thresholds_from_environment(raw: str | None, expected: int) -> None:
    environ = {} if raw is None else {ERROR_THRESHOLD_ENV: raw, WARNING_THRESHOLD_ENV: raw}

    config = ThresholdConfig.from_environ(environ)

    assert config.error_threshold == expected
    assert config.warning_threshold == expected


def test_thresholds_read_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ERROR_THRESHOLD_ENV, "4")
    monkeypatch.delenv(WARNING_THRESHOLD_ENV, raising=False)

    config = ThresholdConfig.from_environ()

    assert (config.error_threshold, config.warning_threshold) == (4, 0)


def test_load_config_defaults_without_pyproject(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config.root == tmp_path.resolve()
    assert config.extension == ".php"
    assert config.default_reference == "trunk"
    assert config.scripts.script_prefix == ("composer",)
    assert config.scripts.summary_command == "check-cs-summary"
    assert config.migrations_path == tmp_path.resolve() / DEFAULT_MIGRATIONS_DIR


def test_load_config_reads_tool_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "\n".join(
            [
                "[tool.devactions]",
                'extension = ".inc"',
                'default_reference = "main"',
                'script_prefix = ["php", "vendor/bin/runner"]',
                'summary_command = "cs-summary"',
                'migrations_dir = "db/migrations"',
                'file_extension = ".inc.php"',
            ]
        ),
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.extension == ".inc"
    assert config.default_reference == "main"
    assert config.scripts.script_prefix == ("php", "vendor/bin/runner")
    assert config.scripts.summary_command == "cs-summary"
    assert config.migrations_path == tmp_path.resolve() / "db" / "migrations"
    assert config.migrations.file_extension == ".inc.php"


def test_load_config_ignores_other_tools(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.black]\nline-length = 100\n', encoding="utf-8")

    assert load_config(tmp_path).extension == ".php"


@pytest.mark.parametrize(
    "body",
    [
        "[tool.devactions]\nunknown = 1\n",
        "[tool.devactions]\nscript_prefix = []\n",
        "[tool.devactions\n",
    ],
)
def test_load_config_rejects_invalid_tables(tmp_path: Path, body: str) -> None:
    (tmp_path / "pyproject.toml").write_text(body, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
