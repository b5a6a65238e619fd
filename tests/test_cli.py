# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end tests for the devactions command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from devactions.cli import services
from devactions.cli.app import app
from devactions.discovery.git import ChangeSetResolver
from devactions.interfaces.runtime import ScriptOutput

REPORT = (
    "PHP CODE SNIFFER REPORT SUMMARY",
    "A TOTAL OF 3 ERRORS AND 7 WARNINGS WERE FOUND IN 12 FILES",
)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def patched_runner(monkeypatch: pytest.MonkeyPatch, script_runner):
    monkeypatch.setattr(services, "build_script_runner", lambda context: script_runner)
    return script_runner


@pytest.fixture
def patched_git(monkeypatch: pytest.MonkeyPatch, fake_git):
    def install(lines: list[str]):
        git = fake_git(lines)
        monkeypatch.setattr(
            services,
            "build_resolver",
            lambda context: ChangeSetResolver(context.config.root, runner=git),
        )
        return git

    return install


def _invoke(cli_runner: CliRunner, root: Path, *args: str, input: str | None = None):
    return cli_runner.invoke(app, [*args, "--root", str(root), "--no-emoji"], input=input)


def test_thresholds_pass(cli_runner, tmp_path, monkeypatch, patched_runner) -> None:
    monkeypatch.setenv("YOASTCS_THRESHOLD_ERRORS", "5")
    monkeypatch.setenv("YOASTCS_THRESHOLD_WARNINGS", "10")
    patched_runner.outputs["check-cs-summary"] = ScriptOutput(lines=REPORT)

    result = _invoke(cli_runner, tmp_path, "check-cs-thresholds")

    assert result.exit_code == 0
    assert "Running coding standards checks" in result.stdout
    assert "CODE SNIFFER SUMMARY" in result.stdout
    assert "Coding standards errors: 3/5." in result.stdout
    assert "Coding standards warnings: 7/10." in result.stdout
    assert "Coding standards checks have passed!" in result.stdout


def test_thresholds_fail_on_errors(cli_runner, tmp_path, monkeypatch, patched_runner) -> None:
    monkeypatch.setenv("YOASTCS_THRESHOLD_ERRORS", "2")
    monkeypatch.setenv("YOASTCS_THRESHOLD_WARNINGS", "10")
    patched_runner.outputs["check-cs-summary"] = ScriptOutput(lines=REPORT)

    result = _invoke(cli_runner, tmp_path, "check-cs-thresholds")

    assert result.exit_code == 1
    assert "Please fix any errors introduced in your code" in result.stdout
    assert "have passed" not in result.stdout


def test_thresholds_default_to_zero(cli_runner, tmp_path, clear_thresholds, patched_runner) -> None:
    patched_runner.outputs["check-cs-summary"] = ScriptOutput(lines=REPORT)

    result = _invoke(cli_runner, tmp_path, "check-cs-thresholds")

    assert result.exit_code == 1
    assert "Coding standards errors: 3/0." in result.stdout


def test_thresholds_parse_failure(cli_runner, tmp_path, clear_thresholds, patched_runner) -> None:
    patched_runner.outputs["check-cs-summary"] = ScriptOutput(lines=("Fatal error",))

    result = _invoke(cli_runner, tmp_path, "check-cs-thresholds")

    assert result.exit_code == 1
    assert "Error occurred when parsing the coding standards results." in result.stdout
    assert "CODE SNIFFER SUMMARY" not in result.stdout


def test_thresholds_use_configured_summary_command(cli_runner, tmp_path, clear_thresholds, patched_runner) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.devactions]\nsummary_command = "cs-sum"\n', encoding="utf-8")
    patched_runner.outputs["cs-sum"] = ScriptOutput(
        lines=("A TOTAL OF 0 ERRORS AND 0 WARNINGS WERE FOUND IN 3 FILES",),
    )

    result = _invoke(cli_runner, tmp_path, "check-cs-thresholds")

    assert result.exit_code == 0
    assert patched_runner.commands == ["cs-sum"]


def test_invalid_config_exits_with_failure(cli_runner, tmp_path, patched_runner) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.devactions]\nbogus = true\n", encoding="utf-8")

    result = _invoke(cli_runner, tmp_path, "check-cs-thresholds")

    assert result.exit_code == 1
    assert "Invalid [tool.devactions] configuration" in result.stdout
    assert patched_runner.calls == []


def test_dispatch_with_key(cli_runner, tmp_path, patched_runner) -> None:
    result = _invoke(cli_runner, tmp_path, "dispatch-choice", "4")

    assert result.exit_code == 0
    assert patched_runner.commands == ["check-cs-warnings"]


def test_dispatch_interactive(cli_runner, tmp_path, patched_runner) -> None:
    result = _invoke(cli_runner, tmp_path, "dispatch-choice", input="2\n")

    assert result.exit_code == 0
    assert "1. Check staged files for coding standard warnings & errors." in result.stdout
    assert "6. Check for coding standards thresholds." in result.stdout
    assert "What do you want to do?" in result.stdout
    assert patched_runner.commands == ["check-branch-cs"]


def test_dispatch_unknown_choice(cli_runner, tmp_path, patched_runner) -> None:
    result = _invoke(cli_runner, tmp_path, "dispatch-choice", "9")

    assert result.exit_code == 0
    assert "Unknown choice." in result.stdout
    assert patched_runner.calls == []


def test_generate_migration(cli_runner, tmp_path) -> None:
    result = _invoke(cli_runner, tmp_path, "generate-migration", "fix the thing")

    assert result.exit_code == 0
    written = list((tmp_path / "src" / "config" / "migrations").glob("*_FixTheThing.php"))
    assert len(written) == 1
    assert len(written[0].name.split("_", 1)[0]) == 14
    assert "Created migration src/config/migrations/" in result.stdout


def test_generate_migration_uses_configured_file_extension(cli_runner, tmp_path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.devactions]\nfile_extension = ".inc"\n', encoding="utf-8")

    result = _invoke(cli_runner, tmp_path, "generate-migration", "add links")

    assert result.exit_code == 0
    assert len(list((tmp_path / "src" / "config" / "migrations").glob("*_AddLinks.inc"))) == 1


def test_generate_migration_missing_name(cli_runner, tmp_path) -> None:
    result = _invoke(cli_runner, tmp_path, "generate-migration")

    assert result.exit_code == 1
    assert "You must provide an argument with the migration name." in result.stdout
    assert not (tmp_path / "src").exists()


def test_generate_migration_invalid_identifier(cli_runner, tmp_path) -> None:
    result = _invoke(cli_runner, tmp_path, "generate-migration", "123abc")

    assert result.exit_code == 1
    assert "123abc is not a valid migration name." in result.stdout


def test_generate_migration_collision(cli_runner, tmp_path) -> None:
    migrations = tmp_path / "src" / "config" / "migrations"
    migrations.mkdir(parents=True)
    existing = migrations / "20200101000000_FixTheThing.php"
    existing.write_text("<?php\nclass FixTheThing extends Migration {}\n", encoding="utf-8")

    result = _invoke(cli_runner, tmp_path, "generate-migration", "fix_the_thing")

    assert result.exit_code == 1
    assert "A class with the name FixTheThing already exists." in result.stdout
    assert list(migrations.iterdir()) == [existing]


def test_lint_staged_runs_lint_files(cli_runner, tmp_path, patched_runner, patched_git) -> None:
    git = patched_git(["a.php", "b.css"])

    result = _invoke(cli_runner, tmp_path, "lint-staged")

    assert result.exit_code == 0
    assert git.calls[0][0][-1] == "--cached"
    assert patched_runner.calls == [("lint-files", ("a.php",), False)]


def test_check_branch_cs_defaults_to_trunk(cli_runner, tmp_path, patched_runner, patched_git) -> None:
    git = patched_git(["src/x.php"])

    result = _invoke(cli_runner, tmp_path, "check-branch-cs")

    assert result.exit_code == 0
    assert git.calls[0][0][-2:] == ("trunk", "--")
    assert patched_runner.calls == [("check-cs", ("src/x.php",), False)]


def test_lint_branch_uses_given_reference(cli_runner, tmp_path, patched_runner, patched_git) -> None:
    git = patched_git(["src/x.php"])

    result = _invoke(cli_runner, tmp_path, "lint-branch", "release/1.0")

    assert result.exit_code == 0
    assert git.calls[0][0][-2:] == ("release/1.0", "--")


def test_check_staged_cs_without_files(cli_runner, tmp_path, patched_runner, patched_git) -> None:
    patched_git(["notes.md"])

    result = _invoke(cli_runner, tmp_path, "check-staged-cs")

    assert result.exit_code == 0
    assert "No files to compare! Exiting." in result.stdout
    assert patched_runner.calls == []


def test_changed_flow_propagates_downstream_failure(cli_runner, tmp_path, patched_runner, patched_git) -> None:
    patched_git(["a.php"])
    patched_runner.outputs["check-cs"] = ScriptOutput(returncode=2)

    result = _invoke(cli_runner, tmp_path, "check-branch-cs", "main")

    assert result.exit_code == 2


def test_resolve_changes_prints_files(cli_runner, tmp_path, patched_git) -> None:
    patched_git(["a.php", "b.js", "c.php"])

    result = _invoke(cli_runner, tmp_path, "resolve-changes", "main")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["a.php", "c.php"]


def test_resolve_changes_with_extension_and_staged(cli_runner, tmp_path, patched_git) -> None:
    git = patched_git(["a.php", "b.js"])

    result = _invoke(cli_runner, tmp_path, "resolve-changes", "--staged", "--extension", ".js")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["b.js"]
    assert git.calls[0][0][-1] == "--cached"


def test_resolve_changes_with_positional_extension(cli_runner, tmp_path, patched_git) -> None:
    git = patched_git(["a.php", "b.js", "c.js"])

    result = _invoke(cli_runner, tmp_path, "resolve-changes", "trunk", ".js")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["b.js", "c.js"]
    assert git.calls[0][0][-2:] == ("trunk", "--")


def test_resolve_changes_staged_with_positional_extension(cli_runner, tmp_path, patched_git) -> None:
    git = patched_git(["a.php", "b.js"])

    result = _invoke(cli_runner, tmp_path, "resolve-changes", "--staged", ".js")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["b.js"]
    assert git.calls[0][0][-1] == "--cached"


def test_debug_flag_prints_commands(cli_runner, tmp_path, patched_git) -> None:
    patched_git([])

    result = cli_runner.invoke(app, ["resolve-changes", "main", "--root", str(tmp_path), "--debug"])

    assert result.exit_code == 0
    assert "[debug]" in result.stdout


def test_help_lists_every_command(cli_runner) -> None:
    result = cli_runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("check-cs-thresholds", "dispatch-choice", "generate-migration", "resolve-changes"):
        assert name in result.stdout
