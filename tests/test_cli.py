"""Tests for the root utf16kit CLI."""

import json

import pytest
from click.testing import CliRunner

from utf16kit import __version__
from utf16kit.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "utf16kit" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_unknown_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["transcode"])
    assert result.exit_code == 2


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/utf16kit-test.toml", "--version"])
    assert result.exit_code == 0


def test_config_option_applies(cli_runner: CliRunner, project_root) -> None:
    config = project_root / "custom.toml"
    config.write_text("[codec]\nnumber_base = 10\n", encoding="utf-8")
    result = cli_runner.invoke(cli, ["-c", str(config), "--json", "decode", "65"])
    assert result.exit_code == 0
    assert json.loads(result.output)["data"]["text"] == "A"


def test_invalid_config_reports_error(cli_runner: CliRunner, project_root) -> None:
    (project_root / "utf16kit.toml").write_text("[codec\n", encoding="utf-8")
    result = cli_runner.invoke(cli, ["decode", "41"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output


def test_env_override(cli_runner: CliRunner, project_root, monkeypatch) -> None:
    monkeypatch.setenv("UTF16KIT_CODEC__NUMBER_BASE", "10")
    result = cli_runner.invoke(cli, ["-q", "decode", "66"])
    assert result.exit_code == 0
    assert result.output == "B\n"


# --- Commands registered ---

EXPECTED_COMMANDS = ["decode", "encode", "utf8"]


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


def test_all_commands_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in EXPECTED_COMMANDS:
        assert name in result.output, f"{name} missing from --help"
