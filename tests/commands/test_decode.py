"""Tests for the decode CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from utf16kit.cli import cli


@pytest.mark.usefixtures("project_root")
class TestDecodeCommand:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--help"])
        assert result.exit_code == 0
        assert "UNITS" in result.output
        assert "--byte-order" in result.output

    def test_surrogate_pair_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "D83D", "DE00"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "decode"
        assert data["data"]["runes"] == ["U+1F600"]
        assert data["data"]["text"] == "😀"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "0x48", "0x69"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "text: Hi" in result.output

    def test_quiet_prints_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "0048", "0069"])
        assert result.exit_code == 0
        assert result.output == "Hi\n"

    def test_repair_warns_but_succeeds(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "D800", "0041"])
        assert result.exit_code == 0
        assert "WARNING: Replaced 1 malformed code unit(s) with U+FFFD" in result.output

    def test_repair_in_json_payload(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "DC00"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["runes"] == ["U+FFFD"]
        assert data["data"]["replacements"] == 1
        assert data["warnings"]

    def test_bad_token_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "zz"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "zz" in result.output

    def test_out_of_range_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "0x10000"])
        assert result.exit_code == 1

    def test_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "msg.utf16"
        path.write_bytes("héllo".encode("utf-16-be"))
        result = cli_runner.invoke(
            cli, ["-q", "decode", "--file", str(path), "--byte-order", "BE"]
        )
        assert result.exit_code == 0
        assert result.output == "héllo\n"

    def test_missing_file_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["decode", "--file", str(tmp_path / "nope.bin")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "--file", "-"], input=b"O\x00K\x00")
        assert result.exit_code == 0
        assert result.output == "OK\n"

    def test_explicit_bom_unit_is_decoded(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "FEFF", "0041"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["units"] == ["FEFF", "0041"]
        assert data["data"]["runes"] == ["U+FEFF", "U+0041"]

    def test_stdin_bom_stripped(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "decode", "--file", "-"], input=b"\xff\xfeO\x00K\x00"
        )
        assert result.exit_code == 0
        assert result.output == "OK\n"

    def test_odd_stdin_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "--file", "-"], input=b"O\x00K")
        assert result.exit_code == 1
        assert "even byte length" in result.output

    def test_nothing_to_decode(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode"])
        assert result.exit_code == 2
        assert "Nothing to decode" in result.output

    def test_units_and_file_conflict(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["decode", "41", "--file", str(tmp_path / "x")])
        assert result.exit_code == 2

    def test_config_number_base(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "utf16kit.toml").write_text("[codec]\nnumber_base = 10\n")
        result = cli_runner.invoke(cli, ["-q", "decode", "72", "105"])
        assert result.exit_code == 0
        assert result.output == "Hi\n"

    def test_verbose_shows_rune_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "decode", "D83D", "DE00"])
        assert result.exit_code == 0
        assert "GRINNING FACE" in result.output
        assert "meta:" in result.output
