"""Tests for the decode command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from zaidctl.cli import cli

MALE_CITIZEN_ID = "8001315009087"


@pytest.mark.usefixtures("_isolated_cli")
class TestDecodeCommand:
    def test_valid_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", MALE_CITIZEN_ID])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "1980-01-31" in result.output
        assert "MALE" in result.output
        assert "CITIZEN" in result.output

    def test_invalid_id_exits_one(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "1212567890123"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "INVALID_DAYS_DIGITS" in result.output

    def test_blank_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "   "])
        assert result.exit_code == 1
        assert "INPUT_BLANK" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", MALE_CITIZEN_ID])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["date_of_birth"] == "1980-01-31"
        assert data["meta"] == {"max_age": 100, "reference_date": "2026-01-15"}

    def test_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "123"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "NOT_13_DIGITS"

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", MALE_CITIZEN_ID])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: decode"

    def test_max_age_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", MALE_CITIZEN_ID, "--max-age", "45"])
        assert result.exit_code == 0
        assert "2080-01-31" in result.output

    def test_max_age_must_be_positive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", MALE_CITIZEN_ID, "--max-age", "0"])
        assert result.exit_code == 2

    def test_max_age_from_config_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "zaidctl.toml").write_text("[decoder]\nmax_age = 45\n")
        result = cli_runner.invoke(cli, ["decode", MALE_CITIZEN_ID])
        assert result.exit_code == 0
        assert "2080-01-31" in result.output

    def test_verbose_shows_meta(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "decode", MALE_CITIZEN_ID])
        assert result.exit_code == 0
        assert "reference_date: 2026-01-15" in result.output
