"""Tests for the validate command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from enskit.cli import cli
from enskit.domain.validation import MSG_BOUNDARY, MSG_CHARSET, MSG_RESERVED


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateCommand:
    def test_valid_label(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "kenya-dev-series"])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_invalid_label_exits_nonzero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "ETH"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "INVALID_LABEL"
        assert payload["error"]["detail"]["errors"] == [MSG_CHARSET, MSG_RESERVED]

    def test_human_error_lists_violations(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--", "-myname"])
        assert result.exit_code == 1
        assert MSG_BOUNDARY in result.stderr

    def test_multiple_labels_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "abc", "ab", "eth"])
        assert result.exit_code == 0
        assert "1 valid, 2 invalid" in result.output

    def test_multiple_labels_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "abc", "my--name"])
        data = json.loads(result.output)
        assert data["op"] == "validate_batch"
        assert [item["valid"] for item in data["data"]["items"]] == [True, False]

    def test_requires_label(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 2

    def test_config_reserved_words(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "enskit.toml").write_text('[validation]\nreserved = ["admin"]\n')
        assert cli_runner.invoke(cli, ["validate", "eth"]).exit_code == 0
        assert cli_runner.invoke(cli, ["validate", "admin"]).exit_code == 1


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateFromStdin:
    def test_reads_one_label_per_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "-"], input="abc\n\n# comment\nmy--name\n"
        )
        assert result.exit_code == 0
        items = json.loads(result.output)["data"]["items"]
        assert [item["label"] for item in items] == ["abc", "my--name"]

    def test_single_stdin_label_is_batch(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "-"], input="ETH\n")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "validate_batch"
        assert data["data"]["invalid_count"] == 1

    def test_mixed_with_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "validate", "first", "-", "last"], input="mid\n")
        assert result.output.splitlines() == ["valid\tfirst", "valid\tmid", "valid\tlast"]

    def test_empty_stdin_is_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "-"], input="\n# nothing\n")
        assert result.exit_code == 2
        assert "No labels given" in result.stderr
