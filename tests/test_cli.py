"""Tests for the root cleanctl command."""

import pytest
from click.testing import CliRunner

from cleanctl import __version__
from cleanctl.cli import cli

SUBCOMMANDS = ("add", "init", "set")


class TestRoot:
    def test_bare_invocation_prints_usage(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage" in result.output
        assert "Clean Architecture" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"cleanctl, version {__version__}" in result.output

    def test_epilog_mentions_record(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert "cleanrc" in result.output
        assert "CLEANCTL_CONFIG" in result.output

    def test_unknown_subcommand(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["remove", "usecase"]).exit_code == 2


class TestGlobalFlags:
    @pytest.mark.parametrize(
        "args",
        [
            ["--json"],
            ["-q"],
            ["-v"],
            ["--log-json"],
            ["-c", "/tmp/elsewhere/cleanrc"],
            ["-C", "/tmp/elsewhere"],
        ],
        ids=["json", "quiet", "verbose", "log-json", "config", "directory"],
    )
    def test_parsed_before_version(self, cli_runner: CliRunner, args: list[str]) -> None:
        assert cli_runner.invoke(cli, [*args, "--version"]).exit_code == 0


class TestSubcommands:
    @pytest.mark.parametrize("name", SUBCOMMANDS)
    def test_listed_in_help(self, cli_runner: CliRunner, name: str) -> None:
        assert name in cli_runner.invoke(cli, ["--help"]).output

    @pytest.mark.parametrize("name", SUBCOMMANDS)
    def test_own_help(self, cli_runner: CliRunner, name: str) -> None:
        result = cli_runner.invoke(cli, [name, "--help"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("Usage:")
