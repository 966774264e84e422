"""Tests for the root walletctl CLI."""

from click.testing import CliRunner

from walletctl import __version__
from walletctl.cli import cli

EXPECTED_COMMANDS = ["report", "balance", "unspent", "mempool", "load"]


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "bitcoin-cli" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_global_flags_accepted(cli_runner: CliRunner) -> None:
    for flag in (["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/x.toml"], ["-w", "w"]):
        result = cli_runner.invoke(cli, [*flag, "--version"])
        assert result.exit_code == 0, flag


def test_commands_registered() -> None:
    assert sorted(cli.commands) == sorted(EXPECTED_COMMANDS)


def test_root_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "WALLETCTL_RPC__NETWORK" in result.output
