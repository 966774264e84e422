"""Tests for balance, unspent, mempool, and load commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from walletctl.cli import cli


@pytest.mark.usefixtures("fake_node")
class TestBalanceCommand:
    def test_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["balance"])
        assert result.exit_code == 0
        assert "balance: 1.23456789 BTC" in result.stdout
        assert "unconfirmed: 0.00000000 BTC" in result.stdout

    def test_quiet(self, cli_runner: CliRunner) -> None:
        assert cli_runner.invoke(cli, ["-q", "balance"]).stdout == "1.23456789\n"


@pytest.mark.usefixtures("fake_node")
class TestUnspentCommand:
    def test_filtered_default(self, cli_runner: CliRunner, fake_node) -> None:
        result = cli_runner.invoke(cli, ["unspent"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == '    "confirmations": 0,'
        assert fake_node.calls[0][0][-3:] == ["listunspent", "0", "0"]

    def test_all_with_range(self, cli_runner: CliRunner, fake_node) -> None:
        result = cli_runner.invoke(cli, ["unspent", "--minconf", "1", "--maxconf", "6", "--all"])
        assert result.stdout == fake_node.responses["listunspent"][0]
        assert fake_node.calls[0][0][-3:] == ["listunspent", "1", "6"]

    def test_invalid_range(self, cli_runner: CliRunner, fake_node) -> None:
        result = cli_runner.invoke(cli, ["unspent", "--minconf", "5", "--maxconf", "1"])
        assert result.exit_code == 1
        assert "Invalid confirmation range 5..1" in result.stderr
        assert fake_node.calls == []

    def test_json(self, cli_runner: CliRunner) -> None:
        data = json.loads(cli_runner.invoke(cli, ["--json", "unspent"]).stdout)
        assert data["data"]["filtered"] is True
        assert len(data["data"]["lines"]) == 3


@pytest.mark.usefixtures("fake_node")
class TestMempoolCommand:
    def test_raw_output(self, cli_runner: CliRunner, fake_node) -> None:
        result = cli_runner.invoke(cli, ["mempool"])
        assert result.exit_code == 0
        assert result.stdout == fake_node.responses["getmempoolinfo"][0]
        assert fake_node.calls[0][0] == ["bitcoin-cli", "-testnet4", "getmempoolinfo"]

    def test_raw_bytes_and_escapes_pass_through(self, cli_runner: CliRunner, fake_node) -> None:
        fake_node.respond("getmempoolinfo", b"{\r\n  \"note\": \"\xff\x1b[1m\"\r\n}\r\n")
        result = cli_runner.invoke(cli, ["mempool"])
        assert result.exit_code == 0
        assert result.stdout_bytes == b"{\r\n  \"note\": \"\xff\x1b[1m\"\r\n}\r\n"

    def test_json_escapes_stray_bytes(self, cli_runner: CliRunner, fake_node) -> None:
        fake_node.respond("getmempoolinfo", b"size \xff\n")
        result = cli_runner.invoke(cli, ["--json", "mempool"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["mempool_info"] == "size \udcff\n"


@pytest.mark.usefixtures("fake_node")
class TestLoadCommand:
    def test_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["load"])
        assert result.exit_code == 0
        assert "OK  load_wallet" in result.stdout

    def test_failure_is_visible(self, cli_runner: CliRunner, fake_node) -> None:
        fake_node.respond(
            "loadwallet", "", "error code: -35\nerror message:\nWallet already loaded.\n", 35
        )
        result = cli_runner.invoke(cli, ["load"])
        assert result.exit_code == 1
        assert "ERROR  load_wallet" in result.stderr
        assert "Wallet already loaded." in result.stderr
        assert result.stdout == ""
