"""Shared pytest fixtures and test helpers for walletctl tests."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Generator
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from walletctl.config.models import RpcConfig
from walletctl.infrastructure.rpc_cli import RpcCli
from walletctl.services.report import ReportService
from walletctl.services.telemetry import disable_telemetry

LISTUNSPENT_OUTPUT = """\
[
  {
    "txid": "8f1b0c5a",
    "vout": 1,
    "address": "tb1qexample",
    "amount": 0.00050000,
    "confirmations": 0,
    "spendable": true,
    "solvable": true,
    "safe": false
  }
]
"""

MEMPOOL_OUTPUT = """\
{
  "loaded": true,
  "size": 3,
  "bytes": 642,
  "usage": 4032,
  "total_fee": 0.00001300,
  "maxmempool": 300000000,
  "mempoolminfee": 0.00001000,
  "minrelaytxfee": 0.00001000
}
"""


class FakeNode:
    """Stand-in for ``subprocess.run`` answering like ``bitcoin-cli``.

    Responses are keyed by subcommand and handed back as bytes, as
    ``capture_output`` without ``text`` does; every call is recorded in
    ``calls``.
    """

    def __init__(self) -> None:
        self.responses: dict[str, tuple[str | bytes, str | bytes, int]] = {
            "loadwallet": ('{\n  "name": "testnet4_wallet"\n}\n', "", 0),
            "getbalance": ("1.23456789\n", "", 0),
            "getunconfirmedbalance": ("0.00000000\n", "", 0),
            "listunspent": (LISTUNSPENT_OUTPUT, "", 0),
            "getmempoolinfo": (MEMPOOL_OUTPUT, "", 0),
        }
        self.calls: list[tuple[list[str], dict[str, Any]]] = []

    def respond(
        self,
        subcommand: str,
        stdout: str | bytes = "",
        stderr: str | bytes = "",
        returncode: int = 0,
    ) -> None:
        self.responses[subcommand] = (stdout, stderr, returncode)

    def subcommands(self) -> list[str]:
        return [_subcommand(args) for args, _ in self.calls]

    def __call__(self, args: list[str], **kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        self.calls.append((list(args), kwargs))
        stdout, stderr, returncode = self.responses.get(_subcommand(args), ("", "", 0))
        if kwargs.get("stdout") is subprocess.DEVNULL:
            return subprocess.CompletedProcess(args, returncode, None, None)
        return subprocess.CompletedProcess(args, returncode, _raw(stdout), _raw(stderr))


def _subcommand(args: list[str]) -> str:
    return next(a for a in args[1:] if not a.startswith("-"))


def _raw(stream: str | bytes) -> bytes:
    return stream if isinstance(stream, bytes) else os.fsencode(stream)


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no WALLETCTL_* variables.

    Also restores logging handlers and telemetry state the CLI may change.
    """
    for name in list(os.environ):
        if name.startswith("WALLETCTL_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    wallet_level = logging.getLogger("walletctl").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("walletctl").setLevel(wallet_level)
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_node() -> Generator[FakeNode]:
    """Patch the RPC runner's subprocess.run with a :class:`FakeNode`."""
    node = FakeNode()
    with patch("walletctl.infrastructure.rpc_cli.subprocess.run", side_effect=node):
        yield node


@pytest.fixture
def service(fake_node: FakeNode) -> ReportService:
    """ReportService for ``testnet4_wallet`` talking to the fake node."""
    return ReportService(RpcCli(RpcConfig(), wallet="testnet4_wallet"))
