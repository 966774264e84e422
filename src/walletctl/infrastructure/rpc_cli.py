"""Runner for the node's command-line RPC client (``bitcoin-cli``).

Every call is a blocking ``subprocess.run`` with no timeout.  Exit status is
never checked: a failing call simply yields whatever the client printed.
A missing or unexecutable binary is reported the way a shell would, as
empty stdout with exit status 127.

Output is captured as bytes and decoded with the filesystem encoding and
``surrogateescape``: line endings are left alone and undecodable bytes
survive the round trip back to our own stdout.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from dataclasses import dataclass

from walletctl.config.models import RpcConfig

logger = logging.getLogger(__name__)

# Exit status a POSIX shell reports for "command not found".
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class RpcOutput:
    """Captured result of one client invocation."""

    args: tuple[str, ...]
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class RpcCli:
    """Build client argv and run it.

    Wallet-scoped calls carry ``-rpcwallet=<wallet>``; node-wide calls
    (``getmempoolinfo``) pass ``wallet_scoped=False``.
    """

    def __init__(self, config: RpcConfig | None = None, wallet: str | None = None) -> None:
        self._config = config or RpcConfig()
        self._wallet = wallet

    @property
    def wallet(self) -> str | None:
        return self._wallet

    def argv(self, subcommand: str, *params: str, wallet_scoped: bool = True) -> list[str]:
        """Return the full argument vector for *subcommand*."""
        args = [self._config.binary]
        if self._config.network:
            args.append(f"-{self._config.network}")
        args.extend(self._config.extra_args)
        if wallet_scoped and self._wallet:
            args.append(f"-rpcwallet={self._wallet}")
        args.append(subcommand)
        args.extend(params)
        return args

    def call(self, subcommand: str, *params: str, wallet_scoped: bool = True) -> RpcOutput:
        """Run *subcommand* and capture stdout and stderr."""
        args = self.argv(subcommand, *params, wallet_scoped=wallet_scoped)
        started = time.perf_counter()
        try:
            proc = subprocess.run(args, capture_output=True, check=False)
        except OSError as exc:
            logger.warning("RPC client could not be started: %s", exc)
            return RpcOutput(args=tuple(args), stderr=str(exc), returncode=COMMAND_NOT_FOUND)

        logger.debug(
            "rpc %s exited %d in %.2fms",
            subcommand,
            proc.returncode,
            (time.perf_counter() - started) * 1000,
        )
        return RpcOutput(
            args=tuple(args),
            stdout=_decode(proc.stdout),
            stderr=_decode(proc.stderr),
            returncode=proc.returncode,
        )

    def call_discarding(self, subcommand: str, *params: str, wallet_scoped: bool = True) -> None:
        """Run *subcommand* with stdout and stderr sent to the null device.

        The outcome is not observed in any way; only debug logging records it.
        """
        args = self.argv(subcommand, *params, wallet_scoped=wallet_scoped)
        try:
            proc = subprocess.run(
                args,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as exc:
            logger.debug("rpc %s not started: %s", subcommand, exc)
            return
        logger.debug("rpc %s exited %d (discarded)", subcommand, proc.returncode)


def _decode(raw: bytes | None) -> str:
    """Bytes from the client as text, reversible with :func:`os.fsencode`."""
    if not raw:
        return ""
    return os.fsdecode(raw)
