"""ReportService — the wallet report and its single-call building blocks.

The report is a fixed sequence of client invocations:

1. ``loadwallet`` with all output discarded and its outcome ignored
2. ``getbalance``
3. ``getunconfirmedbalance``, shown only when not the zero literal
4. ``listunspent 0 0`` filtered to unconfirmed outputs
5. the same ``listunspent 0 0`` call and filter again, for the mempool section
6. ``getmempoolinfo``, kept byte-for-byte

Nothing is validated: a failed call contributes whatever it printed,
usually an empty string.
"""

from __future__ import annotations

from typing import Any

from walletctl.domain.capture import is_zero_literal, substitute
from walletctl.domain.grep import grep_after, split_lines
from walletctl.services.base import BaseService
from walletctl.services.result import ServiceError, ServiceResult
from walletctl.services.telemetry import traced


class ReportService(BaseService):
    """Report a wallet's balances, unconfirmed outputs, and mempool state."""

    @traced
    def report(self) -> ServiceResult:
        """Run the full report sequence."""
        warnings: list[str] = []

        self._rpc.call_discarding("loadwallet", self.wallet)

        balance = substitute(self._call("getbalance", warnings=warnings).stdout)
        unconfirmed = substitute(self._call("getunconfirmedbalance", warnings=warnings).stdout)
        unconfirmed_txs = self._unconfirmed_outputs(warnings)
        mempool_txs = self._unconfirmed_outputs(warnings)
        mempool = self._call("getmempoolinfo", warnings=warnings, wallet_scoped=False)

        data: dict[str, Any] = {
            "wallet": self.wallet,
            "currency": self._report.currency,
            "balance": balance,
            "unconfirmed_balance": (
                None if is_zero_literal(unconfirmed, self._report.zero_balance) else unconfirmed
            ),
            "unconfirmed_transactions": unconfirmed_txs,
            "mempool_transactions": mempool_txs,
            "mempool_info": mempool.stdout,
            "exit_code": mempool.returncode,
        }
        return ServiceResult(ok=True, op="report", data=data, warnings=warnings)

    @traced
    def balance(self) -> ServiceResult:
        """Confirmed and unconfirmed balance, both always shown."""
        warnings: list[str] = []
        balance = self._call("getbalance", warnings=warnings)
        unconfirmed = self._call("getunconfirmedbalance", warnings=warnings)
        return ServiceResult(
            ok=True,
            op="balance",
            data={
                "wallet": self.wallet,
                "currency": self._report.currency,
                "balance": substitute(balance.stdout),
                "unconfirmed_balance": substitute(unconfirmed.stdout),
                "exit_code": unconfirmed.returncode,
            },
            warnings=warnings,
        )

    @traced
    def unspent(
        self, minconf: int = 0, maxconf: int = 0, *, filtered: bool = True
    ) -> ServiceResult:
        """List unspent outputs in a confirmation range.

        With *filtered*, only the unconfirmed-output lines and their trailing
        context are kept; otherwise every line of the client output is.
        """
        if minconf < 0 or maxconf < minconf:
            return ServiceResult(
                ok=False,
                op="unspent",
                error=ServiceError(
                    code="INVALID_RANGE",
                    message=f"Invalid confirmation range {minconf}..{maxconf}",
                    detail={"minconf": minconf, "maxconf": maxconf},
                ),
            )

        warnings: list[str] = []
        out = self._call("listunspent", str(minconf), str(maxconf), warnings=warnings)
        if filtered:
            lines = grep_after(
                out.stdout, self._report.unconfirmed_pattern, self._report.context_lines
            )
        else:
            lines = split_lines(out.stdout)
        return ServiceResult(
            ok=True,
            op="unspent",
            data={
                "wallet": self.wallet,
                "minconf": minconf,
                "maxconf": maxconf,
                "filtered": filtered,
                "lines": lines,
                "exit_code": out.returncode,
            },
            warnings=warnings,
        )

    @traced
    def mempool_info(self) -> ServiceResult:
        """Node-wide mempool summary, raw."""
        warnings: list[str] = []
        out = self._call("getmempoolinfo", warnings=warnings, wallet_scoped=False)
        return ServiceResult(
            ok=True,
            op="mempool_info",
            data={"mempool_info": out.stdout, "exit_code": out.returncode},
            warnings=warnings,
        )

    @traced
    def load_wallet(self) -> ServiceResult:
        """Load the wallet and report the outcome, unlike the report does."""
        warnings: list[str] = []
        out = self._call("loadwallet", self.wallet, warnings=warnings)
        if not out.ok:
            return ServiceResult(
                ok=False,
                op="load_wallet",
                error=ServiceError(
                    code="LOAD_FAILED",
                    message=substitute(out.stderr) or f"loadwallet exited {out.returncode}",
                    detail={"wallet": self.wallet, "returncode": out.returncode},
                ),
            )
        return ServiceResult(
            ok=True,
            op="load_wallet",
            data={"wallet": self.wallet, "output": substitute(out.stdout)},
        )

    def _unconfirmed_outputs(self, warnings: list[str]) -> list[str]:
        out = self._call("listunspent", "0", "0", warnings=warnings)
        return grep_after(out.stdout, self._report.unconfirmed_pattern, self._report.context_lines)
