"""BaseService — shared foundation for walletctl services.

Every service receives an :class:`RpcCli` bound to one wallet and the
``[report]`` settings.  Services never check the client's exit status;
stderr output is carried forward as warnings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from walletctl.config.models import ReportConfig
from walletctl.services.telemetry import trace_span

if TYPE_CHECKING:
    from walletctl.infrastructure.rpc_cli import RpcCli, RpcOutput


class BaseService:
    """Base for service-layer classes that delegate to the RPC client."""

    def __init__(self, rpc: RpcCli, report: ReportConfig | None = None) -> None:
        self._rpc = rpc
        self._report = report or ReportConfig()

    @property
    def wallet(self) -> str:
        return self._rpc.wallet or ""

    def _call(
        self,
        subcommand: str,
        *params: str,
        warnings: list[str],
        wallet_scoped: bool = True,
    ) -> RpcOutput:
        """Invoke the client, recording stderr text in *warnings*."""
        with trace_span(f"rpc.{subcommand}") as span:
            out = self._rpc.call(subcommand, *params, wallet_scoped=wallet_scoped)
            if span is not None:
                span.annotate("returncode", out.returncode)
        stderr = out.stderr.rstrip("\n")
        if stderr:
            warnings.append(f"{subcommand}: {stderr}")
        return out
