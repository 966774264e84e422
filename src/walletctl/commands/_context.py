"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides the report service and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import click

from walletctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from walletctl.config.settings import WalletctlSettings
    from walletctl.services.report import ReportService
    from walletctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is built lazily so ``--help`` and ``--examples`` never
    touch the RPC client.
    """

    def __init__(self, settings: WalletctlSettings) -> None:
        self.settings = settings
        self._service: ReportService | None = None

        from walletctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from walletctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> ReportService:
        """ReportService bound to the configured client and wallet."""
        if self._service is None:
            from walletctl.infrastructure.rpc_cli import RpcCli
            from walletctl.services.report import ReportService

            rpc = RpcCli(self.settings.rpc, wallet=self.settings.wallet.name)
            self._service = ReportService(rpc, self.settings.report)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout.  Warnings and the verbose span tree go
          to stderr so they never mix with the report.  A non-zero
          ``exit_code`` from the last client call becomes the exit status.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if not result.ok:
            _write(output, err=True)
            raise SystemExit(1)

        _write(output)
        if not settings.json_output:
            for warning in result.warnings:
                _write(f"WARNING: {warning}\n", err=True)
            if self.settings.verbose:
                from walletctl.output.renderers import render_telemetry

                telemetry = render_telemetry(result)
                if telemetry:
                    _write(telemetry, err=True)
        if result.exit_code:
            raise SystemExit(result.exit_code)


def _write(text: str, *, err: bool = False) -> None:
    """Write *text* to the binary stream, restoring the client's raw bytes.

    ``click.echo`` would re-encode strictly and strip ANSI escapes off a
    non-TTY, so client text would no longer match what the client printed.
    """
    stream = click.get_binary_stream("stderr" if err else "stdout")
    stream.write(os.fsencode(text))
    stream.flush()
