"""Root CLI group for walletctl with global flags and command registration."""

from __future__ import annotations

import click

from walletctl import __version__
from walletctl.commands import register_commands
from walletctl.commands._base import WalletGroup
from walletctl.commands._context import AppContext
from walletctl.config.settings import WalletctlSettings


@click.group(
    cls=WalletGroup,
    invoke_without_command=True,
    examples="""\
  walletctl
  walletctl -c ./walletctl.toml report
  WALLETCTL_RPC__NETWORK=regtest walletctl balance""",
)
@click.version_option(version=__version__, prog_name="walletctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Log every RPC call and show timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("-w", "--wallet", "wallet_name", default=None, help="Wallet name override.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    wallet_name: str | None,
) -> None:
    """walletctl — wallet balance and mempool report via bitcoin-cli."""
    settings = WalletctlSettings.from_cli(
        config_path=config_path,
        wallet_name=wallet_name,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from walletctl.commands.report import report

        ctx.invoke(report)


register_commands(cli)
