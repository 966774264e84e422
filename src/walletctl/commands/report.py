"""Command: full wallet and mempool report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from walletctl.commands._base import WalletCommand

if TYPE_CHECKING:
    from walletctl.commands._context import AppContext


@click.command(
    cls=WalletCommand,
    examples="""\
  walletctl                         # same as 'walletctl report'
  walletctl report
  walletctl -w other_wallet report
  walletctl --json report
  walletctl -q report               # balance only""",
)
@click.pass_obj
def report(app: AppContext) -> None:
    """Print balance, unconfirmed outputs, and mempool info for the wallet."""
    app.emit(app.service.report())
