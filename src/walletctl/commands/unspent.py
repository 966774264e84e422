"""Command: unspent outputs in a confirmation range."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from walletctl.commands._base import WalletCommand

if TYPE_CHECKING:
    from walletctl.commands._context import AppContext


@click.command(
    cls=WalletCommand,
    examples="""\
  walletctl unspent                       # unconfirmed outputs only
  walletctl unspent --maxconf 6 --all     # raw listing, up to 6 confirmations
  walletctl --json unspent""",
)
@click.option("--minconf", type=int, default=0, show_default=True, help="Minimum confirmations.")
@click.option("--maxconf", type=int, default=0, show_default=True, help="Maximum confirmations.")
@click.option("--all", "show_all", is_flag=True, help="Print the listing unfiltered.")
@click.pass_obj
def unspent(app: AppContext, minconf: int, maxconf: int, show_all: bool) -> None:
    """List unspent outputs, filtered to unconfirmed ones by default."""
    app.emit(app.service.unspent(minconf, maxconf, filtered=not show_all))
