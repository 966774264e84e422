"""Command: confirmed and unconfirmed balance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from walletctl.commands._base import WalletCommand

if TYPE_CHECKING:
    from walletctl.commands._context import AppContext


@click.command(
    cls=WalletCommand,
    examples="""\
  walletctl balance
  walletctl -q balance
  walletctl --json balance""",
)
@click.pass_obj
def balance(app: AppContext) -> None:
    """Show the wallet balance and unconfirmed balance."""
    app.emit(app.service.balance())
