"""Command: load the wallet on the node."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from walletctl.commands._base import WalletCommand

if TYPE_CHECKING:
    from walletctl.commands._context import AppContext


@click.command(cls=WalletCommand, examples="  walletctl load\n  walletctl -w other_wallet load")
@click.pass_obj
def load(app: AppContext) -> None:
    """Load the wallet and report whether the node accepted it."""
    app.emit(app.service.load_wallet())
