"""Command: node mempool summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from walletctl.commands._base import WalletCommand

if TYPE_CHECKING:
    from walletctl.commands._context import AppContext


@click.command(cls=WalletCommand, examples="  walletctl mempool\n  walletctl --json mempool")
@click.pass_obj
def mempool(app: AppContext) -> None:
    """Print the node's raw mempool info."""
    app.emit(app.service.mempool_info())
