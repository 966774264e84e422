"""Subcommand modules for walletctl.

Provides register_commands() which uses deferred imports to keep
``walletctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from walletctl.commands.balance import balance
    from walletctl.commands.load import load
    from walletctl.commands.mempool import mempool
    from walletctl.commands.report import report
    from walletctl.commands.unspent import unspent

    cli.add_command(report)
    cli.add_command(balance)
    cli.add_command(unspent)
    cli.add_command(mempool)
    cli.add_command(load)
