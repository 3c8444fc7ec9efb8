"""Command: show deployed ENS contract addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enskit.commands._base import EnsCommand

if TYPE_CHECKING:
    from enskit.commands._context import AppContext


@click.command(
    cls=EnsCommand,
    examples=(
        "enskit addresses",
        "enskit addresses --network sepolia",
        "enskit --network goerli --json addresses",
    ),
)
@click.option("--network", default=None, help="mainnet, goerli, or sepolia (default from config).")
@click.pass_obj
def addresses(app: AppContext, network: str | None) -> None:
    """Show registry, resolver, and registrar addresses for a network."""
    app.emit(app.names.addresses(network))
