"""Command: offline registration prep for a label."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enskit.commands._base import EnsCommand

if TYPE_CHECKING:
    from enskit.commands._context import AppContext


@click.command(
    cls=EnsCommand,
    examples=(
        "enskit prepare kenya-dev-series",
        "enskit prepare kenya-dev-series --years 2",
        "enskit --suffix base.eth prepare my-project",
    ),
)
@click.argument("label")
@click.option("--years", type=int, default=1, show_default=True, help="Rental period.")
@click.pass_obj
def prepare(app: AppContext, label: str, years: int) -> None:
    """Validate LABEL and compute everything needed to register it."""
    app.emit(app.names.prepare(label, years=years))
