"""Commands: namehash and labelhash."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enskit.commands._base import EnsCommand

if TYPE_CHECKING:
    from enskit.commands._context import AppContext


@click.command(
    cls=EnsCommand,
    examples=(
        "enskit namehash foo.eth",
        "enskit namehash ''",
        "enskit namehash 'Vitalik.ETH.' --normalize",
        "enskit -q namehash sub.example.eth",
    ),
)
@click.argument("name")
@click.option("--normalize", is_flag=True, help="Trim, drop trailing dot, and lowercase first.")
@click.pass_obj
def namehash(app: AppContext, name: str, normalize: bool) -> None:
    """Compute the ENS node hash of a dotted NAME."""
    app.emit(app.names.namehash(name, normalize=normalize))


@click.command(
    cls=EnsCommand,
    examples=("enskit labelhash vitalik", "enskit --json labelhash kenya-dev-series"),
)
@click.argument("label")
@click.pass_obj
def labelhash(app: AppContext, label: str) -> None:
    """Hash a single LABEL and show its registrar token id."""
    app.emit(app.names.labelhash(label))
