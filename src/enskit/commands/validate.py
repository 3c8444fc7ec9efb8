"""Command: validate candidate labels before registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enskit.commands._base import STDIN, EnsCommand, read_labels

if TYPE_CHECKING:
    from enskit.commands._context import AppContext


@click.command(
    cls=EnsCommand,
    examples=(
        "enskit validate kenya-dev-series",
        "enskit validate my--name",
        "enskit validate alpha beta gamma",
        "enskit validate -- -leading-hyphen",
        "enskit --json validate ETH",
        "cat labels.txt | enskit validate -",
    ),
)
@click.argument("labels", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, labels: tuple[str, ...]) -> None:
    """Check one or more LABELS against the registration rules.

    A single label exits non-zero when invalid. Several labels, or ``-``
    to read one label per line from stdin, are reported together as a
    table and always exit zero.
    """
    collected = read_labels(labels)
    if not collected:
        raise click.UsageError("No labels given on stdin.")
    if len(collected) == 1 and STDIN not in labels:
        app.emit(app.names.validate(collected[0]))
    else:
        app.emit(app.names.validate_many(collected))
