"""Click base classes shared by enskit commands.

``EnsCommand`` and ``EnsGroup`` take ``examples``: a sequence of complete
``enskit ...`` invocations, shown by an eager ``--examples`` flag so that
``--help`` stays short. :func:`read_labels` lets label arguments come from
stdin, one per line, when given as ``-``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import click

STDIN = "-"
PROG = "enskit"


def _checked_examples(examples: Sequence[str]) -> tuple[str, ...]:
    lines = tuple(examples)
    for line in lines:
        # the last stage of a shell pipeline must be the enskit call
        stage = line.rsplit("|", 1)[-1].split()
        if not stage or stage[0] != PROG:
            msg = f"example must be a full {PROG} invocation: {line!r}"
            raise ValueError(msg)
    return lines


class _ExamplesMixin:
    """Adds the ``--examples`` option to whatever params click collects."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = _checked_examples(examples)

    def get_params(self, ctx: click.Context) -> list[click.Parameter]:
        params: list[click.Parameter] = super().get_params(ctx)  # type: ignore[misc]
        if self.examples:
            params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )
        return params

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in self.examples:
            click.echo(f"  $ {line}")
        ctx.exit(0)


class EnsCommand(_ExamplesMixin, click.Command):
    """Click Command with an ``--examples`` flag."""


class EnsGroup(_ExamplesMixin, click.Group):
    """Click Group with an ``--examples`` flag; subcommands default to EnsCommand."""

    command_class = EnsCommand


def read_labels(values: Iterable[str]) -> list[str]:
    """Expand each ``-`` in *values* into the labels read from stdin.

    Stdin holds one label per line; blank lines and ``#`` comments are
    skipped. Other values pass through unchanged and in order.
    """
    labels: list[str] = []
    for value in values:
        if value != STDIN:
            labels.append(value)
            continue
        for line in click.get_text_stream("stdin"):
            text = line.strip()
            if text and not text.startswith("#"):
                labels.append(text)
    return labels
