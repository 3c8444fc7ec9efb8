"""Subcommand modules for enskit.

Provides register_commands() which uses deferred imports to keep
``enskit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    1 group (has subcommands) + 5 standalone commands.
    """
    # --- Groups ---
    from enskit.commands.contenthash import contenthash

    cli.add_command(contenthash)

    # --- Standalone commands ---
    from enskit.commands.addresses import addresses
    from enskit.commands.hashing import labelhash, namehash
    from enskit.commands.prepare import prepare
    from enskit.commands.validate import validate

    cli.add_command(namehash)
    cli.add_command(labelhash)
    cli.add_command(validate)
    cli.add_command(prepare)
    cli.add_command(addresses)
