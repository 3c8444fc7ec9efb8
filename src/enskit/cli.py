"""Root CLI group for enskit: output flags, config overrides, command registration."""

from __future__ import annotations

import click

from enskit import __version__
from enskit.commands import register_commands
from enskit.commands._context import AppContext
from enskit.config.settings import EnsSettings
from enskit.domain.networks import Network


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="enskit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the primary value (hash, node).")
@click.option("-v", "--verbose", is_flag=True, help="Label breakdowns and debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Use this enskit.toml.")
@click.option(
    "--suffix",
    default=None,
    metavar="SUFFIX",
    help="Parent name that prepared labels are registered under (default: eth).",
)
@click.option(
    "--network",
    default=None,
    type=click.Choice([n.value for n in Network], case_sensitive=False),
    help="Default network for address lookups.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    suffix: str | None,
    network: str | None,
) -> None:
    """enskit — offline ENS namehash, label validation, and registration prep.

    Settings come from flags, then ENSKIT_* env vars, then the nearest
    enskit.toml.
    """
    settings = EnsSettings.from_cli(
        config_path=config_path,
        suffix=suffix,
        network=network.lower() if network else None,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
