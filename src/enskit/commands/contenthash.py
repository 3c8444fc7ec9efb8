"""Command group: content-hash record encoding."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from enskit.commands._base import EnsGroup

if TYPE_CHECKING:
    from enskit.commands._context import AppContext


@click.group(
    cls=EnsGroup,
    examples=(
        "enskit contenthash encode QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",
        "enskit contenthash decode 0x0102516d",
    ),
)
def contenthash() -> None:
    """Encode or decode IPFS content-hash records."""


@contenthash.command(
    examples=("enskit contenthash encode QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG",),
)
@click.argument("ipfs_hash")
@click.pass_obj
def encode(app: AppContext, ipfs_hash: str) -> None:
    """Encode IPFS_HASH (Qm... or bafy...) as a content-hash record."""
    app.emit(app.names.encode_content_hash(ipfs_hash))


@contenthash.command(
    examples=("enskit -q contenthash decode 0x0102516d",),
)
@click.argument("content_hash")
@click.pass_obj
def decode(app: AppContext, content_hash: str) -> None:
    """Decode CONTENT_HASH back to the IPFS hash it carries."""
    app.emit(app.names.decode_content_hash(content_hash))
