"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from enskit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from enskit.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    key = _QUIET_KEYS.get(result.op)
    if key and key in result.data:
        return str(result.data[key])

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(
            f"{'valid' if item.get('valid') else 'invalid'}\t{item.get('label', '')}"
            for item in items
        )

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ens.ok")
    op = Text(f"  {result.op}", style="ens.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ens.key")
    if key in ("node", "labelhash", "content_hash", "secret"):
        v = Text(str(value), style="ens.hash")
    elif key in ("name", "label"):
        v = Text(str(value), style="ens.name")
    elif key in ("registry", "public_resolver", "base_registrar", "eth_controller"):
        v = Text(str(value), style="ens.address")
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ens.error")
    op = Text(f"  {result.op}", style="ens.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err is None:
        return

    # Violations are always listed; they are the useful part of the error.
    for violation in err.detail.get("errors", []):
        console.print(Text(f"  - {violation}"))

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_namehash(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render namehash with the label breakdown in verbose mode."""
    _status_line(console, result)
    name = result.data.get("name", "")
    _field(console, "name", name if name else "(root)")
    _field(console, "node", result.data.get("node", ""))
    if verbose:
        labels = result.data.get("labels", [])
        _field(console, "labels", labels)


def _render_validate_batch(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render batch validation as a table, one row per label."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Label", style="ens.name", no_wrap=True)
    table.add_column("Valid")
    table.add_column("Problems")

    for item in items:
        valid = bool(item.get("valid"))
        status = Text("yes", style="ens.ok") if valid else Text("no", style="ens.error")
        errors = item.get("errors", [])
        table.add_row(Text(str(item.get("label", ""))), status, Text("; ".join(errors)))

    console.print(table)
    console.print(
        f"{result.data.get('valid_count', 0)} valid, "
        f"{result.data.get('invalid_count', 0)} invalid"
    )


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "namehash": _render_namehash,
    "validate_batch": _render_validate_batch,
}

# Primary value per op, printed alone in quiet mode so output can be piped.
_QUIET_KEYS: dict[str, str] = {
    "namehash": "node",
    "labelhash": "labelhash",
    "prepare": "node",
    "contenthash_encode": "content_hash",
    "contenthash_decode": "value",
}
