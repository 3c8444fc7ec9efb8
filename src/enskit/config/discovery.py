"""Locate and read ``enskit.toml``.

The file is found by walking up from the working directory, unless the
``ENSKIT_CONFIG`` env var names one explicitly. :func:`read_config` parses it
and checks each known table against its section model before the settings
layer merges it, so a bad ``[validation]`` table fails with the file path in
the message instead of a bare pydantic traceback.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from enskit.config.models import SECTIONS

CONFIG_FILENAME = "enskit.toml"
CONFIG_ENV_VAR = "ENSKIT_CONFIG"

logger = logging.getLogger(__name__)


class ConfigError(click.ClickException):
    """An ``enskit.toml`` that cannot be parsed or fails section checks."""

    def __init__(self, path: Path, problem: str) -> None:
        super().__init__(f"{path}: {problem}")
        self.path = path


def find_config(start: Path | None = None) -> Path | None:
    """Return the ``enskit.toml`` governing *start* (default: cwd), or None.

    ``ENSKIT_CONFIG`` takes precedence; a missing file there means no config
    rather than falling back to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* and return its tables for the settings layer.

    Raises:
        ConfigError: Invalid TOML, a known table that is not a table, or a
            table that fails its section model (e.g. inverted length bounds).
    """
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(path, f"Invalid TOML: {exc}") from exc

    for name, value in data.items():
        model = SECTIONS.get(name)
        if model is None:
            logger.warning("ignoring unknown table [%s] in %s", name, path)
            continue
        if not isinstance(value, dict):
            raise ConfigError(path, f"[{name}] must be a table")
        try:
            model.model_validate(value)
        except ValidationError as exc:
            raise ConfigError(path, f"Invalid [{name}]: {_first_error(exc)}") from exc

    return {name: value for name, value in data.items() if name in SECTIONS}


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    msg = err["msg"].removeprefix("Value error, ")
    return f"{loc}: {msg}" if loc else msg
