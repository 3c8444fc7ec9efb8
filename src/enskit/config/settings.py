"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ENSKIT_*`` prefix, nested tables via ``__``
  3. TOML file    — ``enskit.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reads through :func:`enskit.config.discovery.read_config`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from enskit.config.discovery import find_config, read_config
from enskit.config.models import NamesConfig, NetworkConfig, ValidationConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read the known tables of an ``enskit.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class EnsSettings(BaseSettings):
    """Unified settings for the enskit CLI and services.

    Merges CLI flags, environment variables, TOML config sections,
    and code-baked defaults into a single frozen object.  Stored on the
    CLI's :class:`~enskit.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENSKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    names: NamesConfig = Field(default_factory=NamesConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        suffix: str | None = None,
        network: str | None = None,
        **cli_flags: Any,
    ) -> EnsSettings:
        """Construct settings from CLI invocation.

        Discovers ``enskit.toml`` via walk-up from *search_root* (default
        cwd), or uses an explicit *config_path*. CLI flags are the
        highest-priority overrides; *suffix* and *network* override single
        keys of the ``[names]`` and ``[network]`` tables, leaving the rest
        of each table to the lower sources.

        Raises:
            click.ClickException: The merged settings are invalid, e.g. env
                vars that invert the ``[validation]`` length bounds.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(search_root)

        overrides: dict[str, Any] = dict(cli_flags)
        if suffix is not None:
            overrides["names"] = {"suffix": suffix}
        if network is not None:
            overrides["network"] = {"default": network}

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            raise click.ClickException(f"Invalid settings: {exc.errors()[0]['msg']}") from exc
        finally:
            _tls.toml_path = None
