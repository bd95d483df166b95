"""CutgraphSettings: one frozen object built from every configuration layer.

Later layers lose to earlier ones:

  1. keyword arguments, i.e. the global CLI flags
  2. ``CUTGRAPH_*`` environment variables (``__`` separates sections)
  3. the ``cutgraph.toml`` found by :func:`find_config`
  4. defaults in :mod:`cutgraph.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from cutgraph.config.discovery import find_config
from cutgraph.config.models import ComponentsConfig, PickingConfig

# TOML file for the settings object currently being built by from_cli().
_toml_path: ContextVar[Path | None] = ContextVar("_toml_path", default=None)


class CutgraphSettings(BaseSettings):
    """Global flags plus the ``[picking]`` and ``[components]`` sections.

    Attributes:
        config_path: The TOML file that was read, or None.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="CUTGRAPH_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    picking: PickingConfig = Field(default_factory=PickingConfig)
    components: ComponentsConfig = Field(default_factory=ComponentsConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_path = _toml_path.get()
        if toml_path is None:
            return (init_settings, env_settings)
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> CutgraphSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist is ignored. Otherwise
        ``cutgraph.toml`` is looked up from *start* (default: cwd).

        Raises:
            click.ClickException: If the TOML file cannot be parsed.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        token = _toml_path.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_path.reset(token)
