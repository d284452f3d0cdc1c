"""RoverSettings: one frozen object built from flags, environment and TOML.

Highest priority first: CLI flags, ``ROVERCTL_*`` variables (``__`` reaches
into sections, e.g. ``ROVERCTL_SESSION__PROMPT``), ``roverctl.toml``, then
the defaults on the section models.
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

from roverctl.config.discovery import find_config
from roverctl.config.models import ReportConfig, SessionConfig

# The TOML file for the settings object currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class RoverSettings(BaseSettings):
    model_config = SettingsConfigDict(frozen=True, env_prefix="ROVERCTL_", env_nested_delimiter="__")

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    session: SessionConfig = Field(default_factory=SessionConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlConfigSettingsSource(settings_cls, toml_file=_toml_file.get())
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        cwd: Path | None = None,
        **cli_flags: Any,
    ) -> RoverSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* that does not exist means no TOML at all;
        without one, ``roverctl.toml`` is searched for upward from *cwd*.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(cwd)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **cli_flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_file.reset(token)
