"""Translate the ``[stamp]`` and ``[build]`` config sections into domain settings.

Uses Pydantic for single-parse validation at the boundary; the domain only
ever sees frozen dataclasses.

Contents:
    * :class:`StampConfigModel` - ``[stamp]`` section schema.
    * :class:`BuildConfigModel` - ``[build]`` section schema.
    * :func:`load_run_settings` - Build ``(StampSettings, BuildSettings)`` from Config.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from sitestamp.domain.enums import BuildProfile
from sitestamp.domain.errors import ConfigurationError
from sitestamp.domain.settings import (
    DEFAULT_BUILD_SUBCOMMAND,
    DEFAULT_BUILD_TOOL,
    DEFAULT_DOMAIN,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_STAMP_FILE_NAME,
    BuildSettings,
    StampSettings,
)


class StampConfigModel(BaseModel):
    """Pydantic model for the [stamp] config section.

    Example:
        >>> model = StampConfigModel.model_validate({"domain": "example.org"})
        >>> (model.domain, model.output_dir, model.file_name)
        ('example.org', 'docs', 'CNAME')
        >>> StampConfigModel().project_dir
        ''
    """

    domain: str = DEFAULT_DOMAIN
    output_dir: str = DEFAULT_OUTPUT_DIR
    file_name: str = DEFAULT_STAMP_FILE_NAME
    project_dir: str = ""

    model_config = ConfigDict(extra="forbid")

    @field_validator("domain", "file_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @field_validator("domain")
    @classmethod
    def _single_host(cls, value: str) -> str:
        if any(char.isspace() for char in value):
            raise ValueError("must be a single host name without whitespace")
        return value

    @field_validator("file_name")
    @classmethod
    def _plain_name(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("must be a file name, not a path")
        return value

    def to_settings(self) -> StampSettings:
        return StampSettings(
            domain=self.domain,
            output_dir=self.output_dir,
            file_name=self.file_name,
            project_dir=Path(self.project_dir) if self.project_dir.strip() else None,
        )


class BuildConfigModel(BaseModel):
    """Pydantic model for the [build] config section.

    Example:
        >>> BuildConfigModel.model_validate({"profile": "debug"}).profile
        <BuildProfile.DEBUG: 'debug'>
        >>> BuildConfigModel().extra_args
        []
    """

    tool: str = DEFAULT_BUILD_TOOL
    subcommand: str = DEFAULT_BUILD_SUBCOMMAND
    profile: BuildProfile = BuildProfile.RELEASE
    extra_args: list[str] = []

    model_config = ConfigDict(extra="forbid")

    @field_validator("tool")
    @classmethod
    def _tool_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    def to_settings(self) -> BuildSettings:
        return BuildSettings(
            tool=self.tool,
            subcommand=self.subcommand,
            profile=self.profile,
            extra_args=tuple(self.extra_args),
        )


def _section(config: Config, name: str) -> Mapping[str, Any]:
    raw: object = config.get(name, default={})
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{name}] must be a table, got {type(raw).__name__}")
    return cast("Mapping[str, Any]", raw)


def _format_validation_error(section: str, exc: ValidationError) -> str:
    problems = "; ".join(
        f"{section}.{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return f"Invalid configuration: {problems}"


def load_run_settings(config: Config) -> tuple[StampSettings, BuildSettings]:
    """Parse the run settings out of a loaded Config.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Tuple of (stamp settings, build settings). Missing sections fall back
        to the built-in defaults.

    Raises:
        ConfigurationError: If either section holds invalid values.

    Example:
        >>> stamp, build = load_run_settings(Config({}, {}))
        >>> stamp.domain, build.tool
        ('calculus.dogwood.cloud', 'trunk')
    """
    try:
        stamp = StampConfigModel.model_validate(dict(_section(config, "stamp")))
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error("stamp", exc)) from exc
    try:
        build = BuildConfigModel.model_validate(dict(_section(config, "build")))
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error("build", exc)) from exc
    return stamp.to_settings(), build.to_settings()


__all__ = [
    "BuildConfigModel",
    "StampConfigModel",
    "load_run_settings",
]
