"""Immutable value objects describing one build-and-stamp run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .enums import BuildProfile

DEFAULT_DOMAIN = "calculus.dogwood.cloud"
DEFAULT_OUTPUT_DIR = "docs"
DEFAULT_STAMP_FILE_NAME = "CNAME"
DEFAULT_BUILD_TOOL = "trunk"
DEFAULT_BUILD_SUBCOMMAND = "build"


@dataclass(frozen=True, slots=True)
class StampSettings:
    """Where the stamp file goes and what it says.

    Attributes:
        domain: Custom domain written into the stamp file.
        output_dir: Directory, relative to the project directory, holding the file.
        file_name: Name of the stamp file.
        project_dir: Explicit project directory. ``None`` anchors the run at
            the directory containing the running program.

    Example:
        >>> StampSettings().domain
        'calculus.dogwood.cloud'
        >>> StampSettings().project_dir is None
        True
    """

    domain: str = DEFAULT_DOMAIN
    output_dir: str = DEFAULT_OUTPUT_DIR
    file_name: str = DEFAULT_STAMP_FILE_NAME
    project_dir: Path | None = None


@dataclass(frozen=True, slots=True)
class BuildSettings:
    """How the external build tool is invoked.

    Example:
        >>> settings = BuildSettings()
        >>> (settings.tool, settings.subcommand, settings.profile.value)
        ('trunk', 'build', 'release')
    """

    tool: str = DEFAULT_BUILD_TOOL
    subcommand: str = DEFAULT_BUILD_SUBCOMMAND
    profile: BuildProfile = BuildProfile.RELEASE
    extra_args: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class StampResult:
    """Outcome of a successful run."""

    project_dir: Path
    command: tuple[str, ...]
    stamp_file: Path
    content: str


__all__ = [
    "DEFAULT_BUILD_SUBCOMMAND",
    "DEFAULT_BUILD_TOOL",
    "DEFAULT_DOMAIN",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_STAMP_FILE_NAME",
    "BuildSettings",
    "StampResult",
    "StampSettings",
]
