"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Stamp rendering, build argv and stamp path rules
    * :mod:`.enums` - Domain enumerations (OutputFormat, BuildProfile)
    * :mod:`.errors` - Domain exception types
    * :mod:`.settings` - Run settings and result value objects
"""

from __future__ import annotations

from .behaviors import build_command, render_stamp, stamp_path
from .enums import BuildProfile, OutputFormat
from .errors import (
    BuildError,
    ConfigurationError,
    ProjectDirectoryError,
    RunnerError,
    StampWriteError,
    os_error_exit_code,
)
from .settings import DEFAULT_DOMAIN, BuildSettings, StampResult, StampSettings

__all__ = [
    # Behaviors
    "build_command",
    "render_stamp",
    "stamp_path",
    # Enums
    "BuildProfile",
    "OutputFormat",
    # Errors
    "BuildError",
    "ConfigurationError",
    "ProjectDirectoryError",
    "RunnerError",
    "StampWriteError",
    "os_error_exit_code",
    # Settings
    "DEFAULT_DOMAIN",
    "BuildSettings",
    "StampResult",
    "StampSettings",
]
