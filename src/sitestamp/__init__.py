"""Public package surface for the build-and-stamp runner.

Routes imports through the architectural layers:
- Domain exports: settings, stamp rendering, error taxonomy
- Application exports: the build-and-stamp use case
- Composition exports: wired adapter services
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.runner import RunnerPorts, build_and_stamp

# Composition exports (wired adapters)
from .composition import build_production, get_config

# Domain exports
from .domain import (
    DEFAULT_DOMAIN,
    BuildError,
    BuildSettings,
    ConfigurationError,
    ProjectDirectoryError,
    RunnerError,
    StampResult,
    StampSettings,
    StampWriteError,
    render_stamp,
)

__all__ = [
    "DEFAULT_DOMAIN",
    "BuildError",
    "BuildSettings",
    "ConfigurationError",
    "ProjectDirectoryError",
    "RunnerError",
    "RunnerPorts",
    "StampResult",
    "StampSettings",
    "StampWriteError",
    "build_and_stamp",
    "build_production",
    "get_config",
    "print_info",
    "render_stamp",
]
