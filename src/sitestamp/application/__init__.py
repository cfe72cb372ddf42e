"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.runner` - Build-and-stamp use case
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    EnterDirectory,
    GetConfig,
    GetScriptPath,
    InitLogging,
    LocateProjectDir,
    RunBuild,
    WriteStamp,
)
from .runner import RunnerPorts, build_and_stamp

__all__ = [
    "DisplayConfig",
    "EnterDirectory",
    "GetConfig",
    "GetScriptPath",
    "InitLogging",
    "LocateProjectDir",
    "RunBuild",
    "RunnerPorts",
    "WriteStamp",
    "build_and_stamp",
]
