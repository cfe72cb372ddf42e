"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that never touch the
filesystem, spawn processes, or start the logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.workspace` - Runner port spy (WorkspaceSpy class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
)
from .logging import init_logging_in_memory
from .workspace import WorkspaceSpy

# Static conformance assertions
if TYPE_CHECKING:
    from sitestamp.application.ports import (
        DisplayConfig,
        EnterDirectory,
        GetConfig,
            InitLogging,
        LocateProjectDir,
        RunBuild,
        WriteStamp,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _spy = WorkspaceSpy()
    _assert_locate: LocateProjectDir = _spy.locate_project_dir
    _assert_enter: EnterDirectory = _spy.enter_directory
    _assert_run_build: RunBuild = _spy.run_build
    _assert_write_stamp: WriteStamp = _spy.write_stamp

__all__ = [
    "WorkspaceSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
