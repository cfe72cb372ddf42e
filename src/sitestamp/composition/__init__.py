"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config

# Runner services
from ..adapters.filesystem.workspace import (
    current_script_path,
    enter_directory,
    locate_project_dir,
    write_stamp,
)

# Logging services
from ..adapters.logging.setup import init_logging
from ..adapters.process.build import run_build
from ..application.runner import RunnerPorts

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.workspace import WorkspaceSpy
    from ..application.ports import (
        DisplayConfig,
        EnterDirectory,
        GetConfig,
            GetScriptPath,
        InitLogging,
        LocateProjectDir,
        RunBuild,
        WriteStamp,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_get_script_path: GetScriptPath = current_script_path
    _assert_locate_project_dir: LocateProjectDir = locate_project_dir
    _assert_enter_directory: EnterDirectory = enter_directory
    _assert_run_build: RunBuild = run_build
    _assert_write_stamp: WriteStamp = write_stamp


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    get_script_path: GetScriptPath
    runner_ports: RunnerPorts


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        get_script_path=current_script_path,
        runner_ports=RunnerPorts(
            locate_project_dir=locate_project_dir,
            enter_directory=enter_directory,
            run_build=run_build,
            write_stamp=write_stamp,
        ),
    )


def build_testing(*, spy: WorkspaceSpy | None = None, script_path: str = "/srv/site/build.py") -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional WorkspaceSpy capturing runner operations. When None,
            a fresh WorkspaceSpy is created. Pass your own spy to assert on
            the steps a run performed.
        script_path: Path reported as the running program.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        WorkspaceSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    workspace_spy = spy if spy is not None else WorkspaceSpy()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        get_script_path=lambda: script_path,
        runner_ports=workspace_spy.ports(),
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # Runner
    "current_script_path",
    "enter_directory",
    "locate_project_dir",
    "run_build",
    "write_stamp",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
