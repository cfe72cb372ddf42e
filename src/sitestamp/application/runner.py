"""Build-and-stamp use case.

Runs the four steps of a release in strict order, each exactly once:

1. locate the project directory (the directory of the running program,
   unless configuration names one explicitly),
2. enter it,
3. run the external build tool and wait for it,
4. write the stamp file.

The first failing step raises and nothing after it runs, so a failed build
never leaves a freshly written stamp behind.

Contents:
    * :class:`RunnerPorts` - The adapter callables the use case depends on.
    * :func:`build_and_stamp` - Execute one run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.behaviors import build_command, render_stamp, stamp_path
from ..domain.settings import BuildSettings, StampResult, StampSettings
from .ports import EnterDirectory, LocateProjectDir, RunBuild, WriteStamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RunnerPorts:
    """Adapters used by :func:`build_and_stamp`."""

    locate_project_dir: LocateProjectDir
    enter_directory: EnterDirectory
    run_build: RunBuild
    write_stamp: WriteStamp


def build_and_stamp(
    *,
    script_path: str,
    stamp: StampSettings,
    build: BuildSettings,
    ports: RunnerPorts,
) -> StampResult:
    """Build the site in release mode, then write the stamp file.

    Settings are validated before any side effect so a bad configuration
    never starts a build.

    Args:
        script_path: Path of the running program as it was invoked.
        stamp: Stamp file location and content settings.
        build: Build tool invocation settings.
        ports: Adapter callables performing the I/O.

    Returns:
        Summary of what was built and written.

    Raises:
        ConfigurationError: Settings cannot produce a command or stamp.
        ProjectDirectoryError: The project directory cannot be resolved or entered.
        BuildError: The build tool is missing or failed.
        StampWriteError: The stamp file cannot be written.

    Example:
        >>> from sitestamp.adapters.memory import WorkspaceSpy
        >>> spy = WorkspaceSpy()
        >>> result = build_and_stamp(
        ...     script_path="/srv/site/build.py",
        ...     stamp=StampSettings(),
        ...     build=BuildSettings(),
        ...     ports=spy.ports(),
        ... )
        >>> result.stamp_file.as_posix()
        '/srv/site/docs/CNAME'
        >>> [step for step, _ in spy.calls]
        ['locate', 'enter', 'build', 'write']
    """
    command = build_command(build)
    content = render_stamp(stamp.domain)

    project_dir = ports.locate_project_dir(script_path, override=stamp.project_dir)
    logger.debug("Resolved project directory", extra={"project_dir": str(project_dir)})
    ports.enter_directory(project_dir)

    logger.info("Running build command", extra={"command": " ".join(command)})
    ports.run_build(command, cwd=project_dir)

    target = stamp_path(project_dir, stamp)
    ports.write_stamp(target, content)
    logger.info("Wrote stamp file", extra={"path": str(target), "domain": content.strip()})

    return StampResult(project_dir=project_dir, command=command, stamp_file=target, content=content)


__all__ = ["RunnerPorts", "build_and_stamp"]
