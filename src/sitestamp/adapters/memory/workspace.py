"""In-memory runner adapters for testing.

Contents:
    * :class:`WorkspaceSpy` - Records every runner port call and keeps
      written stamp files in a dict instead of on disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from ...application.runner import RunnerPorts
from ...domain.errors import BuildError, ProjectDirectoryError, RunnerError, StampWriteError


def _empty_calls() -> list[tuple[str, object]]:
    return []


def _empty_files() -> dict[Path, str]:
    return {}


@dataclass
class WorkspaceSpy:
    """Captures runner operations for test assertions.

    Paths are never resolved against the real filesystem: the project
    directory is the parent of the script path (or the override).

    Attributes:
        calls: ``(step, argument)`` tuples in call order; steps are
            ``locate``, ``enter``, ``build`` and ``write``.
        files: Stamp files written so far, keyed by path.
        build_returncode: Non-zero makes ``run_build`` raise ``BuildError``.
        tool_missing: When True, ``run_build`` reports the tool as absent.
        writable_dirs: When not None, only these directories accept writes.
        fail_on: Step name whose port raises ``raise_exception`` instead.
        raise_exception: Error raised for the ``fail_on`` step.

    Example:
        >>> spy = WorkspaceSpy(build_returncode=2)
        >>> spy.run_build(("trunk", "build"), cwd=Path("/srv"))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        BuildError: Build command 'trunk build' failed with exit code 2
    """

    calls: list[tuple[str, object]] = field(default_factory=_empty_calls)
    files: dict[Path, str] = field(default_factory=_empty_files)
    build_returncode: int = 0
    tool_missing: bool = False
    writable_dirs: set[Path] | None = None
    fail_on: str | None = None
    raise_exception: RunnerError | None = None

    def _maybe_fail(self, step: str) -> None:
        if self.fail_on == step and self.raise_exception is not None:
            raise self.raise_exception

    def locate_project_dir(self, script_path: str, *, override: Path | None = None) -> Path:
        self.calls.append(("locate", script_path))
        self._maybe_fail("locate")
        if override is not None:
            return override
        if not script_path:
            raise ProjectDirectoryError("Cannot determine the directory of the running program from ''")
        return Path(PurePosixPath(script_path).parent)

    def enter_directory(self, path: Path) -> None:
        self.calls.append(("enter", path))
        self._maybe_fail("enter")

    def run_build(self, command: tuple[str, ...], *, cwd: Path) -> None:
        self.calls.append(("build", command))
        self._maybe_fail("build")
        if self.tool_missing:
            raise BuildError.tool_missing(command)
        if self.build_returncode != 0:
            raise BuildError.failed(command, self.build_returncode)

    def write_stamp(self, path: Path, content: str) -> None:
        self.calls.append(("write", path))
        self._maybe_fail("write")
        if self.writable_dirs is not None and path.parent not in self.writable_dirs:
            raise StampWriteError(f"Cannot write stamp file {str(path)!r}: directory does not exist", exit_code=2)
        self.files[path] = content

    def ports(self) -> RunnerPorts:
        """Bundle the spy's methods as :class:`RunnerPorts`."""
        return RunnerPorts(
            locate_project_dir=self.locate_project_dir,
            enter_directory=self.enter_directory,
            run_build=self.run_build,
            write_stamp=self.write_stamp,
        )

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.calls.clear()
        self.files.clear()


__all__ = ["WorkspaceSpy"]
