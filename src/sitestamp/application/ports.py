"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``)
    are imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class GetScriptPath(Protocol):
    """Return the path the running program was invoked as."""

    def __call__(self) -> str: ...


class LocateProjectDir(Protocol):
    """Resolve the directory a run is anchored at.

    Raises ``ProjectDirectoryError`` when no usable directory can be found.
    """

    def __call__(self, script_path: str, *, override: Path | None = ...) -> Path: ...


class EnterDirectory(Protocol):
    """Make ``path`` the process working directory."""

    def __call__(self, path: Path) -> None: ...


class RunBuild(Protocol):
    """Run the build command to completion, raising ``BuildError`` on failure."""

    def __call__(self, command: tuple[str, ...], *, cwd: Path) -> None: ...


class WriteStamp(Protocol):
    """Create or truncate ``path`` with ``content``, raising ``StampWriteError`` on failure."""

    def __call__(self, path: Path, content: str) -> None: ...


__all__ = [
    "DisplayConfig",
    "EnterDirectory",
    "GetConfig",
    "GetScriptPath",
    "InitLogging",
    "LocateProjectDir",
    "RunBuild",
    "WriteStamp",
]
