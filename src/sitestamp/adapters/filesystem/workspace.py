"""Filesystem adapters for the build-and-stamp run.

Contents:
    * :func:`locate_project_dir` - Resolve the directory of the running program.
    * :func:`enter_directory` - Change the process working directory.
    * :func:`write_stamp` - Create or overwrite the stamp file.

All ``OSError`` failures are re-raised as domain errors carrying the exit
code the CLI reports.
"""

from __future__ import annotations

import logging
import os
import sys
import sysconfig
from pathlib import Path

from sitestamp import __init__conf__
from sitestamp.domain.errors import ProjectDirectoryError, StampWriteError, os_error_exit_code

logger = logging.getLogger(__name__)

#: ``sys.argv[0]`` values that do not name a file on disk
#: (interactive interpreter, ``python -c``, piped stdin).
_UNLOCATABLE_SCRIPT_PATHS = frozenset({"", "-", "-c"})

#: Installed package directory; ``python -m sitestamp`` runs a file inside it.
_PACKAGE_DIR = Path(__file__).resolve().parents[2]

#: File names the installer gives the console script.
_CONSOLE_SCRIPT_NAMES = frozenset({__init__conf__.shell_command, f"{__init__conf__.shell_command}.exe"})


def current_script_path() -> str:
    """Return the path the running program was invoked as (``sys.argv[0]``)."""
    return sys.argv[0] if sys.argv else ""


def _is_installed_entry_point(script: Path) -> bool:
    """Return True when ``script`` is the console script or a file of this package."""
    if script.is_relative_to(_PACKAGE_DIR) or script.name in _CONSOLE_SCRIPT_NAMES:
        return True
    scripts_dir = sysconfig.get_path("scripts")
    return bool(scripts_dir) and script.parent == Path(scripts_dir).resolve()


def locate_project_dir(script_path: str, *, override: Path | None = None) -> Path:
    """Return the absolute directory a run is anchored at.

    Without an override this is the directory containing the running
    program, not the directory the process was started from. Symlinks to
    the program are followed. The installed ``sitestamp`` console script and
    ``python -m sitestamp`` live outside any site, so they need
    ``[stamp] project_dir``; run a ``build.py`` launcher placed in the site
    otherwise.

    Args:
        script_path: Path of the running program (usually ``sys.argv[0]``).
        override: Explicitly configured project directory.

    Returns:
        Absolute, resolved directory path.

    Raises:
        ProjectDirectoryError: If the path cannot be determined, does not
            exist, is not a directory, or is the installed entry point.

    Example:
        >>> locate_project_dir("", override=Path(__file__).parent).name
        'filesystem'
        >>> locate_project_dir("-c")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ProjectDirectoryError: Cannot determine the directory of the running program
        >>> locate_project_dir(__file__)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ProjectDirectoryError: ... is the installed sitestamp entry point
    """
    if override is not None:
        candidate = override.expanduser()
    elif script_path in _UNLOCATABLE_SCRIPT_PATHS:
        raise ProjectDirectoryError(
            f"Cannot determine the directory of the running program from {script_path!r}",
        )
    else:
        candidate = Path(script_path)

    try:
        resolved = candidate.resolve(strict=True)
    except OSError as exc:
        raise ProjectDirectoryError(
            f"Cannot resolve project directory from {str(candidate)!r}: {exc.strerror or exc}",
            exit_code=os_error_exit_code(exc),
        ) from exc

    if override is None and _is_installed_entry_point(resolved):
        raise ProjectDirectoryError(
            f"{str(resolved)!r} is the installed {__init__conf__.shell_command} entry point, not a site launcher; "
            "run a build.py placed next to the site's docs/ or set [stamp] project_dir",
        )

    directory = resolved if override is not None else resolved.parent
    if not directory.is_dir():
        raise ProjectDirectoryError(f"Project directory {str(directory)!r} is not a directory")
    return directory


def enter_directory(path: Path) -> None:
    """Change the process working directory to ``path``.

    Raises:
        ProjectDirectoryError: If the directory vanished or cannot be entered.
    """
    try:
        os.chdir(path)
    except OSError as exc:
        raise ProjectDirectoryError(
            f"Cannot enter project directory {str(path)!r}: {exc.strerror or exc}",
            exit_code=os_error_exit_code(exc),
        ) from exc
    logger.debug("Changed working directory", extra={"cwd": str(path)})


def write_stamp(path: Path, content: str) -> None:
    """Create or truncate ``path`` and write ``content`` to it.

    The parent directory is never created; a missing output directory is a
    failure, not something to repair.

    Raises:
        StampWriteError: If the file cannot be written.
    """
    try:
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except OSError as exc:
        reason = "directory does not exist" if isinstance(exc, FileNotFoundError) else (exc.strerror or str(exc))
        raise StampWriteError(
            f"Cannot write stamp file {str(path)!r}: {reason}",
            exit_code=os_error_exit_code(exc),
        ) from exc


__all__ = ["current_script_path", "enter_directory", "locate_project_dir", "write_stamp"]
