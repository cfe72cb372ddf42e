"""Run the external static-site build tool as a child process.

The child inherits stdin, stdout and stderr so its diagnostics reach the
terminal unchanged. The call blocks until the tool exits; there is no
timeout and no retry.

Contents:
    * :func:`normalize_returncode` - Convert signal codes to POSIX 128+N.
    * :func:`run_build` - Execute the build command, raising on failure.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from sitestamp.domain.errors import BuildError

logger = logging.getLogger(__name__)


def normalize_returncode(code: int) -> int:
    """Convert negative signal return codes to POSIX 128+N convention.

    Python's ``subprocess`` reports signal-killed processes as negative values
    (e.g., -2 for SIGINT). POSIX convention is 128+N (e.g., 130 for SIGINT).

    Args:
        code: Raw return code from subprocess.

    Returns:
        POSIX-conventional exit code.

    Example:
        >>> normalize_returncode(-15)
        143
        >>> normalize_returncode(3)
        3
    """
    if code < 0:
        return 128 + abs(code)
    return code


def run_build(command: tuple[str, ...], *, cwd: Path) -> None:
    """Run ``command`` in ``cwd`` and wait for it to finish.

    The executable is looked up on ``PATH`` first so that a missing tool is
    reported as such instead of as a generic OS error.

    Args:
        command: Build argv, e.g. ``("trunk", "build", "--release")``.
        cwd: Directory to run the tool in.

    Raises:
        BuildError: If the tool is not found or exits with a non-zero status.
    """
    if not command:
        raise BuildError("Build command is empty")

    executable = shutil.which(command[0])
    if executable is None:
        raise BuildError.tool_missing(command)

    logger.debug("Spawning build process", extra={"executable": executable, "cwd": str(cwd)})
    try:
        result = subprocess.run([executable, *command[1:]], cwd=cwd, check=False)  # noqa: S603
    except FileNotFoundError as exc:
        raise BuildError.tool_missing(command) from exc

    returncode = normalize_returncode(result.returncode)
    if returncode != 0:
        logger.error("Build command failed", extra={"command": " ".join(command), "exit_code": returncode})
        raise BuildError.failed(command, returncode)


__all__ = ["normalize_returncode", "run_build"]
