"""Domain-specific exceptions for typed error handling at boundaries.

Every failure of a build-and-stamp run is a :class:`RunnerError`. Each
subclass carries the process exit code the CLI reports for it, so the
command boundary can translate errors without inspecting their type.

The exit code values mirror :class:`sitestamp.adapters.cli.exit_codes.ExitCode`;
the domain keeps plain integers to stay free of adapter imports.
"""

from __future__ import annotations

_GENERAL_ERROR = 1
_FILE_NOT_FOUND = 2
_PERMISSION_DENIED = 13
_CONFIG_ERROR = 78
_COMMAND_NOT_FOUND = 127


class RunnerError(Exception):
    """Base class for all failures that abort a build-and-stamp run.

    Example:
        >>> err = RunnerError("something broke")
        >>> err.exit_code
        1
        >>> RunnerError("custom", exit_code=5).exit_code
        5
    """

    default_exit_code: int = _GENERAL_ERROR

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code if exit_code is not None else self.default_exit_code


class ConfigurationError(RunnerError):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[stamp]`` or ``[build]`` sections hold values that
    cannot be turned into settings (empty domain, unknown build profile).

    Example:
        >>> err = ConfigurationError("stamp.domain must not be empty")
        >>> str(err)
        'stamp.domain must not be empty'
        >>> err.exit_code
        78
    """

    default_exit_code = _CONFIG_ERROR


class ProjectDirectoryError(RunnerError):
    """The directory containing the running program cannot be resolved or entered.

    Example:
        >>> ProjectDirectoryError("missing").exit_code
        2
    """

    default_exit_code = _FILE_NOT_FOUND


class BuildError(RunnerError):
    """The external build tool is missing or finished with a non-zero status.

    Attributes:
        command: The argv that was (or would have been) executed.

    Example:
        >>> err = BuildError.tool_missing(("trunk", "build", "--release"))
        >>> err.exit_code
        127
        >>> err = BuildError.failed(("trunk", "build"), 3)
        >>> err.exit_code
        3
        >>> str(err)
        "Build command 'trunk build' failed with exit code 3"
    """

    def __init__(self, message: str, *, command: tuple[str, ...] = (), exit_code: int | None = None) -> None:
        super().__init__(message, exit_code=exit_code)
        self.command = command

    @classmethod
    def tool_missing(cls, command: tuple[str, ...]) -> BuildError:
        """Build the error reported when the tool is not on the execution path."""
        tool = command[0] if command else "<empty>"
        return cls(
            f"Build tool '{tool}' not found on PATH",
            command=command,
            exit_code=_COMMAND_NOT_FOUND,
        )

    @classmethod
    def failed(cls, command: tuple[str, ...], returncode: int) -> BuildError:
        """Build the error reported when the tool exits non-zero."""
        return cls(
            f"Build command '{' '.join(command)}' failed with exit code {returncode}",
            command=command,
            exit_code=returncode,
        )


class StampWriteError(RunnerError):
    """The stamp file could not be created or overwritten.

    Example:
        >>> StampWriteError("docs/ is missing", exit_code=2).exit_code
        2
    """


def os_error_exit_code(exc: OSError) -> int:
    """Map an ``OSError`` to the errno-derived exit code used by the CLI.

    Example:
        >>> os_error_exit_code(FileNotFoundError())
        2
        >>> os_error_exit_code(PermissionError())
        13
        >>> os_error_exit_code(OSError("disk full"))
        1
    """
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return _FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return _PERMISSION_DENIED
    return _GENERAL_ERROR


__all__ = [
    "BuildError",
    "ConfigurationError",
    "ProjectDirectoryError",
    "RunnerError",
    "StampWriteError",
    "os_error_exit_code",
]
