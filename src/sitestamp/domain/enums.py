"""Type-safe domain enums for output formats and build profiles."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class BuildProfile(str, Enum):
    """Optimisation profile passed to the external build tool.

    Attributes:
        RELEASE: Optimised production build (adds ``--release``).
        DEBUG: Development build (no extra flag).

    Example:
        >>> BuildProfile("release").flags
        ('--release',)
        >>> BuildProfile.DEBUG.flags
        ()
    """

    RELEASE = "release"
    DEBUG = "debug"

    @property
    def flags(self) -> tuple[str, ...]:
        return ("--release",) if self is BuildProfile.RELEASE else ()


__all__ = [
    "BuildProfile",
    "OutputFormat",
]
