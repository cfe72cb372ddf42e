"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from pathlib import Path

from .errors import ConfigurationError
from .settings import BuildSettings, StampSettings


def render_stamp(domain: str) -> str:
    r"""Return the stamp file content for ``domain``.

    The content is the domain followed by exactly one newline, matching
    what ``echo`` would have written.

    Args:
        domain: Custom domain name. Surrounding whitespace is ignored.

    Returns:
        The text to write into the stamp file.

    Raises:
        ConfigurationError: If the domain is empty after stripping or
            contains whitespace.

    Example:
        >>> render_stamp("calculus.dogwood.cloud")
        'calculus.dogwood.cloud\n'
        >>> render_stamp("  example.org\n")
        'example.org\n'
    """
    cleaned = domain.strip()
    if not cleaned:
        raise ConfigurationError("stamp.domain must not be empty")
    if any(char.isspace() for char in cleaned):
        raise ConfigurationError(f"stamp.domain must be a single host name, got {cleaned!r}")
    return f"{cleaned}\n"


def build_command(settings: BuildSettings) -> tuple[str, ...]:
    """Return the argv for the external build step.

    Example:
        >>> build_command(BuildSettings())
        ('trunk', 'build', '--release')
        >>> from sitestamp.domain.enums import BuildProfile
        >>> build_command(BuildSettings(profile=BuildProfile.DEBUG, extra_args=("--dist", "out")))
        ('trunk', 'build', '--dist', 'out')
    """
    if not settings.tool.strip():
        raise ConfigurationError("build.tool must not be empty")
    head = (settings.tool, settings.subcommand) if settings.subcommand else (settings.tool,)
    return (*head, *settings.profile.flags, *settings.extra_args)


def stamp_path(project_dir: Path, settings: StampSettings) -> Path:
    """Return ``<project_dir>/<output_dir>/<file_name>``.

    Example:
        >>> stamp_path(Path("/srv/site"), StampSettings()).as_posix()
        '/srv/site/docs/CNAME'
    """
    return project_dir / settings.output_dir / settings.file_name


__all__ = [
    "build_command",
    "render_stamp",
    "stamp_path",
]
