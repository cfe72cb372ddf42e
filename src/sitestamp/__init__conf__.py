"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by hand; the metadata tests
fail when they drift.

Contents:
    * Module-level metadata constants.
    * :func:`print_info` - Render the metadata block for ``sitestamp info``.
"""

from __future__ import annotations

#: Distribution name declared in pyproject.toml.
name = "sitestamp"
#: Human-readable summary shown in CLI help output.
title = "Build a static site in release mode and stamp its custom-domain CNAME file"
#: Current release version pulled from pyproject.toml.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/dogwood-cloud/sitestamp"
#: Author attribution surfaced in CLI output.
author = "dogwood.cloud"
#: Contact email surfaced in CLI output.
author_email = "dev@dogwood.cloud"
#: Console-script name published by the package.
shell_command = "sitestamp"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "dogwood.cloud"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "sitestamp"
#: Configuration slug for lib_layered_config Linux paths and environment variables.
LAYEREDCONF_SLUG: str = "sitestamp"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for sitestamp:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
