"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Run command from :mod:`.run_cmd`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .run_cmd import cli_run, execute_run

__all__ = [
    "cli_config",
    "cli_info",
    "cli_run",
    "execute_run",
]
