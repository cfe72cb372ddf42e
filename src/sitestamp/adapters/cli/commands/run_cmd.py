"""CLI command running the release build and writing the stamp file.

Provides ``run``; the root group performs the same operation when invoked
without a subcommand, so plain ``sitestamp`` is the whole workflow.

Steps, each attempted once and aborting on the first failure:
    1. Resolve the directory containing the running program
       (or ``[stamp] project_dir``) and enter it.
    2. ``trunk build --release`` (from ``[build]``) with inherited output.
    3. Write ``[stamp] domain`` plus a newline to ``docs/CNAME``.

Contents:
    * :func:`execute_run` - Shared implementation used by ``run`` and the root group.
    * :func:`cli_run` - Run command.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from sitestamp.adapters.config.settings import load_run_settings
from sitestamp.application.runner import build_and_stamp
from sitestamp.domain.errors import RunnerError
from sitestamp.domain.settings import StampResult

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)


def execute_run(cli_ctx: CLIContext) -> StampResult:
    """Run build-and-stamp with the context's configuration and services.

    Args:
        cli_ctx: CLI context holding config and services.

    Returns:
        The run result.

    Raises:
        SystemExit: With the failing step's exit code; the message goes to stderr.
    """
    services = cli_ctx.services
    try:
        stamp, build = load_run_settings(cli_ctx.config)
        result = build_and_stamp(
            script_path=services.get_script_path(),
            stamp=stamp,
            build=build,
            ports=services.runner_ports,
        )
    except RunnerError as exc:
        logger.error(
            "Build-and-stamp run failed",
            extra={"error": str(exc), "error_type": type(exc).__name__, "exit_code": exc.exit_code},
        )
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(exc.exit_code) from exc

    click.echo(f"Wrote {result.stamp_file} ({result.content.strip()})")
    return result


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_run(ctx: click.Context) -> None:
    """Build the site in release mode and write the CNAME stamp file.

    Same as running ``sitestamp`` without a subcommand.

    Example:
        sitestamp                                  # build and stamp
        sitestamp run                              # same, explicitly
        sitestamp --set stamp.domain=example.org   # stamp another domain
    """
    with lib_log_rich.runtime.bind(job_id="cli-run", extra={"command": "run"}):
        logger.info("Executing build-and-stamp run")
        execute_run(get_cli_context(ctx))


__all__ = ["cli_run", "execute_run"]
