"""Shared pytest fixtures for CLI, runner and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests receive fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import os
import re
import stat
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from sitestamp.adapters.memory.workspace import WorkspaceSpy
    from sitestamp.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture(autouse=True)
def preserve_working_directory() -> Iterator[None]:
    """Restore the process working directory after every test.

    A successful run changes directory into the project; later tests must
    not inherit that.
    """
    original = os.getcwd()
    try:
        yield
    finally:
        os.chdir(original)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for command output and ``result.stderr`` for error
    messages; log records from the async runtime may land on stderr too.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from sitestamp.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, so a monkeypatched ``get_config`` (which
    lacks ``cache_clear``) does not break teardown.
    """
    from sitestamp.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_domain(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"stamp": {"domain": "example.org"}})
            assert config.get("stamp.domain") == "example.org"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@dataclass
class RunnerCliContext:
    """Services factory and workspace spy for CLI run tests.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: WorkspaceSpy recording every runner step.
    """

    factory: Callable[[], Any]
    spy: WorkspaceSpy


@pytest.fixture
def runner_cli_context(
    clear_config_cache: None,
) -> Callable[..., RunnerCliContext]:
    """Create a CLI test context whose runner steps are captured by a spy.

    Configuration is injected as a Config (defaults when omitted) and
    logging uses the production initializer, so the CLI path is exercised
    end to end without touching the filesystem or spawning the build tool.

    Example:
        def test_run(cli_runner: CliRunner, runner_cli_context: Callable[..., RunnerCliContext]) -> None:
            ctx = runner_cli_context(build_returncode=3)
            result = cli_runner.invoke(cli, [], obj=ctx.factory)
            assert result.exit_code == 3
    """
    from sitestamp.adapters.memory import WorkspaceSpy
    from sitestamp.composition import AppServices, build_production

    def _create(
        config_data: dict[str, Any] | None = None,
        *,
        script_path: str = "/srv/site/build.py",
        **spy_options: Any,
    ) -> RunnerCliContext:
        config = Config(config_data or {}, {})
        spy = WorkspaceSpy(**spy_options)

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            get_script_path=lambda: script_path,
            runner_ports=spy.ports(),
        )
        return RunnerCliContext(factory=lambda: services, spy=spy)

    return _create


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced.
    """
    from dataclasses import replace

    from sitestamp.composition import build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_production(), get_config=_fake_get_config)
        return lambda: services

    return _inject


@dataclass
class SiteProject:
    """A throwaway project tree with a fake build tool on PATH.

    Attributes:
        root: Project directory (contains ``build.py`` and ``docs/``).
        script: Path used as the running program.
        docs: Output directory receiving the stamp file.
        marker: File the fake build tool writes its argv and cwd into.
    """

    root: Path
    script: Path
    docs: Path
    marker: Path

    @property
    def cname(self) -> Path:
        return self.docs / "CNAME"


def _write_fake_tool(bin_dir: Path, name: str, marker: Path, exit_code: int) -> None:
    tool = bin_dir / name
    tool.write_text(
        "#!/bin/sh\n"
        f'printf "%s\\n" "$PWD" "$@" > "{marker}"\n'
        f"exit {exit_code}\n",
        encoding="utf-8",
    )
    tool.chmod(tool.stat().st_mode | stat.S_IEXEC | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def site_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[..., SiteProject]:
    """Create a project directory plus a fake ``trunk`` at the front of PATH.

    The fake tool records its working directory and arguments, then exits
    with the requested status. POSIX only (``/bin/sh`` script).

    Example:
        def test_build(site_project: Callable[..., SiteProject]) -> None:
            project = site_project(exit_code=0)
            ...
    """
    if sys.platform == "win32":
        pytest.skip("Fake build tool requires /bin/sh")

    def _create(*, exit_code: int = 0, with_docs: bool = True, tool_name: str = "trunk") -> SiteProject:
        root = tmp_path / "site"
        root.mkdir()
        script = root / "build.py"
        script.write_text("# launcher\n", encoding="utf-8")
        docs = root / "docs"
        if with_docs:
            docs.mkdir()

        bin_dir = tmp_path / "bin"
        bin_dir.mkdir()
        marker = tmp_path / "tool-invocation.txt"
        _write_fake_tool(bin_dir, tool_name, marker, exit_code)
        monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
        return SiteProject(root=root, script=script, docs=docs, marker=marker)

    return _create
