"""CLI run stories: plain ``sitestamp``, ``sitestamp run``, and their exit codes."""

from __future__ import annotations

import shutil
import subprocess
import sys
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from sitestamp.adapters import cli as cli_mod
from sitestamp.composition import AppServices, build_production

if TYPE_CHECKING:
    from conftest import RunnerCliContext, SiteProject

CNAME = Path("/srv/site/docs/CNAME")


# ======================== In-memory runner ========================


@pytest.mark.os_agnostic
def test_bare_invocation_builds_and_stamps(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context()

    result = cli_runner.invoke(cli_mod.cli, [], obj=ctx.factory)

    assert result.exit_code == 0
    assert [step for step, _ in ctx.spy.calls] == ["locate", "enter", "build", "write"]
    assert ctx.spy.files == {CNAME: "calculus.dogwood.cloud\n"}
    assert f"Wrote {CNAME} (calculus.dogwood.cloud)" in result.stdout


@pytest.mark.os_agnostic
def test_run_subcommand_matches_bare_invocation(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["run"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.files == {CNAME: "calculus.dogwood.cloud\n"}


@pytest.mark.os_agnostic
def test_failed_build_exits_with_tool_code_and_no_stamp(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context(build_returncode=3)

    result = cli_runner.invoke(cli_mod.cli, [], obj=ctx.factory)

    assert result.exit_code == 3
    assert "failed with exit code 3" in result.stderr
    assert ctx.spy.files == {}


@pytest.mark.os_agnostic
def test_missing_build_tool_exits_127(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context(tool_missing=True)

    result = cli_runner.invoke(cli_mod.cli, ["run"], obj=ctx.factory)

    assert result.exit_code == 127
    assert "Build tool 'trunk' not found" in result.stderr
    assert ctx.spy.files == {}


@pytest.mark.os_agnostic
def test_missing_docs_directory_exits_with_not_found(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context(writable_dirs=set())

    result = cli_runner.invoke(cli_mod.cli, [], obj=ctx.factory)

    assert result.exit_code == 2
    assert "directory does not exist" in result.stderr


@pytest.mark.os_agnostic
def test_invalid_configuration_exits_78_before_any_step(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context({"stamp": {"domain": "   "}})

    result = cli_runner.invoke(cli_mod.cli, [], obj=ctx.factory)

    assert result.exit_code == 78
    assert "stamp.domain" in result.stderr
    assert ctx.spy.calls == []


@pytest.mark.os_agnostic
def test_set_override_changes_stamped_domain(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["--set", "stamp.domain=preview.dogwood.cloud"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ctx.spy.files == {CNAME: "preview.dogwood.cloud\n"}


@pytest.mark.os_agnostic
def test_set_override_changes_build_profile(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["--set", "build.profile=debug", "run"], obj=ctx.factory)

    assert result.exit_code == 0
    assert ("build", ("trunk", "build")) in ctx.spy.calls


@pytest.mark.os_agnostic
def test_unlocatable_script_exits_with_not_found(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context(script_path="")

    result = cli_runner.invoke(cli_mod.cli, [], obj=ctx.factory)

    assert result.exit_code == 2
    assert "Cannot determine the directory" in result.stderr
    assert ctx.spy.files == {}


@pytest.mark.os_agnostic
def test_main_returns_build_exit_code(
    managed_traceback_state: None,
    runner_cli_context: Callable[..., RunnerCliContext],
    capsys: pytest.CaptureFixture[str],
) -> None:
    ctx = runner_cli_context(build_returncode=101)

    exit_code = cli_mod.main([], services_factory=ctx.factory)

    assert exit_code == 101
    assert "failed with exit code 101" in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_main_returns_zero_after_stamping(
    managed_traceback_state: None,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context()

    assert cli_mod.main(["run"], services_factory=ctx.factory) == 0
    assert ctx.spy.files == {CNAME: "calculus.dogwood.cloud\n"}


# ======================== Real filesystem and child process ========================


def _anchored_at(project: SiteProject) -> Callable[[], AppServices]:
    services = replace(build_production(), get_script_path=lambda: str(project.script))
    return lambda: services


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_real_run_builds_in_script_directory_and_writes_cname(
    cli_runner: CliRunner,
    site_project: Callable[..., SiteProject],
    clear_config_cache: None,
    tmp_path: Path,
) -> None:
    project = site_project()
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()

    with cli_runner.isolated_filesystem(temp_dir=elsewhere):
        result = cli_runner.invoke(cli_mod.cli, [], obj=_anchored_at(project))

    assert result.exit_code == 0, result.output
    recorded = project.marker.read_text(encoding="utf-8").splitlines()
    assert Path(recorded[0]).resolve() == project.root.resolve()
    assert recorded[1:] == ["build", "--release"]
    assert project.cname.read_bytes() == b"calculus.dogwood.cloud\n"


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_real_run_overwrites_stale_cname(
    cli_runner: CliRunner,
    site_project: Callable[..., SiteProject],
    clear_config_cache: None,
) -> None:
    project = site_project()
    project.cname.write_text("stale.example.org\nsecond line\n", encoding="utf-8")

    first = cli_runner.invoke(cli_mod.cli, [], obj=_anchored_at(project))
    second = cli_runner.invoke(cli_mod.cli, ["run"], obj=_anchored_at(project))

    assert (first.exit_code, second.exit_code) == (0, 0)
    assert project.cname.read_bytes() == b"calculus.dogwood.cloud\n"


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_real_failed_build_leaves_existing_cname_untouched(
    cli_runner: CliRunner,
    site_project: Callable[..., SiteProject],
    clear_config_cache: None,
) -> None:
    project = site_project(exit_code=4)
    project.cname.write_text("previous.example.org\n", encoding="utf-8")

    result = cli_runner.invoke(cli_mod.cli, [], obj=_anchored_at(project))

    assert result.exit_code == 4
    assert project.cname.read_text(encoding="utf-8") == "previous.example.org\n"


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_real_run_without_docs_directory_fails_after_build(
    cli_runner: CliRunner,
    site_project: Callable[..., SiteProject],
    clear_config_cache: None,
) -> None:
    project = site_project(with_docs=False)

    result = cli_runner.invoke(cli_mod.cli, [], obj=_anchored_at(project))

    assert result.exit_code == 2
    assert project.marker.exists()
    assert not project.docs.exists()


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_production_wiring_uses_argv_zero(
    site_project: Callable[..., SiteProject],
    clear_config_cache: None,
    managed_traceback_state: None,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    project = site_project()
    monkeypatch.setattr(sys, "argv", [str(project.script)])

    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 0
    assert project.cname.read_bytes() == b"calculus.dogwood.cloud\n"


@pytest.mark.os_agnostic
def test_multi_line_domain_override_is_rejected_before_any_step(
    cli_runner: CliRunner,
    runner_cli_context: Callable[..., RunnerCliContext],
) -> None:
    ctx = runner_cli_context()

    result = cli_runner.invoke(cli_mod.cli, ["--set", 'stamp.domain="a\\nb"'], obj=ctx.factory)

    assert result.exit_code == 78
    assert "stamp.domain" in result.stderr
    assert ctx.spy.calls == []


# ======================== Entry points ========================

REPO_LAUNCHER = Path(__file__).resolve().parents[1] / "build.py"


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_launcher_copied_into_site_builds_and_stamps(
    site_project: Callable[..., SiteProject],
    tmp_path: Path,
) -> None:
    project = site_project()
    launcher = project.root / "build.py"
    shutil.copyfile(REPO_LAUNCHER, launcher)
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()

    result = subprocess.run(  # noqa: S603
        [sys.executable, str(launcher)],
        cwd=elsewhere,
        capture_output=True,
        timeout=60,
        check=False,
        encoding="utf-8",
        errors="replace",
    )

    assert result.returncode == 0, result.stderr
    assert Path(project.marker.read_text(encoding="utf-8").splitlines()[0]).resolve() == project.root.resolve()
    assert project.cname.read_bytes() == b"calculus.dogwood.cloud\n"


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_module_entry_refuses_to_build_without_project_dir(site_project: Callable[..., SiteProject]) -> None:
    project = site_project()

    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "sitestamp"],
        cwd=project.root,
        capture_output=True,
        timeout=60,
        check=False,
        encoding="utf-8",
        errors="replace",
    )

    assert result.returncode == 2
    assert "project_dir" in result.stderr
    assert not project.marker.exists()
    assert not project.cname.exists()


@pytest.mark.integration
@pytest.mark.skipif(sys.platform == "win32", reason="Fake build tool requires /bin/sh")
def test_console_script_refuses_to_build_without_project_dir(
    site_project: Callable[..., SiteProject],
    clear_config_cache: None,
    managed_traceback_state: None,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    project = site_project()
    bin_dir = tmp_path / "venv" / "bin"
    bin_dir.mkdir(parents=True)
    console_script = bin_dir / "sitestamp"
    console_script.write_text("# console script\n", encoding="utf-8")
    monkeypatch.chdir(project.root)
    monkeypatch.setattr(sys, "argv", [str(console_script)])

    exit_code = cli_mod.main([], services_factory=build_production)

    assert exit_code == 2
    assert not project.marker.exists()
    assert not project.cname.exists()
