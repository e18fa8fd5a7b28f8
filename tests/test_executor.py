"""Tests for concurrent execution, aggregation and orchestration."""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from idt.downloaders import DeflateOption
from idt.executor import run_installers
from idt.models import Outcome, OutcomeKind
from idt.orchestrator import install_tools, run
from idt.report import aggregate, exit_code
from idt.system import ln_sf

from tests.conftest import FakeInstaller, fail, panic, succeed


def _raise(error: BaseException):
    async def action():
        raise error
    return action


def _snapshot(link_dir: Path) -> dict[str, tuple]:
    """Names, link targets and file contents of everything in ``link_dir``."""
    snapshot = {}
    for entry in sorted(link_dir.iterdir()):
        if entry.is_symlink():
            snapshot[entry.name] = ("link", str(entry.readlink()), entry.read_bytes())
        else:
            snapshot[entry.name] = ("file", entry.read_bytes(), entry.stat().st_mode)
    return snapshot


class TestRunInstallers:
    """Fan-out and join of installer tasks."""

    @pytest.mark.asyncio
    async def test_empty_list(self):
        assert await run_installers([]) == []

    @pytest.mark.asyncio
    async def test_results_are_positional(self, make_installer):
        installers = [
            make_installer("slow", succeed(0.05)),
            make_installer("broken", fail("boom")),
            make_installer("fast", succeed()),
        ]
        results = await run_installers(installers)

        assert results[0] == Outcome.success()
        assert results[1] == Outcome.failure("boom")
        assert results[2] == Outcome.success()

    @pytest.mark.asyncio
    async def test_installers_run_concurrently(self, make_installer):
        first_started = asyncio.Event()

        async def wait_for_other():
            await asyncio.wait_for(first_started.wait(), timeout=2)

        async def signal():
            first_started.set()

        installers = [
            make_installer("waiter", wait_for_other),
            make_installer("signaller", signal),
        ]
        results = await run_installers(installers)
        assert results == [Outcome.success(), Outcome.success()]

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_returned(self, make_installer):
        installers = [make_installer("bad", panic("kaboom")), make_installer("ok")]
        results = await run_installers(installers)

        assert isinstance(results[0], RuntimeError)
        assert str(results[0]) == "kaboom"
        assert results[1] == Outcome.success()

    @pytest.mark.asyncio
    async def test_os_error_is_a_failure(self, make_installer):
        async def denied():
            raise PermissionError("permission denied")

        results = await run_installers([make_installer("perm", denied)])
        assert results[0] == Outcome.failure("permission denied")

    @pytest.mark.asyncio
    async def test_failure_is_printed(self, make_installer, capsys):
        await run_installers([make_installer("x", fail("no network"))])
        captured = capsys.readouterr()
        assert "❌ error installing x: no network" in captured.err

    @pytest.mark.asyncio
    async def test_success_is_printed(self, make_installer, capsys):
        await run_installers([make_installer("x")])
        assert "🎉 x installed" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_check_output_is_printed(self, make_installer, capsys):
        with patch.object(FakeInstaller, "run", new=AsyncMock(return_value="x 1.4.2\n")):
            await run_installers([make_installer("x")])
        assert "🎉 x installed & checked: x 1.4.2" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_unchecked_install_is_labelled(self, make_installer, capsys):
        await run_installers([make_installer("x")])
        assert "🎉 x installed (not checked)" in capsys.readouterr().out

    @pytest.mark.parametrize("error", [SystemExit(0), KeyboardInterrupt()])
    @pytest.mark.asyncio
    async def test_base_exceptions_are_returned(self, make_installer, error):
        installers = [make_installer("bad", _raise(error)), make_installer("ok", succeed(0.01))]
        results = await run_installers(installers)

        assert results[0] is error
        assert results[1] == Outcome.success()

    @pytest.mark.asyncio
    async def test_each_installer_runs_once(self, make_installer):
        installers = [make_installer(name) for name in ("a", "b", "c")]
        await run_installers(installers)
        assert [i.install_calls for i in installers] == [1, 1, 1]


class TestInstallTools:
    """Executor plus aggregator."""

    @pytest.mark.asyncio
    async def test_mixed_outcomes(self, make_installer, capsys):
        installers = [
            make_installer("a", succeed(0.02)),
            make_installer("b", fail("bad checksum")),
            make_installer("c", panic("index out of range")),
        ]
        report = await install_tools(installers)

        assert [e.tool_name for e in report.entries] == ["a", "b", "c"]
        assert report.entries[0].outcome.kind == OutcomeKind.SUCCESS
        assert report.entries[1].outcome == Outcome.failure("bad checksum")
        assert report.entries[2].outcome.kind == OutcomeKind.PANIC
        assert "index out of range" in report.entries[2].outcome.detail
        assert report.failure_count == 2
        assert report.failed_tools == ["b", "c"]
        assert "💥 c installer panicked" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_report_has_one_entry_per_installer(self, make_installer):
        installers = [make_installer(f"t{i}", succeed(0.01 * (5 - i))) for i in range(5)]
        report = await install_tools(installers)
        assert len(report.entries) == 5
        assert [e.tool_name for e in report.entries] == [f"t{i}" for i in range(5)]


class TestRun:
    """Full run including cleanup."""

    @pytest.mark.asyncio
    async def test_cleanup_runs_after_failures(self, make_installer, installer_config):
        link_dir = installer_config.link_dir
        (link_dir / "stale").symlink_to(link_dir / "missing-target")

        report, cleanup_report = await run([make_installer("x", fail("nope"))], link_dir)

        assert report.failure_count == 1
        assert cleanup_report.removed == [link_dir / "stale"]
        assert not (link_dir / "stale").is_symlink()

    @pytest.mark.asyncio
    async def test_cleanup_sees_installer_output(self, make_installer, installer_config):
        link_dir = installer_config.link_dir
        target = installer_config.tool_storage_dir / "tool"

        async def place():
            target.write_text("#!/bin/sh\n")
            (link_dir / "tool").symlink_to(target)

        _, cleanup_report = await run([make_installer("tool", place)], link_dir)

        assert cleanup_report.removed == []
        assert (link_dir / "tool").stat().st_mode & 0o111 == 0o111

    @pytest.mark.asyncio
    async def test_cleanup_runs_after_panic(self, make_installer, installer_config):
        link_dir = installer_config.link_dir
        (link_dir / "stale").symlink_to(link_dir / "missing-target")

        report, cleanup_report = await run(
            [make_installer("c", panic("unexpected nil"))], link_dir
        )

        outcome = report.entries[0].outcome
        assert outcome.kind == OutcomeKind.PANIC
        assert "unexpected nil" in outcome.detail
        assert cleanup_report.removed == [link_dir / "stale"]
        assert not (link_dir / "stale").is_symlink()

    @pytest.mark.asyncio
    async def test_system_exit_is_a_panic(self, make_installer, installer_config):
        link_dir = installer_config.link_dir
        (link_dir / "stale").symlink_to(link_dir / "missing-target")
        installers = [
            make_installer("a", _raise(SystemExit(0))),
            make_installer("b", succeed(0.01)),
        ]

        report, cleanup_report = await run(installers, link_dir)

        assert report.entries[0].outcome == Outcome.panic("SystemExit: 0")
        assert report.entries[1].outcome == Outcome.success()
        assert exit_code(report) == 1
        assert cleanup_report.removed == [link_dir / "stale"]

    @pytest.mark.asyncio
    async def test_repeated_runs_leave_identical_artifacts(self, installer_config):
        link_dir = installer_config.link_dir
        storage = installer_config.tool_storage_dir

        async def link_tool():
            target = storage / "linked" / "bin" / "linked"
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(b"#!/bin/sh\necho linked\n")
            ln_sf(target, link_dir / "linked")

        async def write_tool():
            downloaded = storage / "written.download"
            downloaded.write_bytes(b"\x7fELF written")
            await asyncio.to_thread(
                DeflateOption.write_to(link_dir / "written").process, downloaded
            )

        def installers():
            return [
                FakeInstaller(installer_config, "linked", link_tool),
                FakeInstaller(installer_config, "written", write_tool),
            ]

        first_report, _ = await run(installers(), link_dir)
        first = _snapshot(link_dir)
        second_report, _ = await run(installers(), link_dir)
        second = _snapshot(link_dir)

        assert first_report.failure_count == second_report.failure_count == 0
        assert sorted(first) == ["linked", "written"]
        assert first == second


class TestAggregate:
    """Aggregator edge cases."""

    def test_length_mismatch(self, make_installer):
        with pytest.raises(ValueError):
            aggregate([make_installer("a")], [])
