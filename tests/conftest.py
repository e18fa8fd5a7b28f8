"""Pytest fixtures and utilities for idt tests."""

import asyncio
import tempfile
from pathlib import Path
from typing import Awaitable, Callable, Generator
from unittest.mock import patch

import pytest

from idt.config import InstallerConfig
from idt.errors import InstallError
from idt.installers import Installer
from idt.system import Arch, Os, SysInfo


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def linux_x86() -> SysInfo:
    return SysInfo(os=Os.LINUX, arch=Arch.X86)


@pytest.fixture
def installer_config(temp_dir: Path, linux_x86: SysInfo) -> InstallerConfig:
    """An InstallerConfig with both directories created under temp_dir."""
    storage = temp_dir / "storage"
    links = temp_dir / "links"
    storage.mkdir()
    links.mkdir()
    return InstallerConfig(
        tool_storage_dir=storage,
        link_dir=links,
        sys_info=linux_x86,
        check_installs=False,
    )


class FakeInstaller(Installer):
    """Installer whose behaviour is a coroutine function supplied by the test."""

    def __init__(
        self,
        config: InstallerConfig,
        name: str,
        action: Callable[[], Awaitable[None]] | None = None,
    ):
        super().__init__(config)
        self.name = name
        self.action = action
        self.install_calls = 0

    async def install(self) -> None:
        self.install_calls += 1
        if self.action is not None:
            await self.action()

    def check_args(self) -> list[str] | None:
        return None


def succeed(delay: float = 0):
    async def action():
        await asyncio.sleep(delay)
    return action


def fail(message: str, delay: float = 0):
    async def action():
        await asyncio.sleep(delay)
        raise InstallError(message)
    return action


def panic(message: str, delay: float = 0):
    async def action():
        await asyncio.sleep(delay)
        raise RuntimeError(message)
    return action


@pytest.fixture
def make_installer(installer_config: InstallerConfig):
    """Factory for FakeInstaller bound to the shared installer_config."""

    def _create(name: str, action=None) -> FakeInstaller:
        return FakeInstaller(installer_config, name, action)

    return _create


@pytest.fixture
def mock_tty() -> Generator[None, None, None]:
    """Mock sys.stdin.isatty to return True."""
    with patch("sys.stdin.isatty", return_value=True):
        yield


@pytest.fixture
def mock_no_tty() -> Generator[None, None, None]:
    """Mock sys.stdin.isatty to return False."""
    with patch("sys.stdin.isatty", return_value=False):
        yield
