"""The installer contract every tool implements."""

import logging
import shlex
from abc import ABC, abstractmethod
from pathlib import Path

from .. import is_debug
from ..config import InstallerConfig
from ..downloaders import cargo, npm, pip
from ..errors import CheckError
from ..execution import run_command_async
from ..system import chmod_x, ln_sf

_logging = logging.getLogger(__name__)


class Installer(ABC):
    """Knows how to acquire one external tool and place it on disk.

    Subclasses set ``name`` and implement ``install``. Installers only read
    their ``config`` and write under ``<tool_storage_dir>/<name>`` and their
    own entries of ``link_dir``.
    """

    name: str = ""

    def __init__(self, config: InstallerConfig):
        self.config = config

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def tool_name(self) -> str:
        """Stable identifier used for selection and reporting."""
        return self.name

    @abstractmethod
    async def install(self) -> None:
        """Acquire the tool, overwriting any previously installed version."""

    def check_args(self) -> list[str] | None:
        """Arguments for the post-install sanity check; None skips it."""
        return ["--version"]

    async def check(self) -> str | None:
        """Run the installed binary with ``check_args`` and return its output."""
        args = self.check_args()
        if args is None:
            return None

        command = shlex.join([str(self.config.link_dir / self.tool_name()), *args])
        output, returncode = await run_command_async(
            command, timeout=self.config.command_timeout, debug=is_debug()
        )
        if returncode != 0:
            raise CheckError(f"{self.tool_name()} check failed: {output}")
        return output

    async def run(self) -> str | None:
        """Install the tool, then check it when checks are enabled.

        Returns the check output, or None when no check ran.
        """
        await self.install()
        if not self.config.check_installs:
            _logging.debug(f"{self.tool_name()} installed, checks disabled")
            return None
        return await self.check()

    @property
    def storage_dir(self) -> Path:
        return self.config.tool_storage_dir / self.tool_name()

    @property
    def link_path(self) -> Path:
        return self.config.link_dir / self.tool_name()


class SystemDependent(ABC):
    """Mixin for installers whose release assets depend on OS and architecture."""

    config: InstallerConfig

    @abstractmethod
    def target_arch_and_os(self) -> tuple[str, str]:
        """Return the (arch, os) spellings used in release asset names."""


async def install_npm_tool(
    config: InstallerConfig, tool: str, bin_name: str, packages: list[str]
) -> Path:
    """npm-install ``packages`` and link ``bin_name`` into the link dir."""
    bin_dir = await npm.install(
        config.tool_storage_dir, tool, packages, timeout=config.command_timeout
    )
    target = bin_dir / bin_name
    ln_sf(target, config.link_dir / bin_name)
    chmod_x(target)
    return target


async def install_pip_tool(
    config: InstallerConfig, tool: str, bin_name: str, packages: list[str]
) -> Path:
    """pip-install ``packages`` into a venv and link ``bin_name`` into the link dir."""
    bin_dir = await pip.install(
        config.tool_storage_dir, tool, packages, timeout=config.command_timeout
    )
    target = bin_dir / bin_name
    ln_sf(target, config.link_dir / bin_name)
    return target


async def install_cargo_tool(
    config: InstallerConfig,
    tool: str,
    bin_name: str,
    crate: str,
    extra_args: list[str] | None = None,
) -> Path:
    """cargo-install ``crate`` and link ``bin_name`` into the link dir."""
    bin_dir = await cargo.install(
        config.tool_storage_dir,
        tool,
        crate,
        extra_args=extra_args,
        timeout=config.command_timeout,
    )
    target = bin_dir / bin_name
    ln_sf(target, config.link_dir / bin_name)
    chmod_x(target)
    return target
