"""Tools that live in their own directory under tool storage."""

import shlex

from .. import is_debug
from ..downloaders import DeflateOption, download
from ..execution import run_checked
from ..github import get_latest_release_tag
from ..system import Arch, Os, chmod_x, chmod_x_files_in_dir, ln_sf
from .base import Installer
from .release_tools import ReleaseInstaller


class ElixirLs(Installer):
    name = "elixir-ls"

    async def install(self) -> None:
        repo = "elixir-lsp/elixir-ls"
        tag = await get_latest_release_tag(repo, timeout=self.config.command_timeout)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        await download(
            f"https://github.com/{repo}/releases/download/{tag}/elixir-ls-{tag}.zip",
            DeflateOption.extract_zip(self.storage_dir),
            timeout=self.config.command_timeout,
        )

        ln_sf(self.storage_dir / "language_server.sh", self.link_path)
        chmod_x_files_in_dir(self.storage_dir)

    def check_args(self) -> list[str] | None:
        return None


class LuaLanguageServer(ReleaseInstaller):
    """Unpacked in tool storage only: the binary needs its sibling files.

    Point the editor's LSP config at ``<tool_storage_dir>/lua-language-server/bin``.
    """

    name = "lua-language-server"
    os_names = {Os.MACOS: "darwin", Os.LINUX: "linux"}
    arch_names = {Arch.ARM: "arm64", Arch.X86: "x64"}

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        repo = "LuaLS/lua-language-server"
        tag = await get_latest_release_tag(repo, timeout=self.config.command_timeout)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        await download(
            f"https://github.com/{repo}/releases/download/{tag}/"
            f"lua-language-server-{tag}-{os_}-{arch}.tar.gz",
            DeflateOption.extract_tar_gz(self.storage_dir),
            timeout=self.config.command_timeout,
        )

        chmod_x(self.storage_dir / "bin" / self.tool_name())

    def check_args(self) -> list[str] | None:
        return None


class Nvim(Installer):
    """Builds Neovim from the tip of master."""

    name = "nvim"
    repo_url = "https://github.com/neovim/neovim"

    async def install(self) -> None:
        source_dir = self.storage_dir / "source"
        release_dir = self.storage_dir / "release"
        timeout = self.config.command_timeout

        async def sh(command: str, cwd=source_dir) -> None:
            await run_checked(command, timeout=timeout, debug=is_debug(), cwd=cwd)

        if not (source_dir / ".git").is_dir():
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            await sh(
                shlex.join(["git", "clone", self.repo_url, str(source_dir)]),
                cwd=self.storage_dir,
            )

        await sh("git checkout master")
        await sh("git pull origin master")
        await sh("make distclean")
        await sh(
            shlex.join([
                "make",
                "CMAKE_BUILD_TYPE=Release",
                f"CMAKE_EXTRA_FLAGS=-DCMAKE_INSTALL_PREFIX={release_dir}",
            ])
        )
        await sh("make install")

        ln_sf(release_dir / "bin" / self.tool_name(), self.link_path)
