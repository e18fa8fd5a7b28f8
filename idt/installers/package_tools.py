"""Tools installed through pip and cargo."""

from .base import Installer, install_cargo_tool, install_pip_tool


class Ruff(Installer):
    name = "ruff"

    async def install(self) -> None:
        await install_pip_tool(self.config, self.tool_name(), self.tool_name(), ["ruff"])


class HarperLs(Installer):
    name = "harper-ls"

    async def install(self) -> None:
        await install_cargo_tool(self.config, self.tool_name(), self.tool_name(), "harper-ls")


class Taplo(Installer):
    name = "taplo"

    # See https://github.com/tamasfe/taplo/issues/542
    async def install(self) -> None:
        await install_cargo_tool(
            self.config,
            self.tool_name(),
            self.tool_name(),
            "taplo-cli",
            extra_args=["--all-features"],
        )
