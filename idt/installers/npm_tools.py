"""Tools distributed through npm."""

from ..system import chmod_x_files_in_dir, ln_sf_files_in_dir
from ..downloaders import npm
from .base import Installer, install_npm_tool


class NpmInstaller(Installer):
    """Installs ``packages`` with npm and links the ``name`` binary."""

    packages: tuple[str, ...] = ()

    async def install(self) -> None:
        await install_npm_tool(
            self.config,
            self.tool_name(),
            self.tool_name(),
            list(self.packages or (self.tool_name(),)),
        )


class BashLanguageServer(NpmInstaller):
    name = "bash-language-server"


class Commitlint(NpmInstaller):
    name = "commitlint"
    packages = ("@commitlint/cli", "@commitlint/config-conventional")


class DockerLangServer(NpmInstaller):
    name = "docker-langserver"
    packages = ("dockerfile-language-server-nodejs",)

    def check_args(self) -> list[str] | None:
        return None


class ElmLanguageServer(NpmInstaller):
    name = "elm-language-server"
    packages = ("@elm-tooling/elm-language-server",)


class EslintD(NpmInstaller):
    name = "eslint_d"


class GraphQlLsp(NpmInstaller):
    name = "graphql-lsp"
    packages = ("graphql-language-service-cli",)

    def check_args(self) -> list[str] | None:
        return None


class PrettierD(NpmInstaller):
    name = "prettierd"
    packages = ("@fsouza/prettierd",)


class Quicktype(NpmInstaller):
    name = "quicktype"


class SqlLanguageServer(NpmInstaller):
    name = "sql-language-server"


class TypescriptLanguageServer(NpmInstaller):
    name = "typescript-language-server"
    packages = ("typescript-language-server", "typescript")


class YamlLanguageServer(NpmInstaller):
    name = "yaml-language-server"

    # Starts a server on stdio instead of printing a version.
    def check_args(self) -> list[str] | None:
        return None


class VsCodeLangServers(Installer):
    """Links every binary shipped by vscode-langservers-extracted."""

    name = "vscode-langservers-extracted"

    async def install(self) -> None:
        bin_dir = await npm.install(
            self.config.tool_storage_dir,
            self.tool_name(),
            [self.tool_name()],
            timeout=self.config.command_timeout,
        )
        ln_sf_files_in_dir(bin_dir, self.config.link_dir)
        chmod_x_files_in_dir(bin_dir)

    def check_args(self) -> list[str] | None:
        return None
