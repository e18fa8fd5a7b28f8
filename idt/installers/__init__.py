"""Installers for every supported tool."""

from .base import (
    Installer,
    SystemDependent,
    install_cargo_tool,
    install_npm_tool,
    install_pip_tool,
)
from .bundle_tools import ElixirLs, LuaLanguageServer, Nvim
from .npm_tools import (
    BashLanguageServer,
    Commitlint,
    DockerLangServer,
    ElmLanguageServer,
    EslintD,
    GraphQlLsp,
    NpmInstaller,
    PrettierD,
    Quicktype,
    SqlLanguageServer,
    TypescriptLanguageServer,
    VsCodeLangServers,
    YamlLanguageServer,
)
from .package_tools import HarperLs, Ruff, Taplo
from .release_tools import (
    Deno,
    Hadolint,
    HelmLs,
    Marksman,
    ReleaseInstaller,
    RustAnalyzer,
    Shellcheck,
    Sqruff,
    TerraformLs,
    TyposLsp,
)

# Registry order.
INSTALLER_CLASSES: tuple[type[Installer], ...] = (
    BashLanguageServer,
    Commitlint,
    Deno,
    DockerLangServer,
    ElixirLs,
    ElmLanguageServer,
    EslintD,
    GraphQlLsp,
    Hadolint,
    HarperLs,
    HelmLs,
    LuaLanguageServer,
    Marksman,
    Nvim,
    PrettierD,
    Quicktype,
    Ruff,
    RustAnalyzer,
    Shellcheck,
    SqlLanguageServer,
    Sqruff,
    Taplo,
    TerraformLs,
    TypescriptLanguageServer,
    TyposLsp,
    VsCodeLangServers,
    YamlLanguageServer,
)

__all__ = [
    "INSTALLER_CLASSES",
    "Installer",
    "SystemDependent",
    "NpmInstaller",
    "ReleaseInstaller",
    "install_cargo_tool",
    "install_npm_tool",
    "install_pip_tool",
    "BashLanguageServer",
    "Commitlint",
    "Deno",
    "DockerLangServer",
    "ElixirLs",
    "ElmLanguageServer",
    "EslintD",
    "GraphQlLsp",
    "Hadolint",
    "HarperLs",
    "HelmLs",
    "LuaLanguageServer",
    "Marksman",
    "Nvim",
    "PrettierD",
    "Quicktype",
    "Ruff",
    "RustAnalyzer",
    "Shellcheck",
    "SqlLanguageServer",
    "Sqruff",
    "Taplo",
    "TerraformLs",
    "TypescriptLanguageServer",
    "TyposLsp",
    "VsCodeLangServers",
    "YamlLanguageServer",
]
