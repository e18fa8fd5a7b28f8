"""Tools shipped as prebuilt release assets."""

from ..downloaders import ChecksumSource, DeflateOption, download
from ..github import get_latest_release_tag
from ..system import Arch, Os, chmod_x
from .base import Installer, SystemDependent


class ReleaseInstaller(SystemDependent, Installer):
    """Base for installers that download a platform-specific release asset.

    ``os_names`` and ``arch_names`` map the running platform to the spelling
    used in the project's asset names.
    """

    os_names: dict[Os, str] = {Os.MACOS: "apple-darwin", Os.LINUX: "unknown-linux-gnu"}
    arch_names: dict[Arch, str] = {Arch.ARM: "aarch64", Arch.X86: "x86_64"}

    def target_arch_and_os(self) -> tuple[str, str]:
        sys_info = self.config.sys_info
        return self.arch_names[sys_info.arch], self.os_names[sys_info.os]

    def checksum(self, checksums_url: str, filename: str) -> ChecksumSource | None:
        if not self.config.verify_checksums:
            return None
        return ChecksumSource(checksums_url=checksums_url, filename=filename)

    async def fetch_to_link_dir(self, url: str, option: DeflateOption, checksum=None) -> None:
        target = await download(url, option, checksum, timeout=self.config.command_timeout)
        chmod_x(target)


class Deno(ReleaseInstaller):
    name = "deno"

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        repo = "denoland/deno"
        tag = await get_latest_release_tag(repo, timeout=self.config.command_timeout)
        asset = f"deno-{arch}-{os_}.zip"
        base_url = f"https://github.com/{repo}/releases/download/{tag}"

        await self.fetch_to_link_dir(
            f"{base_url}/{asset}",
            DeflateOption.extract_zip(self.config.link_dir, member=self.tool_name()),
            self.checksum(f"{base_url}/{asset}.sha256sum", asset),
        )


class Hadolint(ReleaseInstaller):
    name = "hadolint"
    os_names = {Os.MACOS: "Darwin", Os.LINUX: "Linux"}
    arch_names = {Arch.ARM: "arm64", Arch.X86: "x86_64"}

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        await self.fetch_to_link_dir(
            f"https://github.com/hadolint/hadolint/releases/latest/download/hadolint-{os_}-{arch}",
            DeflateOption.write_to(self.link_path),
        )

    # Segfaults on some macOS versions when run without a Dockerfile.
    def check_args(self) -> list[str] | None:
        return None


class HelmLs(ReleaseInstaller):
    name = "helm_ls"
    os_names = {Os.MACOS: "darwin", Os.LINUX: "linux"}
    arch_names = {Arch.ARM: "arm64", Arch.X86: "amd64"}

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        await self.fetch_to_link_dir(
            f"https://github.com/mrjosh/helm-ls/releases/latest/download/helm_ls_{os_}_{arch}",
            DeflateOption.write_to(self.link_path),
        )

    def check_args(self) -> list[str] | None:
        return ["version"]


class Marksman(ReleaseInstaller):
    name = "marksman"

    def target_arch_and_os(self) -> tuple[str, str]:
        sys_info = self.config.sys_info
        if sys_info.os == Os.MACOS:
            return "", "macos"
        return ("-arm64" if sys_info.arch == Arch.ARM else "-x64"), "linux"

    async def install(self) -> None:
        arch_suffix, os_ = self.target_arch_and_os()
        await self.fetch_to_link_dir(
            "https://github.com/artempyanykh/marksman/releases/latest/download/"
            f"marksman-{os_}{arch_suffix}",
            DeflateOption.write_to(self.link_path),
        )


class RustAnalyzer(ReleaseInstaller):
    name = "rust-analyzer"

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        await self.fetch_to_link_dir(
            "https://github.com/rust-lang/rust-analyzer/releases/download/nightly/"
            f"rust-analyzer-{arch}-{os_}.gz",
            DeflateOption.decompress_gz(self.link_path),
        )


class Shellcheck(ReleaseInstaller):
    name = "shellcheck"
    os_names = {Os.MACOS: "darwin", Os.LINUX: "linux"}

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        repo = "koalaman/shellcheck"
        tag = await get_latest_release_tag(repo, timeout=self.config.command_timeout)

        await self.fetch_to_link_dir(
            f"https://github.com/{repo}/releases/download/{tag}/shellcheck-{tag}.{os_}.{arch}.tar.xz",
            DeflateOption.extract_tar_xz(
                self.config.link_dir, member=f"shellcheck-{tag}/shellcheck"
            ),
        )


class Sqruff(ReleaseInstaller):
    name = "sqruff"
    os_names = {Os.MACOS: "darwin", Os.LINUX: "linux"}

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        await self.fetch_to_link_dir(
            f"https://github.com/quarylabs/sqruff/releases/latest/download/sqruff-{os_}-{arch}.tar.gz",
            DeflateOption.extract_tar_gz(self.config.link_dir, member=self.tool_name()),
        )


class TerraformLs(ReleaseInstaller):
    name = "terraform-ls"
    os_names = {Os.MACOS: "darwin", Os.LINUX: "linux"}
    arch_names = {Arch.ARM: "arm64", Arch.X86: "amd64"}

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        tag = await get_latest_release_tag(
            "hashicorp/terraform-ls", timeout=self.config.command_timeout
        )
        version = tag.removeprefix("v")
        base_url = f"https://releases.hashicorp.com/terraform-ls/{version}"
        asset = f"terraform-ls_{version}_{os_}_{arch}.zip"

        await self.fetch_to_link_dir(
            f"{base_url}/{asset}",
            DeflateOption.extract_zip(self.config.link_dir, member=self.tool_name()),
            self.checksum(f"{base_url}/terraform-ls_{version}_SHA256SUMS", asset),
        )


class TyposLsp(ReleaseInstaller):
    name = "typos-lsp"

    async def install(self) -> None:
        arch, os_ = self.target_arch_and_os()
        repo = "tekumara/typos-vscode"
        tag = await get_latest_release_tag(repo, timeout=self.config.command_timeout)

        await self.fetch_to_link_dir(
            f"https://github.com/{repo}/releases/download/{tag}/typos-lsp-{tag}-{arch}-{os_}.tar.gz",
            DeflateOption.extract_tar_gz(self.config.link_dir, member=self.tool_name()),
        )
