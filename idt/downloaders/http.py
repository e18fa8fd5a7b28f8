"""Download a URL, optionally verify it, and place it on disk.

Every download lands in a private temporary directory first. Only after the
optional checksum verification succeeds is the file decompressed, extracted
or copied to its destination, and single-file destinations are always
replaced atomically so re-running an install leaves identical artifacts.
"""

import asyncio
import gzip
import logging
import lzma
import os
import shlex
import shutil
import tarfile
import tempfile
import zipfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO

from .. import is_debug
from ..errors import ArchiveLayoutError, DownloadError
from ..execution import INSTALL_TIMEOUT, run_command_async
from . import checksum as checksum_utils

_logging = logging.getLogger(__name__)


class DeflateKind(Enum):
    WRITE_TO = "write_to"
    DECOMPRESS_GZ = "decompress_gz"
    EXTRACT_TAR_GZ = "extract_tar_gz"
    EXTRACT_TAR_XZ = "extract_tar_xz"
    EXTRACT_ZIP = "extract_zip"


@dataclass(frozen=True)
class DeflateOption:
    """How a downloaded file is turned into artifacts.

    ``dest`` is a file path for WRITE_TO and DECOMPRESS_GZ, and a directory
    for the archive kinds. ``member`` selects a single archive entry, which
    is written to ``dest/<basename(member)>``; without it the whole archive
    is unpacked into ``dest``.
    """
    kind: DeflateKind
    dest: Path
    member: str | None = None

    @classmethod
    def write_to(cls, dest_path: Path) -> "DeflateOption":
        return cls(DeflateKind.WRITE_TO, dest_path)

    @classmethod
    def decompress_gz(cls, dest_path: Path) -> "DeflateOption":
        return cls(DeflateKind.DECOMPRESS_GZ, dest_path)

    @classmethod
    def extract_tar_gz(cls, dest_dir: Path, member: str | None = None) -> "DeflateOption":
        return cls(DeflateKind.EXTRACT_TAR_GZ, dest_dir, member)

    @classmethod
    def extract_tar_xz(cls, dest_dir: Path, member: str | None = None) -> "DeflateOption":
        return cls(DeflateKind.EXTRACT_TAR_XZ, dest_dir, member)

    @classmethod
    def extract_zip(cls, dest_dir: Path, member: str | None = None) -> "DeflateOption":
        return cls(DeflateKind.EXTRACT_ZIP, dest_dir, member)

    def process(self, downloaded: Path) -> Path:
        """Place ``downloaded`` according to this option and return the result path."""
        try:
            return self._process(downloaded)
        except (tarfile.TarError, zipfile.BadZipFile, lzma.LZMAError, EOFError) as e:
            raise ArchiveLayoutError(
                f"corrupt {self.kind.value} archive path={downloaded}: {e}"
            ) from e

    def _process(self, downloaded: Path) -> Path:
        if self.kind == DeflateKind.WRITE_TO:
            with open(downloaded, "rb") as src:
                return write_atomic(src, self.dest)

        if self.kind == DeflateKind.DECOMPRESS_GZ:
            with gzip.open(downloaded, "rb") as src:
                return write_atomic(src, self.dest)

        self.dest.mkdir(parents=True, exist_ok=True)

        if self.kind == DeflateKind.EXTRACT_ZIP:
            with zipfile.ZipFile(downloaded) as archive:
                return _extract_zip(archive, self.dest, self.member)

        mode = "r:gz" if self.kind == DeflateKind.EXTRACT_TAR_GZ else "r:xz"
        with tarfile.open(downloaded, mode) as archive:
            return _extract_tar(archive, self.dest, self.member)


@dataclass(frozen=True)
class ChecksumSource:
    """Where to find the published hash of a download."""
    checksums_url: str
    filename: str


def write_atomic(src: BinaryIO, dest: Path) -> Path:
    """Stream ``src`` into ``dest`` through a sibling temp file and rename it over."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", dir=dest.parent)
    try:
        with os.fdopen(fd, "wb") as out:
            shutil.copyfileobj(src, out)
        os.replace(tmp_name, dest)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return dest


def _extract_tar(archive: tarfile.TarFile, dest_dir: Path, member: str | None) -> Path:
    if member is None:
        archive.extractall(dest_dir, filter="data")
        return dest_dir

    try:
        info = archive.getmember(member)
    except KeyError as e:
        raise ArchiveLayoutError(f"entry not found in tar archive entry={member!r}") from e
    src = archive.extractfile(info)
    if src is None:
        raise ArchiveLayoutError(f"tar entry is not a regular file entry={member!r}")
    with src:
        return write_atomic(src, dest_dir / Path(member).name)


def _extract_zip(archive: zipfile.ZipFile, dest_dir: Path, member: str | None) -> Path:
    if member is None:
        archive.extractall(dest_dir)
        return dest_dir

    try:
        src = archive.open(member)
    except KeyError as e:
        raise ArchiveLayoutError(f"entry not found in zip archive entry={member!r}") from e
    with src:
        return write_atomic(src, dest_dir / Path(member).name)


async def fetch(url: str, dest: Path, timeout: int | None = INSTALL_TIMEOUT) -> Path:
    """Download ``url`` into ``dest`` with curl."""
    output, returncode = await run_command_async(
        f"curl -sSfL -o {shlex.quote(str(dest))} {shlex.quote(url)}",
        timeout=timeout,
        debug=is_debug(),
    )
    if returncode != 0:
        raise DownloadError(f"error downloading url={url}: {output}")
    return dest


async def download(
    url: str,
    option: DeflateOption,
    checksum: ChecksumSource | None = None,
    timeout: int | None = INSTALL_TIMEOUT,
) -> Path:
    """Download ``url``, verify it against ``checksum`` if given, then process it.

    Raises:
        DownloadError: If the transfer fails
        ChecksumNotFoundError: If the manifest has no entry for the file
        ChecksumMismatchError: If the file does not match its published hash
        ArchiveLayoutError: If the requested archive member is missing
    """
    with tempfile.TemporaryDirectory(prefix="idt-") as tmp_dir:
        downloaded = await fetch(url, Path(tmp_dir) / "download", timeout=timeout)

        if checksum is not None:
            expected = await checksum_utils.download_and_find_checksum(
                checksum.checksums_url, checksum.filename, timeout=timeout
            )
            await asyncio.to_thread(checksum_utils.verify, downloaded, expected)
            _logging.debug(f"Verified checksum of {url}")

        return await asyncio.to_thread(option.process, downloaded)
