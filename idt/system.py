"""Filesystem and platform helpers shared by installers and cleanup."""

import os
import platform
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import UnsupportedPlatformError

EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class Os(Enum):
    MACOS = "macos"
    LINUX = "linux"


class Arch(Enum):
    ARM = "arm"
    X86 = "x86"


_OS_BY_SYSTEM = {
    "Darwin": Os.MACOS,
    "Linux": Os.LINUX,
}

_ARCH_BY_MACHINE = {
    "arm64": Arch.ARM,
    "aarch64": Arch.ARM,
    "x86_64": Arch.X86,
    "amd64": Arch.X86,
}


@dataclass(frozen=True)
class SysInfo:
    os: Os
    arch: Arch

    @classmethod
    def detect(cls) -> "SysInfo":
        """Detect the running OS and CPU architecture."""
        system = platform.system()
        machine = platform.machine().lower()
        os_ = _OS_BY_SYSTEM.get(system)
        arch = _ARCH_BY_MACHINE.get(machine)
        if os_ is None or arch is None:
            raise UnsupportedPlatformError(
                f"unsupported platform system={system!r} machine={machine!r}"
            )
        return cls(os=os_, arch=arch)


def is_dead_symlink(path: Path) -> bool:
    """Return True if ``path`` is a symlink whose target does not exist."""
    return path.is_symlink() and not path.exists()


def ln_sf(target: Path, link: Path) -> Path:
    """Point ``link`` at ``target``, replacing whatever ``link`` was before.

    The new link is created next to ``link`` and renamed over it, so readers
    never observe a missing link.
    """
    link.parent.mkdir(parents=True, exist_ok=True)
    tmp_link = link.with_name(f".{link.name}.idt-tmp")
    if tmp_link.is_symlink() or tmp_link.exists():
        tmp_link.unlink()
    tmp_link.symlink_to(target)
    os.replace(tmp_link, link)
    return link


def ln_sf_files_in_dir(src_dir: Path, dest_dir: Path) -> list[Path]:
    """Link every entry of ``src_dir`` into ``dest_dir`` under the same name."""
    links = []
    for entry in sorted(src_dir.iterdir()):
        links.append(ln_sf(entry, dest_dir / entry.name))
    return links


def chmod_x(path: Path) -> Path:
    """Add execute permission for user, group and others (``chmod +x``)."""
    mode = path.stat().st_mode
    if mode & EXEC_BITS != EXEC_BITS:
        path.chmod(mode | EXEC_BITS)
    return path


def chmod_x_files_in_dir(directory: Path) -> list[Path]:
    """Make every regular file directly inside ``directory`` executable."""
    changed = []
    for entry in sorted(directory.iterdir()):
        if entry.is_file():
            changed.append(chmod_x(entry))
    return changed

