"""Settings loading and run configuration."""

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .errors import ArgumentError, ConfigError
from .execution import INSTALL_TIMEOUT
from .system import SysInfo


@dataclass
class Settings:
    """User settings read from the optional YAML config file."""
    command_timeout: int = INSTALL_TIMEOUT
    github_login: bool = True
    verify_checksums: bool = True
    check_installs: bool = True

    def __post_init__(self):
        if isinstance(self.command_timeout, bool) or not isinstance(self.command_timeout, int):
            raise ValueError("command_timeout must be an integer")
        if self.command_timeout < 0:
            raise ValueError("command_timeout must be >= 0")
        for name in ("github_login", "verify_checksums", "check_installs"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be a boolean")


@dataclass(frozen=True)
class InstallerConfig:
    """Everything an installer needs, resolved once per run."""
    tool_storage_dir: Path
    link_dir: Path
    sys_info: SysInfo
    command_timeout: int = INSTALL_TIMEOUT
    verify_checksums: bool = True
    check_installs: bool = True


def validate_settings(data: object) -> Settings:
    """Validate and convert raw YAML data to Settings.

    Args:
        data: Result of yaml.safe_load(); None for an empty file

    Returns:
        Settings with defaults for missing keys

    Raises:
        ConfigError: If validation fails with clear field path errors
    """
    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Settings)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    try:
        return Settings(**data)
    except ValueError as e:
        raise ConfigError(f"config: {e}") from e


def load_settings(path: Path) -> Settings:
    """Load settings from ``path``; a missing file yields the defaults."""
    if not path.exists():
        return Settings()
    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    return validate_settings(data)


def resolve_dir(raw: str | Path, name: str) -> Path:
    """Expand, absolutize and create a directory argument."""
    if not str(raw).strip():
        raise ArgumentError(f"{name} must be a non-empty path")
    path = Path(raw).expanduser().absolute()
    if path.exists() and not path.is_dir():
        raise ArgumentError(f"{name} {path} exists and is not a directory")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArgumentError(f"cannot create {name} {path}: {e}") from e
    return path


def resolve_dirs(tool_storage_dir: str | Path, link_dir: str | Path) -> tuple[Path, Path]:
    """Resolve and create both base directories before any installer runs."""
    return (
        resolve_dir(tool_storage_dir, "tool_storage_dir"),
        resolve_dir(link_dir, "link_dir"),
    )


__all__ = [
    "Settings",
    "InstallerConfig",
    "validate_settings",
    "load_settings",
    "resolve_dir",
    "resolve_dirs",
]
