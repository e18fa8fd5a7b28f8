"""The fixed list of installers known to idt."""

from collections.abc import Iterable

from .config import InstallerConfig
from .installers import INSTALLER_CLASSES, Installer


def build_registry(
    config: InstallerConfig,
    installer_classes: Iterable[type[Installer]] = INSTALLER_CLASSES,
) -> list[Installer]:
    """Instantiate every installer with the run's configuration.

    Raises:
        ValueError: If two installers share a tool name
    """
    registry = [cls(config) for cls in installer_classes]
    ensure_unique_names(registry)
    return registry


def ensure_unique_names(registry: list[Installer]) -> None:
    seen: set[str] = set()
    for installer in registry:
        name = installer.tool_name()
        if not name:
            raise ValueError(f"{installer!r} has an empty tool name")
        if name in seen:
            raise ValueError(f"duplicate tool name in registry: {name!r}")
        seen.add(name)


def tool_names(registry: list[Installer]) -> list[str]:
    return [installer.tool_name() for installer in registry]
