"""Filter the registry against the tool names requested on the command line."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .installers import Installer


@dataclass
class Selection:
    selected: list[Installer] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)


def select_installers(registry: list[Installer], requested: Sequence[str]) -> Selection:
    """Pick the installers to run.

    With no requested names every installer is selected. Otherwise the
    installers whose tool name matches a requested name are selected, in
    registry order and at most once each. Names with no installer are
    returned in ``unknown``, in request order and without duplicates.
    """
    if not requested:
        return Selection(selected=list(registry))

    wanted = set(requested)
    selected = [i for i in registry if i.tool_name() in wanted]

    known = {i.tool_name() for i in registry}
    unknown = list(dict.fromkeys(name for name in requested if name not in known))

    return Selection(selected=selected, unknown=unknown)


def format_unknown_warning(unknown: Sequence[str]) -> str:
    return f"⚠️  No installer for: {', '.join(unknown)} (skipped)"
