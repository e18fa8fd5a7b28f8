"""Interactive tool picker.

Uses questionary for the checkbox and prompt_toolkit for its style. Only
available when stdin is a TTY.
"""

import sys

import questionary
from prompt_toolkit.styles import Style

TOOL_PICKER_STYLE = Style.from_dict(
    {
        "qmark": "fg:#00ffff bold",
        "pointer": "fg:#00ffff bold",
        "highlighted": "fg:#00ffff bold",
        "selected": "fg:#00ffff",
        "instruction": "fg:#888888",
    }
)


def select_tools_interactive(tool_names: list[str]) -> list[str] | None:
    """Let the user untick tools they do not want installed.

    Args:
        tool_names: Names in registry order; all start checked

    Returns:
        Chosen names in registry order, or None if the user cancels

    Raises:
        RuntimeError: If not running in a TTY
    """
    if not sys.stdin.isatty():
        raise RuntimeError("Interactive tool selector requires a TTY")

    if not tool_names:
        return []

    choices = [questionary.Choice(title=name, value=name, checked=True) for name in tool_names]

    try:
        selected = questionary.checkbox(
            "Select tools to install:",
            choices=choices,
            instruction="Space to toggle, Enter to confirm",
            style=TOOL_PICKER_STYLE,
        ).ask()
    except KeyboardInterrupt:
        return None

    if selected is None:
        return None

    chosen = set(selected)
    return [name for name in tool_names if name in chosen]
