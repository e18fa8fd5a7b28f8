"""Command line entry point for idt."""

import asyncio
import logging
import sys
from pathlib import Path

import click

from . import __version__, setup_logging
from .config import InstallerConfig, Settings, load_settings, resolve_dirs
from .errors import (
    ArgumentError,
    AuthError,
    ConfigError,
    format_error,
    format_suggestion,
)
from .github import ensure_logged_in
from .orchestrator import run
from .paths import get_config_path
from .registry import build_registry, tool_names
from .report import (
    EXIT_AUTH_FAILED,
    EXIT_CONFIG_ERROR,
    EXIT_INVALID_ARGS,
    EXIT_SUCCESS,
    exit_code,
    format_failure_summary,
)
from .selection import format_unknown_warning, select_installers
from .system import SysInfo
from .tui import select_tools_interactive

_logging = logging.getLogger(__name__)


def _load_settings_or_exit(config_path: Path) -> Settings:
    try:
        return load_settings(config_path)
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)


def _interactive_selection(names: list[str]) -> list[str]:
    try:
        chosen = select_tools_interactive(names)
    except RuntimeError as e:
        click.echo(format_suggestion(str(e), "pass tool names instead of --interactive"), err=True)
        sys.exit(EXIT_INVALID_ARGS)
    if chosen is None:
        click.echo("Cancelled.")
        sys.exit(EXIT_SUCCESS)
    return chosen


@click.command()
@click.argument("tool_storage_dir")
@click.argument("link_dir")
@click.argument("tool_names_requested", metavar="[TOOL_NAMES]...", nargs=-1)
@click.option(
    "--debug",
    is_flag=True,
    envvar="IDT_DEBUG",
    help="Enable debug output for troubleshooting",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="IDT_CONFIG",
    default=None,
    help="Settings file (default: ~/.config/idt/config.yaml)",
)
@click.option("--skip-login", is_flag=True, help="Do not check GitHub CLI authentication")
@click.option(
    "--interactive",
    "-i",
    is_flag=True,
    help="Pick tools from a checklist when no TOOL_NAMES are given",
)
@click.version_option(__version__, prog_name="idt")
def main(
    tool_storage_dir: str,
    link_dir: str,
    tool_names_requested: tuple[str, ...],
    debug: bool,
    config_path: Path | None,
    skip_login: bool,
    interactive: bool,
):
    """Install developer tools into TOOL_STORAGE_DIR and link them into LINK_DIR.

    All known tools are installed when no TOOL_NAMES are given.
    """
    setup_logging(debug)

    try:
        tool_storage_dir, link_dir = resolve_dirs(tool_storage_dir, link_dir)
    except ArgumentError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_INVALID_ARGS)

    settings = _load_settings_or_exit(config_path or get_config_path())

    click.echo(f"🚀 Installing dev tools in {tool_storage_dir}, linking into {link_dir}")

    if settings.github_login and not skip_login:
        try:
            ensure_logged_in()
        except AuthError as e:
            click.echo(
                format_suggestion(str(e), "run `gh auth login` or pass --skip-login"),
                err=True,
            )
            sys.exit(EXIT_AUTH_FAILED)

    try:
        sys_info = SysInfo.detect()
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    config = InstallerConfig(
        tool_storage_dir=tool_storage_dir,
        link_dir=link_dir,
        sys_info=sys_info,
        command_timeout=settings.command_timeout,
        verify_checksums=settings.verify_checksums,
        check_installs=settings.check_installs,
    )
    registry = build_registry(config)

    requested = list(tool_names_requested)
    if interactive and not requested:
        requested = _interactive_selection(tool_names(registry))
        if not requested:
            click.echo("No tools selected.")
            sys.exit(EXIT_SUCCESS)

    selection = select_installers(registry, requested)
    if selection.unknown:
        click.secho(format_unknown_warning(selection.unknown), fg="yellow", err=True)

    _logging.debug(f"Selected: {', '.join(tool_names(selection.selected)) or '(none)'}")
    report, _ = asyncio.run(run(selection.selected, link_dir))

    code = exit_code(report)
    if code != EXIT_SUCCESS:
        click.secho(format_failure_summary(report), fg="red", err=True)
    sys.exit(code)


if __name__ == "__main__":
    main()
