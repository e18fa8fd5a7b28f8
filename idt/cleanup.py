"""Best-effort tidying of the link directory after every run."""

import logging
from pathlib import Path

import click

from .errors import CleanupError
from .models import CleanupReport
from .system import chmod_x, is_dead_symlink

_logging = logging.getLogger(__name__)


def _warn(report: CleanupReport, error: CleanupError) -> None:
    report.errors.append(str(error))
    click.secho(f"⚠️  {error}", fg="yellow", err=True)


def _list_entries(directory: Path, report: CleanupReport) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        _warn(report, CleanupError(f"cannot scan {directory}: {e}"))
        return []


def rm_dead_symlinks(link_dir: Path, report: CleanupReport | None = None) -> CleanupReport:
    """Remove every symlink in ``link_dir`` whose target no longer exists."""
    report = report if report is not None else CleanupReport()
    for entry in _list_entries(link_dir, report):
        if not is_dead_symlink(entry):
            continue
        click.echo(f"🧹 Removing dead symlink: {entry}")
        try:
            entry.unlink()
        except OSError as e:
            _warn(report, CleanupError(f"cannot remove dead symlink {entry}: {e}"))
            continue
        report.removed.append(entry)
    return report


def normalize_permissions(link_dir: Path, report: CleanupReport | None = None) -> CleanupReport:
    """``chmod +x`` every entry of ``link_dir`` that resolves to a regular file."""
    report = report if report is not None else CleanupReport()
    for entry in _list_entries(link_dir, report):
        if not entry.is_file():
            continue
        try:
            chmod_x(entry)
        except OSError as e:
            _warn(report, CleanupError(f"cannot make {entry} executable: {e}"))
    return report


def post_run_cleanup(link_dir: Path) -> CleanupReport:
    """Drop dead links, then make every linked file executable.

    Problems are collected in the returned report and printed as warnings;
    nothing here raises.
    """
    report = CleanupReport()
    rm_dead_symlinks(link_dir, report)
    normalize_permissions(link_dir, report)
    _logging.debug(
        f"Cleanup of {link_dir}: {len(report.removed)} removed, {len(report.errors)} errors"
    )
    return report


__all__ = [
    "CleanupReport",
    "normalize_permissions",
    "post_run_cleanup",
    "rm_dead_symlinks",
]
