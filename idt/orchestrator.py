"""Executor, aggregator and cleanup wired together for one run."""

import logging
from pathlib import Path

from .cleanup import post_run_cleanup
from .executor import run_installers
from .installers import Installer
from .models import CleanupReport, RunReport
from .report import aggregate

_logging = logging.getLogger(__name__)


async def install_tools(installers: list[Installer]) -> RunReport:
    """Install all ``installers`` concurrently and report on each one."""
    _logging.debug(f"Installing {len(installers)} tools")
    results = await run_installers(installers)
    return aggregate(installers, results)


async def run(installers: list[Installer], link_dir: Path) -> tuple[RunReport, CleanupReport]:
    """Install, then clean ``link_dir`` once every installer has finished."""
    try:
        report = await install_tools(installers)
    finally:
        cleanup_report = post_run_cleanup(link_dir)
    return report, cleanup_report
