"""Turn executor results into a RunReport and an exit status."""

import logging
from collections.abc import Sequence

import click

from .installers import Installer
from .models import Outcome, RunReport, ToolReport

_logging = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_INSTALL_FAILED = 1
EXIT_INVALID_ARGS = 2
EXIT_AUTH_FAILED = 3
EXIT_CONFIG_ERROR = 4


def panic_payload(error: BaseException) -> str:
    return f"{type(error).__name__}: {error}"


def aggregate(
    installers: Sequence[Installer],
    results: Sequence[Outcome | BaseException],
) -> RunReport:
    """Pair each installer with its result, in selection order.

    Exceptions that escaped an installer task are recorded as panics and
    reported here.

    Raises:
        ValueError: If ``results`` does not hold one entry per installer
    """
    if len(installers) != len(results):
        raise ValueError(
            f"expected {len(installers)} results, got {len(results)}"
        )

    report = RunReport()
    for installer, result in zip(installers, results):
        name = installer.tool_name()
        if isinstance(result, Outcome):
            outcome = result
        else:
            payload = panic_payload(result)
            click.secho(f"💥 {name} installer panicked: {payload}", fg="red", err=True)
            _logging.debug(f"{name} installer panicked", exc_info=result)
            outcome = Outcome.panic(payload)
        report.entries.append(ToolReport(tool_name=name, outcome=outcome))

    return report


def exit_code(report: RunReport) -> int:
    return EXIT_SUCCESS if report.failure_count == 0 else EXIT_INSTALL_FAILED


def format_failure_summary(report: RunReport) -> str:
    return (
        f"❌ {report.failure_count} tools failed to install, "
        f"namely: {', '.join(report.failed_tools)}"
    )


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_INSTALL_FAILED",
    "EXIT_INVALID_ARGS",
    "EXIT_AUTH_FAILED",
    "EXIT_CONFIG_ERROR",
    "aggregate",
    "exit_code",
    "format_failure_summary",
    "panic_payload",
]
