"""Run every selected installer concurrently and collect one result each."""

import asyncio
import logging

import click

from .errors import InstallError
from .installers import Installer
from .models import Outcome

_logging = logging.getLogger(__name__)


async def _run_installer(installer: Installer) -> Outcome | BaseException:
    name = installer.tool_name()
    _logging.debug(f"Starting installer {name}")
    try:
        check_output = await installer.run()
    except (InstallError, OSError) as e:
        click.secho(f"❌ error installing {name}: {e}", fg="red", err=True)
        return Outcome.failure(str(e))
    except (Exception, SystemExit, KeyboardInterrupt) as e:
        # Reported as a panic by the aggregator.
        return e

    if check_output is None:
        click.echo(f"🎉 {name} installed (not checked)")
    else:
        click.echo(f"🎉 {name} installed & checked: {check_output.strip()}")
    return Outcome.success()


async def run_installers(installers: list[Installer]) -> list[Outcome | BaseException]:
    """Start all installers at once and wait for every one of them.

    Expected failures are turned into ``Outcome.failure`` inside each task.
    Anything else a task raises, ``SystemExit`` and ``KeyboardInterrupt``
    included, is returned in its slot as the exception object.
    ``results[i]`` always belongs to ``installers[i]``.
    """
    if not installers:
        return []

    return await asyncio.gather(
        *[_run_installer(installer) for installer in installers],
        return_exceptions=True,
    )
