"""Async command execution utilities."""

import asyncio
import logging
from pathlib import Path
from typing import Tuple

from .errors import CommandError

DEFAULT_TIMEOUT = 30
INSTALL_TIMEOUT = 600

_logging = logging.getLogger(__name__)


async def run_command_async(
    command: str,
    timeout: int | None = DEFAULT_TIMEOUT,
    debug: bool = False,
    cwd: Path | None = None,
) -> Tuple[str, int]:
    """Run a command asynchronously and return output and return code.

    A ``timeout`` of ``None`` or ``0`` waits for the command indefinitely.
    """
    process = None
    try:
        if debug:
            _logging.debug(f"Running command: {command}")
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=timeout or None
            )
            output = stdout.decode(errors="replace").strip()
            errors = stderr.decode(errors="replace").strip()
            if errors and debug:
                _logging.debug(f"stderr: {errors}")
            returncode = process.returncode if process.returncode is not None else 1
            if returncode != 0 and errors:
                output = f"{output}\n{errors}" if output else errors
            return output, returncode
        except asyncio.TimeoutError:
            process.kill()
            _ = await process.wait()
            _logging.error(f"Command timed out after {timeout} seconds: {command}")
            return f"Command timed out after {timeout} seconds", 1
    except OSError as e:
        _logging.error(f"Command execution failed: {type(e).__name__}: {e} | Command: {command}")
        return f"Error: {str(e)}", 1
    finally:
        if process:
            transport = getattr(process, "_transport", None)
            if transport:
                transport.close()


async def run_checked(
    command: str,
    timeout: int | None = INSTALL_TIMEOUT,
    debug: bool = False,
    cwd: Path | None = None,
) -> str:
    """Run a command and return its output, raising CommandError on failure."""
    output, returncode = await run_command_async(
        command, timeout=timeout, debug=debug, cwd=cwd
    )
    if returncode != 0:
        raise CommandError(command, returncode, output)
    return output
