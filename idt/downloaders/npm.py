"""Install Node.js packages into a private prefix with npm."""

import shlex
from pathlib import Path

from .. import is_debug
from ..execution import INSTALL_TIMEOUT, run_checked


async def install(
    tool_storage_dir: Path,
    tool: str,
    packages: list[str],
    timeout: int | None = INSTALL_TIMEOUT,
) -> Path:
    """Install ``packages`` under ``<tool_storage_dir>/<tool>``.

    Returns:
        The ``node_modules/.bin`` directory holding the package binaries
    """
    prefix = tool_storage_dir / tool
    prefix.mkdir(parents=True, exist_ok=True)

    args = ["npm", "install", "--silent", "--prefix", str(prefix), *packages]
    await run_checked(shlex.join(args), timeout=timeout, debug=is_debug())

    return prefix / "node_modules" / ".bin"
