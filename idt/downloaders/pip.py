"""Install Python packages into a dedicated virtualenv."""

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
    """Create ``<tool_storage_dir>/<tool>/.venv`` and install ``packages`` into it.

    Returns:
        The virtualenv ``bin`` directory
    """
    venv = tool_storage_dir / tool / ".venv"
    venv.parent.mkdir(parents=True, exist_ok=True)

    await run_checked(
        shlex.join(["python3", "-m", "venv", str(venv)]), timeout=timeout, debug=is_debug()
    )
    pip = venv / "bin" / "pip"
    await run_checked(
        shlex.join([str(pip), "install", "--upgrade", "pip", *packages]),
        timeout=timeout,
        debug=is_debug(),
    )

    return venv / "bin"
