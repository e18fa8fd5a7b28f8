"""Build and install Rust crates with cargo."""

import shlex
from pathlib import Path

from .. import is_debug
from ..execution import INSTALL_TIMEOUT, run_checked


async def install(
    tool_storage_dir: Path,
    tool: str,
    crate: str,
    extra_args: list[str] | None = None,
    timeout: int | None = INSTALL_TIMEOUT,
) -> Path:
    """Install ``crate`` with ``--root <tool_storage_dir>/<tool>``.

    Returns:
        The ``bin`` directory cargo appends to the root
    """
    root = tool_storage_dir / tool
    root.mkdir(parents=True, exist_ok=True)

    args = ["cargo", "install", crate, "--force", "--root", str(root), *(extra_args or [])]
    await run_checked(shlex.join(args), timeout=timeout, debug=is_debug())

    return root / "bin"
