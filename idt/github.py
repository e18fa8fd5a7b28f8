"""GitHub helpers: login precondition and release lookup."""

import json
import logging
import os
import shlex
import subprocess

from . import is_debug
from .errors import AuthError, ReleaseLookupError
from .execution import DEFAULT_TIMEOUT, run_command_async

GITHUB_API = "https://api.github.com"
AUTH_STATUS_TIMEOUT = 15

_logging = logging.getLogger(__name__)


def ensure_logged_in() -> None:
    """Make sure the GitHub CLI is authenticated, prompting for login if not.

    Raises:
        AuthError: If gh is missing or the interactive login fails
    """
    try:
        status = subprocess.run(
            ["gh", "auth", "status"],
            capture_output=True,
            timeout=AUTH_STATUS_TIMEOUT,
        )
    except FileNotFoundError as e:
        raise AuthError("gh CLI not found on PATH") from e
    except subprocess.TimeoutExpired as e:
        raise AuthError("gh auth status timed out") from e

    if status.returncode == 0:
        _logging.debug("gh already authenticated")
        return

    try:
        login = subprocess.run(["gh", "auth", "login"])
    except OSError as e:
        raise AuthError(f"gh auth login failed: {e}") from e
    if login.returncode != 0:
        raise AuthError(f"gh auth login exited with code {login.returncode}")


def add_github_auth_if_needed(command: str) -> str:
    """Add Bearer token header to curl commands targeting GitHub API if GITHUB_TOKEN is set."""
    token = os.environ.get("GITHUB_TOKEN")
    if not token or "api.github.com" not in command:
        return command

    if "Authorization:" in command:
        return command

    if command.startswith("curl"):
        header = ' -H "Authorization: Bearer $GITHUB_TOKEN"'
        command = command.replace("curl", f"curl{header}", 1)

    return command


async def get_latest_release_tag(repo: str, timeout: int | None = DEFAULT_TIMEOUT) -> str:
    """Return the ``tag_name`` of the latest release of ``repo`` (``owner/name``)."""
    url = f"{GITHUB_API}/repos/{repo}/releases/latest"
    command = add_github_auth_if_needed(
        f"curl -sSfL -H 'Accept: application/vnd.github+json' {shlex.quote(url)}"
    )
    output, returncode = await run_command_async(command, timeout=timeout, debug=is_debug())
    if returncode != 0:
        raise ReleaseLookupError(f"error fetching latest release repo={repo!r}: {output}")

    try:
        data = json.loads(output)
    except json.JSONDecodeError as e:
        raise ReleaseLookupError(f"error parsing release JSON repo={repo!r}: {e}") from e

    tag_name = data.get("tag_name") if isinstance(data, dict) else None
    if not tag_name or not isinstance(tag_name, str):
        raise ReleaseLookupError(f"missing tag_name in release response repo={repo!r}")
    return tag_name
