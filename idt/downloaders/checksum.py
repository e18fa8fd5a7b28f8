"""SHA-256 checksum lookup and verification."""

import hashlib
import shlex
from pathlib import Path

from .. import is_debug
from ..errors import ChecksumMismatchError, ChecksumNotFoundError, DownloadError
from ..execution import DEFAULT_TIMEOUT, run_command_async

CHUNK_SIZE = 8192


def compute_sha256(path: Path) -> str:
    """Return the hex SHA-256 digest of the file at ``path``."""
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def parse_checksum(content: str, filename: str) -> str:
    """Find the hash for ``filename`` in a checksums manifest.

    Handles two formats:
    1. Multi-line: ``<hex_hash>  <filename>`` (one or more spaces, optional
       ``*`` binary-mode marker before the filename)
    2. Single-line: just a hex hash (per-file ``.sha256`` files)

    Raises:
        ChecksumNotFoundError: If no entry matches ``filename``
    """
    trimmed = content.strip()

    if trimmed and len(trimmed.split()) == 1:
        return trimmed

    for line in trimmed.splitlines():
        parts = line.strip().split(maxsplit=1)
        if len(parts) != 2:
            continue
        hash_, entry = parts
        if entry.removeprefix("*") == filename:
            return hash_

    raise ChecksumNotFoundError(
        f"checksum entry not found filename={filename!r} content={trimmed!r}"
    )


def verify(path: Path, expected_hex: str) -> None:
    """Check that ``path`` hashes to ``expected_hex``.

    Raises:
        ChecksumMismatchError: If the digests differ
    """
    actual = compute_sha256(path)
    expected = expected_hex.strip().lower()
    if actual != expected:
        raise ChecksumMismatchError(
            f"checksum mismatch path={path} expected={expected} actual={actual}"
        )


async def download_and_find_checksum(
    checksums_url: str, filename: str, timeout: int | None = DEFAULT_TIMEOUT
) -> str:
    """Fetch a checksums manifest and return the expected hash for ``filename``."""
    output, returncode = await run_command_async(
        f"curl -sSfL {shlex.quote(checksums_url)}", timeout=timeout, debug=is_debug()
    )
    if returncode != 0:
        raise DownloadError(f"error downloading checksums url={checksums_url}: {output}")
    return parse_checksum(output, filename)
