"""Acquisition collaborators: HTTP downloads and package managers."""

from .checksum import compute_sha256, parse_checksum, verify
from .http import ChecksumSource, DeflateKind, DeflateOption, download

__all__ = [
    "ChecksumSource",
    "DeflateKind",
    "DeflateOption",
    "download",
    "compute_sha256",
    "parse_checksum",
    "verify",
]
