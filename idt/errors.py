"""Error types and message formatting for idt.

Fatal errors (``ArgumentError``, ``AuthError``, ``ConfigError``) abort a run
before any installer starts. ``InstallError`` and its subclasses describe a
single tool failing and never leave that tool's task. ``CleanupError`` is
collected by the post-run cleanup and only ever reported as a warning.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Include the offending value (url, path, tool) in the message
- Avoid emojis in error messages (keep in progress displays only)
"""


class IdtError(Exception):
    """Base class for every error raised by idt."""


class ArgumentError(IdtError):
    """Raised when the directory arguments are missing or unusable."""


class AuthError(IdtError):
    """Raised when the GitHub login precondition cannot be satisfied."""


class ConfigError(IdtError):
    """Raised when the settings file cannot be loaded or validated."""


class UnsupportedPlatformError(ConfigError):
    """Raised when the running OS or CPU architecture has no release assets."""


class InstallError(IdtError):
    """Base class for a failure of a single installer."""


class CommandError(InstallError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int, output: str = ""):
        self.command = command
        self.returncode = returncode
        self.output = output
        message = f"command failed with exit code {returncode}: {command}"
        if output:
            message += f"\n{output}"
        super().__init__(message)


class DownloadError(InstallError):
    """Raised when fetching a URL fails."""


class ReleaseLookupError(InstallError):
    """Raised when the latest release of a GitHub repository cannot be resolved."""


class ChecksumNotFoundError(InstallError):
    """Raised when a checksums manifest has no entry for the requested file."""


class ChecksumMismatchError(InstallError):
    """Raised when a downloaded file does not match its published hash."""


class ArchiveLayoutError(InstallError):
    """Raised when an archive does not contain the expected member."""


class CheckError(InstallError):
    """Raised when the post-install sanity check of a tool fails."""


class CleanupError(IdtError):
    """A single post-run cleanup step that failed."""


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Args:
        message: The error message to format

    Returns:
        Formatted error message with 'Error: ' prefix

    Examples:
        >>> format_error("missing link_dir")
        'Error: missing link_dir'
    """
    return f"Error: {message}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("gh is not logged in", "run 'gh auth login'")
        "Error: gh is not logged in. Hint: run 'gh auth login'"
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "IdtError",
    "ArgumentError",
    "AuthError",
    "ConfigError",
    "UnsupportedPlatformError",
    "InstallError",
    "CommandError",
    "DownloadError",
    "ReleaseLookupError",
    "ChecksumNotFoundError",
    "ChecksumMismatchError",
    "ArchiveLayoutError",
    "CheckError",
    "CleanupError",
    "format_error",
    "format_suggestion",
]
