"""Exceptions raised while querying and parsing repository history."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class GitStatsError(Exception):
    """Base class for all contributor statistics errors."""


class InvalidRepositoryError(GitStatsError):
    """Raised when the repository root is missing or not a directory."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Provided path is not a valid directory: {self.path}")


class QueryFailedError(GitStatsError):
    """Raised when git exits with a non-zero status or cannot be started.

    Attributes:
        args_used: Arguments passed to git, without the executable.
        exit_code: Process exit status, or ``None`` if git never ran.
        stderr: Captured diagnostic output.
    """

    def __init__(self, args_used: Sequence[str], exit_code: int | None, stderr: str) -> None:
        self.args_used = tuple(args_used)
        self.exit_code = exit_code
        self.stderr = stderr.strip()
        status = "could not start" if exit_code is None else f"exit code {exit_code}"
        message = f"git command failed ({' '.join(self.args_used)}): {status}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class MalformedLogLineError(GitStatsError):
    """Raised when a full-history log line does not match ``name|seconds tz``."""

    def __init__(self, line_number: int, line: str, reason: str = "") -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Malformed log line {line_number}{detail}: {line!r}")
