"""Parsers for the raw text printed by the git history queries."""

from __future__ import annotations

import datetime

from git_contributor_stats.models.errors import MalformedLogLineError
from git_contributor_stats.models.stats import CommitRecord

# ---------------------------------------------------------------------------
# Full-history log: one "name|seconds tz" line per commit
# ---------------------------------------------------------------------------


def parse_full_history_line(line: str, line_number: int = 1) -> CommitRecord:
    """Parse a single ``%an|%ad`` line produced with ``--date=raw``.

    Args:
        line: Log line, e.g. ``"alice|1000000000 +0000"``.
        line_number: 1-based position used in error messages.

    Returns:
        CommitRecord with author, UTC timestamp and timezone token.

    Raises:
        MalformedLogLineError: If the separator is missing or the seconds
            field is not an integer or is out of range.
    """
    if "|" not in line:
        raise MalformedLogLineError(line_number, line, "missing '|' separator")

    author, date_field = line.split("|", 1)
    tokens = date_field.split()
    if not tokens:
        raise MalformedLogLineError(line_number, line, "missing timestamp")

    try:
        seconds = int(tokens[0])
    except ValueError as exc:
        raise MalformedLogLineError(line_number, line, "timestamp is not an integer") from exc

    try:
        timestamp = datetime.datetime.fromtimestamp(seconds, tz=datetime.UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise MalformedLogLineError(line_number, line, "timestamp out of range") from exc

    tz_offset = tokens[1] if len(tokens) > 1 else ""
    return CommitRecord(author=author, timestamp=timestamp, tz_offset=tz_offset)


def parse_full_history(output: str) -> list[CommitRecord]:
    """Convert full-history log output into commit records.

    Blank and whitespace-only lines are skipped. Any other line must be
    well formed; a single bad line fails the whole parse.
    """
    records: list[CommitRecord] = []
    for line_number, line in enumerate(output.splitlines(), start=1):
        if not line.strip():
            continue
        records.append(parse_full_history_line(line, line_number))
    return records


# ---------------------------------------------------------------------------
# Name-only log: file paths with the commit headers stripped
# ---------------------------------------------------------------------------


def parse_name_only(output: str) -> list[str]:
    """Return every non-blank line of a name-only log as a file path.

    Order and duplicates are preserved: a file touched by three commits
    appears three times.
    """
    return [line for line in output.splitlines() if line.strip()]


def parse_author_files(output: str, author: str) -> CommitRecord | None:
    """Bundle an author-filtered name-only log into one record.

    The log has no commit boundaries, so all paths are attributed to a
    single record owned by ``author``. Returns ``None`` for empty output.
    """
    paths = parse_name_only(output)
    if not paths:
        return None
    return CommitRecord(author=author, changed_files=tuple(paths))


# ---------------------------------------------------------------------------
# Commit count: a single integer
# ---------------------------------------------------------------------------


def parse_commit_count(output: str) -> int:
    """Parse ``git rev-list --count`` output.

    Raises:
        MalformedLogLineError: If the output is not a single integer.
    """
    text = output.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError as exc:
        raise MalformedLogLineError(1, text, "commit count is not an integer") from exc


__all__ = [
    "parse_author_files",
    "parse_commit_count",
    "parse_full_history",
    "parse_full_history_line",
    "parse_name_only",
]
