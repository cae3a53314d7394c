"""Value objects produced by the history parser and stats aggregator."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class CommitRecord:
    """One commit, or the file listing of a name-only query.

    Attributes:
        author: Author name exactly as git printed it.
        timestamp: Commit time as a UTC-aware datetime. ``None`` for
            name-only records, which carry no dates.
        changed_files: Paths touched, or ``None`` for full-history records.
        tz_offset: Raw timezone token from the log (e.g. ``+0200``).
    """

    author: str
    timestamp: datetime | None = None
    changed_files: tuple[str, ...] | None = None
    tz_offset: str = ""


@dataclass(frozen=True, slots=True)
class ContributorSummary:
    """Latest activity and commit total for one author.

    Attributes:
        name: Author name, unique within a report.
        latest_commit_at: Most recent commit timestamp.
        relative_age: Human-readable age of the latest commit.
        commit_count: Number of commits by this author.
    """

    name: str
    latest_commit_at: datetime
    relative_age: str
    commit_count: int


@dataclass(frozen=True, slots=True)
class DeveloperStats:
    """Language and framework usage for a single author.

    Attributes:
        author: Author filter the stats were computed for.
        languages: Distinct language labels with at least one file.
        language_file_counts: Read-only label -> file count, highest count
            first. Left out of the hash since mappings are unhashable.
        frameworks: Frameworks and build tools detected from the paths.
        commit_count: Commits by the author, from a dedicated count query.
        file_count: Number of file path lines seen, duplicates included.
    """

    author: str
    languages: frozenset[str] = frozenset()
    language_file_counts: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    frameworks: frozenset[str] = frozenset()
    commit_count: int = 0
    file_count: int = 0
