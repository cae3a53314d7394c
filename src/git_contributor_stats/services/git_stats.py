"""Per-contributor statistics built from git history.

Two read-only reports are produced:

* the contributor listing, one summary per author ordered by latest commit;
* developer stats for one author: languages, per-language file counts,
  detected frameworks and the commit total.

The ``aggregate_*`` functions are pure and work on already-parsed data. The
``list_contributors`` / ``get_developer_stats`` entry points validate the
repository root, run the git queries and feed the parsers.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from pathlib import Path
from types import MappingProxyType

from git_contributor_stats.framework_detection import detect_frameworks
from git_contributor_stats.language_classifier import classify_path
from git_contributor_stats.log_parser import (
    parse_author_files,
    parse_commit_count,
    parse_full_history,
)
from git_contributor_stats.models.stats import CommitRecord, ContributorSummary, DeveloperStats
from git_contributor_stats.relative_time import format_relative_time
from git_contributor_stats.utils.git import (
    query_author_commit_count,
    query_author_files,
    query_full_log,
    validate_repo_root,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def aggregate_contributors(
    records: Iterable[CommitRecord], now: datetime | None = None
) -> list[ContributorSummary]:
    """Group full-history records by author.

    Args:
        records: Parsed full-history commits.
        now: Reference time for the relative age labels. Defaults to the
            current UTC time.

    Returns:
        One summary per distinct author name (exact, case-sensitive match),
        newest activity first. Authors with equal latest timestamps keep the
        order in which they first appeared.

    Raises:
        ValueError: if a record has no timestamp, e.g. a name-only record.
    """
    now = now or datetime.now(UTC)
    timestamps: dict[str, list[datetime]] = {}
    for record in records:
        if record.timestamp is None:
            raise ValueError(f"Commit by {record.author!r} has no timestamp")
        timestamps.setdefault(record.author, []).append(record.timestamp)

    summaries = []
    for name, dates in timestamps.items():
        latest = max(dates)
        summaries.append(
            ContributorSummary(
                name=name,
                latest_commit_at=latest,
                relative_age=format_relative_time(latest, now),
                commit_count=len(dates),
            )
        )
    summaries.sort(key=lambda s: s.latest_commit_at, reverse=True)
    return summaries


def count_languages(paths: Iterable[str]) -> dict[str, int]:
    """Count files per language label, highest count first.

    Paths without an extension are skipped. Labels with equal counts keep
    the order in which they were first seen.
    """
    counts = Counter(label for label in map(classify_path, paths) if label is not None)
    return dict(counts.most_common())


def aggregate_developer_stats(
    author: str, paths: Sequence[str], commit_count: int
) -> DeveloperStats:
    """Build developer stats from the file paths of an author-filtered log.

    Args:
        author: Author the paths belong to.
        paths: Every path line of the name-only log, duplicates included.
        commit_count: Commit total from the dedicated count query.

    Returns:
        DeveloperStats for ``author``.
    """
    language_file_counts = count_languages(paths)
    return DeveloperStats(
        author=author,
        languages=frozenset(language_file_counts),
        language_file_counts=MappingProxyType(language_file_counts),
        frameworks=detect_frameworks(paths),
        commit_count=commit_count,
        file_count=len(paths),
    )


def filter_contributors(
    summaries: Iterable[ContributorSummary], query: str | None
) -> list[ContributorSummary]:
    """Keep summaries whose name contains ``query``, ignoring case.

    An empty or missing query keeps everything. Order is preserved.
    """
    if not query:
        return list(summaries)
    needle = query.lower()
    return [s for s in summaries if needle in s.name.lower()]


# ---------------------------------------------------------------------------
# Repository Reports
# ---------------------------------------------------------------------------


def list_contributors(
    repo_root: Path | str, *, now: datetime | None = None
) -> list[ContributorSummary]:
    """List every contributor of the repository with their latest activity.

    Raises:
        InvalidRepositoryError: if ``repo_root`` is not a directory.
        QueryFailedError: if the git log query fails.
        MalformedLogLineError: if git prints an unexpected line.
    """
    repo = validate_repo_root(repo_root)
    records = parse_full_history(query_full_log(repo))
    summaries = aggregate_contributors(records, now)
    logger.debug("Parsed %d commits from %d contributors in %s", len(records), len(summaries), repo)
    return summaries


def get_developer_stats(repo_root: Path | str, author: str) -> DeveloperStats:
    """Compute language and framework usage for ``author``.

    The commit total comes from ``git rev-list --count`` rather than from
    the name-only log, which has no commit boundaries and misses commits
    that touch no files.

    Raises:
        InvalidRepositoryError: if ``repo_root`` is not a directory.
        QueryFailedError: if either git query fails.
        MalformedLogLineError: if the commit count is not an integer.
    """
    repo = validate_repo_root(repo_root)
    record = parse_author_files(query_author_files(repo, author), author)
    paths = list(record.changed_files) if record is not None else []
    commit_count = parse_commit_count(query_author_commit_count(repo, author))
    stats = aggregate_developer_stats(author, paths, commit_count)
    logger.debug(
        "Author %s: %d commits, %d files, %d languages",
        author,
        stats.commit_count,
        stats.file_count,
        len(stats.languages),
    )
    return stats


__all__ = [
    "aggregate_contributors",
    "aggregate_developer_stats",
    "count_languages",
    "filter_contributors",
    "get_developer_stats",
    "list_contributors",
]
