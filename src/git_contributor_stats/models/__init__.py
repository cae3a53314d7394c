"""Data models and type definitions"""

from git_contributor_stats.models.errors import (
    GitStatsError,
    InvalidRepositoryError,
    MalformedLogLineError,
    QueryFailedError,
)
from git_contributor_stats.models.stats import (
    CommitRecord,
    ContributorSummary,
    DeveloperStats,
)

__all__ = [
    "CommitRecord",
    "ContributorSummary",
    "DeveloperStats",
    "GitStatsError",
    "InvalidRepositoryError",
    "MalformedLogLineError",
    "QueryFailedError",
]
