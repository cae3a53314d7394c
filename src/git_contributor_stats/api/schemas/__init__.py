"""Response schemas for the API."""

from git_contributor_stats.api.schemas.contributors import (
    ContributorListResponse,
    ContributorResponse,
    DeveloperStatsResponse,
)

__all__ = [
    "ContributorListResponse",
    "ContributorResponse",
    "DeveloperStatsResponse",
]
