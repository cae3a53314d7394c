"""Pydantic schemas for contributor API responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from git_contributor_stats.models import ContributorSummary, DeveloperStats


class ContributorResponse(BaseModel):
    """One contributor with their latest activity."""

    name: str = Field(description="Author name as recorded by git")
    latest_commit_at: datetime = Field(description="Timestamp of the most recent commit")
    relative_age: str = Field(description="Age of the latest commit, e.g. '3 days ago'")
    commit_count: int = Field(ge=0, description="Number of commits by this author")

    @classmethod
    def from_summary(cls, summary: ContributorSummary) -> ContributorResponse:
        return cls(
            name=summary.name,
            latest_commit_at=summary.latest_commit_at,
            relative_age=summary.relative_age,
            commit_count=summary.commit_count,
        )


class ContributorListResponse(BaseModel):
    """Contributor listing, newest activity first."""

    repo: str
    contributors: list[ContributorResponse]
    total: int = Field(description="Number of contributors returned")


class DeveloperStatsResponse(BaseModel):
    """Language and framework usage for one author."""

    author: str
    commit_count: int = Field(ge=0)
    file_count: int = Field(ge=0, description="File path lines seen in the author's log")
    languages: list[str] = Field(description="Language labels, highest file count first")
    language_file_counts: dict[str, int] = Field(
        description="Files per language label, highest count first"
    )
    frameworks: list[str] = Field(description="Detected frameworks, alphabetical")

    @classmethod
    def from_stats(cls, stats: DeveloperStats) -> DeveloperStatsResponse:
        return cls(
            author=stats.author,
            commit_count=stats.commit_count,
            file_count=stats.file_count,
            languages=list(stats.language_file_counts),
            language_file_counts=dict(stats.language_file_counts),
            frameworks=sorted(stats.frameworks),
        )
