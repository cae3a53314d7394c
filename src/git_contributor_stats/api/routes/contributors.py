"""Contributor routes for the API."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, HTTPException, Query, status

from git_contributor_stats.api.schemas.contributors import (
    ContributorListResponse,
    ContributorResponse,
    DeveloperStatsResponse,
)
from git_contributor_stats.config import get_default_repo_root
from git_contributor_stats.models import (
    GitStatsError,
    InvalidRepositoryError,
)
from git_contributor_stats.services import (
    filter_contributors,
    get_developer_stats,
    list_contributors,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contributors", tags=["contributors"])

RepoQuery = Query(
    default=None,
    description="Repository root. Defaults to the configured repository.",
)


def _resolve_repo(repo: str | None) -> Path:
    return Path(repo) if repo else get_default_repo_root()


def _to_http_error(exc: GitStatsError) -> HTTPException:
    """Map engine errors to HTTP responses."""
    if isinstance(exc, InvalidRepositoryError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    logger.warning("Git query failed: %s", exc)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


# Handlers are plain ``def`` so FastAPI runs the blocking git calls in its threadpool.
@router.get(
    "",
    response_model=ContributorListResponse,
    summary="List contributors",
    description="Return every contributor ordered by their latest commit, newest first.",
    responses={
        404: {"description": "Repository not found"},
        502: {"description": "Git query failed"},
    },
)
def get_contributors(
    repo: str | None = RepoQuery,
    search: str | None = Query(
        default=None, description="Case-insensitive substring filter on contributor names"
    ),
) -> ContributorListResponse:
    repo_path = _resolve_repo(repo)
    try:
        summaries = filter_contributors(list_contributors(repo_path), search)
    except GitStatsError as exc:
        raise _to_http_error(exc) from exc

    return ContributorListResponse(
        repo=str(repo_path),
        contributors=[ContributorResponse.from_summary(s) for s in summaries],
        total=len(summaries),
    )


@router.get(
    "/{author}/stats",
    response_model=DeveloperStatsResponse,
    summary="Get developer stats",
    description="Return languages, per-language file counts and frameworks for one author.",
    responses={
        404: {"description": "Repository not found"},
        502: {"description": "Git query failed"},
    },
)
def get_author_stats(author: str, repo: str | None = RepoQuery) -> DeveloperStatsResponse:
    try:
        stats = get_developer_stats(_resolve_repo(repo), author)
    except GitStatsError as exc:
        raise _to_http_error(exc) from exc
    return DeveloperStatsResponse.from_stats(stats)
