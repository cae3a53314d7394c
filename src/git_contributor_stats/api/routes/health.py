"""Health check routes."""

from __future__ import annotations

import shutil

from fastapi import APIRouter

from git_contributor_stats.config import get_git_executable

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return the API status and whether the git executable can be found."""
    git = get_git_executable()
    return {
        "status": "healthy",
        "git": "available" if shutil.which(git) else "missing",
    }
