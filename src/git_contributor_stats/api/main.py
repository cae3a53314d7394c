"""FastAPI application entry point for the contributor stats API."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from git_contributor_stats.api.routes import contributors, health

app = FastAPI(
    title="Git Contributor Stats API",
    description="Per-contributor commit, language and framework statistics for git repositories",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(contributors.router, prefix="/api")


def main() -> None:
    """Start the development server."""
    import uvicorn

    uvicorn.run(
        "git_contributor_stats.api.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
