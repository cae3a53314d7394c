"""Route handlers for the API."""

from git_contributor_stats.api.routes import contributors, health

__all__ = [
    "contributors",
    "health",
]
