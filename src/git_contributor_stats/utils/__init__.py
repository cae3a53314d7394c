"""Utility functions and helpers"""

from git_contributor_stats.utils.git import (
    query_author_commit_count,
    query_author_files,
    query_full_log,
    run_git,
    validate_repo_root,
)

__all__ = [
    "query_author_commit_count",
    "query_author_files",
    "query_full_log",
    "run_git",
    "validate_repo_root",
]
