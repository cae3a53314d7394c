"""Environment-driven settings."""

from __future__ import annotations

import os
from pathlib import Path

GIT_EXECUTABLE_ENV = "GIT_CONTRIBUTOR_STATS_GIT"
REPO_ROOT_ENV = "GIT_CONTRIBUTOR_STATS_REPO"


def get_git_executable() -> str:
    """Return the git executable to run, allowing overrides via environment variable."""
    return os.getenv(GIT_EXECUTABLE_ENV) or "git"


def get_default_repo_root() -> Path:
    """Return the repository analysed when the caller does not name one."""
    env_root = os.getenv(REPO_ROOT_ENV)
    if env_root:
        return Path(env_root).expanduser().resolve()
    return Path.cwd()
