"""Git related utilities."""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from git_contributor_stats.config import get_git_executable
from git_contributor_stats.models.errors import InvalidRepositoryError, QueryFailedError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Git Execution
# ---------------------------------------------------------------------------


def validate_repo_root(repo: Path | str) -> Path:
    """Return ``repo`` as a Path, failing fast when it is not a directory.

    Raises:
        InvalidRepositoryError: if the path does not exist or is a file.
    """
    repo_path = Path(repo)
    if not repo_path.exists() or not repo_path.is_dir():
        raise InvalidRepositoryError(repo_path)
    return repo_path


def run_git(repo: Path | str, *args: str) -> str:
    """Run a git command inside `repo` and return its stdout.

    Raises:
        QueryFailedError: if git exits with a non-zero status or cannot be
            started at all.
    """
    repo_path = Path(repo)
    # Unquoted paths so non-ASCII file names keep their real extension.
    command = [get_git_executable(), "-c", "core.quotePath=false", "-C", str(repo_path), *args]
    logger.debug("Running %s", " ".join(command))
    try:
        proc = subprocess.run(
            command,
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except subprocess.CalledProcessError as exc:
        logger.warning("git %s exited with %s", " ".join(args), exc.returncode)
        raise QueryFailedError(args, exc.returncode, exc.stderr or "") from exc
    except OSError as exc:
        logger.warning("Unable to start git: %s", exc)
        raise QueryFailedError(args, None, str(exc)) from exc
    return proc.stdout


# ---------------------------------------------------------------------------
# History Queries
# ---------------------------------------------------------------------------


def query_full_log(repo: Path | str) -> str:
    """Return one ``author|seconds tz`` line per commit reachable from HEAD."""
    return run_git(repo, "log", "--format=%an|%ad", "--date=raw")


_ERE_SPECIAL = re.compile(r"([\\.\[\](){}*+?|^$])")


def author_pattern(author: str) -> str:
    """Return an extended regex matching exactly ``author``'s ident line.

    git matches ``--author`` against ``Name <email>``; anchoring on both
    sides of the name keeps ``Al`` from also matching ``Alice``.
    """
    escaped = _ERE_SPECIAL.sub(r"\\\1", author)
    return f"^{escaped} <"


def query_author_files(repo: Path | str, author: str) -> str:
    """Return the paths touched by ``author``'s commits, one per line.

    ``--pretty=format:`` strips the commit headers, leaving only paths and
    the blank lines between commits.
    """
    return run_git(
        repo,
        "log",
        "--extended-regexp",
        f"--author={author_pattern(author)}",
        "--name-only",
        "--pretty=format:",
    )


def query_author_commit_count(repo: Path | str, author: str) -> str:
    """Return the number of commits by ``author`` as text."""
    return run_git(
        repo,
        "rev-list",
        "--count",
        "--extended-regexp",
        f"--author={author_pattern(author)}",
        "HEAD",
    )


__all__ = [
    "author_pattern",
    "query_author_commit_count",
    "query_author_files",
    "query_full_log",
    "run_git",
    "validate_repo_root",
]
