from __future__ import annotations

import os
import shutil
import subprocess
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest


def git_available() -> bool:
    return shutil.which("git") is not None


requires_git = pytest.mark.skipif(not git_available(), reason="git not installed")


def _run(cmd: list[str], *, cwd: Path, env: dict[str, str] | None = None) -> None:
    subprocess.run(cmd, cwd=str(cwd), check=True, capture_output=True, text=True, env=env)


def init_repo(tmp: Path) -> Path:
    _run(["git", "init", "-q", "--initial-branch=main"], cwd=tmp)
    _run(["git", "config", "user.name", "Tester"], cwd=tmp)
    _run(["git", "config", "user.email", "tester@example.com"], cwd=tmp)
    _run(["git", "config", "commit.gpgsign", "false"], cwd=tmp)
    return tmp


def commit(
    repo: Path,
    *,
    files: dict[str, str],
    author: str,
    when: datetime,
    message: str = "update",
    allow_empty: bool = False,
    email: str | None = None,
) -> None:
    for filename, content in files.items():
        target = repo / filename
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        _run(["git", "add", filename], cwd=repo)

    env = os.environ.copy()
    stamp = f"{int(when.timestamp())} +0000"
    email = email or f"{author.lower().replace(' ', '.')}@example.com"
    env.update(
        {
            "GIT_AUTHOR_NAME": author,
            "GIT_AUTHOR_EMAIL": email,
            "GIT_COMMITTER_NAME": author,
            "GIT_COMMITTER_EMAIL": email,
            "GIT_AUTHOR_DATE": stamp,
            "GIT_COMMITTER_DATE": stamp,
        }
    )
    cmd = ["git", "commit", "-q", "-m", message]
    if allow_empty:
        cmd.append("--allow-empty")
    _run(cmd, cwd=repo, env=env)


@pytest.fixture
def base_time() -> datetime:
    return datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def sample_repo(tmp_path: Path, base_time: datetime) -> Path:
    """Repository with two authors.

    Alice: three commits (two Kotlin files, a Gradle build, one empty commit).
    Bob: one later commit touching a Python file and a Dockerfile.
    """
    if not git_available():
        pytest.skip("git not installed")

    repo = init_repo(tmp_path)
    commit(
        repo,
        files={"src/Main.kt": "fun main() {}\n", "build.gradle.kts": "plugins {}\n"},
        author="Alice",
        when=base_time,
    )
    commit(
        repo,
        files={"src/Util.kt": "object Util\n"},
        author="Alice",
        when=base_time + timedelta(hours=1),
    )
    commit(
        repo,
        files={},
        author="Alice",
        when=base_time + timedelta(hours=2),
        message="empty",
        allow_empty=True,
    )
    commit(
        repo,
        files={"scripts/tool.py": "print('hi')\n", "Dockerfile": "FROM python:3.12\n"},
        author="Bob",
        when=base_time + timedelta(days=1),
    )
    return repo
