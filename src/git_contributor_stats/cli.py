from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from git_contributor_stats.config import get_default_repo_root
from git_contributor_stats.models import ContributorSummary, DeveloperStats, GitStatsError
from git_contributor_stats.services import (
    filter_contributors,
    get_developer_stats,
    list_contributors,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="git-contributor-stats",
        description="Show per-contributor commit, language and framework statistics.",
    )
    parser.add_argument(
        "repo",
        nargs="?",
        type=Path,
        help="Repository root (defaults to $GIT_CONTRIBUTOR_STATS_REPO or the current directory).",
    )
    parser.add_argument("--author", help="Only report developer stats for this author.")
    parser.add_argument("--search", help="Case-insensitive filter on contributor names.")
    parser.add_argument(
        "--no-details",
        action="store_true",
        help="Print the contributor table without per-author statistics.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def format_contributor_table(contributors: Sequence[ContributorSummary]) -> list[str]:
    """Render the contributor listing as fixed-width text lines."""
    if not contributors:
        return ["No contributors found."]

    width = max(len("Contributor"), *(len(c.name) for c in contributors))
    lines = [f"{'Contributor':<{width}}  {'Last commit':<18}  {'Commits':>7}"]
    lines.append("-" * len(lines[0]))
    for contributor in contributors:
        lines.append(
            f"{contributor.name:<{width}}  {contributor.relative_age:<18}  "
            f"{contributor.commit_count:>7}"
        )
    return lines


def format_developer_stats(stats: DeveloperStats) -> list[str]:
    """Render developer stats as indented text lines."""
    lines = [f"{stats.author}", f"  Total commits: {stats.commit_count}"]

    if stats.frameworks:
        lines.append(f"  Frameworks: {', '.join(sorted(stats.frameworks))}")

    if stats.language_file_counts:
        lines.append("  Files per language:")
        for language, count in stats.language_file_counts.items():
            lines.append(f"    {language:<20} {count:>5}")
    else:
        lines.append("  No language data.")
    return lines


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run the contributor report.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    repo = args.repo or get_default_repo_root()

    try:
        if args.author:
            authors = [args.author]
        else:
            contributors = filter_contributors(list_contributors(repo), args.search)
            print(f"Repository: {repo}")
            print()
            for line in format_contributor_table(contributors):
                print(line)
            if args.no_details:
                return 0
            authors = [c.name for c in contributors]

        for author in authors:
            print()
            for line in format_developer_stats(get_developer_stats(repo, author)):
                print(line)
    except GitStatsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
