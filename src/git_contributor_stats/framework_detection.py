from __future__ import annotations

from collections.abc import Iterable

from git_contributor_stats.constants.framework_constants import FRAMEWORK_MARKERS


class FrameworkDetector:
    """Detector for frameworks and build tools referenced by file paths."""

    @staticmethod
    def _matches(path: str) -> set[str]:
        """Return every framework whose marker token occurs in ``path``.

        Args:
            path: Repository-relative file path.

        Returns:
            Framework names for all matching markers.
        """
        return {framework for token, framework in FRAMEWORK_MARKERS if token in path}

    @staticmethod
    def detect(paths: Iterable[str]) -> frozenset[str]:
        """Scan paths for marker tokens.

        Args:
            paths: File paths touched in the repository.

        Returns:
            Set of detected framework names. Empty when nothing matches.
        """
        frameworks: set[str] = set()
        for path in paths:
            frameworks |= FrameworkDetector._matches(path)
        return frozenset(frameworks)


def detect_frameworks(paths: Iterable[str]) -> frozenset[str]:
    """Public API: detect frameworks from a sequence of file paths."""
    return FrameworkDetector.detect(paths)
