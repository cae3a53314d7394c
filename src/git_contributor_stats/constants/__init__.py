from __future__ import annotations

from git_contributor_stats.constants.framework_constants import FRAMEWORK_MARKERS
from git_contributor_stats.constants.language_constants import (
    EXTENSION_TO_LANGUAGE,
    UNKNOWN_LANGUAGE,
)

__all__ = [
    "EXTENSION_TO_LANGUAGE",
    "FRAMEWORK_MARKERS",
    "UNKNOWN_LANGUAGE",
]
