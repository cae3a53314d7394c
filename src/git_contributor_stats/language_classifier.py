"""Map file extensions found in git history to language labels."""

from __future__ import annotations

from git_contributor_stats.constants.language_constants import (
    EXTENSION_TO_LANGUAGE,
    UNKNOWN_LANGUAGE,
)


def extension_of(path: str) -> str:
    """Return the text after the last dot of the path's final component.

    Args:
        path: Repository-relative path using ``/`` separators.

    Returns:
        The extension as written (case preserved), or ``""`` when the file
        name has no dot or ends with one.
    """
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def classify_extension(extension: str) -> str:
    """Return the language label for an extension.

    Lookup is case-sensitive. Unknown extensions are returned unchanged so
    they still show up as their own bucket; an empty extension maps to
    ``UNKNOWN_LANGUAGE``.
    """
    if not extension:
        return UNKNOWN_LANGUAGE
    return EXTENSION_TO_LANGUAGE.get(extension, extension)


def classify_path(path: str) -> str | None:
    """Classify a path by its extension, or ``None`` if it has none."""
    extension = extension_of(path)
    if not extension:
        return None
    return classify_extension(extension)
