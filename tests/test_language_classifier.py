from __future__ import annotations

import pytest

from git_contributor_stats.constants import EXTENSION_TO_LANGUAGE, UNKNOWN_LANGUAGE
from git_contributor_stats.language_classifier import (
    classify_extension,
    classify_path,
    extension_of,
)


@pytest.mark.parametrize(
    ("extension", "language"),
    [
        ("kt", "Kotlin"),
        ("rs", "Rust"),
        ("py", "Python"),
        ("yml", "YAML"),
        ("yaml", "YAML"),
        ("tsx", "TypeScript"),
    ],
)
def test_known_extensions(extension: str, language: str) -> None:
    assert classify_extension(extension) == language


def test_unknown_extension_passes_through() -> None:
    assert classify_extension("xyz") == "xyz"


def test_lookup_is_case_sensitive() -> None:
    assert classify_extension("PY") == "PY"
    assert classify_extension("R") == "R"
    assert classify_extension("r") == "R"


def test_empty_extension_is_unknown_sentinel() -> None:
    assert classify_extension("") == UNKNOWN_LANGUAGE


@pytest.mark.parametrize(
    ("path", "extension"),
    [
        ("src/main.kt", "kt"),
        ("archive.tar.gz", "gz"),
        ("Makefile", ""),
        ("notes.", ""),
        ("dir.with.dots/README", ""),
        (".gitignore", "gitignore"),
        ("Lib/Foo.PY", "PY"),
    ],
)
def test_extension_of(path: str, extension: str) -> None:
    assert extension_of(path) == extension


def test_classify_path_skips_files_without_extension() -> None:
    assert classify_path("Dockerfile") is None
    assert classify_path("src/app.kt") == "Kotlin"


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        EXTENSION_TO_LANGUAGE["kt"] = "Java"  # type: ignore[index]
