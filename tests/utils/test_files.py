# topmark:header:start
#
#   project      : Vuenify
#   file         : test_files.py
#   file_relpath : tests/utils/test_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for input path expansion and exclusion."""

from __future__ import annotations

from pathlib import Path

import pytest

from vuenify.utils.files import expand_path, resolve_input_files


@pytest.fixture
def tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small component tree and make it the working directory."""
    for rel in ("src/App.vue", "src/ui/Button.vue", "src/ui/notes.md", "legacy/Old.vue", "x.html"):
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("<template></template>\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_directory_expands_to_vue_files(tree: Path) -> None:
    """Directories are searched recursively for .vue files only."""
    assert expand_path("src") == [Path("src/App.vue"), Path("src/ui/Button.vue")]


def test_explicit_file_is_kept_whatever_its_suffix(tree: Path) -> None:
    """A named file is taken as given."""
    assert expand_path("x.html") == [Path("x.html")]


def test_glob_expansion(tree: Path) -> None:
    """Globs are expanded relative to the working directory."""
    assert expand_path("src/**/*.vue") == [Path("src/App.vue"), Path("src/ui/Button.vue")]
    assert expand_path("*.html") == [Path("x.html")]


def test_missing_arguments_are_reported(tree: Path) -> None:
    """Arguments matching nothing are returned separately."""
    files, missing = resolve_input_files(["src/App.vue", "nope.vue", "*.txt"])
    assert files == [Path("src/App.vue")]
    assert missing == ["nope.vue", "*.txt"]


def test_results_are_sorted_and_unique(tree: Path) -> None:
    """Overlapping arguments do not produce duplicates."""
    files, missing = resolve_input_files(["src", "src/App.vue", "legacy"])
    assert files == [Path("legacy/Old.vue"), Path("src/App.vue"), Path("src/ui/Button.vue")]
    assert missing == []


def test_exclude_patterns_use_gitignore_semantics(tree: Path) -> None:
    """Directory and wildcard patterns drop matching files."""
    files, _ = resolve_input_files(["."], ["legacy/", "Button.*"])
    assert files == [Path("src/App.vue")]


def test_blank_exclude_patterns_are_ignored(tree: Path) -> None:
    """Empty patterns exclude nothing."""
    files, _ = resolve_input_files(["legacy"], ["", "  "])
    assert files == [Path("legacy/Old.vue")]
