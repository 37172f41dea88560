"""Tests for readmegen.scanner."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from readmegen.scanner import GlobSet, read_json, read_text, scan_paths, write_text
from tests._fixtures.repo_builder import RepoBuilder


def test_globset_double_star_matches_root_and_nested_files() -> None:
    globs = GlobSet(include=("**/*.js",), exclude=("node_modules/**", "**/*.min.js"))
    assert globs.matches("app.js")
    assert globs.matches("src/deep/app.js")
    assert not globs.matches("app.ts")
    assert not globs.matches("node_modules/pkg/index.js")
    assert not globs.matches("src/vendor.min.js")


def test_globset_directory_exclusion_covers_directory_itself() -> None:
    globs = GlobSet(exclude=("dist/**",))
    assert globs.excludes("dist")
    assert globs.excludes("dist/a/b.js")
    assert not globs.excludes("distribution")


def test_scan_paths_lists_directories_when_requested(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"src/app.js": "", "README.md": "", ".hidden/file.js": ""})

    files_only = scan_paths(repo_builder.path())
    with_dirs = scan_paths(repo_builder.path(), include_dirs=True)

    assert files_only == ["README.md", "src/app.js"]
    assert with_dirs == ["README.md", "src", "src/app.js"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_scan_paths_skips_symlinked_entries(repo_builder: RepoBuilder, tmp_path: Path) -> None:
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "secret.js").write_text("", encoding="utf-8")
    repo_builder.write({"index.js": ""})
    try:
        (repo_builder.path() / "linked").symlink_to(outside, target_is_directory=True)
        (repo_builder.path() / "alias.js").symlink_to(outside / "secret.js")
    except OSError:
        pytest.skip("cannot create symlinks here")

    paths = scan_paths(repo_builder.path(), include_dirs=True)

    assert paths == ["index.js"]


def test_scan_paths_missing_root_returns_empty(tmp_path: Path) -> None:
    assert scan_paths(tmp_path / "missing") == []


def test_read_helpers_absorb_failures(tmp_path: Path) -> None:
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json", encoding="utf-8")
    binary = tmp_path / "blob.bin"
    binary.write_bytes(b"\xff\xfe\xfd")

    assert read_text(tmp_path / "missing.txt") is None
    assert read_text(binary) is None
    assert read_json(bad_json) is None
    assert read_json(tmp_path / "missing.json") is None


def test_write_text_creates_parents_and_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir" / "out.md"

    assert write_text(target, "first version") == len("first version")
    written = write_text(target, "héllo")

    assert written == 6
    assert target.read_text(encoding="utf-8") == "héllo"
