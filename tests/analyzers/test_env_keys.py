"""Tests for environment key extraction."""

from __future__ import annotations

from readmegen.analyzers.env import collect_env_keys, extract_env_keys, parse_env_sample
from tests._fixtures.repo_builder import RepoBuilder


def test_parse_env_sample_reads_uppercase_assignments() -> None:
    text = "DB_URL=postgres://localhost\nPORT=3000\n# SECRET=1\nlower=1\n JWT=indented\n"
    assert parse_env_sample(text) == ["DB_URL", "PORT"]


def test_extract_env_keys_supports_dot_and_bracket_access() -> None:
    text = "const a = process.env.API_KEY;\nconst b = process.env['REDIS_URL'];\nprocess.env.lower;"
    assert extract_env_keys(text) == ["API_KEY", "REDIS_URL"]


def test_collect_env_keys_merges_sample_and_sources(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            ".env.example": "DB_URL=\nPORT=3000\n",
            "src/db.js": "connect(process.env.DB_URL);\n",
            "src/auth.ts": "sign(process.env.JWT_SECRET);\n",
        }
    )

    keys = collect_env_keys(repo_builder.path())

    assert keys == ["DB_URL", "JWT_SECRET", "PORT"]
    assert keys.count("DB_URL") == 1


def test_collect_env_keys_without_sample_file(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"index.js": "listen(process.env.PORT);\n"})
    repo_builder.write_bytes("broken.js", b"\xff process.env.NEVER")

    assert collect_env_keys(repo_builder.path()) == ["PORT"]


def test_collect_env_keys_empty_directory(repo_builder: RepoBuilder) -> None:
    assert collect_env_keys(repo_builder.path()) == []
