"""Tests for fact aggregation and default resolution."""

from __future__ import annotations

from pathlib import Path

from readmegen.config import ReadmeConfig, ReadmeGenConfig
from readmegen.facts import collect_facts, resolve_options, resolve_project_name
from readmegen.models import DocumentOptions, ManifestFacts
from tests._fixtures.repo_builder import RepoBuilder


def test_resolve_project_name_fallback_order(tmp_path: Path) -> None:
    manifest = ManifestFacts(name="from-manifest")
    assert resolve_project_name("explicit", manifest, tmp_path) == "explicit"
    assert resolve_project_name(None, manifest, tmp_path) == "from-manifest"
    assert resolve_project_name(None, ManifestFacts(), tmp_path) == tmp_path.name
    assert resolve_project_name(None, None, tmp_path) == tmp_path.name


def test_resolve_options_defaults(tmp_path: Path) -> None:
    options = resolve_options(ReadmeGenConfig(root=tmp_path))
    assert options == DocumentOptions(
        include_badges=True, include_toc=True, max_tree_depth=2, language="zh"
    )


def test_resolve_options_explicit_beats_config(tmp_path: Path) -> None:
    config = ReadmeGenConfig(
        root=tmp_path,
        readme=ReadmeConfig(language="en", badges=False, toc=False, max_tree_depth=4),
    )

    from_config = resolve_options(config)
    explicit = resolve_options(config, add_badges=True, language="zh", max_tree_depth=1)

    assert from_config == DocumentOptions(False, False, 4, "en")
    assert explicit == DocumentOptions(True, False, 1, "zh")


def test_collect_facts_for_express_project(repo_builder: RepoBuilder) -> None:
    repo_builder.write_package(
        name="shop-api",
        scripts={"start": "node app.js"},
        dependencies={"express": "^4", "jsonwebtoken": "^9"},
        license="MIT",
        engines={"node": ">=18"},
    )
    repo_builder.write(
        {
            "LICENSE": "MIT License\n",
            "app.js": "app.get('/orders', list);\nconst key = process.env.API_KEY;\n",
            ".env.example": "PORT=3000\n",
        }
    )

    facts = collect_facts(repo_builder.path(), extra_features=["JWT 鉴权", "Docker image"])

    assert facts.name == "shop-api"
    assert facts.description == ""
    assert facts.features == ["基于 Express 的 Web 服务", "JWT 鉴权", "Docker image"]
    assert facts.routes == ["GET /orders"]
    assert facts.env_keys == ["API_KEY", "PORT"]
    assert facts.scripts == {"start": "node app.js"}
    assert "License-MIT-blue" in facts.badges
    assert "node-%3E%3D18" in facts.badges
    assert "TypeScript" not in facts.badges
    assert facts.tree_text.splitlines() == ["LICENSE", "app.js", "package.json"]


def test_collect_facts_without_manifest_uses_directory_name(repo_builder: RepoBuilder) -> None:
    facts = collect_facts(repo_builder.path())

    assert facts.name == "repo"
    assert facts.features == []
    assert facts.scripts is None
    assert facts.dependencies is None
    assert facts.badges == ""


def test_collect_facts_applies_config_file(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            ".readmegen.yml": """
                readme:
                  language: en
                  badges: false
                  extra_features: [CLI]
                exclude_paths: ["fixtures/**"]
            """,
            "LICENSE": "MIT\n",
            "app.js": "app.get('/kept', h);\n",
            "fixtures/app.js": "app.get('/fixture', h);\n",
        }
    )

    facts = collect_facts(repo_builder.path(), extra_features=["Docs"])

    assert facts.options.language == "en"
    assert facts.options.include_badges is False
    assert facts.badges == ""
    assert facts.features == ["Docs", "CLI"]
    assert facts.routes == ["GET /kept"]
    assert "fixtures" not in facts.tree_text


def test_collect_facts_ignores_broken_config(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".readmegen.yml": "readme:\n  language: klingon\n"})

    facts = collect_facts(repo_builder.path())

    assert facts.options == DocumentOptions()


def test_collect_facts_ignores_non_utf8_config(repo_builder: RepoBuilder) -> None:
    repo_builder.write_bytes(".readmegen.yml", b"readme:\n  language: \xff\xfe\n")

    facts = collect_facts(repo_builder.path())

    assert facts.options == DocumentOptions()
