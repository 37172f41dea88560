"""Collects README facts for a project directory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from .analyzers import (
    build_tree,
    collect_env_keys,
    collect_routes,
    detect_features,
    merge_features,
)
from .config import ConfigError, ReadmeGenConfig, load_config
from .logging import get_logger
from .manifest import load_manifest
from .models import DocumentOptions, FactSheet, ManifestFacts
from .postproc.badges import BadgeFacts, build_badges

_logger = get_logger("facts")


def resolve_project_name(
    explicit: Optional[str], manifest: Optional[ManifestFacts], directory: Path
) -> str:
    """Return the first of: explicit name, manifest name, directory basename."""
    if explicit is not None:
        return explicit
    if manifest is not None and manifest.name is not None:
        return manifest.name
    return directory.resolve().name


def resolve_options(
    config: ReadmeGenConfig,
    *,
    add_badges: Optional[bool] = None,
    include_toc: Optional[bool] = None,
    max_tree_depth: Optional[int] = None,
    language: Optional[str] = None,
) -> DocumentOptions:
    """Merge explicit switches over config defaults over built-in defaults."""
    defaults = DocumentOptions()
    readme = config.readme
    return DocumentOptions(
        include_badges=_first(add_badges, readme.badges, defaults.include_badges),
        include_toc=_first(include_toc, readme.toc, defaults.include_toc),
        max_tree_depth=_first(max_tree_depth, readme.max_tree_depth, defaults.max_tree_depth),
        language=_first(language, readme.language, defaults.language),
    )


def load_directory_config(directory: Path) -> ReadmeGenConfig:
    """Load ``.readmegen.yml`` for ``directory``, falling back to defaults when broken."""
    try:
        return load_config(directory)
    except (ConfigError, OSError) as exc:
        _logger.warning("Ignoring configuration in %s: %s", directory, exc)
        return ReadmeGenConfig(root=directory)


def collect_facts(
    directory: Path | str,
    *,
    name: Optional[str] = None,
    description: Optional[str] = None,
    extra_features: Optional[Iterable[str]] = None,
    add_badges: Optional[bool] = None,
    include_toc: Optional[bool] = None,
    max_tree_depth: Optional[int] = None,
    language: Optional[str] = None,
    config: Optional[ReadmeGenConfig] = None,
) -> FactSheet:
    """Scan ``directory`` and return the fact sheet for the full README."""
    root = Path(directory)
    if config is None:
        config = load_directory_config(root)
    manifest = load_manifest(root)
    if manifest is None:
        _logger.debug("No usable package.json in %s", root)

    options = resolve_options(
        config,
        add_badges=add_badges,
        include_toc=include_toc,
        max_tree_depth=max_tree_depth,
        language=language,
    )

    badges = ""
    if options.include_badges:
        badges = build_badges(BadgeFacts.from_directory(root, manifest))

    dependencies = manifest.dependencies if manifest else None
    extras: List[str] = list(extra_features) if extra_features is not None else []
    extras.extend(config.readme.extra_features)
    features = merge_features(detect_features(dependencies, options.language), extras)

    excludes = config.exclude_paths
    facts = FactSheet(
        name=resolve_project_name(name, manifest, root),
        description=description if description is not None else "",
        badges=badges,
        options=options,
        features=features,
        scripts=manifest.scripts if manifest else None,
        tree_text=build_tree(root, options.max_tree_depth, excludes),
        routes=collect_routes(root, excludes),
        env_keys=collect_env_keys(root, excludes),
        dependencies=dependencies,
    )
    _logger.info(
        "Collected facts for %s: %d features, %d routes, %d env keys",
        facts.name,
        len(facts.features),
        len(facts.routes),
        len(facts.env_keys),
    )
    return facts


def _first(*values):
    for value in values:
        if value is not None:
            return value
    return None


__all__ = ["collect_facts", "load_directory_config", "resolve_options", "resolve_project_name"]
