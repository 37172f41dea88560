"""Heuristic extractors that turn a project directory into README facts."""

from __future__ import annotations

from .env import collect_env_keys, extract_env_keys, parse_env_sample
from .features import detect_features, merge_features
from .routes import MAX_ROUTES, collect_routes, extract_routes
from .tree import build_tree, render_tree, truncate_paths

__all__ = [
    "MAX_ROUTES",
    "build_tree",
    "collect_env_keys",
    "collect_routes",
    "detect_features",
    "extract_env_keys",
    "extract_routes",
    "merge_features",
    "parse_env_sample",
    "render_tree",
    "truncate_paths",
]
