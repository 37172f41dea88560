"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import LANGUAGES, MAX_TREE_DEPTH, MIN_TREE_DEPTH

CONFIG_FILENAME = ".readmegen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReadmeConfig:
    """Default presentation options from the ``readme`` block."""

    language: Optional[str] = None
    badges: Optional[bool] = None
    toc: Optional[bool] = None
    max_tree_depth: Optional[int] = None
    extra_features: List[str] = field(default_factory=list)


@dataclass
class ReadmeGenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    readme: ReadmeConfig = field(default_factory=ReadmeConfig)
    exclude_paths: List[str] = field(default_factory=list)


def load_config(config_path: Path) -> ReadmeGenConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmeGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    readme = ReadmeConfig()
    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        language = _as_str(readme_data.get("language"))
        if language is not None and language not in LANGUAGES:
            raise ConfigError(f"readme.language must be one of {', '.join(LANGUAGES)}")
        depth = _as_int(readme_data.get("max_tree_depth"))
        if depth is not None and not MIN_TREE_DEPTH <= depth <= MAX_TREE_DEPTH:
            raise ConfigError(
                f"readme.max_tree_depth must be between {MIN_TREE_DEPTH} and {MAX_TREE_DEPTH}"
            )
        readme = ReadmeConfig(
            language=language,
            badges=_as_bool(readme_data.get("badges")),
            toc=_as_bool(readme_data.get("toc")),
            max_tree_depth=depth,
            extra_features=_as_str_list(readme_data.get("extra_features")),
        )

    return ReadmeGenConfig(
        root=root,
        readme=readme,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.name != CONFIG_FILENAME:
        # Any other path names the project directory itself.
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path.name} is not valid UTF-8: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
