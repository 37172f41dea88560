"""Core data models shared across readmegen components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

LANGUAGES = ("zh", "en")
MIN_TREE_DEPTH = 1
MAX_TREE_DEPTH = 5


@dataclass(frozen=True)
class ManifestFacts:
    """Read-only snapshot of a project's package.json."""

    name: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    scripts: Optional[Dict[str, str]] = None
    dependencies: Optional[Dict[str, str]] = None
    dev_dependencies: Optional[Dict[str, str]] = None
    license: Optional[str] = None
    engines: Optional[Dict[str, str]] = None

    @property
    def node_engine(self) -> Optional[str]:
        if not self.engines:
            return None
        return self.engines.get("node")

    def to_summary(self) -> Dict[str, Any]:
        """Return the camelCase summary reported by ``detectRepo``."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "scripts": self.scripts,
            "dependencies": self.dependencies,
            "devDependencies": self.dev_dependencies,
            "license": self.license,
            "engines": self.engines,
        }


@dataclass(frozen=True)
class DocumentOptions:
    """Presentation switches recognised by the full README assembler."""

    include_badges: bool = True
    include_toc: bool = True
    max_tree_depth: int = 2
    language: str = "zh"

    def __post_init__(self) -> None:
        if not MIN_TREE_DEPTH <= self.max_tree_depth <= MAX_TREE_DEPTH:
            raise ValueError(
                f"max_tree_depth must be between {MIN_TREE_DEPTH} and {MAX_TREE_DEPTH}"
            )
        if self.language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {self.language}")


@dataclass
class FactSheet:
    """Aggregated facts about one project directory."""

    name: str
    description: str = ""
    badges: str = ""
    options: DocumentOptions = field(default_factory=DocumentOptions)
    features: List[str] = field(default_factory=list)
    scripts: Optional[Dict[str, str]] = None
    tree_text: str = ""
    routes: List[str] = field(default_factory=list)
    env_keys: List[str] = field(default_factory=list)
    dependencies: Optional[Dict[str, str]] = None
