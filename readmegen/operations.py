"""The four README tools, independent of any transport.

Each operation takes a validated argument model and returns a ``ToolResult``
text envelope. Arguments are validated with pydantic; a malformed request
raises ``pydantic.ValidationError`` before any filesystem work happens.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

from .facts import collect_facts
from .logging import get_logger
from .manifest import load_manifest, manifest_path
from .prompting.builder import ReadmeBuilder
from .scanner import file_exists, write_text

PREVIEW_LIMIT = 500

_logger = get_logger("operations")


class ToolArgs(BaseModel):
    """Base for tool arguments; accepts both camelCase aliases and field names."""

    model_config = ConfigDict(populate_by_name=True)


class DetectRepoArgs(ToolArgs):
    dir: Optional[str] = None


class GenerateReadmeArgs(ToolArgs):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    features: Optional[List[str]] = None


class WriteFileArgs(ToolArgs):
    file_path: str = Field(alias="filePath", min_length=1)
    content: str = Field(min_length=1)
    confirm: bool = False


class GenerateReadmeProArgs(ToolArgs):
    dir: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    extra_features: Optional[List[str]] = Field(default=None, alias="extraFeatures")
    add_badges: Optional[bool] = Field(default=None, alias="addBadges")
    include_toc: Optional[bool] = Field(default=None, alias="includeTOC")
    max_tree_depth: Optional[int] = Field(default=None, alias="maxTreeDepth", ge=1, le=5)
    language: Optional[Literal["zh", "en"]] = None


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Response envelope shared by every tool."""

    content: List[TextContent]

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)


def _base_dir(directory: Optional[str]) -> Path:
    return Path(directory) if directory is not None else Path.cwd()


def detect_repo(args: DetectRepoArgs) -> ToolResult:
    """Summarise ``<dir>/package.json``."""
    base = _base_dir(args.dir)
    pkg_path = manifest_path(base)
    if not file_exists(pkg_path):
        return ToolResult.from_text(f"未找到 {pkg_path}")
    manifest = load_manifest(base)
    if manifest is None:
        _logger.warning("Could not parse %s", pkg_path)
        return ToolResult.from_text(f"无法解析 {pkg_path}")
    return ToolResult.from_text(json.dumps(manifest.to_summary(), indent=2, ensure_ascii=False))


def generate_readme(args: GenerateReadmeArgs, builder: ReadmeBuilder | None = None) -> ToolResult:
    """Render the two-section README from caller-supplied facts."""
    builder = builder or ReadmeBuilder()
    return ToolResult.from_text(builder.render_basic(args.name, args.description, args.features))


def write_file(args: WriteFileArgs, cwd: Path | str | None = None) -> ToolResult:
    """Write ``content`` to disk when confirmed; otherwise return a preview only."""
    if not args.confirm:
        return ToolResult.from_text(
            f"安全提示：未设置 confirm=true，不写入。预览：\n{args.content[:PREVIEW_LIMIT]}"
        )
    target = Path(args.file_path)
    if not target.is_absolute():
        target = Path(cwd if cwd is not None else Path.cwd()) / target
    written = write_text(target, args.content)
    _logger.info("Wrote %d bytes to %s", written, target)
    return ToolResult.from_text(f"已写入：{target}（{written} bytes）")


def generate_readme_pro(
    args: GenerateReadmeProArgs, builder: ReadmeBuilder | None = None
) -> ToolResult:
    """Scan a project directory and render the full README."""
    builder = builder or ReadmeBuilder()
    facts = collect_facts(
        _base_dir(args.dir),
        name=args.name,
        description=args.description,
        extra_features=args.extra_features,
        add_badges=args.add_badges,
        include_toc=args.include_toc,
        max_tree_depth=args.max_tree_depth,
        language=args.language,
    )
    return ToolResult.from_text(builder.render_full(facts))


@dataclass(frozen=True)
class Tool:
    """A named operation with its argument model."""

    name: str
    title: str
    description: str
    args_model: Type[ToolArgs]
    handler: Callable[[Any], ToolResult]

    def invoke(self, arguments: Mapping[str, Any] | ToolArgs) -> ToolResult:
        if isinstance(arguments, self.args_model):
            parsed = arguments
        else:
            parsed = self.args_model.model_validate(dict(arguments))
        return self.handler(parsed)

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": self.args_model.model_json_schema(by_alias=True),
        }


TOOLS: Dict[str, Tool] = {
    tool.name: tool
    for tool in (
        Tool(
            name="detectRepo",
            title="Detect repository",
            description="Read package.json in the given directory and return its key fields.",
            args_model=DetectRepoArgs,
            handler=detect_repo,
        ),
        Tool(
            name="generateReadme",
            title="Generate README (read-only)",
            description="Render README markdown from the supplied project details.",
            args_model=GenerateReadmeArgs,
            handler=generate_readme,
        ),
        Tool(
            name="writeFile",
            title="Write file (requires confirmation)",
            description="Write to disk only when confirm=true; otherwise return a preview.",
            args_model=WriteFileArgs,
            handler=write_file,
        ),
        Tool(
            name="generateReadmePro",
            title="Generate README (pro)",
            description=(
                "Scan a directory and render a complete GitHub-style README with badges, "
                "table of contents, scripts, structure, routes, environment variables and stack."
            ),
            args_model=GenerateReadmeProArgs,
            handler=generate_readme_pro,
        ),
    )
}


__all__ = [
    "DetectRepoArgs",
    "GenerateReadmeArgs",
    "GenerateReadmeProArgs",
    "TOOLS",
    "TextContent",
    "Tool",
    "ToolResult",
    "WriteFileArgs",
    "detect_repo",
    "generate_readme",
    "generate_readme_pro",
    "write_file",
]
