"""Renders README documents from fact sheets using Jinja templates."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..models import FactSheet
from ..postproc.lint import MarkdownLinter
from ..postproc.toc import build_toc_entries
from .constants import (
    BASIC_DEFAULT_FEATURE,
    BASIC_FEATURES_TITLE,
    DEFAULT_LANGUAGE,
    FULL_SECTIONS,
    PLACEHOLDERS,
    QUICKSTART,
    SECTION_TITLES,
    TOC_LANGUAGES,
    TOC_TITLES,
)

TEMPLATES_DIR = Path(__file__).with_name("templates")

# Stands in for the caller's description while the scaffolding is linted.
_DESCRIPTION_SLOT = "\x00readmegen:description\x00"


def render_scripts(scripts: Optional[Mapping[str, str]], language: str = DEFAULT_LANGUAGE) -> str:
    """Return one ``npm run`` line per script, or the placeholder when there are none."""
    if not scripts:
        return str(PLACEHOLDERS[language]["scripts"])
    return "\n".join(f"npm run {name}  # {command}" for name, command in scripts.items())


def render_stack(dependencies: Optional[Mapping[str, str]]) -> List[str]:
    """Return ``<name> <version>`` entries sorted by package name."""
    if not dependencies:
        return []
    return [f"{name} {dependencies[name]}" for name in sorted(dependencies)]


class ReadmeBuilder:
    """Assembles basic and full README documents.

    Every section of the full layout is always emitted; a section whose facts
    are empty falls back to the fixed placeholder text for the chosen language.
    """

    def __init__(
        self,
        templates_dir: Path | None = None,
        linter: MarkdownLinter | None = None,
    ) -> None:
        self._env = self._create_env(templates_dir)
        self.linter = linter or MarkdownLinter()

    def render_basic(
        self,
        name: str,
        description: str | None = None,
        features: Sequence[str] | None = None,
    ) -> str:
        template = self._env.get_template("readme_basic.md.j2")
        rendered = template.render(
            name=name,
            description=_DESCRIPTION_SLOT if description else "",
            features_title=BASIC_FEATURES_TITLE,
            features=list(features) if features else [BASIC_DEFAULT_FEATURE],
        )
        return self._finish(rendered, description)

    def render_full(self, facts: FactSheet) -> str:
        language = facts.options.language
        titles = SECTION_TITLES[language]
        placeholders = PLACEHOLDERS[language]

        toc: List[Dict[str, str]] = []
        if facts.options.include_toc and language in TOC_LANGUAGES:
            toc = build_toc_entries([titles[section] for section in FULL_SECTIONS])

        template = self._env.get_template("readme_full.md.j2")
        rendered = template.render(
            name=facts.name,
            badges=facts.badges if facts.options.include_badges else "",
            description=_DESCRIPTION_SLOT if facts.description else "",
            toc=toc,
            toc_title=TOC_TITLES[language],
            titles=titles,
            placeholders=placeholders,
            features=facts.features or placeholders["features"],
            quickstart=QUICKSTART[language],
            scripts_text=render_scripts(facts.scripts, language),
            tree_text=facts.tree_text,
            routes=facts.routes,
            env_keys=facts.env_keys,
            stack=render_stack(facts.dependencies),
        )
        return self._finish(rendered, facts.description)

    def _finish(self, rendered: str, description: str | None) -> str:
        """Lint the rendered scaffolding, then restore the description verbatim."""
        return self.linter.lint(rendered).replace(_DESCRIPTION_SLOT, description or "")

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(TEMPLATES_DIR))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


__all__ = ["ReadmeBuilder", "render_scripts", "render_stack"]
