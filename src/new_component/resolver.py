"""Resolve a project/template selection into concrete output paths."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from new_component.errors import ConfigurationError
from new_component.models.config import EffectiveConfig, TemplateConfig

COMPONENT_EXTENSION = "tsx"
INDEX_EXTENSION = "ts"


@dataclass(frozen=True)
class ResolvedPaths:
    """Output locations for one component, relative to the working directory."""

    component_dir: Path
    component_file: Path
    index_file: Path


@dataclass(frozen=True)
class ResolvedTemplate:
    """Everything the pipeline needs to scaffold one component."""

    component_name: str
    template_name: str
    config: TemplateConfig
    paths: ResolvedPaths


def build_paths(template_config: TemplateConfig, component_name: str) -> ResolvedPaths:
    component_dir = Path(template_config.dir) / component_name
    return ResolvedPaths(
        component_dir=component_dir,
        component_file=component_dir / f"{component_name}.{COMPONENT_EXTENSION}",
        index_file=component_dir / f"index.{INDEX_EXTENSION}",
    )


def resolve_template(
    config: EffectiveConfig,
    component_name: str,
    *,
    project_name: str,
    template_name: str,
) -> ResolvedTemplate:
    """Select the active TemplateConfig and derive output paths.

    Args:
        config: The effective configuration.
        component_name: Name given on the command line, used verbatim
            for directory and file names.
        project_name: ``"default"`` or a key under ``project``.
        template_name: Template key within the selected project.

    Raises:
        ConfigurationError: If the project or its template entry is not
            configured, or the selected entry has the wrong shape.
    """
    templates = config.bucket(project_name)
    if templates is None:
        available = ", ".join(sorted(config.project)) or "none"
        raise ConfigurationError(
            f"Unknown project '{project_name}'. "
            f"Configured projects: {available}."
        )

    template_config = config.lookup(project_name, template_name)
    if template_config is None:
        available = ", ".join(sorted(templates)) or "none"
        raise ConfigurationError(
            f"Project '{project_name}' has no '{template_name}' template configured. "
            f"Configured templates: {available}."
        )

    return ResolvedTemplate(
        component_name=component_name,
        template_name=template_name,
        config=template_config,
        paths=build_paths(template_config, component_name),
    )
