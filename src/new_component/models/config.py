"""Configuration models for component templates.

The effective configuration maps a project name to its templates, and
each template to the directory it is created in plus whether an index
file is emitted alongside it.

Project and template buckets are kept as raw mappings; only the entry
selected for a run is validated, so a broken entry elsewhere in an
override file does not affect other projects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, StrictBool, ValidationError, field_validator

from new_component.errors import ConfigurationError

DEFAULT_PROJECT = "default"
DEFAULT_TEMPLATE = "component"


class TemplateConfig(BaseModel):
    """Settings for a single template within a project.

    ``index`` must be a real boolean; strings such as ``"false"`` are
    rejected rather than coerced.
    """

    model_config = {"extra": "ignore", "frozen": True}

    dir: str
    index: StrictBool = True


class EffectiveConfig(BaseModel):
    """Merged configuration from defaults and override files.

    ``default`` holds the templates used when no project is requested;
    named projects live under ``project``. Unknown top-level keys are
    ignored so older config files keep working. A top-level bucket that
    is not a JSON object is treated as empty.
    """

    model_config = {"extra": "ignore", "frozen": True}

    default: dict[str, Any] = Field(default_factory=dict)
    project: dict[str, Any] = Field(default_factory=dict)

    @field_validator("default", "project", mode="before")
    @classmethod
    def _object_or_empty(cls, value: Any) -> Any:
        return value if isinstance(value, dict) else {}

    def bucket(self, project_name: str) -> dict[str, Any] | None:
        """Return the raw template mapping for *project_name*, or None.

        Raises:
            ConfigurationError: If the named project is not a JSON object.
        """
        if project_name == DEFAULT_PROJECT:
            return self.default
        templates = self.project.get(project_name)
        if templates is None:
            return None
        if not isinstance(templates, dict):
            raise ConfigurationError(
                f"Project '{project_name}' must map template names to settings."
            )
        return templates

    def lookup(self, project_name: str, template_name: str) -> TemplateConfig | None:
        """Return the validated TemplateConfig for a project/template pair.

        There is no fallback to ``default`` when a named project lacks
        the template.

        Raises:
            ConfigurationError: If the selected entry has the wrong shape.
        """
        templates = self.bucket(project_name)
        if templates is None or template_name not in templates:
            return None
        try:
            return TemplateConfig.model_validate(templates[template_name])
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid settings for template '{template_name}' in project "
                f"'{project_name}': {exc.error_count()} error(s)\n{exc}"
            ) from exc
