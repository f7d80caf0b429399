"""Tests for new_component.resolver - template selection and output paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from new_component.errors import ConfigurationError
from new_component.models.config import EffectiveConfig, TemplateConfig
from new_component.resolver import (
    COMPONENT_EXTENSION,
    INDEX_EXTENSION,
    build_paths,
    resolve_template,
)


@pytest.fixture
def config() -> EffectiveConfig:
    return EffectiveConfig.model_validate(
        {
            "default": {"component": {"dir": "src/components", "index": True}},
            "project": {"web": {"hook": {"dir": "src/hooks", "index": False}}},
        }
    )


class TestBuildPaths:
    """Test output path derivation."""

    def test_paths_use_component_name_verbatim(self):
        paths = build_paths(TemplateConfig(dir="src/components"), "my-button")
        assert paths.component_dir == Path("src/components/my-button")
        assert paths.component_file == Path("src/components/my-button/my-button.tsx")
        assert paths.index_file == Path("src/components/my-button/index.ts")

    def test_extensions(self):
        assert COMPONENT_EXTENSION == "tsx"
        assert INDEX_EXTENSION == "ts"


class TestResolveTemplate:
    """Test resolve_template selection and errors."""

    def test_default_project(self, config: EffectiveConfig):
        resolved = resolve_template(
            config, "button", project_name="default", template_name="component"
        )
        assert resolved.component_name == "button"
        assert resolved.template_name == "component"
        assert resolved.config.dir == "src/components"
        assert resolved.config.index is True
        assert resolved.paths.component_file == Path("src/components/button/button.tsx")

    def test_named_project(self, config: EffectiveConfig):
        resolved = resolve_template(
            config, "Toggle", project_name="web", template_name="hook"
        )
        assert resolved.config.index is False
        assert resolved.paths.component_dir == Path("src/hooks/Toggle")

    def test_unknown_project_raises(self, config: EffectiveConfig):
        with pytest.raises(ConfigurationError, match="Unknown project 'mobile'") as exc_info:
            resolve_template(
                config, "button", project_name="mobile", template_name="component"
            )
        assert "web" in str(exc_info.value)

    def test_unknown_template_raises(self, config: EffectiveConfig):
        with pytest.raises(ConfigurationError, match="no 'hook' template") as exc_info:
            resolve_template(
                config, "button", project_name="default", template_name="hook"
            )
        assert "component" in str(exc_info.value)

    def test_named_project_has_no_default_fallback(self, config: EffectiveConfig):
        with pytest.raises(ConfigurationError):
            resolve_template(
                config, "button", project_name="web", template_name="component"
            )

    def test_resolved_is_immutable(self, config: EffectiveConfig):
        resolved = resolve_template(
            config, "button", project_name="default", template_name="component"
        )
        with pytest.raises(AttributeError):
            resolved.paths.component_dir = Path("elsewhere")  # type: ignore[misc]
