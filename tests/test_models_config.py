"""Tests for new_component.models.config - EffectiveConfig and TemplateConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from new_component.errors import ConfigurationError
from new_component.models.config import EffectiveConfig, TemplateConfig


def _config() -> EffectiveConfig:
    return EffectiveConfig.model_validate(
        {
            "default": {"component": {"dir": "src/components", "index": True}},
            "project": {
                "web": {"hook": {"dir": "src/hooks", "index": False}},
            },
        }
    )


class TestTemplateConfig:
    """Test TemplateConfig model."""

    def test_index_defaults_to_true(self):
        assert TemplateConfig(dir="lib").index is True

    def test_dir_is_required(self):
        with pytest.raises(ValidationError, match="dir"):
            TemplateConfig.model_validate({"index": False})

    def test_ignores_unknown_keys(self):
        config = TemplateConfig.model_validate({"dir": "lib", "style": "css"})
        assert config.dir == "lib"

    def test_index_string_is_rejected(self):
        """A string such as "false" is not coerced to a boolean."""
        with pytest.raises(ValidationError, match="index"):
            TemplateConfig.model_validate({"dir": "lib", "index": "false"})

    def test_index_false_is_accepted(self):
        assert TemplateConfig.model_validate({"dir": "lib", "index": False}).index is False


class TestEffectiveConfig:
    """Test EffectiveConfig lookups."""

    def test_project_defaults_to_empty(self):
        config = EffectiveConfig.model_validate(
            {"default": {"component": {"dir": "src/components"}}}
        )
        assert config.project == {}

    def test_ignores_unknown_top_level_keys(self):
        config = EffectiveConfig.model_validate(
            {
                "default": {"component": {"dir": "src/components"}},
                "prettierConfig": {"semi": False},
            }
        )
        assert config.lookup("default", "component") is not None

    def test_missing_default_bucket_is_empty(self):
        config = EffectiveConfig.model_validate({"project": {}})
        assert config.default == {}
        assert config.lookup("default", "component") is None

    def test_broken_sibling_project_is_not_validated(self):
        config = EffectiveConfig.model_validate(
            {
                "default": {"component": {"dir": "src/components"}},
                "project": {"legacy": {"component": {"path": "x"}}},
            }
        )
        assert config.lookup("default", "component") == TemplateConfig(dir="src/components")

    def test_broken_selected_entry_raises(self):
        config = EffectiveConfig.model_validate(
            {
                "default": {"component": {"dir": "src/components"}},
                "project": {"legacy": {"component": {"path": "x"}}},
            }
        )
        with pytest.raises(ConfigurationError, match="legacy"):
            config.lookup("legacy", "component")

    def test_non_object_project_bucket_raises(self):
        config = EffectiveConfig.model_validate(
            {"default": {}, "project": {"legacy": ["component"]}}
        )
        with pytest.raises(ConfigurationError, match="legacy"):
            config.lookup("legacy", "component")

    def test_lookup_default_project(self):
        template = _config().lookup("default", "component")
        assert template == TemplateConfig(dir="src/components", index=True)

    def test_lookup_named_project(self):
        template = _config().lookup("web", "hook")
        assert template is not None
        assert template.dir == "src/hooks"
        assert template.index is False

    def test_lookup_unknown_project_returns_none(self):
        assert _config().lookup("mobile", "component") is None

    def test_lookup_unknown_template_returns_none(self):
        assert _config().lookup("default", "hook") is None

    def test_named_project_does_not_fall_back_to_default(self):
        assert _config().lookup("web", "component") is None

    def test_bucket(self):
        config = _config()
        assert config.bucket("default") is config.default
        assert config.bucket("web") == config.project["web"]
        assert config.bucket("mobile") is None
