"""Configuration models - re-exports all public model classes."""

from new_component.models.config import EffectiveConfig, TemplateConfig

__all__ = [
    "EffectiveConfig",
    "TemplateConfig",
]
