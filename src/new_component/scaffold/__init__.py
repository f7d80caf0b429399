"""Component scaffolding - template loading and the scaffold pipeline."""

from new_component.scaffold.pipeline import ScaffoldOutcome, ScaffoldPipeline, ScaffoldState
from new_component.scaffold.templates import list_templates, load_template

__all__ = [
    "ScaffoldOutcome",
    "ScaffoldPipeline",
    "ScaffoldState",
    "list_templates",
    "load_template",
]
