"""Bundled component templates.

Templates are plain source files named ``<template>.js`` in the
``templates`` directory next to this module. Each contains the literal
``COMPONENT_NAME`` placeholder wherever the component's name belongs.
"""

from __future__ import annotations

from pathlib import Path

from new_component.errors import TemplateNotFoundError

TEMPLATE_SUFFIX = ".js"


def _get_templates_dir() -> Path:
    """Return the path to the templates directory within the package."""
    return Path(__file__).parent / "templates"


def list_templates(templates_dir: Path | None = None) -> list[str]:
    """Return the sorted names of available templates (file stems)."""
    directory = templates_dir or _get_templates_dir()
    if not directory.is_dir():
        return []
    return sorted(
        path.stem
        for path in directory.iterdir()
        if path.is_file() and path.suffix == TEMPLATE_SUFFIX
    )


def load_template(name: str, templates_dir: Path | None = None) -> str:
    """Read the text of the named template.

    Raises:
        TemplateNotFoundError: If no template file matches *name*.
    """
    directory = templates_dir or _get_templates_dir()
    template_file = directory / f"{name}{TEMPLATE_SUFFIX}"
    try:
        return template_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise TemplateNotFoundError(
            name, str(template_file), list_templates(directory)
        ) from None
