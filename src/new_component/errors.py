"""Exception types raised while resolving and scaffolding a component."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Raised when the effective configuration cannot serve a request.

    Covers an unknown project/template pair as well as override files
    whose merged content does not match the expected shape.
    """


class InvalidComponentNameError(ValueError):
    """Raised when a component name contains nothing to PascalCase."""


class ComponentExistsError(Exception):
    """Raised when the target component directory is already on disk."""

    def __init__(self, component_dir: str) -> None:
        self.component_dir = component_dir
        super().__init__(
            "Looks like this component already exists! "
            f"There's already a component at {component_dir}.\n"
            "Please delete this directory and try again."
        )


class TemplateNotFoundError(FileNotFoundError):
    """Raised when no bundled template matches the requested name."""

    def __init__(self, name: str, path: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        options = ", ".join(available) or "none"
        super().__init__(
            f"No template named '{name}' at {path} (available: {options})"
        )


class FormatterError(Exception):
    """Raised when the code formatter rejects the rendered text."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)
