"""Layered configuration resolution.

Configuration is merged from, in increasing precedence:
  - built-in defaults
  - a global override in the user's home directory
  - a project override in the working directory

CLI flags only select a project/template from the merged result; they
are not merged here.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from new_component.models.config import EffectiveConfig

CONFIG_FILENAME = ".new-component-config.json"

DEFAULT_CONFIG: dict[str, Any] = {
    "default": {
        "component": {
            "dir": "src/components",
            "index": True,
        },
    },
}

LayerStatus = Literal["loaded", "missing", "malformed"]


@dataclass(frozen=True)
class RuntimeContext:
    """Process-level locations, captured once at startup.

    Attributes:
        home: The user's home directory (global override location).
        cwd: The working directory (project override location and the
            root all component paths are resolved against).
    """

    home: Path
    cwd: Path

    @classmethod
    def from_environment(cls) -> RuntimeContext:
        return cls(home=Path.home(), cwd=Path.cwd())

    @property
    def global_config_path(self) -> Path:
        return self.home / CONFIG_FILENAME

    @property
    def local_config_path(self) -> Path:
        return self.cwd / CONFIG_FILENAME


@dataclass(frozen=True)
class OverrideLayer:
    """One optional override source.

    ``data`` is always a dict: the parsed object when ``status`` is
    ``"loaded"``, otherwise empty.
    """

    source: Path
    status: LayerStatus
    data: dict[str, Any] = field(default_factory=dict)


def load_override(path: Path) -> OverrideLayer:
    """Read an optional JSON override file.

    A missing file and a file that is not a JSON object both produce an
    empty layer; neither is an error.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return OverrideLayer(source=path, status="missing")
    except (IsADirectoryError, UnicodeDecodeError):
        return OverrideLayer(source=path, status="malformed")

    try:
        raw = json.loads(text)
    except json.JSONDecodeError:
        return OverrideLayer(source=path, status="malformed")

    if not isinstance(raw, dict):
        return OverrideLayer(source=path, status="malformed")
    return OverrideLayer(source=path, status="loaded", data=raw)


def merge_layers(*layers: dict[str, Any]) -> dict[str, Any]:
    """Shallow-merge mappings; later layers replace whole top-level keys."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def get_config(context: RuntimeContext) -> EffectiveConfig:
    """Build the effective configuration for this invocation.

    Individual template entries are not validated here; that happens
    when a project/template pair is looked up.

    Args:
        context: Locations of the global and project override files.

    Returns:
        EffectiveConfig over the merged layers.
    """
    global_layer = load_override(context.global_config_path)
    local_layer = load_override(context.local_config_path)
    merged = merge_layers(DEFAULT_CONFIG, global_layer.data, local_layer.data)
    return EffectiveConfig.model_validate(merged)
