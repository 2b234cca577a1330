"""Editor state: the active element and one configuration per element kind."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from uiforge_renderer.models import (
    CONFIG_TYPES,
    ElementConfig,
    ElementKind,
    config_fields,
    config_from_mapping,
    config_to_mapping,
    default_config,
    element_kind,
    field_name,
)

from .logging_setup import get_logger

STATE_VERSION = 2

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")

logger = get_logger("store")


def _default_configs() -> dict[ElementKind, ElementConfig]:
    return {kind: default_config(kind) for kind in ElementKind}


@dataclass(frozen=True)
class EditorState:
    active: ElementKind = ElementKind.HEALTHBAR
    configs: dict[ElementKind, ElementConfig] = field(default_factory=_default_configs)

    def active_config(self) -> ElementConfig:
        return self.configs[self.active]

    def select(self, kind: ElementKind | str) -> "EditorState":
        return replace(self, active=element_kind(kind))

    def update_field(self, key: str, value: Any) -> "EditorState":
        """Return a new state with one field of the active config changed."""
        config = self.active_config()
        updated = replace(config, **{field_name(key): coerce_value(self.active, key, value)})
        configs = dict(self.configs)
        configs[self.active] = updated
        return replace(self, configs=configs)

    def update_fields(self, values: dict[str, Any]) -> "EditorState":
        state = self
        for key, value in values.items():
            state = state.update_field(key, value)
        return state


def default_state(active: ElementKind | str = ElementKind.HEALTHBAR) -> EditorState:
    return EditorState(active=element_kind(active))


def coerce_value(kind: ElementKind | str, key: str, value: Any) -> Any:
    """Convert ``value`` to the declared type of ``key``; undeclared fields raise ``ValueError``."""
    name = field_name(key)
    declared = config_fields(kind)
    if name not in declared:
        raise ValueError(f"{element_kind(kind).value} has no field '{key}'")
    type_name = declared[name]

    if type_name == "bool":
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ValueError(f"{name}: expected a boolean, got {value!r}")
    if type_name == "int":
        try:
            return int(float(value))
        except (TypeError, ValueError):
            raise ValueError(f"{name}: expected an integer, got {value!r}") from None
    if type_name == "float":
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValueError(f"{name}: expected a number, got {value!r}") from None
    return str(value)


def parse_assignment(text: str) -> tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"expected key=value, got {text!r}")
    return key.strip(), value


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = int(raw.get("state_version", 1))
    data = dict(raw)

    if version < 2:
        # v1 used the browser tool's layout: "tool" plus one camelCase block per element.
        if "tool" in data:
            data.setdefault("active", data.pop("tool"))
        data["configs"] = {kind.value: data.pop(kind.value, {}) for kind in ElementKind}
        data["state_version"] = 2

    return data


def state_from_mapping(raw: dict[str, Any]) -> EditorState:
    data = _migrate(raw)
    configs = _default_configs()
    blocks = data.get("configs", {}) or {}
    for kind in ElementKind:
        block = blocks.get(kind.value)
        if not isinstance(block, dict):
            continue
        values = {}
        for key, value in block.items():
            try:
                values[key] = coerce_value(kind, key, value)
            except ValueError as exc:
                logger.warning(f"ignoring preset field: {exc}", extra={"event": "preset_field_invalid"})
        configs[kind] = config_from_mapping(kind, values)
    try:
        active = element_kind(data.get("active", ElementKind.HEALTHBAR.value))
    except ValueError:
        active = ElementKind.HEALTHBAR
    return EditorState(active=active, configs=configs)


def state_to_mapping(state: EditorState) -> dict[str, Any]:
    return {
        "state_version": STATE_VERSION,
        "active": state.active.value,
        "configs": {kind.value: config_to_mapping(state.configs[kind]) for kind in CONFIG_TYPES},
    }


def load_state(path: Path) -> EditorState:
    if not path.exists():
        return default_state()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        logger.warning(f"unreadable preset {path}, using defaults", extra={"event": "preset_unreadable"})
        return default_state()
    if not isinstance(raw, dict):
        return default_state()
    return state_from_mapping(raw)


def save_state(state: EditorState, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(state_to_mapping(state), indent=2, sort_keys=True), encoding="utf-8")
    return path
